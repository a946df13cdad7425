"""
Configuration settings
"""

import os
from dotenv import load_dotenv

load_dotenv()

TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")
TELEGRAM_CHAT_ID = os.getenv("TELEGRAM_CHAT_ID")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# === Generation Settings ===
GENERATION_DELAY = float(os.getenv("GENERATION_DELAY", "1.5"))  # Simulated latency (s)
_seed = os.getenv("THEME_SEED")
THEME_SEED = int(_seed) if _seed else None  # Pin the random theme fallback
MAX_THEMES = 3
DEFAULT_CURRENCY = "USD"

# === Budget Optimizer ===
BUDGET_STEP = 10

# === Telegram Limits ===
TELEGRAM_MAX_LEN = 4096
CHUNK_LEN = 3500  # Stay safely below the hard limit

# === Broadcast Event ===
# Raw form answers used by broadcast.py
DEFAULT_EVENT = {
    "event_type": "Birthday",
    "name": "Alex",
    "age": "8",
    "host_name": "Sam",
    "date": "2026-11-14 15:00",
    "guests": "15",
    "guest_type": "children",
    "budget": "1000",
    "currency": "USD",
    "location": "outdoors",
    "city": "Austin",
    "country": "USA",
    "interests": "space exploration",
    "dietary_restrictions": "",
    "food_preferences": "",
    "drink_preferences": "",
    "additional_details": "",
}
