"""
Generate a plan for the configured default event and post it to a
Telegram channel through the Bot API.
"""

import asyncio
import logging

import requests

from config import (
    TELEGRAM_BOT_TOKEN,
    TELEGRAM_CHAT_ID,
    TELEGRAM_MAX_LEN,
    CHUNK_LEN,
    DEFAULT_EVENT,
    LOG_LEVEL
)
from reports import format_plan_report, split_into_chunks
from services import generate_plan
from validation import build_event_request

logger = logging.getLogger(__name__)


def send_to_telegram(message, header=""):
    """Send message to Telegram channel, chunking if needed."""
    url = f"https://api.telegram.org/bot{TELEGRAM_BOT_TOKEN}/sendMessage"

    if len(header) + len(message) <= TELEGRAM_MAX_LEN:
        chunks = [header + message]
    else:
        body_chunks = split_into_chunks(message, max_len=CHUNK_LEN)
        # Header goes in the first chunk only
        if body_chunks:
            body_chunks[0] = header + body_chunks[0]
        chunks = body_chunks

    results = []
    for idx, chunk in enumerate(chunks, start=1):
        payload = {
            "chat_id": TELEGRAM_CHAT_ID,
            "text": chunk,
            "disable_web_page_preview": True
        }
        r = requests.post(url, json=payload, timeout=30)
        try:
            resp = r.json()
        except ValueError:
            resp = {"ok": False, "status_code": r.status_code, "text": r.text}
        if not resp.get("ok"):
            logger.error(
                f"Telegram error on chunk {idx}/{len(chunks)}: {resp}"
            )
        results.append(resp)
    return results


def build_report():
    """Plan the default event and render the first theme's report."""
    request = build_event_request(DEFAULT_EVENT)
    result = asyncio.run(generate_plan(request))
    plan = result.plans[0]
    logger.info(f"Broadcasting {plan.title} ({len(result.plans)} themes)")
    return plan.title, format_plan_report(plan, result.invitation_text)


def main():
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=LOG_LEVEL
    )

    if not TELEGRAM_BOT_TOKEN or not TELEGRAM_CHAT_ID:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must be set in .env"
        )

    print("🎈 Generating party plan...")
    title, report = build_report()
    print(f"ℹ️ Report length: {len(report)} chars")

    print("📤 Sending to Telegram...")
    results = send_to_telegram(report, header=f"🎉 {title} 🎉\n\n")

    if results and all(r.get("ok") for r in results):
        print("✅ Done! Check your Telegram channel.")
    else:
        print("⚠️ Some chunks failed. See logs above.")


if __name__ == "__main__":
    main()
