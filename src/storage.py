"""
In-memory session storage for the Party Planner Bot.

Sessions hold wizard answers and the plans currently on screen. They
are lost on restart; nothing here is meant to be persisted.
"""

from datetime import datetime

from models import UserSession


_sessions: dict[int, UserSession] = {}


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


def get_session(chat_id: int) -> UserSession:
    """
    Get or create a session for the given chat ID.

    Args:
        chat_id: Telegram chat ID

    Returns:
        UserSession for this chat
    """
    if chat_id not in _sessions:
        now = _now()
        _sessions[chat_id] = UserSession(
            chat_id=chat_id, created_at=now, updated_at=now
        )
    return _sessions[chat_id]


def save_session(session: UserSession) -> None:
    """Store a session and stamp its update time."""
    session.updated_at = _now()
    _sessions[session.chat_id] = session


def clear_session(chat_id: int) -> None:
    """Drop a chat's session (e.g. when the user starts over with /plan)."""
    _sessions.pop(chat_id, None)


def get_all_sessions() -> dict[int, UserSession]:
    """Snapshot of all active sessions (for debugging)."""
    return _sessions.copy()
