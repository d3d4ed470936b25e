"""Storage backings for the streak."""

import logging
import sqlite3
from datetime import date
from pathlib import Path
from typing import Optional

from .models import StreakState

logger = logging.getLogger(__name__)

COUNT_KEY = "current_streak"
LAST_DAY_KEY = "last_success_day"


class StreakStore:
    """Interface for loading and saving the streak."""

    def load(self) -> StreakState:
        """Read the stored streak, or the empty streak if none is stored."""
        raise NotImplementedError

    def save(self, state: StreakState):
        """Replace the stored streak."""
        raise NotImplementedError


class InMemoryStreakStore(StreakStore):
    """Keeps the streak in memory only."""

    def __init__(self, state: Optional[StreakState] = None):
        self.state = state or StreakState()

    def load(self) -> StreakState:
        return self.state

    def save(self, state: StreakState):
        self.state = state


def decode_state(raw_count: Optional[str], raw_day: Optional[str]) -> StreakState:
    """
    Build a streak from stored text values.

    Anything undecodable or inconsistent is treated as "no previous success",
    so a corrupt record resets the streak instead of failing.

    Args:
        raw_count: Stored counter
        raw_day: Stored ISO calendar day

    Returns:
        Decoded StreakState
    """
    if raw_day is None and raw_count in (None, "0"):
        return StreakState()

    try:
        count = int(raw_count)
        last_day = date.fromisoformat(raw_day)
        return StreakState(count=count, last_success_day=last_day)
    except (TypeError, ValueError) as e:
        logger.warning(f"Discarding unreadable stored streak ({raw_count!r}, {raw_day!r}): {e}")
        return StreakState()


class SqliteStreakStore(StreakStore):
    """Key/value SQLite table holding the counter and last success day."""

    def __init__(self, db_path: str = "data/streak.db"):
        """Initialize database."""
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Create database tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
            """)
            conn.commit()
        logger.info(f"Database initialized at {self.db_path}")

    def load(self) -> StreakState:
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT key, value FROM settings WHERE key IN (?, ?)",
                (COUNT_KEY, LAST_DAY_KEY),
            )
            values = dict(cursor.fetchall())

        return decode_state(values.get(COUNT_KEY), values.get(LAST_DAY_KEY))

    def save(self, state: StreakState):
        last_day = state.last_success_day.isoformat() if state.last_success_day else None

        # Both keys change together or not at all
        with sqlite3.connect(self.db_path) as conn:
            conn.executemany(
                "INSERT OR REPLACE INTO settings (key, value) VALUES (?, ?)",
                [(COUNT_KEY, str(state.count)), (LAST_DAY_KEY, last_day)],
            )
            conn.commit()
        logger.debug(f"Saved streak: {state.count} (last success {last_day})")
