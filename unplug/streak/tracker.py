"""Streak continuity and the calendar-day policy."""

import logging
from datetime import date, datetime, timedelta
from typing import Optional

import pytz

from .models import StreakState
from .store import StreakStore

logger = logging.getLogger(__name__)


def record_success(state: StreakState, today: date) -> StreakState:
    """
    Apply one successful urge break on ``today``.

    Counts at most once per calendar day. The next calendar day extends the
    streak; any other day (a gap, or a day before the last success after a
    clock change) restarts it at 1.

    Args:
        state: Streak before this success
        today: Current calendar day

    Returns:
        New streak state
    """
    last = state.last_success_day

    if last is None:
        logger.info("First success. Streak: 1")
        return StreakState(count=1, last_success_day=today)

    if last == today:
        logger.info(f"Already counted today. Streak: {state.count}")
        return state

    if last + timedelta(days=1) == today:
        logger.info(f"Streak continued! New streak: {state.count + 1}")
        return StreakState(count=state.count + 1, last_success_day=today)

    logger.info(f"Streak broken (last success {last}). New streak: 1")
    return StreakState(count=1, last_success_day=today)


def current_day(timezone: str = "") -> date:
    """
    Get today's calendar day.

    Args:
        timezone: IANA timezone name; empty uses the server's local time

    Returns:
        Date at the moment of the call in that timezone
    """
    if timezone:
        return datetime.now(pytz.timezone(timezone)).date()
    return datetime.now().date()


class StreakTracker:
    """Owns the persisted streak."""

    def __init__(self, store: StreakStore, timezone: str = ""):
        """
        Initialize tracker and read the stored streak.

        Args:
            store: Backing storage
            timezone: IANA timezone used to decide calendar days

        Raises:
            pytz.UnknownTimeZoneError: timezone is not a known IANA name
        """
        if timezone:
            # Fail at startup rather than on the first success
            pytz.timezone(timezone)

        self.store = store
        self.timezone = timezone
        self._state = store.load()
        logger.info(f"Loaded streak: {self._state.count} (last success {self._state.last_success_day})")

    def current_state(self) -> StreakState:
        """Get the streak for display."""
        return self._state

    def record_success(self, today: Optional[date] = None) -> StreakState:
        """
        Record a successful urge break and persist the result.

        Args:
            today: Calendar day of the success (defaults to the current day)

        Returns:
            Updated streak state
        """
        if today is None:
            today = current_day(self.timezone)

        new_state = record_success(self._state, today)
        if new_state != self._state:
            self.store.save(new_state)
            self._state = new_state

        return self._state
