"""Data models for the daily streak."""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class StreakState:
    """Consecutive-day count of successful urge breaks."""
    count: int = 0
    last_success_day: Optional[date] = None

    def __post_init__(self):
        if self.count < 0:
            raise ValueError(f"Streak count cannot be negative: {self.count}")
        if (self.count == 0) != (self.last_success_day is None):
            raise ValueError(
                f"Streak count {self.count} does not match last success day "
                f"{self.last_success_day}"
            )

    def label(self, goal_days: int) -> str:
        """Display text, e.g. "Streak: 3 days / 90 days"."""
        return f"Streak: {self.count} days / {goal_days} days"
