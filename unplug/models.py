"""HTTP API models."""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel

from .screens import Failed, Loading, ScreenState, Succeeded
from .streak.models import StreakState


def screen_fields(state: ScreenState) -> dict:
    """Flatten a screen state into response fields."""
    if isinstance(state, Succeeded):
        return {"status": "succeeded", "text": state.text}
    if isinstance(state, Failed):
        return {"status": "failed", "error": state.reason}
    if isinstance(state, Loading):
        return {"status": "loading"}
    return {"status": "idle"}


class StreakResponse(BaseModel):
    """Response for /api/streak endpoint."""

    count: int
    last_success_day: Optional[date] = None
    goal_days: int
    label: str

    @classmethod
    def from_state(cls, state: StreakState, goal_days: int) -> "StreakResponse":
        return cls(
            count=state.count,
            last_success_day=state.last_success_day,
            goal_days=goal_days,
            label=state.label(goal_days),
        )


class ScreenResponse(BaseModel):
    """Screen state as seen by a client."""

    status: Literal["idle", "loading", "succeeded", "failed"]
    text: Optional[str] = None
    error: Optional[str] = None


class UrgeResponse(ScreenResponse):
    """Response for /api/urge endpoint."""

    streak: StreakResponse

    @classmethod
    def from_state(cls, state: ScreenState, streak: StreakResponse) -> "UrgeResponse":
        return cls(streak=streak, **screen_fields(state))


class HobbyRequest(BaseModel):
    """Body for POST /api/hobbies."""

    interests: str = ""


class HobbiesResponse(ScreenResponse):
    """Response for /api/hobbies endpoint."""

    suggestions: list[str] = []

    @classmethod
    def from_state(cls, state: ScreenState) -> "HobbiesResponse":
        fields = screen_fields(state)
        if isinstance(state, Succeeded):
            fields["suggestions"] = list(state.suggestions)
        return cls(**fields)
