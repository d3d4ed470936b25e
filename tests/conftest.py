"""
Shared pytest fixtures for Unplug tests.
"""

import os
import tempfile
from datetime import date
from unittest.mock import MagicMock

import pytest

# Settings are read when unplug.config is first imported
_DATA_DIR = tempfile.mkdtemp(prefix="unplug-tests-")
os.environ["DATABASE_PATH"] = os.path.join(_DATA_DIR, "streak.db")
os.environ["GROQ_API_KEY"] = "test-key"
os.environ.pop("STREAK_TIMEZONE", None)

from unplug.streak.models import StreakState  # noqa: E402
from unplug.streak.store import InMemoryStreakStore  # noqa: E402
from unplug.streak.tracker import StreakTracker  # noqa: E402


def chat_response(status_code: int = 200, body=None, text: str = ""):
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if body is None:
        response.json.side_effect = ValueError("Expecting value")
        response.text = text
    else:
        response.json.return_value = body
        response.text = text or str(body)
    return response


def completion_body(*contents: str) -> dict:
    """Chat-completion body with one choice per content string."""
    return {
        "choices": [
            {"message": {"role": "assistant", "content": content}}
            for content in contents
        ]
    }


@pytest.fixture
def streak_day():
    """A fixed calendar day for deterministic streak tests."""
    return date(2026, 2, 5)


@pytest.fixture
def memory_tracker():
    """Tracker backed by an empty in-memory store."""
    return StreakTracker(InMemoryStreakStore())


@pytest.fixture
def started_tracker(streak_day):
    """Tracker with a 3-day streak ending on streak_day."""
    store = InMemoryStreakStore(StreakState(count=3, last_success_day=streak_day))
    return StreakTracker(store)
