"""Observable state of the urge and hobbies screens."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Union

from .assistant.orchestrator import CompletionResult, PromptOrchestrator
from .assistant.prompts import UseCase
from .groq.errors import CompletionError
from .streak.tracker import StreakTracker

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Something went wrong. Please try again."


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""


@dataclass(frozen=True)
class Loading:
    """A completion is outstanding."""


@dataclass(frozen=True)
class Succeeded:
    """Last completion returned text."""
    text: str
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class Failed:
    """Last completion failed; reason is shown to the user."""
    reason: str


ScreenState = Union[Idle, Loading, Succeeded, Failed]


class ScreenBusyError(Exception):
    """Raised when a screen is triggered while its completion is outstanding."""


class Screen:
    """One user-triggered completion flow."""

    use_case: UseCase

    def __init__(self, orchestrator: PromptOrchestrator):
        """Initialize with orchestrator."""
        self.orchestrator = orchestrator
        self.state: ScreenState = Idle()

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    async def trigger(self, user_context: str = "") -> ScreenState:
        """
        Run the completion for this screen.

        Previous text or error is cleared as soon as the call starts. The
        blocking HTTP call runs in a worker thread; all state changes happen
        back on the event loop.

        Args:
            user_context: Free-form user text passed to the prompt

        Returns:
            Succeeded or Failed

        Raises:
            ScreenBusyError: A completion is already outstanding
        """
        if self.is_loading:
            raise ScreenBusyError(f"{self.use_case.value} completion already in progress")

        self.state = Loading()

        try:
            result = await asyncio.to_thread(
                self.orchestrator.complete, self.use_case, user_context
            )
        except CompletionError as e:
            logger.error(f"{self.use_case.value} completion failed: {e.to_dict()}")
            self.state = Failed(reason=e.message)
            return self.state
        except Exception:
            logger.exception(f"Unexpected error during {self.use_case.value} completion")
            self.state = Failed(reason=UNEXPECTED_ERROR_MESSAGE)
            return self.state

        self.state = Succeeded(text=result.text, suggestions=tuple(result.suggestions))
        self.on_success(result)
        return self.state

    def on_success(self, result: CompletionResult):
        """Hook run after a successful completion."""


class UrgeScreen(Screen):
    """Break-urge flow; each success counts toward the streak."""

    use_case = UseCase.BREAK_URGE

    def __init__(self, orchestrator: PromptOrchestrator, tracker: StreakTracker):
        super().__init__(orchestrator)
        self.tracker = tracker

    def on_success(self, result: CompletionResult):
        self.tracker.record_success()


class HobbiesScreen(Screen):
    """Hobby suggestion flow."""

    use_case = UseCase.SUGGEST_HOBBY
