"""Runs one assistant use case against the completion service."""

import logging
import re
from dataclasses import dataclass, field

from unplug.groq.client import GroqClient

from .prompts import UseCase, build_request

logger = logging.getLogger(__name__)

_NUMBER_MARKER = re.compile(r"^\d+\.\s*")
_DASH_MARKER = re.compile(r"^-+\s*")


@dataclass
class CompletionResult:
    """Text of a successful completion."""

    text: str
    suggestions: list[str] = field(default_factory=list)  # SUGGEST_HOBBY only


def parse_hobby_suggestions(text: str) -> list[str]:
    """
    Split a completion into individual hobby suggestions.

    Each non-blank line becomes one suggestion with a leading "1." style
    number or "-" bullet removed.

    Example:
        "1. Try pottery\\n2. Go hiking\\n\\n3. Learn guitar"
        -> ["Try pottery", "Go hiking", "Learn guitar"]
    """
    suggestions = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue

        line = _NUMBER_MARKER.sub("", line)
        line = _DASH_MARKER.sub("", line)

        # A bare marker line leaves nothing to show
        if line:
            suggestions.append(line)

    return suggestions


class PromptOrchestrator:
    """Builds the prompt, calls the service once and normalizes the result."""

    def __init__(self, client: GroqClient):
        """Initialize with completion client."""
        self.client = client

    def complete(self, use_case: UseCase, user_context: str = "") -> CompletionResult:
        """
        Run one completion.

        Args:
            use_case: BREAK_URGE or SUGGEST_HOBBY
            user_context: Free-form user text (interests for SUGGEST_HOBBY)

        Returns:
            CompletionResult with suggestions filled in for SUGGEST_HOBBY

        Raises:
            CompletionError: Any failure; never retried
        """
        logger.info(f"Running {use_case.value} completion")

        request = build_request(use_case, user_context)
        text = self.client.chat(request)

        result = CompletionResult(text=text)
        if use_case is UseCase.SUGGEST_HOBBY:
            result.suggestions = parse_hobby_suggestions(text)
            logger.info(f"Parsed {len(result.suggestions)} hobby suggestions")

        return result
