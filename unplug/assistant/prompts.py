"""Fixed prompts for the two assistant use cases."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UseCase(str, Enum):
    """What the user asked the assistant for."""

    BREAK_URGE = "break_urge"
    SUGGEST_HOBBY = "suggest_hobby"


@dataclass(frozen=True)
class CompletionRequest:
    """One prompt pair plus sampling parameters, built fresh per call."""

    system_prompt: str
    user_prompt: str
    temperature: float
    max_tokens: Optional[int] = None


@dataclass(frozen=True)
class PromptTemplate:
    """Use-case specific prompt text and sampling parameters."""

    system_prompt: str
    user_template: str
    temperature: float
    max_tokens: Optional[int] = None


DEFAULT_INTERESTS = "general interests like learning, being productive, or being creative"

TEMPLATES = {
    UseCase.BREAK_URGE: PromptTemplate(
        system_prompt=(
            "You are a helpful assistant for breaking digital habits. "
            "Your responses are direct and actionable."
        ),
        user_template=(
            "I feel a strong urge to start gaming. Give me a concise, compelling reason "
            "not to, or a single 5-minute, non-digital activity I can do right now to "
            "break the impulse. Start directly with the reason or activity."
        ),
        temperature=0.7,
        max_tokens=150,
    ),
    UseCase.SUGGEST_HOBBY: PromptTemplate(
        system_prompt=(
            "You are a creative and helpful assistant specialized in suggesting "
            "real-life hobbies and activities. Provide concise, actionable suggestions. "
            "Format your response as a numbered list."
        ),
        user_template=(
            "I need to replace my gaming habit. The things I like about games are "
            "{context}. Suggest three real-life hobbies or 'quests' I could start. "
            "Each suggestion should be brief and actionable."
        ),
        temperature=0.8,
        max_tokens=300,
    ),
}


def build_request(use_case: UseCase, user_context: str = "") -> CompletionRequest:
    """
    Build the completion request for a use case.

    Args:
        use_case: Which assistant flow to run
        user_context: Free-form user text (the stated interests for hobbies)

    Returns:
        CompletionRequest ready to send
    """
    template = TEMPLATES[use_case]

    context = user_context.strip()
    if use_case is UseCase.SUGGEST_HOBBY and not context:
        context = DEFAULT_INTERESTS

    return CompletionRequest(
        system_prompt=template.system_prompt,
        user_prompt=template.user_template.format(context=context),
        temperature=template.temperature,
        max_tokens=template.max_tokens,
    )
