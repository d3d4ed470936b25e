"""Groq chat-completion wire models."""

from typing import Optional

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """One message in a chat conversation."""

    role: str
    content: str


class ChatRequest(BaseModel):
    """Body of POST /openai/v1/chat/completions."""

    model: str
    messages: list[ChatMessage]
    temperature: float
    max_tokens: Optional[int] = None
    stream: bool = False


class ChatChoice(BaseModel):
    """One candidate completion."""

    message: ChatMessage


class ChatResponse(BaseModel):
    """Subset of the completion response we read."""

    choices: list[ChatChoice]
