"""Groq chat-completion HTTP client."""

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from unplug.assistant.prompts import CompletionRequest

from .errors import DecodeFailure, EmptyResult, HttpError, MissingCredential, TransportFailure
from .models import ChatMessage, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


class GroqClient:
    """Blocking client for the OpenAI-compatible Groq completion endpoint."""

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str],
        model: str,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Groq client.

        Args:
            api_url: Full chat-completions URL
            api_key: Bearer credential; may be empty, checked on each call
            model: Model name sent with every request
            timeout: Seconds to wait for the response (None = no limit)
        """
        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    def _build_payload(self, request: CompletionRequest) -> dict:
        """Convert a completion request to the JSON body."""
        chat_request = ChatRequest(
            model=self.model,
            messages=[
                ChatMessage(role="system", content=request.system_prompt),
                ChatMessage(role="user", content=request.user_prompt),
            ],
            temperature=request.temperature,
            max_tokens=request.max_tokens,
            stream=False,
        )
        return chat_request.model_dump()

    def chat(self, request: CompletionRequest) -> str:
        """
        Send one completion request and return the first choice's text.

        Args:
            request: Prompts and sampling parameters

        Returns:
            Message content of the first choice

        Raises:
            MissingCredential: API key absent or empty (no request is made)
            TransportFailure: Connection or other transport error
            HttpError: Any status other than 200
            DecodeFailure: Body is not JSON or does not match the chat schema
            EmptyResult: Response has no choices
        """
        if not self.api_key:
            logger.warning("Groq API key is not configured")
            raise MissingCredential()

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        payload = self._build_payload(request)

        logger.info(
            f"Requesting completion from {self.model} "
            f"(temperature={request.temperature}, max_tokens={request.max_tokens})"
        )

        try:
            response = requests.post(
                self.api_url, json=payload, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Completion request failed: {e}")
            raise TransportFailure(str(e)) from e

        if response.status_code != 200:
            logger.error(f"HTTP Error: Status {response.status_code}, Body: {response.text}")
            raise HttpError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Completion body is not JSON: {response.text[:200]}")
            raise DecodeFailure("response body is not valid JSON") from e

        try:
            chat_response = ChatResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Completion body does not match schema: {e}")
            raise DecodeFailure("unexpected response format") from e

        if not chat_response.choices:
            logger.warning("Completion response contained no choices")
            raise EmptyResult()

        content = chat_response.choices[0].message.content
        logger.debug(f"Completion response length: {len(content)} chars")
        return content


def demo_completion():
    """Send one break-urge request with the configured credential."""
    from unplug.assistant.prompts import UseCase, build_request
    from unplug.config import settings

    from .errors import CompletionError

    client = GroqClient(
        settings.groq_api_url,
        settings.groq_api_key,
        settings.groq_model,
        timeout=settings.groq_timeout,
    )

    try:
        print(client.chat(build_request(UseCase.BREAK_URGE)))
    except CompletionError as e:
        print(f"Error: {e.message}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo_completion()
