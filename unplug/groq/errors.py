"""
Failures of a single completion call.

Every failure is terminal for the user action that caused it: nothing here is
retried. ``message`` is short enough to show on screen as-is.
"""

from typing import Any, Dict, Optional

BODY_EXCERPT_LENGTH = 100


class CompletionError(Exception):
    """Base exception for completion failures."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize exception with message and optional context.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


class MissingCredential(CompletionError):
    """Raised before any request when the API key is absent or empty."""

    def __init__(self):
        super().__init__(
            message="API Key not found or empty. Please check your .env file.",
            error_code="MISSING_CREDENTIAL",
        )


class TransportFailure(CompletionError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, details: str):
        super().__init__(
            message=f"Failed to get AI response: {details}",
            error_code="TRANSPORT_FAILURE",
            context={"details": details},
        )


class HttpError(CompletionError):
    """Raised on any status other than 200."""

    def __init__(self, status_code: int, body: str):
        excerpt = body[:BODY_EXCERPT_LENGTH]
        super().__init__(
            message=f"API request failed with status {status_code}. Response: {excerpt}.",
            error_code="HTTP_ERROR",
            context={"status_code": status_code, "body_excerpt": excerpt},
        )
        self.status_code = status_code
        self.body_excerpt = excerpt


class DecodeFailure(CompletionError):
    """Raised when a 200 body is not JSON or does not match the chat schema."""

    def __init__(self, details: str):
        super().__init__(
            message=f"Could not read AI response: {details}",
            error_code="DECODE_FAILURE",
            context={"details": details},
        )


class EmptyResult(CompletionError):
    """Raised when a well-formed response has no choices."""

    def __init__(self):
        super().__init__(
            message="No response content from AI.",
            error_code="EMPTY_RESULT",
        )
