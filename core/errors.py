"""Custom exception types for the API boundary and AI helpers."""

from __future__ import annotations


class ApiError(Exception):
    """Base exception for failed job-board API calls."""

    def __init__(self, message: str, *, status: int | None = None, payload: object | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.payload = payload


class NetworkError(ApiError):
    """Raised when the API cannot be reached (connection refused, timeout)."""


class AuthenticationError(ApiError):
    """Raised for ``401`` responses."""


class PermissionDeniedError(ApiError):
    """Raised for ``403`` responses."""


class NotFoundError(ApiError):
    """Raised for ``404`` responses."""


class ServerError(ApiError):
    """Raised for ``5xx`` responses."""


AI_UNAVAILABLE_MESSAGE = "The AI assistant is currently unavailable, please fill the fields in manually."


class AIError(Exception):
    """Base exception for AI assistance issues."""


class AIUnavailableError(AIError):
    """Raised when no model is configured or the backend cannot be reached."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or AI_UNAVAILABLE_MESSAGE)


class AIResponseError(AIError):
    """Raised when the model response could not be parsed into the expected shape."""


class ResumeExtractionError(ValueError):
    """Raised when an uploaded resume cannot be turned into text."""

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason
