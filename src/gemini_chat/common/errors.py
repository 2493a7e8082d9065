"""Exception types raised by the Gemini client and the chat loop."""
from __future__ import annotations


class ChatError(Exception):
    """Base class for every error the chat client reports."""


class MissingApiKeyError(ChatError):
    """Raised at startup when no API key is configured."""


class RequestSerializationError(ChatError):
    """The request envelope could not be serialized to JSON."""


class RequestBuildError(ChatError):
    """The HTTP request could not be built."""


class RequestSendError(ChatError):
    """The HTTP request failed in transport (connect, timeout, protocol)."""


class ApiStatusError(ChatError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ResponseDecodeError(ChatError):
    """The response body is not JSON or doesn't match the response envelope."""


class EmptyResponseError(ResponseDecodeError):
    """The response decoded but carries no candidate text."""
