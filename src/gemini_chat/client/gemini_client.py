"""Blocking client for the Gemini generateContent REST endpoint.

One call = one single-turn request. Every failure is mapped onto a
`gemini_chat.common.errors.ChatError` subclass so callers only need one
except clause.
"""
from __future__ import annotations
from typing import Any

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from gemini_chat.common.config import Settings
from gemini_chat.common.errors import (
    ApiStatusError,
    RequestBuildError,
    RequestSendError,
    RequestSerializationError,
    ResponseDecodeError,
)
from gemini_chat.common.schema import GenerateContentRequest, GenerateContentResponse

JSON_HEADERS = {"Content-Type": "application/json"}


def _error_message(response: httpx.Response) -> str:
    """Pull `error.message` out of a Google API error body, else the raw text."""
    try:
        data: Any = response.json()
        return str(data["error"]["message"])
    except Exception:
        return response.text.strip() or response.reason_phrase


class GeminiClient:
    """
    Single-turn Gemini client.

    Args:
        api_key: Sent as the `key` query parameter.
        endpoint: Full generateContent URL.
        timeout_s: Per-request timeout.
        http_client: Optional pre-built httpx client (tests inject a MockTransport).
    """

    def __init__(
        self,
        *,
        api_key: str,
        endpoint: str,
        timeout_s: float = 120.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self._http = http_client or httpx.Client(timeout=timeout_s)

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.Client | None = None) -> "GeminiClient":
        return cls(
            api_key=settings.api_key,
            endpoint=settings.endpoint,
            timeout_s=settings.timeout_s,
            http_client=http_client,
        )

    def __enter__(self) -> "GeminiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        self._http.close()

    def encode_request(self, text: str) -> bytes:
        try:
            return GenerateContentRequest.for_text(text).model_dump_json().encode("utf-8")
        except (PydanticSerializationError, ValueError) as e:
            raise RequestSerializationError(f"Error serializing request: {e}") from e

    def build_request(self, body: bytes) -> httpx.Request:
        try:
            return self._http.build_request(
                "POST",
                self.endpoint,
                params={"key": self.api_key},
                headers=JSON_HEADERS,
                content=body,
            )
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            raise RequestBuildError(f"Error building request: {e}") from e

    def generate(self, text: str) -> GenerateContentResponse:
        """
        Send `text` as one user turn and decode the reply.

        Raises:
            RequestSerializationError, RequestBuildError, RequestSendError,
            ApiStatusError, ResponseDecodeError
        """
        request = self.build_request(self.encode_request(text))

        try:
            response = self._http.send(request)
            body = response.read()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RequestSendError(f"Error sending request: {e}") from e

        if not response.is_success:
            raise ApiStatusError(response.status_code, _error_message(response))

        try:
            return GenerateContentResponse.model_validate_json(body)
        except ValidationError as e:
            raise ResponseDecodeError(f"Error deserializing response: {e}") from e
