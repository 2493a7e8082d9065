from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from gemini_chat.client.gemini_client import GeminiClient

ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"

Handler = Callable[[httpx.Request], httpx.Response]


def reply_payload(text: str = "Hello test") -> dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
                "index": 0,
                "safetyRatings": [
                    {"category": "HARM_CATEGORY_HARASSMENT", "probability": "NEGLIGIBLE"}
                ],
            }
        ],
        "usageMetadata": {"promptTokenCount": 4, "candidatesTokenCount": 2, "totalTokenCount": 6},
    }


def make_client(handler: Handler) -> GeminiClient:
    """GeminiClient whose HTTP layer is served by `handler` instead of the network."""
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return GeminiClient(api_key="test-key", endpoint=ENDPOINT, http_client=http)


def json_handler(payload: dict[str, Any], status_code: int = 200) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode("utf-8"))
    return _handler
