"""Pydantic models for the generateContent request and response envelopes."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gemini_chat.common.errors import EmptyResponseError

USER_ROLE = "user"


class _Envelope(BaseModel):
    # The API sends camelCase keys and may add fields we don't model.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Part(_Envelope):
    text: str


class Content(_Envelope):
    parts: list[Part] = Field(default_factory=list)
    role: str | None = None


class GenerateContentRequest(_Envelope):
    contents: list[Content]

    @classmethod
    def for_text(cls, text: str) -> "GenerateContentRequest":
        """Single-turn user request holding exactly one part."""
        return cls(contents=[Content(parts=[Part(text=text)], role=USER_ROLE)])


class SafetyRating(_Envelope):
    category: str
    probability: str


class Candidate(_Envelope):
    content: Content = Field(default_factory=Content)
    finish_reason: str | None = Field(default=None, alias="finishReason")
    index: int = 0
    safety_ratings: list[SafetyRating] = Field(default_factory=list, alias="safetyRatings")


class UsageMetadata(_Envelope):
    prompt_token_count: int = Field(default=0, alias="promptTokenCount")
    candidates_token_count: int = Field(default=0, alias="candidatesTokenCount")
    total_token_count: int = Field(default=0, alias="totalTokenCount")


class PromptFeedback(_Envelope):
    block_reason: str | None = Field(default=None, alias="blockReason")


class GenerateContentResponse(_Envelope):
    candidates: list[Candidate] = Field(default_factory=list)
    usage_metadata: UsageMetadata = Field(default_factory=UsageMetadata, alias="usageMetadata")
    prompt_feedback: PromptFeedback | None = Field(default=None, alias="promptFeedback")

    def first_text(self) -> str:
        """
        Text of the first part of the first candidate.

        Raises:
            EmptyResponseError: no candidate, or the first candidate has no parts.
        """
        if not self.candidates:
            reason = self.prompt_feedback.block_reason if self.prompt_feedback else None
            if reason:
                raise EmptyResponseError(f"Response has no candidates (prompt blocked: {reason})")
            raise EmptyResponseError("Response has no candidates")
        parts = self.candidates[0].content.parts
        if not parts:
            finish = self.candidates[0].finish_reason or "unknown"
            raise EmptyResponseError(f"First candidate has no parts (finishReason={finish})")
        return parts[0].text
