"""Token usage reported with API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class CompletionTokensDetails:
    """Breakdown of tokens used in a completion."""

    audio_tokens: int = 0
    reasoning_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompletionTokensDetails:
        return cls(
            audio_tokens=data.get("audio_tokens") or 0,
            reasoning_tokens=data.get("reasoning_tokens") or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"audio_tokens": self.audio_tokens, "reasoning_tokens": self.reasoning_tokens}


@dataclass
class PromptTokensDetails:
    """Breakdown of tokens used in the prompt."""

    audio_tokens: int = 0
    cached_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PromptTokensDetails:
        return cls(
            audio_tokens=data.get("audio_tokens") or 0,
            cached_tokens=data.get("cached_tokens") or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"audio_tokens": self.audio_tokens, "cached_tokens": self.cached_tokens}


@dataclass
class Usage:
    """Total token usage of one request."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_tokens_details: PromptTokensDetails | None = None
    completion_tokens_details: CompletionTokensDetails | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Usage:
        """Build usage from decoded JSON; missing or null fields take their zero value."""
        data = data or {}
        prompt_details = data.get("prompt_tokens_details")
        completion_details = data.get("completion_tokens_details")
        return cls(
            prompt_tokens=data.get("prompt_tokens") or 0,
            completion_tokens=data.get("completion_tokens") or 0,
            total_tokens=data.get("total_tokens") or 0,
            prompt_tokens_details=(
                PromptTokensDetails.from_dict(prompt_details) if prompt_details is not None else None
            ),
            completion_tokens_details=(
                CompletionTokensDetails.from_dict(completion_details)
                if completion_details is not None
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """The usage as a JSON-ready dict; absent details are null."""
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
            "prompt_tokens_details": (
                self.prompt_tokens_details.to_dict() if self.prompt_tokens_details else None
            ),
            "completion_tokens_details": (
                self.completion_tokens_details.to_dict() if self.completion_tokens_details else None
            ),
        }