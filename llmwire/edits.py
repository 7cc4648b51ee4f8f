"""Edit requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from llmwire.common import Usage


@dataclass
class EditsRequest:
    """Parameters of an edit request."""

    model: str | None = None
    input: str = ""
    instruction: str = ""
    n: int = 0
    temperature: float = 0.0
    top_p: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; empty fields are left out."""
        body: dict[str, Any] = {}
        if self.model is not None:
            body["model"] = self.model
        fields = [
            ("input", self.input),
            ("instruction", self.instruction),
            ("n", self.n),
            ("temperature", self.temperature),
            ("top_p", self.top_p),
        ]
        body.update((key, value) for key, value in fields if value)
        return body


@dataclass
class EditsChoice:
    """One of the returned edits."""

    text: str = ""
    index: int = 0


@dataclass
class EditsResponse:
    """Reply to an edit request."""

    object: str = ""
    created: int = 0
    usage: Usage = field(default_factory=Usage)
    choices: list[EditsChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> EditsResponse:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            object=data.get("object") or "",
            created=data.get("created") or 0,
            usage=Usage.from_dict(data.get("usage")),
            choices=[
                EditsChoice(text=(item or {}).get("text") or "", index=(item or {}).get("index") or 0)
                for item in data.get("choices") or []
            ],
        )