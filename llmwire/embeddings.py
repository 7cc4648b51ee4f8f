"""Embedding requests, responses and vector helpers."""

from __future__ import annotations

import base64
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from llmwire.common import Usage

_FLOAT32_SIZE = 4


class VectorLengthMismatchError(ValueError):
    """Two embedding vectors of different lengths were combined."""

    def __init__(self) -> None:
        super().__init__("vector length mismatch")


class EmbeddingModel(str, Enum):
    """Models that produce embedding vectors."""

    # Shut down; use text-embedding-ada-002 instead.
    ADA_SIMILARITY = "text-similarity-ada-001"
    BABBAGE_SIMILARITY = "text-similarity-babbage-001"
    CURIE_SIMILARITY = "text-similarity-curie-001"
    DAVINCI_SIMILARITY = "text-similarity-davinci-001"
    ADA_SEARCH_DOCUMENT = "text-search-ada-doc-001"
    ADA_SEARCH_QUERY = "text-search-ada-query-001"
    BABBAGE_SEARCH_DOCUMENT = "text-search-babbage-doc-001"
    BABBAGE_SEARCH_QUERY = "text-search-babbage-query-001"
    CURIE_SEARCH_DOCUMENT = "text-search-curie-doc-001"
    CURIE_SEARCH_QUERY = "text-search-curie-query-001"
    DAVINCI_SEARCH_DOCUMENT = "text-search-davinci-doc-001"
    DAVINCI_SEARCH_QUERY = "text-search-davinci-query-001"
    ADA_CODE_SEARCH_CODE = "code-search-ada-code-001"
    ADA_CODE_SEARCH_TEXT = "code-search-ada-text-001"
    BABBAGE_CODE_SEARCH_CODE = "code-search-babbage-code-001"
    BABBAGE_CODE_SEARCH_TEXT = "code-search-babbage-text-001"

    ADA_EMBEDDING_V2 = "text-embedding-ada-002"
    SMALL_EMBEDDING_3 = "text-embedding-3-small"
    LARGE_EMBEDDING_3 = "text-embedding-3-large"


class EmbeddingEncodingFormat(str, Enum):
    """Encoding of the returned vectors; the service defaults to float."""

    FLOAT = "float"
    BASE64 = "base64"


def _text(value: Any) -> str:
    """The plain string form of a string or string enum."""
    if value is None:
        return ""
    return str(getattr(value, "value", value))


@dataclass
class Embedding:
    """A vector representation of one input."""

    object: str = ""
    embedding: list[float] = field(default_factory=list)
    index: int = 0

    def dot_product(self, other: Embedding) -> float:
        """Dot product with ``other``; both vectors must be the same length."""
        if len(self.embedding) != len(other.embedding):
            raise VectorLengthMismatchError()
        return sum(a * b for a, b in zip(self.embedding, other.embedding))


def _embedding_from_dict(data: dict[str, Any] | None) -> Embedding:
    data = data or {}
    return Embedding(
        object=data.get("object") or "",
        embedding=[float(value) for value in data.get("embedding") or []],
        index=data.get("index") or 0,
    )


@dataclass
class EmbeddingResponse:
    """Reply to an embeddings request."""

    object: str = ""
    data: list[Embedding] = field(default_factory=list)
    model: str = ""
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> EmbeddingResponse:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            object=data.get("object") or "",
            data=[_embedding_from_dict(item) for item in data.get("data") or []],
            model=_text(data.get("model")),
            usage=Usage.from_dict(data.get("usage")),
        )


def decode_base64_embedding(data: str) -> list[float]:
    """Decode a base64 string of little-endian float32 values.

    Trailing bytes that do not make a whole float are ignored; malformed
    base64 raises ``ValueError``.
    """
    raw = base64.b64decode(data, validate=True)
    whole = len(raw) - len(raw) % _FLOAT32_SIZE
    return [value for (value,) in struct.iter_unpack("<f", raw[:whole])]


@dataclass
class Base64Embedding:
    """An embedding whose vector is still base64-encoded."""

    object: str = ""
    embedding: str = ""
    index: int = 0


@dataclass
class EmbeddingResponseBase64:
    """Reply to an embeddings request made with the base64 encoding format."""

    object: str = ""
    data: list[Base64Embedding] = field(default_factory=list)
    model: str = ""
    usage: Usage = field(default_factory=Usage)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> EmbeddingResponseBase64:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            object=data.get("object") or "",
            data=[
                Base64Embedding(
                    object=(item or {}).get("object") or "",
                    embedding=(item or {}).get("embedding") or "",
                    index=(item or {}).get("index") or 0,
                )
                for item in data.get("data") or []
            ],
            model=_text(data.get("model")),
            usage=Usage.from_dict(data.get("usage")),
        )

    def to_embedding_response(self) -> EmbeddingResponse:
        """Decode every vector into an ``EmbeddingResponse``."""
        return EmbeddingResponse(
            object=self.object,
            data=[
                Embedding(
                    object=item.object,
                    embedding=decode_base64_embedding(item.embedding),
                    index=item.index,
                )
                for item in self.data
            ],
            model=self.model,
            usage=self.usage,
        )


def _copy_input(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [list(item) if isinstance(item, (list, tuple)) else item for item in value]
    return value


def _request_dict(
    input_value: Any,
    model: Any,
    user: str,
    encoding_format: Any,
    dimensions: int,
    *,
    user_always: bool,
) -> dict[str, Any]:
    body: dict[str, Any] = {"input": _copy_input(input_value), "model": _text(model)}
    if user_always or user:
        body["user"] = user
    if encoding_format:
        body["encoding_format"] = _text(encoding_format)
    if dimensions:
        body["dimensions"] = dimensions
    return body


@dataclass
class EmbeddingRequest:
    """An embeddings request with input of any accepted shape."""

    input: Any = None
    model: EmbeddingModel | str = ""
    user: str = ""
    encoding_format: EmbeddingEncodingFormat | str = ""
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        """The request itself."""
        return self

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; empty optional fields are left out."""
        return _request_dict(
            self.input, self.model, self.user, self.encoding_format, self.dimensions, user_always=False
        )


@dataclass
class EmbeddingRequestStrings:
    """An embeddings request over a list of strings."""

    input: list[str] | None = None
    model: EmbeddingModel | str = ""
    user: str = ""
    encoding_format: EmbeddingEncodingFormat | str = ""
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        """The equivalent general ``EmbeddingRequest``."""
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; ``user`` is always present."""
        return _request_dict(
            self.input, self.model, self.user, self.encoding_format, self.dimensions, user_always=True
        )


@dataclass
class EmbeddingRequestTokens:
    """An embeddings request over lists of token ids."""

    input: list[list[int]] | None = None
    model: EmbeddingModel | str = ""
    user: str = ""
    encoding_format: EmbeddingEncodingFormat | str = ""
    dimensions: int = 0

    def convert(self) -> EmbeddingRequest:
        """The equivalent general ``EmbeddingRequest``."""
        return EmbeddingRequest(
            input=self.input,
            model=self.model,
            user=self.user,
            encoding_format=self.encoding_format,
            dimensions=self.dimensions,
        )

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; ``user`` is always present."""
        return _request_dict(
            self.input, self.model, self.user, self.encoding_format, self.dimensions, user_always=True
        )