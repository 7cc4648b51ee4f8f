"""Engines and models available from the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Engine:
    """An engine and its availability."""

    id: str = ""
    object: str = ""
    owner: str = ""
    ready: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Engine:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            owner=data.get("owner") or "",
            ready=bool(data.get("ready")),
        )


@dataclass
class EnginesList:
    """A list of engines."""

    engines: list[Engine] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> EnginesList:
        """Build from decoded JSON; the engines are under ``data``."""
        data = data or {}
        return cls(engines=[Engine.from_dict(item) for item in data.get("data") or []])


@dataclass
class Permission:
    """A permission granted on a model."""

    created_at: int = 0
    id: str = ""
    object: str = ""
    allow_create_engine: bool = False
    allow_sampling: bool = False
    allow_logprobs: bool = False
    allow_search_indices: bool = False
    allow_view: bool = False
    allow_fine_tuning: bool = False
    organization: str = ""
    group: Any = None
    is_blocking: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Permission:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            created_at=data.get("created") or 0,
            id=data.get("id") or "",
            object=data.get("object") or "",
            allow_create_engine=bool(data.get("allow_create_engine")),
            allow_sampling=bool(data.get("allow_sampling")),
            allow_logprobs=bool(data.get("allow_logprobs")),
            allow_search_indices=bool(data.get("allow_search_indices")),
            allow_view=bool(data.get("allow_view")),
            allow_fine_tuning=bool(data.get("allow_fine_tuning")),
            organization=data.get("organization") or "",
            group=data.get("group"),
            is_blocking=bool(data.get("is_blocking")),
        )


@dataclass
class Model:
    """A model with its owner and permissions."""

    created_at: int = 0
    id: str = ""
    object: str = ""
    owned_by: str = ""
    permission: list[Permission] = field(default_factory=list)
    root: str = ""
    parent: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Model:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            created_at=data.get("created") or 0,
            id=data.get("id") or "",
            object=data.get("object") or "",
            owned_by=data.get("owned_by") or "",
            permission=[Permission.from_dict(item) for item in data.get("permission") or []],
            root=data.get("root") or "",
            parent=data.get("parent") or "",
        )


@dataclass
class ModelsList:
    """A list of models."""

    models: list[Model] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ModelsList:
        """Build from decoded JSON; the models are under ``data``."""
        data = data or {}
        return cls(models=[Model.from_dict(item) for item in data.get("data") or []])


@dataclass
class FineTuneModelDeleteResponse:
    """Deletion status of a fine-tuned model."""

    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FineTuneModelDeleteResponse:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            deleted=bool(data.get("deleted")),
        )