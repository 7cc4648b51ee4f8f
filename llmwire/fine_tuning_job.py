"""Fine-tuning jobs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlencode

from llmwire.fine_tunes import FineTuneEvent


@dataclass
class Hyperparameters:
    """Training hyperparameters; each may be a number or ``"auto"``."""

    epochs: Any = None
    learning_rate_multiplier: Any = None
    batch_size: Any = None

    def to_dict(self) -> dict[str, Any]:
        """The JSON object; unset values are left out."""
        fields = [
            ("n_epochs", self.epochs),
            ("learning_rate_multiplier", self.learning_rate_multiplier),
            ("batch_size", self.batch_size),
        ]
        return {key: value for key, value in fields if value is not None}


def _hyperparameters_from_dict(data: dict[str, Any] | None) -> Hyperparameters:
    data = data or {}
    return Hyperparameters(
        epochs=data.get("n_epochs"),
        learning_rate_multiplier=data.get("learning_rate_multiplier"),
        batch_size=data.get("batch_size"),
    )


@dataclass
class FineTuningJob:
    """A fine-tuning job and its state."""

    id: str = ""
    object: str = ""
    created_at: int = 0
    finished_at: int = 0
    model: str = ""
    fine_tuned_model: str = ""
    organization_id: str = ""
    status: str = ""
    hyperparameters: Hyperparameters = field(default_factory=Hyperparameters)
    training_file: str = ""
    validation_file: str = ""
    result_files: list[str] = field(default_factory=list)
    trained_tokens: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FineTuningJob:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            id=data.get("id") or "",
            object=data.get("object") or "",
            created_at=data.get("created_at") or 0,
            finished_at=data.get("finished_at") or 0,
            model=data.get("model") or "",
            fine_tuned_model=data.get("fine_tuned_model") or "",
            organization_id=data.get("organization_id") or "",
            status=data.get("status") or "",
            hyperparameters=_hyperparameters_from_dict(data.get("hyperparameters")),
            training_file=data.get("training_file") or "",
            validation_file=data.get("validation_file") or "",
            result_files=list(data.get("result_files") or []),
            trained_tokens=data.get("trained_tokens") or 0,
        )

    def to_dict(self) -> dict[str, Any]:
        """The job as a JSON-ready dict; empty optional names are left out."""
        body: dict[str, Any] = {
            "id": self.id,
            "object": self.object,
            "created_at": self.created_at,
            "finished_at": self.finished_at,
            "model": self.model,
        }
        if self.fine_tuned_model:
            body["fine_tuned_model"] = self.fine_tuned_model
        body["organization_id"] = self.organization_id
        body["status"] = self.status
        body["hyperparameters"] = self.hyperparameters.to_dict()
        body["training_file"] = self.training_file
        if self.validation_file:
            body["validation_file"] = self.validation_file
        body["result_files"] = list(self.result_files)
        body["trained_tokens"] = self.trained_tokens
        return body


@dataclass
class FineTuningJobRequest:
    """Parameters for creating a fine-tuning job."""

    training_file: str = ""
    validation_file: str = ""
    model: str = ""
    hyperparameters: Hyperparameters | None = None
    suffix: str = ""

    def to_dict(self) -> dict[str, Any]:
        """The JSON body; empty optional fields are left out."""
        body: dict[str, Any] = {"training_file": self.training_file}
        if self.validation_file:
            body["validation_file"] = self.validation_file
        if self.model:
            body["model"] = self.model
        if self.hyperparameters is not None:
            body["hyperparameters"] = self.hyperparameters.to_dict()
        if self.suffix:
            body["suffix"] = self.suffix
        return body


@dataclass
class FineTuningJobEvent:
    """An event in the life of a fine-tuning job."""

    object: str = ""
    id: str = ""
    created_at: int = 0
    level: str = ""
    message: str = ""
    data: Any = None
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FineTuningJobEvent:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            object=data.get("object") or "",
            id=data.get("id") or "",
            created_at=data.get("created_at") or 0,
            level=data.get("level") or "",
            message=data.get("message") or "",
            data=data.get("data"),
            type=data.get("type") or "",
        )


@dataclass
class FineTuningJobEventList:
    """A page of events of a fine-tuning job."""

    object: str = ""
    data: list[FineTuneEvent] = field(default_factory=list)
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FineTuningJobEventList:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            object=data.get("object") or "",
            data=[FineTuneEvent.from_dict(item) for item in data.get("data") or []],
            has_more=bool(data.get("has_more")),
        )


def fine_tuning_job_events_path(
    fine_tuning_job_id: str,
    after: str | None = None,
    limit: int | None = None,
) -> str:
    """The URL path listing a job's events, with the paging query if any."""
    query: dict[str, str] = {}
    if after is not None:
        query["after"] = after
    if limit is not None:
        query["limit"] = str(limit)
    path = f"/fine_tuning/jobs/{fine_tuning_job_id}/events"
    if query:
        path += "?" + urlencode(sorted(query.items()))
    return path