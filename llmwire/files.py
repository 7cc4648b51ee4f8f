"""File upload requests and file metadata."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class PurposeType(str, Enum):
    """What an uploaded file is for."""

    FINE_TUNE = "fine-tune"
    FINE_TUNE_RESULTS = "fine-tune-results"
    ASSISTANTS = "assistants"
    ASSISTANTS_OUTPUT = "assistants_output"
    BATCH = "batch"


class _FormBuilder(Protocol):
    def create_form_file(self, fieldname: str, file: Any) -> None: ...

    def create_form_file_reader(self, fieldname: str, reader: Any, filename: str) -> None: ...

    def write_field(self, fieldname: str, value: str) -> None: ...

    def close(self) -> None: ...

    def form_data_content_type(self) -> str: ...


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(getattr(value, "value", value))


@dataclass
class FileRequest:
    """Upload of a local file."""

    file_name: str = ""
    file_path: str = ""
    purpose: str = ""


@dataclass
class FileBytesRequest:
    """Upload of in-memory bytes under a given name."""

    name: str = ""
    bytes: bytes = b""
    purpose: PurposeType | str = ""


@dataclass
class File:
    """Metadata of an uploaded file."""

    bytes: int = 0
    created_at: int = 0
    id: str = ""
    file_name: str = ""
    object: str = ""
    status: str = ""
    purpose: str = ""
    status_details: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> File:
        """Build from decoded JSON."""
        data = data or {}
        return cls(
            bytes=data.get("bytes") or 0,
            created_at=data.get("created_at") or 0,
            id=data.get("id") or "",
            file_name=data.get("filename") or "",
            object=data.get("object") or "",
            status=data.get("status") or "",
            purpose=data.get("purpose") or "",
            status_details=data.get("status_details") or "",
        )


@dataclass
class FilesList:
    """Files that belong to the user or organisation."""

    files: list[File] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> FilesList:
        """Build from decoded JSON; the files are under ``data``."""
        data = data or {}
        return cls(files=[File.from_dict(item) for item in data.get("data") or []])


def encode_file_bytes_upload(request: FileBytesRequest, form_builder: _FormBuilder) -> str:
    """Write the multipart body of a bytes upload and return its content type."""
    form_builder.write_field("purpose", _text(request.purpose))
    form_builder.create_form_file_reader("file", io.BytesIO(request.bytes), request.name)
    form_builder.close()
    return form_builder.form_data_content_type()


def encode_file_upload(request: FileRequest, form_builder: _FormBuilder) -> str:
    """Write the multipart body of a local file upload and return its content type.

    Raises ``OSError`` (such as ``FileNotFoundError``) if the file cannot be opened.
    """
    form_builder.write_field("purpose", _text(request.purpose))
    with open(request.file_path, "rb") as file_data:
        form_builder.create_form_file("file", file_data)
    form_builder.close()
    return form_builder.form_data_content_type()