"""Builds multipart/form-data request bodies."""

from __future__ import annotations

import secrets
from typing import Any, BinaryIO

_CHUNK_SIZE = 64 * 1024
_SPECIAL_BOUNDARY_CHARS = set('()<>@,;:\\"/[]?= ')


def _escape_quotes(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def _path_base(path: str) -> str:
    """Last element of a slash-separated path, as the POSIX ``basename`` utility gives it."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return stripped.rsplit("/", 1)[-1]


class FormBuilder:
    """Writes form fields and files as multipart parts into a writable body."""

    def __init__(self, body: Any, *, boundary: str | None = None) -> None:
        self._body = body
        self.boundary = boundary or secrets.token_hex(30)
        self._has_parts = False

    def create_form_file(self, fieldname: str, file: BinaryIO) -> None:
        """Add an open file as a part, named after the file's ``name``."""
        self._create_form_file(fieldname, file, str(getattr(file, "name", "")))

    def create_form_file_reader(self, fieldname: str, reader: Any, filename: str) -> None:
        """Add the contents of ``reader`` as a file part named by the last path element."""
        self._create_form_file(fieldname, reader, _path_base(filename))

    def write_field(self, fieldname: str, value: str) -> None:
        """Add a plain text field."""
        self._create_part(f'form-data; name="{_escape_quotes(fieldname)}"')
        self._body.write(value.encode("utf-8"))

    def close(self) -> None:
        """Write the closing boundary."""
        self._body.write(f"\r\n--{self.boundary}--\r\n".encode("utf-8"))

    def form_data_content_type(self) -> str:
        """The Content-Type header value for the body being built."""
        boundary = self.boundary
        if any(char in _SPECIAL_BOUNDARY_CHARS for char in boundary):
            boundary = f'"{boundary}"'
        return f"multipart/form-data; boundary={boundary}"

    def _create_form_file(self, fieldname: str, reader: Any, filename: str) -> None:
        if not filename:
            raise ValueError("filename cannot be empty")
        self._create_part(
            f'form-data; name="{_escape_quotes(fieldname)}"; filename="{_escape_quotes(filename)}"',
            "application/octet-stream",
        )
        for chunk in iter(lambda: reader.read(_CHUNK_SIZE), b""):
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode("utf-8")
            self._body.write(chunk)

    def _create_part(self, disposition: str, content_type: str | None = None) -> None:
        prefix = f"\r\n--{self.boundary}\r\n" if self._has_parts else f"--{self.boundary}\r\n"
        lines = [f"Content-Disposition: {disposition}"]
        if content_type is not None:
            lines.append(f"Content-Type: {content_type}")
        header = prefix + "".join(f"{line}\r\n" for line in lines) + "\r\n"
        self._body.write(header.encode("utf-8"))
        self._has_parts = True