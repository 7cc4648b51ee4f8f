"""Errors reported by the API and by failed requests."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class InnerError:
    """Azure content-filtering details attached to an API error."""

    code: str = ""
    content_filter_results: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> InnerError:
        if not isinstance(data, dict):
            raise ValueError("innererror must be a JSON object")
        code = data.get("code")
        if code is not None and not isinstance(code, str):
            raise ValueError("innererror code must be a string")
        results = data.get("content_filter_result")
        if results is not None and not isinstance(results, dict):
            raise ValueError("content_filter_result must be a JSON object")
        return cls(code=code or "", content_filter_results=dict(results or {}))


def _optional_string(data: dict[str, Any], key: str) -> str | None:
    value = data[key]
    if value is not None and not isinstance(value, str):
        raise ValueError(f"error field {key!r} must be a string")
    return value


def _parse_message(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list) and all(item is None or isinstance(item, str) for item in raw):
        return ", ".join(item or "" for item in raw)
    raise ValueError("error message must be a string or a list of strings")


class APIError(Exception):
    """An error returned by the API."""

    def __init__(
        self,
        message: str = "",
        *,
        code: Any = None,
        param: str | None = None,
        type: str = "",
        http_status: str = "",
        http_status_code: int = 0,
        inner_error: InnerError | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.param = param
        self.type = type
        self.http_status = http_status
        self.http_status_code = http_status_code
        self.inner_error = inner_error

    def __str__(self) -> str:
        if self.http_status_code > 0:
            return (
                f"error, status code: {self.http_status_code}, "
                f"status: {self.http_status}, message: {self.message}"
            )
        return self.message

    @classmethod
    def from_dict(cls, data: Any) -> APIError:
        """Build from a decoded error object; raises ``ValueError`` on a malformed one."""
        if not isinstance(data, dict):
            raise ValueError("error must be a JSON object")
        if "message" not in data:
            raise ValueError("error message is missing")
        error = cls(_parse_message(data["message"]))
        if "type" in data:
            error.type = _optional_string(data, "type") or ""
        if "innererror" in data and data["innererror"] is not None:
            error.inner_error = InnerError.from_dict(data["innererror"])
        if "param" in data:
            error.param = _optional_string(data, "param")
        if "code" in data:
            error.code = data["code"]
        return error

    @classmethod
    def from_json(cls, data: str | bytes) -> APIError:
        """Parse a JSON error object."""
        return cls.from_dict(json.loads(data))


class RequestError(Exception):
    """A request failed without a well-formed API error in the reply."""

    def __init__(
        self,
        *,
        http_status: str = "",
        http_status_code: int = 0,
        err: BaseException | None = None,
        body: bytes = b"",
    ) -> None:
        super().__init__(http_status_code, err)
        self.http_status = http_status
        self.http_status_code = http_status_code
        self.err = err
        self.body = body
        self.__cause__ = err

    def __str__(self) -> str:
        message = str(self.err) if self.err is not None else ""
        body = self.body.decode("utf-8", errors="replace")
        return (
            f"error, status code: {self.http_status_code}, status: {self.http_status}, "
            f"message: {message}, body: {body}"
        )


@dataclass
class ErrorResponse:
    """Envelope around an API error."""

    error: APIError | None = None

    @classmethod
    def from_json(cls, data: str | bytes) -> ErrorResponse:
        """Parse an error envelope; a missing or null ``error`` gives ``None``."""
        decoded = json.loads(data)
        if not isinstance(decoded, dict):
            raise ValueError("error response must be a JSON object")
        raw = decoded.get("error")
        return cls(error=APIError.from_dict(raw) if raw is not None else None)