"""Builds HTTP requests with JSON-encoded bodies."""

from __future__ import annotations

import urllib.request
from collections.abc import Mapping
from typing import Any, Protocol

from llmwire.marshalling import JSONMarshaller


class _Marshaller(Protocol):
    def marshal(self, value: Any) -> bytes: ...


class HTTPRequestBuilder:
    """Turns a method, URL, body and headers into a ``urllib.request.Request``."""

    def __init__(self, marshaller: _Marshaller | None = None) -> None:
        self.marshaller = marshaller if marshaller is not None else JSONMarshaller()

    def build(
        self,
        method: str,
        url: str,
        body: Any = None,
        header: Mapping[str, str] | None = None,
    ) -> urllib.request.Request:
        """Build a request; raw bytes and readable objects are sent as they are."""
        data: Any = None
        if body is not None:
            if isinstance(body, (bytes, bytearray, memoryview)) or hasattr(body, "read"):
                data = body
            else:
                data = self.marshaller.marshal(body)
        return urllib.request.Request(
            url,
            data=data,
            headers=dict(header or {}),
            method=method or "GET",
        )