"""JSON encoding and decoding of request and response bodies."""

from __future__ import annotations

import json
from typing import Any

# Characters escaped in encoded output so bodies are safe to embed in HTML.
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"value of type {type(value).__name__} is not JSON serializable")


class JSONMarshaller:
    """Encodes values as compact JSON bytes."""

    def marshal(self, value: Any) -> bytes:
        """Encode ``value``; objects with a ``to_dict`` method are encoded through it."""
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_default)
        for char, escaped in _HTML_ESCAPES.items():
            text = text.replace(char, escaped)
        return text.encode("utf-8")


class JSONUnmarshaler:
    """Decodes JSON text into Python values."""

    def unmarshal(self, data: bytes | bytearray | str) -> Any:
        """Decode ``data``; raises ``json.JSONDecodeError`` on malformed input."""
        return json.loads(data)