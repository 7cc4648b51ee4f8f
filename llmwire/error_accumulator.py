"""Collects the raw bytes of an error body as it is read."""

from __future__ import annotations

import io
from typing import Any


class ErrorAccumulatorWriteError(Exception):
    """Raised when the accumulator's buffer refuses a write."""


class ErrorAccumulator:
    """Accumulates error bytes into a buffer with ``write`` and ``getvalue``."""

    def __init__(self, buffer: Any = None) -> None:
        self.buffer = buffer if buffer is not None else io.BytesIO()

    def write(self, data: bytes) -> None:
        """Append ``data`` to the buffer."""
        try:
            self.buffer.write(data)
        except Exception as exc:
            raise ErrorAccumulatorWriteError(f"error accumulator write error, {exc}") from exc

    def bytes(self) -> bytes:
        """Return everything written so far, or empty bytes if nothing was."""
        return bytes(self.buffer.getvalue())