"""Port for the clipboard delivery sink."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class ClipboardError(RuntimeError):
    """Raised when the clipboard rejects a write.

    The message carries the underlying description verbatim so callers can
    classify the fault.
    """


@runtime_checkable
class ClipboardSink(Protocol):
    async def write(self, text: str) -> None: ...


__all__ = ["ClipboardError", "ClipboardSink"]
