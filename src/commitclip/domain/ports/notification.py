"""Port for user-facing notifications."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Notifier(Protocol):
    """Fire-and-forget channel for error messages shown to the user."""

    def notify(self, message: str) -> None: ...


__all__ = ["Notifier"]
