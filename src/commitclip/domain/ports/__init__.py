"""Domain port definitions for adapters."""

from __future__ import annotations

from .clipboard import ClipboardError, ClipboardSink
from .notification import Notifier
from .vcs import VersionControlError, VersionControlProvider

__all__ = [
    "ClipboardError",
    "ClipboardSink",
    "Notifier",
    "VersionControlError",
    "VersionControlProvider",
]
