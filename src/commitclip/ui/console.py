"""Console notifier used by the command-line host."""

from __future__ import annotations

import sys
from typing import TextIO


class ConsoleNotifier:
    """Print user notifications to a text stream (stderr by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def notify(self, message: str) -> None:
        stream = self._stream or sys.stderr
        print(f"Error: {message}", file=stream)  # noqa: T201
