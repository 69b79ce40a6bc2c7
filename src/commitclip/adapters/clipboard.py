"""Clipboard sink backed by pyperclip."""

from __future__ import annotations

import asyncio
from logging import getLogger

import pyperclip

from commitclip.domain.ports import ClipboardError

log = getLogger(__name__)


class PyperclipClipboard:
    """Write text to the system clipboard.

    pyperclip blocks while the platform helper (``xsel``, ``xclip``,
    ``pbcopy``, ...) runs, so the copy happens in a worker thread.
    """

    async def write(self, text: str) -> None:
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc
        log.debug("Copied %s characters to the clipboard", len(text))
