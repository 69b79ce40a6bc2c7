"""Hand resolved messages to the clipboard and report what happened."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from commitclip.domain.model import (
    Failed,
    FailureReason,
    ResolutionArgs,
    Resolved,
)
from commitclip.domain.ports import VersionControlError
from commitclip.domain.resolution import resolve

if TYPE_CHECKING:
    from commitclip.domain.model import Outcome, ResolutionContext
    from commitclip.domain.ports import ClipboardSink, Notifier, VersionControlProvider

log = getLogger(__name__)

GENERIC_ERROR_MESSAGE: Final[str] = "Unable to copy message"
MISSING_BINARY_MESSAGE: Final[str] = (
    "Unable to copy message, xsel is not installed. "
    "Please install it via your package manager, e.g. `sudo apt install xsel`"
)

# clipboardy and pyperclip wordings for "no clipboard program on this host".
MISSING_BINARY_MARKERS: Final[tuple[str, ...]] = (
    "Couldn't find the required `xsel` binary",
    "could not find a copy/paste mechanism",
)


def is_missing_clipboard_binary(error: BaseException) -> bool:
    """Return True when ``error`` says the system clipboard program is absent."""

    description = str(error)
    return any(marker in description for marker in MISSING_BINARY_MARKERS)


async def deliver(message: str, *, clipboard: ClipboardSink) -> Outcome:
    """Write ``message`` verbatim to ``clipboard``."""

    try:
        await clipboard.write(message)
    except Exception as exc:  # noqa: BLE001
        if is_missing_clipboard_binary(exc):
            log.warning("Clipboard program unavailable: %s", exc)
            return Failed(FailureReason.CLIPBOARD_UNAVAILABLE, exc)
        log.exception("Delivery failed: clipboard.write")
        return Failed(FailureReason.DELIVERY_FAULT, exc)
    return Resolved(message)


def report(outcome: Outcome, *, notifier: Notifier) -> None:
    """Notify the user about a failed outcome; successes and no-ops stay silent."""

    if not isinstance(outcome, Failed):
        return
    if outcome.reason is FailureReason.CLIPBOARD_UNAVAILABLE:
        notifier.notify(MISSING_BINARY_MESSAGE)
        return
    notifier.notify(GENERIC_ERROR_MESSAGE)


async def resolve_and_copy(
    context: ResolutionContext,
    args: ResolutionArgs | None = None,
    *,
    vcs: VersionControlProvider,
    clipboard: ClipboardSink,
    notifier: Notifier,
) -> None:
    """Resolve the commit message for ``context`` and copy it to the clipboard."""

    try:
        outcome = await resolve(context, args or ResolutionArgs(), vcs=vcs)
    except VersionControlError as exc:
        log.exception("Commit lookup failed: %s", exc)
        outcome = Failed(FailureReason.LOOKUP_FAULT, exc)
    if isinstance(outcome, Resolved):
        outcome = await deliver(outcome.message, clipboard=clipboard)
    report(outcome, notifier=notifier)


__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "MISSING_BINARY_MARKERS",
    "MISSING_BINARY_MESSAGE",
    "deliver",
    "is_missing_clipboard_binary",
    "report",
    "resolve_and_copy",
]
