from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from commitclip.domain.delivery import (
    GENERIC_ERROR_MESSAGE,
    MISSING_BINARY_MESSAGE,
    deliver,
    is_missing_clipboard_binary,
    report,
    resolve_and_copy,
)
from commitclip.domain.model import (
    AttributionResult,
    CommitSummary,
    Failed,
    FailureReason,
    NothingToResolve,
    ResolutionArgs,
    ResolutionContext,
    Resolved,
)
from commitclip.domain.ports import ClipboardError, VersionControlError
from commitclip.domain.resolution import ResolutionContractError

if TYPE_CHECKING:
    from commitclip.domain.model import CommitRecord, DocumentRef
    from tests.support.fakes import FakeClipboard, FakeNotifier, FakeVersionControl

REPO = Path("/r")
XSEL_MISSING = "Couldn't find the required `xsel` binary. On Debian/Ubuntu you can install it"
PYPERCLIP_MISSING = (
    "Pyperclip could not find a copy/paste mechanism for your system. "
    "For more information, please visit https://pyperclip.readthedocs.io"
)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ClipboardError(XSEL_MISSING), True),
        (ClipboardError(PYPERCLIP_MISSING), True),
        (RuntimeError(f"wrapped: {XSEL_MISSING}"), True),
        (ClipboardError("clipboard is locked"), False),
        (OSError("xsel crashed"), False),
    ],
)
def test_is_missing_clipboard_binary(error: BaseException, expected: bool) -> None:  # noqa: FBT001
    assert is_missing_clipboard_binary(error) is expected


def test_deliver_writes_message_verbatim(clipboard: FakeClipboard) -> None:
    message = "  Subject line\n\n* body with trailing space \n"

    outcome = asyncio.run(deliver(message, clipboard=clipboard))

    assert outcome == Resolved(message)
    assert clipboard.written == [message]


def test_deliver_classifies_missing_binary(clipboard: FakeClipboard) -> None:
    error = ClipboardError(XSEL_MISSING)
    clipboard.error = error

    outcome = asyncio.run(deliver("msg", clipboard=clipboard))

    assert outcome == Failed(FailureReason.CLIPBOARD_UNAVAILABLE, error)


def test_deliver_reports_other_faults_as_delivery_fault(
    clipboard: FakeClipboard, caplog: pytest.LogCaptureFixture
) -> None:
    error = ClipboardError("clipboard is locked")
    clipboard.error = error

    outcome = asyncio.run(deliver("msg", clipboard=clipboard))

    assert outcome == Failed(FailureReason.DELIVERY_FAULT, error)
    assert "clipboard.write" in caplog.text


@pytest.mark.parametrize(
    ("outcome", "expected"),
    [
        (Resolved("msg"), []),
        (NothingToResolve(), []),
        (Failed(FailureReason.ATTRIBUTION_FAULT), [GENERIC_ERROR_MESSAGE]),
        (Failed(FailureReason.LOOKUP_FAULT), [GENERIC_ERROR_MESSAGE]),
        (Failed(FailureReason.DELIVERY_FAULT), [GENERIC_ERROR_MESSAGE]),
        (Failed(FailureReason.CLIPBOARD_UNAVAILABLE), [MISSING_BINARY_MESSAGE]),
    ],
)
def test_report_sends_at_most_one_notification(
    notifier: FakeNotifier, outcome: Failed | Resolved | NothingToResolve, expected: list[str]
) -> None:
    report(outcome, notifier=notifier)

    assert notifier.messages == expected


def test_missing_binary_message_names_remediation() -> None:
    assert "xsel" in MISSING_BINARY_MESSAGE
    assert "sudo apt install xsel" in MISSING_BINARY_MESSAGE


def _run(
    context: ResolutionContext,
    args: ResolutionArgs | None,
    *,
    vcs: FakeVersionControl,
    clipboard: FakeClipboard,
    notifier: FakeNotifier,
) -> None:
    asyncio.run(
        resolve_and_copy(context, args, vcs=vcs, clipboard=clipboard, notifier=notifier)
    )


def test_resolve_and_copy_copies_blamed_commit_message(
    vcs: FakeVersionControl,
    clipboard: FakeClipboard,
    notifier: FakeNotifier,
    document: DocumentRef,
    fix_bug_commit: CommitRecord,
) -> None:
    vcs.attribution = AttributionResult(commit_id="abc123", is_uncommitted=False, repo_path=REPO)
    vcs.commits[(REPO, "abc123")] = fix_bug_commit

    _run(
        ResolutionContext(document=document, line=5),
        None,
        vcs=vcs,
        clipboard=clipboard,
        notifier=notifier,
    )

    assert clipboard.written == ["Fix bug"]
    assert notifier.messages == []


def test_resolve_and_copy_copies_supplied_message(
    vcs: FakeVersionControl, clipboard: FakeClipboard, notifier: FakeNotifier
) -> None:
    _run(
        ResolutionContext(),
        ResolutionArgs(message="Given message"),
        vcs=vcs,
        clipboard=clipboard,
        notifier=notifier,
    )

    assert clipboard.written == ["Given message"]
    assert vcs.calls == []


def test_resolve_and_copy_copies_latest_commit_without_document(
    vcs: FakeVersionControl, clipboard: FakeClipboard, notifier: FakeNotifier
) -> None:
    vcs.active_repository = REPO
    vcs.history = [CommitSummary(commit_id="head", message="Latest commit")]

    _run(ResolutionContext(), None, vcs=vcs, clipboard=clipboard, notifier=notifier)

    assert clipboard.written == ["Latest commit"]


def test_resolve_and_copy_noop_is_silent(
    vcs: FakeVersionControl,
    clipboard: FakeClipboard,
    notifier: FakeNotifier,
    document: DocumentRef,
) -> None:
    vcs.attribution = AttributionResult(commit_id="0" * 40, is_uncommitted=True, repo_path=REPO)

    _run(
        ResolutionContext(document=document, line=1),
        None,
        vcs=vcs,
        clipboard=clipboard,
        notifier=notifier,
    )

    assert clipboard.written == []
    assert notifier.messages == []


def test_resolve_and_copy_attribution_fault_notifies_once(
    vcs: FakeVersionControl,
    clipboard: FakeClipboard,
    notifier: FakeNotifier,
    document: DocumentRef,
) -> None:
    vcs.attribution_error = VersionControlError("blame exploded")

    _run(
        ResolutionContext(document=document, line=5),
        None,
        vcs=vcs,
        clipboard=clipboard,
        notifier=notifier,
    )

    assert notifier.messages == [GENERIC_ERROR_MESSAGE]
    assert clipboard.written == []


def test_resolve_and_copy_missing_binary_gets_targeted_notification(
    vcs: FakeVersionControl, clipboard: FakeClipboard, notifier: FakeNotifier
) -> None:
    clipboard.error = ClipboardError(XSEL_MISSING)

    _run(
        ResolutionContext(),
        ResolutionArgs(message="msg"),
        vcs=vcs,
        clipboard=clipboard,
        notifier=notifier,
    )

    assert notifier.messages == [MISSING_BINARY_MESSAGE]


def test_resolve_and_copy_other_clipboard_fault_gets_generic_notification(
    vcs: FakeVersionControl, clipboard: FakeClipboard, notifier: FakeNotifier
) -> None:
    clipboard.error = ClipboardError("clipboard is locked")

    _run(
        ResolutionContext(),
        ResolutionArgs(message="msg"),
        vcs=vcs,
        clipboard=clipboard,
        notifier=notifier,
    )

    assert notifier.messages == [GENERIC_ERROR_MESSAGE]


def test_resolve_and_copy_commit_lookup_fault_notifies_once(
    vcs: FakeVersionControl,
    clipboard: FakeClipboard,
    notifier: FakeNotifier,
    document: DocumentRef,
    caplog: pytest.LogCaptureFixture,
) -> None:
    vcs.attribution = AttributionResult(commit_id="abc123", is_uncommitted=False, repo_path=REPO)
    vcs.commit_error = VersionControlError("git show abc123 failed: fatal: corrupt object")

    _run(
        ResolutionContext(document=document, line=5),
        None,
        vcs=vcs,
        clipboard=clipboard,
        notifier=notifier,
    )

    assert notifier.messages == [GENERIC_ERROR_MESSAGE]
    assert clipboard.written == []
    assert "git show abc123 failed" in caplog.text


def test_resolve_and_copy_history_fault_notifies_once(
    vcs: FakeVersionControl, clipboard: FakeClipboard, notifier: FakeNotifier
) -> None:
    vcs.active_repository = REPO
    vcs.history_error = VersionControlError("git log failed: fatal: bad config")

    _run(ResolutionContext(), None, vcs=vcs, clipboard=clipboard, notifier=notifier)

    assert notifier.messages == [GENERIC_ERROR_MESSAGE]
    assert clipboard.written == []


def test_resolve_and_copy_contract_violation_propagates(
    vcs: FakeVersionControl,
    clipboard: FakeClipboard,
    notifier: FakeNotifier,
    document: DocumentRef,
) -> None:
    with pytest.raises(ResolutionContractError):
        _run(
            ResolutionContext(document=document),
            ResolutionArgs(commit_id="abc123"),
            vcs=vcs,
            clipboard=clipboard,
            notifier=notifier,
        )

    assert notifier.messages == []
