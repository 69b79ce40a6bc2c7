"""Resolve the commit message relevant to the current context.

The resolver walks a fixed priority chain and returns the first outcome a
branch produces:

1. a caller-supplied message,
2. the most recent history entry of the active repository when no document is
   in focus,
3. blame for the target line of the document (content-aware when the document
   has unsaved edits),
4. the full message of the resolved (or caller-supplied) commit.

Only the attribution lookup is treated as a recoverable fault. Every other
"not found" falls through to :class:`NothingToResolve`.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from commitclip.domain.model import (
    Failed,
    FailureReason,
    NothingToResolve,
    Resolved,
)

if TYPE_CHECKING:
    from commitclip.domain.model import (
        AttributionResult,
        DocumentRef,
        Outcome,
        ResolutionArgs,
        ResolutionContext,
    )
    from commitclip.domain.ports import VersionControlProvider

log = getLogger(__name__)

HISTORY_FALLBACK_MAX_COUNT = 1


class ResolutionContractError(RuntimeError):
    """Raised when the chain reaches a state its invariants rule out."""


async def resolve(
    context: ResolutionContext,
    args: ResolutionArgs,
    *,
    vcs: VersionControlProvider,
) -> Outcome:
    """Return the commit message for ``context`` or a no-op/failure outcome."""

    if args.message is not None:
        return Resolved(args.message)

    line = context.line if context.line is not None else 0
    if line < 0:
        log.debug("Negative target line %s, nothing to resolve", line)
        return NothingToResolve()

    document = context.document
    if document is None:
        return await _resolve_latest_commit(vcs)

    commit_id = args.commit_id
    if commit_id is None:
        try:
            attribution = await _attribute_line(vcs, context, document, line)
        except Exception as exc:  # noqa: BLE001
            log.exception("Attribution failed: get_attribution(line=%s)", line)
            return Failed(FailureReason.ATTRIBUTION_FAULT, exc)

        if attribution is None:
            log.debug("No attribution for %s line %s", document.path, line)
            return NothingToResolve()
        if attribution.is_uncommitted:
            log.debug("Line %s of %s is uncommitted", line, document.path)
            return NothingToResolve()

        commit_id = attribution.commit_id
        document = document.with_repo_path(attribution.repo_path)

    return await _resolve_commit_message(vcs, document, commit_id)


async def _resolve_latest_commit(vcs: VersionControlProvider) -> Outcome:
    repo_path = await vcs.get_active_repository()
    if repo_path is None:
        log.debug("No active repository, nothing to resolve")
        return NothingToResolve()

    history = await vcs.get_history(repo_path, max_count=HISTORY_FALLBACK_MAX_COUNT)
    if not history:
        log.debug("Repository %s has no history", repo_path)
        return NothingToResolve()

    return Resolved(history[0].message)


async def _attribute_line(
    vcs: VersionControlProvider,
    context: ResolutionContext,
    document: DocumentRef,
    line: int,
) -> AttributionResult | None:
    if context.dirty_content is not None:
        return await vcs.get_attribution_for_contents(document, line, context.dirty_content)
    return await vcs.get_attribution(document, line)


async def _resolve_commit_message(
    vcs: VersionControlProvider,
    document: DocumentRef,
    commit_id: str,
) -> Outcome:
    # Blame only carries the summary line; the full message needs the commit itself.
    if document.repo_path is None:
        raise ResolutionContractError(
            f"Cannot look up commit {commit_id}: no repository path for {document.path}"
        )

    record = await vcs.get_commit(document.repo_path, commit_id)
    if record is None:
        log.debug("Commit %s not found in %s", commit_id, document.repo_path)
        return NothingToResolve()

    return Resolved(record.message)


__all__ = ["HISTORY_FALLBACK_MAX_COUNT", "ResolutionContractError", "resolve"]
