"""Ports for reading version-control data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from commitclip.domain.model import (
        AttributionResult,
        CommitRecord,
        CommitSummary,
        DocumentRef,
    )


class VersionControlError(RuntimeError):
    """Raised by providers when a version-control query fails."""


@runtime_checkable
class VersionControlProvider(Protocol):
    """Read-only view of the repository data the resolver depends on.

    ``None`` results mean "nothing there" (no repository, no history, line not
    attributed, unknown commit). Faults are raised, never returned.
    """

    async def get_active_repository(self) -> Path | None: ...

    async def get_history(
        self, repo_path: Path, *, max_count: int
    ) -> Sequence[CommitSummary] | None: ...

    async def get_attribution(
        self, document: DocumentRef, line: int
    ) -> AttributionResult | None: ...

    async def get_attribution_for_contents(
        self, document: DocumentRef, line: int, contents: str
    ) -> AttributionResult | None: ...

    async def get_commit(self, repo_path: Path, commit_id: str) -> CommitRecord | None: ...


__all__ = ["VersionControlError", "VersionControlProvider"]
