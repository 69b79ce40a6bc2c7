"""Request-scoped value objects for commit message resolution.

Every type here is constructed fresh for one invocation and discarded
afterwards. Nothing is cached or persisted, and nothing is mutated in place:
steps that need to "fill in" a field return a new instance instead.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class DocumentRef:
    """A version-controlled file, optionally tagged with its repository root."""

    path: Path
    repo_path: Path | None = None

    def with_repo_path(self, repo_path: Path) -> DocumentRef:
        """Return a reference carrying ``repo_path`` unless one is already set."""

        if self.repo_path is not None:
            return self
        return replace(self, repo_path=repo_path)


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    document: DocumentRef | None = None
    line: int | None = None
    dirty_content: str | None = None

    @property
    def is_dirty(self) -> bool:
        return self.document is not None and self.dirty_content is not None


@dataclass(frozen=True, slots=True)
class ResolutionArgs:
    """Caller-supplied values; a set ``message`` short-circuits resolution."""

    message: str | None = None
    commit_id: str | None = None

    def with_commit_id(self, commit_id: str) -> ResolutionArgs:
        return replace(self, commit_id=commit_id)


@dataclass(frozen=True, slots=True)
class AttributionResult:
    """Blame information for a single line."""

    commit_id: str
    is_uncommitted: bool
    repo_path: Path
    summary: str = ""


@dataclass(frozen=True, slots=True)
class CommitSummary:
    commit_id: str
    message: str
    author_name: str | None = None
    authored_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class CommitRecord:
    commit_id: str
    repo_path: Path
    message: str
    author_name: str | None = None
    authored_at: datetime | None = None


class FailureReason(StrEnum):
    ATTRIBUTION_FAULT = "attribution_fault"
    LOOKUP_FAULT = "lookup_fault"
    DELIVERY_FAULT = "delivery_fault"
    CLIPBOARD_UNAVAILABLE = "clipboard_unavailable"


@dataclass(frozen=True, slots=True)
class Resolved:
    message: str


@dataclass(frozen=True, slots=True)
class NothingToResolve:
    """Benign no-op: there is no message to copy for this context."""


@dataclass(frozen=True, slots=True)
class Failed:
    reason: FailureReason
    error: BaseException | None = None


Outcome: TypeAlias = "Resolved | NothingToResolve | Failed"


__all__ = [
    "AttributionResult",
    "CommitRecord",
    "CommitSummary",
    "DocumentRef",
    "Failed",
    "FailureReason",
    "NothingToResolve",
    "Outcome",
    "ResolutionArgs",
    "ResolutionContext",
    "Resolved",
]
