"""Version-control provider backed by the ``git`` command line."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from commitclip.domain.ports import VersionControlError

from .client import GitCommandRunner
from .schema import LOG_FORMAT
from .translator import (
    parse_blame_porcelain,
    parse_log_records,
    to_attribution,
    to_commit_record,
    to_commit_summary,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from commitclip.domain.model import (
        AttributionResult,
        CommitRecord,
        CommitSummary,
        DocumentRef,
    )

    from .client import GitCommandResult

log = getLogger(__name__)

# stderr fragments meaning "there is nothing there" rather than a fault
_LINE_OUT_OF_RANGE_MARKERS: Final[tuple[str, ...]] = ("has only",)
_UNKNOWN_REVISION_MARKERS: Final[tuple[str, ...]] = (
    "unknown revision",
    "bad object",
    "bad revision",
    "ambiguous argument",
    "does not have any commits yet",
    "invalid object name",
    "expected commit type",
    "could not be peeled",
)


def _stderr_matches(result: GitCommandResult, markers: tuple[str, ...]) -> bool:
    return any(marker in result.stderr for marker in markers)


class GitProvider:
    """Answer repository queries by shelling out to ``git``.

    ``working_dir`` decides which repository counts as "active" when no
    document is in focus.
    """

    def __init__(
        self,
        *,
        runner: GitCommandRunner | None = None,
        working_dir: Path | None = None,
    ) -> None:
        self._runner = runner or GitCommandRunner()
        self._working_dir = working_dir or Path.cwd()

    async def locate_repository(self, path: Path) -> Path | None:
        """Return the top-level directory of the repository holding ``path``."""

        directory = path if path.is_dir() else path.parent
        return await self._show_toplevel(directory)

    async def get_active_repository(self) -> Path | None:
        return await self._show_toplevel(self._working_dir)

    async def _show_toplevel(self, directory: Path) -> Path | None:
        try:
            result = await self._runner.run("rev-parse", "--show-toplevel", cwd=directory)
        except VersionControlError as exc:
            log.debug("No repository at %s: %s", directory, exc)
            return None
        if not result.ok:
            return None
        top_level = result.stdout.strip()
        return Path(top_level) if top_level else None

    async def get_history(
        self, repo_path: Path, *, max_count: int
    ) -> Sequence[CommitSummary] | None:
        result = await self._runner.run(
            "log", f"--max-count={max_count}", f"--format={LOG_FORMAT}", cwd=repo_path
        )
        if not result.ok:
            if _stderr_matches(result, _UNKNOWN_REVISION_MARKERS):
                return None
            raise VersionControlError(f"git log failed: {result.stderr.strip()}")
        records = parse_log_records(result.stdout)
        if not records:
            return None
        return [to_commit_summary(record) for record in records]

    async def get_attribution(
        self, document: DocumentRef, line: int
    ) -> AttributionResult | None:
        return await self._blame(document, line, contents=None)

    async def get_attribution_for_contents(
        self, document: DocumentRef, line: int, contents: str
    ) -> AttributionResult | None:
        return await self._blame(document, line, contents=contents)

    async def get_commit(self, repo_path: Path, commit_id: str) -> CommitRecord | None:
        # peel tags so an annotated tag shows its commit rather than the tag object
        result = await self._runner.run(
            "show",
            "--no-patch",
            f"--format={LOG_FORMAT}",
            "--end-of-options",
            f"{commit_id}^{{commit}}",
            cwd=repo_path,
        )
        if not result.ok:
            if _stderr_matches(result, _UNKNOWN_REVISION_MARKERS):
                return None
            raise VersionControlError(f"git show {commit_id} failed: {result.stderr.strip()}")
        records = parse_log_records(result.stdout)
        if not records:
            return None
        return to_commit_record(records[0], repo_path)

    async def _blame(
        self, document: DocumentRef, line: int, *, contents: str | None
    ) -> AttributionResult | None:
        repo_path = document.repo_path or await self.locate_repository(document.path)
        if repo_path is None:
            return None

        # git counts lines from 1
        target = line + 1
        args = ["blame", "--porcelain", "-L", f"{target},{target}"]
        if contents is not None:
            args += ["--contents", "-"]
        args += ["--", _relative_to(document.path, repo_path)]

        result = await self._runner.run(*args, cwd=repo_path, input_text=contents)
        if not result.ok:
            if _stderr_matches(result, _LINE_OUT_OF_RANGE_MARKERS):
                return None
            raise VersionControlError(
                f"git blame -L {target} {document.path} failed: {result.stderr.strip()}"
            )

        header = parse_blame_porcelain(result.stdout)
        if header is None:
            return None
        return to_attribution(header, repo_path)


def _relative_to(path: Path, repo_path: Path) -> str:
    try:
        return path.resolve().relative_to(repo_path.resolve()).as_posix()
    except ValueError:
        return str(path)
