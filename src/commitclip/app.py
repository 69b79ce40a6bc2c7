"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from commitclip.adapters.clipboard import PyperclipClipboard
from commitclip.adapters.git import GitCommandRunner, GitProvider
from commitclip.config import get_git_config
from commitclip.domain.delivery import resolve_and_copy
from commitclip.domain.model import DocumentRef, ResolutionArgs, ResolutionContext
from commitclip.ui.console import ConsoleNotifier

if TYPE_CHECKING:
    from commitclip.domain.ports import ClipboardSink, Notifier


log = getLogger(__name__)


async def copy_commit_message(
    *,
    file_path: Path | None = None,
    line: int | None = None,
    dirty_content: str | None = None,
    commit_id: str | None = None,
    message: str | None = None,
    working_dir: Path | None = None,
    provider: GitProvider | None = None,
    clipboard: ClipboardSink | None = None,
    notifier: Notifier | None = None,
) -> None:
    """Copy the commit message for the given file/line (or the latest commit)."""

    effective_provider = provider or GitProvider(
        runner=GitCommandRunner(get_git_config(check_binary=True)),
        working_dir=working_dir,
    )

    # A pinned commit without a file refers to the active repository itself.
    target = file_path
    if target is None and commit_id is not None:
        target = working_dir or Path.cwd()

    document: DocumentRef | None = None
    if target is not None:
        path = target.expanduser().resolve()
        repo_path = await effective_provider.locate_repository(path)
        if repo_path is None and commit_id is not None:
            raise ValueError(f"Not inside a git repository: {path}")
        document = DocumentRef(path=path, repo_path=repo_path)

    context = ResolutionContext(document=document, line=line, dirty_content=dirty_content)
    args = ResolutionArgs(message=message)
    if commit_id is not None:
        args = args.with_commit_id(commit_id)

    log.info(
        "Copying commit message: file=%s, line=%s, dirty=%s, commit=%s",
        document.path if document else None,
        line,
        context.is_dirty,
        commit_id,
    )

    await resolve_and_copy(
        context,
        args,
        vcs=effective_provider,
        clipboard=clipboard or PyperclipClipboard(),
        notifier=notifier or ConsoleNotifier(),
    )
