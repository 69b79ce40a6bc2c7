"""Async runner for the ``git`` executable."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from commitclip.config import GitConfig, get_git_config
from commitclip.domain.ports import VersionControlError

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GitCommandResult:
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class GitCommandRunner:
    """Run ``git`` subcommands without a shell and capture their output."""

    def __init__(self, config: GitConfig | None = None) -> None:
        self._config = config or get_git_config()

    async def run(
        self,
        *args: str,
        cwd: Path,
        input_text: str | None = None,
    ) -> GitCommandResult:
        log.debug("Running git %s in %s", " ".join(args), cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                self._config.binary,
                *args,
                cwd=cwd,
                stdin=asyncio.subprocess.PIPE
                if input_text is not None
                else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise VersionControlError(
                f"Unable to run {self._config.binary} in {cwd}: {exc}"
            ) from exc

        stdout, stderr = await process.communicate(
            input_text.encode("utf-8") if input_text is not None else None
        )
        result = GitCommandResult(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
        if not result.ok:
            log.debug("git %s exited with %s: %s", args[0], result.returncode, result.stderr.strip())
        return result
