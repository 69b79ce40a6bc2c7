"""Translate ``git`` command output into domain value objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from commitclip.domain.model import AttributionResult, CommitRecord, CommitSummary
from commitclip.domain.ports import VersionControlError

from .schema import FIELD_SEPARATOR, RECORD_SEPARATOR, BlameHeader, LogRecord

if TYPE_CHECKING:
    from pathlib import Path

_LOG_FIELD_COUNT = 4


def parse_blame_porcelain(output: str) -> BlameHeader | None:
    """Parse the first line group of ``git blame --porcelain`` output.

    The header line is ``<sha> <orig-line> <final-line> [<group-size>]``,
    followed by ``key value`` lines and finally the tab-prefixed content.
    """

    lines = output.splitlines()
    if not lines:
        return None

    header = lines[0].split()
    if len(header) < 3:  # noqa: PLR2004
        raise VersionControlError(f"Unexpected blame header: {lines[0]!r}")

    data: dict[str, object] = {
        "commit_id": header[0],
        "original_line": header[1],
        "final_line": header[2],
    }
    for line in lines[1:]:
        if line.startswith("\t"):
            data["content"] = line[1:]
            break
        key, _, value = line.partition(" ")
        data.setdefault(key, value)

    try:
        return BlameHeader.model_validate(data)
    except ValidationError as exc:
        raise VersionControlError(f"Invalid blame output: {exc}") from exc


def parse_log_records(output: str) -> list[LogRecord]:
    records: list[LogRecord] = []
    for chunk in output.split(RECORD_SEPARATOR):
        chunk = chunk.lstrip("\n")  # noqa: PLW2901
        if not chunk:
            continue
        fields = chunk.split(FIELD_SEPARATOR, _LOG_FIELD_COUNT - 1)
        if len(fields) != _LOG_FIELD_COUNT:
            raise VersionControlError(f"Unexpected log record: {chunk[:80]!r}")
        commit_id, author_name, authored_at, message = fields
        try:
            records.append(
                LogRecord.model_validate(
                    {
                        "commit_id": commit_id,
                        "author_name": author_name,
                        "authored_at": authored_at or None,
                        "message": message,
                    }
                )
            )
        except ValidationError as exc:
            raise VersionControlError(f"Invalid log record: {exc}") from exc
    return records


def to_attribution(header: BlameHeader, repo_path: Path) -> AttributionResult:
    return AttributionResult(
        commit_id=header.commit_id,
        is_uncommitted=header.is_uncommitted,
        repo_path=repo_path,
        summary=header.summary,
    )


def to_commit_summary(record: LogRecord) -> CommitSummary:
    return CommitSummary(
        commit_id=record.commit_id,
        message=record.message,
        author_name=record.author_name,
        authored_at=record.authored_at,
    )


def to_commit_record(record: LogRecord, repo_path: Path) -> CommitRecord:
    return CommitRecord(
        commit_id=record.commit_id,
        repo_path=repo_path,
        message=record.message,
        author_name=record.author_name,
        authored_at=record.authored_at,
    )
