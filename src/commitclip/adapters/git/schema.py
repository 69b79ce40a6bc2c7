"""Pydantic models describing ``git`` command output."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNCOMMITTED_COMMIT_ID_CHAR: Final[str] = "0"
COMMIT_ID_PATTERN: Final[str] = r"^[0-9a-f]{40}([0-9a-f]{24})?$"


def _epoch_to_int(value: object) -> object:
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    return value


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class GitBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class BlameHeader(GitBaseModel):
    """One ``git blame --porcelain`` group for a single line."""

    commit_id: str = Field(pattern=COMMIT_ID_PATTERN)
    original_line: int
    final_line: int
    author: str | None = None
    author_time: datetime | None = Field(default=None, alias="author-time")
    summary: str = ""
    filename: str | None = None
    content: str = ""

    _parse_epoch = field_validator("author_time", mode="before")(_epoch_to_int)
    _normalize_author = field_validator("author", mode="before")(_blank_to_none)

    @property
    def is_uncommitted(self) -> bool:
        return set(self.commit_id) == {UNCOMMITTED_COMMIT_ID_CHAR}


class LogRecord(GitBaseModel):
    """One commit as printed by ``git log``/``git show`` with :data:`LOG_FORMAT`."""

    commit_id: str = Field(pattern=COMMIT_ID_PATTERN)
    author_name: str | None = None
    authored_at: datetime | None = None
    message: str

    _parse_epoch = field_validator("authored_at", mode="before")(_epoch_to_int)
    _normalize_author = field_validator("author_name", mode="before")(_blank_to_none)

    @field_validator("message", mode="before")
    @classmethod
    def _strip_trailing_newlines(cls, value: object) -> object:
        if isinstance(value, str):
            return value.rstrip("\n")
        return value


FIELD_SEPARATOR: Final[str] = "\x1f"
RECORD_SEPARATOR: Final[str] = "\x1e"
LOG_FORMAT: Final[str] = "%H%x1f%an%x1f%at%x1f%B%x1e"
