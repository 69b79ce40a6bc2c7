"""Public interface for the git adapter."""

from __future__ import annotations

from .client import GitCommandResult, GitCommandRunner
from .provider import GitProvider
from .schema import BlameHeader, LogRecord
from .translator import parse_blame_porcelain, parse_log_records

__all__ = [
    "BlameHeader",
    "GitCommandResult",
    "GitCommandRunner",
    "GitProvider",
    "LogRecord",
    "parse_blame_porcelain",
    "parse_log_records",
]
