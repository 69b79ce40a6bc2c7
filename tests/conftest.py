from __future__ import annotations

from pathlib import Path

import pytest

from commitclip.domain.model import CommitRecord, DocumentRef
from tests.support.fakes import FakeClipboard, FakeNotifier, FakeVersionControl

REPO_PATH = Path("/r")


@pytest.fixture
def vcs() -> FakeVersionControl:
    return FakeVersionControl()


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def document() -> DocumentRef:
    return DocumentRef(path=Path("/r/src/module.py"))


@pytest.fixture
def fix_bug_commit() -> CommitRecord:
    return CommitRecord(
        commit_id="abc123",
        repo_path=REPO_PATH,
        message="Fix bug",
    )
