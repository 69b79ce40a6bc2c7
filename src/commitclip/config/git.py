"""Git executable configuration values."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

GIT_BINARY_ENV: Final[str] = "COMMITCLIP_GIT_BINARY"
DEFAULT_GIT_BINARY: Final[str] = "git"


@dataclass(frozen=True, slots=True)
class GitConfig:
    binary: str = DEFAULT_GIT_BINARY


def get_git_config(*, check_binary: bool = False) -> GitConfig:
    binary = optional_env_var(GIT_BINARY_ENV, DEFAULT_GIT_BINARY) or DEFAULT_GIT_BINARY
    if check_binary and shutil.which(binary) is None:
        raise ConfigurationError(f"{GIT_BINARY_ENV}: executable not found: {binary}")
    return GitConfig(binary=binary)
