"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .git import GitConfig, get_git_config
from .logging import configure_logging, get_log_level, parse_log_level

__all__ = [
    "ConfigurationError",
    "GitConfig",
    "configure_logging",
    "get_git_config",
    "get_log_level",
    "optional_env_var",
    "parse_log_level",
]
