"""Logging configuration helpers."""

from __future__ import annotations

import logging
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "COMMITCLIP_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING


def configure_logging(*, level: int = DEFAULT_LOG_LEVEL, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to WARNING so a successful copy stays quiet, with a terse format suitable for
    CLI output. Pass ``force=True`` to reconfigure during tests or specialised
    entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def parse_log_level(value: str) -> int:
    """Translate a level name such as ``debug`` into its ``logging`` constant."""

    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


def get_log_level() -> int:
    value = optional_env_var(LOG_LEVEL_ENV)
    if value is None:
        return DEFAULT_LOG_LEVEL
    return parse_log_level(value)
