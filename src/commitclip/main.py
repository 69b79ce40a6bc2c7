#!/usr/bin/env python3

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from commitclip.app import copy_commit_message
from commitclip.config import (
    ConfigurationError,
    configure_logging,
    get_log_level,
    parse_log_level,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="commitclip",
        description="Copy the commit message for a file line (or the latest commit) "
        "to the clipboard",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="File whose line attribution selects the commit",
    )
    parser.add_argument(
        "--line",
        type=int,
        help="Zero-based line number inside --file (default: 0)",
    )
    parser.add_argument(
        "--commit",
        type=str,
        help="Commit id to copy the message of, skipping line attribution",
    )
    parser.add_argument(
        "--message",
        type=str,
        help="Copy this text as-is without consulting git",
    )
    parser.add_argument(
        "--contents-from-stdin",
        action="store_true",
        help="Read unsaved contents of --file from stdin and attribute against them",
    )
    parser.add_argument(
        "--repo",
        type=Path,
        help="Working directory used to find the active repository (default: cwd)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (defaults to COMMITCLIP_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if args.line is not None and args.file is None:
        raise ValueError("--line requires --file")
    if args.contents_from_stdin and args.file is None:
        raise ValueError("--contents-from-stdin requires --file")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        level = (
            parse_log_level(parsed_args.log_level)
            if parsed_args.log_level
            else get_log_level()
        )
        _validate(parsed_args)
    except (ValueError, ConfigurationError) as exc:
        configure_logging()
        log.error("Invalid arguments: %s", exc)  # noqa: TRY400
        sys.exit(2)

    configure_logging(level=level)

    dirty_content = sys.stdin.read() if parsed_args.contents_from_stdin else None

    try:
        asyncio.run(
            copy_commit_message(
                file_path=parsed_args.file,
                line=parsed_args.line,
                dirty_content=dirty_content,
                commit_id=parsed_args.commit,
                message=parsed_args.message,
                working_dir=parsed_args.repo,
            )
        )
    except (ValueError, ConfigurationError) as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while copying commit message")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
