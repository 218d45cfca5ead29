"""Command-line configuration and logging setup for pyship."""

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from textual.logging import TextualHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Options for one pyship run."""

    directory: Path
    log_level: str = "WARNING"
    log_file: Path | None = None


def build_parser() -> argparse.ArgumentParser:
    """Build the pyship argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyship",
        description="Browse the files of a directory and page through their contents.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        type=Path,
        help="directory to list (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging threshold (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="write log records to this file instead of the Textual console",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> AppConfig:
    """Parse command-line arguments into an AppConfig."""
    args = build_parser().parse_args(argv)
    return AppConfig(
        directory=args.directory,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def configure_logging(config: AppConfig) -> logging.Handler:
    """
    Route pyship's log records to a handler that does not draw over the UI.

    Records go to the Textual devtools console unless a log file is
    configured. Returns the installed handler.
    """
    handler: logging.Handler
    if config.log_file is not None:
        handler = logging.FileHandler(config.log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = TextualHandler()

    package_logger = logging.getLogger("pyship")
    package_logger.setLevel(config.log_level)
    package_logger.addHandler(handler)
    return handler
