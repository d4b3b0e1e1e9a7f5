"""Logging setup shared by the CLI and library callers."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def init(level: str = "INFO", console: Console | None = None) -> None:
    """Configure the root logger once per run.

    Args:
        level: Name of the log level, e.g. ``"DEBUG"``.
        console: Optional rich console to log to (default: stderr).
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
