"""Logging configuration for command-line entry points."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["setup_logging"]


def setup_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route ``ginrummy`` loggers through a Rich handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        console: Console to write to; defaults to stderr.
    """

    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level '{level}'")
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="%H:%M:%S"))
    root = logging.getLogger("ginrummy")
    root.handlers[:] = [handler]
    root.setLevel(numeric)
    root.propagate = False
