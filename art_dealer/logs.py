"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from textual.logging import TextualHandler

__all__ = ["HAND_LOGGER", "configure_logging"]

HAND_LOGGER = "art_dealer.hands"


def _console_handler(interactive: bool, console: Console | None) -> logging.Handler:
    if interactive:
        # Textual owns stdout while the app runs
        return TextualHandler()
    return RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)


def configure_logging(
    *,
    verbose: bool = False,
    hand_log: Path | None = None,
    interactive: bool = False,
    console: Console | None = None,
) -> logging.Handler:
    """Route package logs to stderr (or Textual) and optionally append hands to ``hand_log``.

    Returns the handler installed on the ``art_dealer`` logger.
    """

    package_logger = logging.getLogger("art_dealer")
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.handlers.clear()
    handler = _console_handler(interactive, console)
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.addHandler(handler)

    hands = logging.getLogger(HAND_LOGGER)
    hands.handlers.clear()
    if hand_log is not None:
        file_handler = logging.FileHandler(hand_log, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        hands.addHandler(file_handler)
    return handler
