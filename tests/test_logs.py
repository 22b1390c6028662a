from __future__ import annotations

import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler
from textual.logging import TextualHandler

from art_dealer.logs import HAND_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_loggers():
    yield
    for name in ("art_dealer", HAND_LOGGER):
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_interactive_logging_stays_off_stdout() -> None:
    handler = configure_logging(verbose=True, interactive=True)

    assert isinstance(handler, TextualHandler)
    assert logging.getLogger("art_dealer").handlers == [handler]


def test_command_logging_goes_to_stderr() -> None:
    handler = configure_logging()

    assert isinstance(handler, RichHandler)
    assert handler.console.stderr is True
    assert handler.level == logging.WARNING


def test_hand_log_file_receives_hands(tmp_path: Path) -> None:
    target = tmp_path / "hands.log"
    configure_logging(hand_log=target)

    logging.getLogger(HAND_LOGGER).info("pattern 1: TWO of HEARTS*")
    logging.getLogger(HAND_LOGGER).handlers[0].flush()

    assert "TWO of HEARTS*" in target.read_text(encoding="utf-8")
