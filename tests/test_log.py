from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from ginrummy.log import setup_logging


def test_setup_logging_installs_rich_handler() -> None:
    stream = io.StringIO()

    setup_logging("info", console=Console(file=stream, width=120))
    logging.getLogger("ginrummy.game").info("dealt round %d", 3)

    logger = logging.getLogger("ginrummy")
    assert logger.level == logging.INFO
    assert [type(handler) for handler in logger.handlers] == [RichHandler]
    assert "dealt round 3" in stream.getvalue()


def test_setup_logging_replaces_previous_handlers() -> None:
    setup_logging("debug", console=Console(file=io.StringIO()))
    setup_logging("warning", console=Console(file=io.StringIO()))

    assert len(logging.getLogger("ginrummy").handlers) == 1


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        setup_logging("chatty")
