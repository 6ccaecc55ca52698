from io import StringIO

import pytest
from loguru import logger

from lispy import logging_utils
from lispy.interpreter import Interpreter


@pytest.fixture
def sink(monkeypatch):
    monkeypatch.setattr(logging_utils, "_CONFIGURED_LEVEL", None)
    buffer = StringIO()
    yield buffer
    logger.remove()
    logger.disable("lispy")


def test_package_logger_is_silent_until_configured(capsys):
    Interpreter(out=StringIO()).eval("(+ 1 2)")
    assert "registered" not in capsys.readouterr().err


def test_configure_logging_enables_debug_events(sink):
    logging_utils.configure_logging("debug", sink=sink)
    Interpreter(out=StringIO()).run("(+ 1 2)")
    text = sink.getvalue()
    assert "registered 10 primitives" in text
    assert "evaluating form" in text


def test_level_from_environment(sink, monkeypatch):
    monkeypatch.setenv("LISPY_LOG_LEVEL", "info")
    logging_utils.configure_logging(sink=sink)
    Interpreter(out=StringIO())
    assert "registered" not in sink.getvalue()
