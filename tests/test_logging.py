"""Tests for logging utilities."""

import logging
from io import StringIO

import pytest

from graphconduit.graphs import Graph, dijkstra
from graphconduit.logging import configure_logging, get_logger, set_log_level


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default level and stderr handlers after each test."""
    yield
    configure_logging(level=logging.WARNING)


def test_get_logger_returns_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "graphconduit.test_module"


def test_get_logger_keeps_package_prefix():
    """Module names already under the package are not prefixed twice."""
    logger = get_logger("graphconduit.graphs.example")
    assert logger.name == "graphconduit.graphs.example"


def test_get_logger_default_name():
    assert get_logger().name == "graphconduit"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    logger = get_logger("test_module")
    set_log_level(logging.INFO)
    assert logger.level == logging.INFO
    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    logger = get_logger("test_module")
    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG
    set_log_level("error")
    assert logger.level == logging.ERROR


def test_configure_logging_stream_and_format():
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    logger.debug("Debug message")

    assert stream.getvalue() == "[DEBUG] graphconduit.test_module: Debug message\n"


def test_configure_logging_custom_format():
    logger = get_logger("test_module")
    stream = StringIO()
    configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)

    logger.info("hello")

    assert stream.getvalue() == "INFO|hello\n"


def test_configure_logging_replaces_handlers():
    logger = get_logger("test_module")
    configure_logging(level=logging.INFO, stream=StringIO())
    configure_logging(level=logging.INFO, stream=StringIO())
    assert len(logger.handlers) == 1


def test_logger_created_after_configuration_uses_it():
    stream = StringIO()
    configure_logging(level="INFO", format_string="%(name)s %(message)s", stream=stream)

    get_logger("late_module").info("loaded")

    assert stream.getvalue() == "graphconduit.late_module loaded\n"


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_negative_weight_warning_reaches_configured_stream():
    """The Dijkstra diagnostic is emitted through the package loggers."""
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)

    G = Graph(directed=True)
    G.add_edge("A", "B", -1.0)
    result = dijkstra(G, "A", "B")

    assert result.negative_weights
    assert "[WARNING] graphconduit.graphs.shortest" in stream.getvalue()
