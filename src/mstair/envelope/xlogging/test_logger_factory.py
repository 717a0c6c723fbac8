# File: src/mstair/envelope/xlogging/test_logger_factory.py
"""
Tests for create_logger and EnvelopeLogger.
"""

from __future__ import annotations

import logging
import uuid

import pytest

from mstair.envelope.xlogging import logger_util as lu
from mstair.envelope.xlogging.logger_constants import TRACE
from mstair.envelope.xlogging.logger_factory import EnvelopeLogger, create_logger
from mstair.envelope.xlogging.logger_util import LogLevelConfig


def _unique_name() -> str:
    return f"mstair.envelope.test_{uuid.uuid4().hex}"


def test_create_logger_returns_envelope_logger() -> None:
    name = _unique_name()
    logger = create_logger(name)
    assert isinstance(logger, EnvelopeLogger)
    assert logger.name == name
    assert create_logger(name) is logger
    assert logging.getLogger(name) is logger


def test_logger_class_is_restored() -> None:
    before = logging.getLoggerClass()
    create_logger(_unique_name())
    assert logging.getLoggerClass() is before


def test_plain_logger_conflict_raises() -> None:
    name = _unique_name()
    logging.getLogger(name)
    with pytest.raises(TypeError):
        create_logger(name)


def test_explicit_level_overrides_environment() -> None:
    logger = create_logger(_unique_name(), level="DEBUG")
    assert logger.level == logging.DEBUG


def test_initial_level_comes_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    name = _unique_name()
    monkeypatch.setattr(
        lu,
        "_log_level_config_instance",
        LogLevelConfig(pattern_to_level={name: logging.ERROR}),
    )
    assert create_logger(name).level == logging.ERROR


def test_unconfigured_logger_follows_ancestor_level(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """With no configured entry the level stays NOTSET, so a host can enable tracing."""
    parent_name = _unique_name()
    monkeypatch.setattr(
        lu,
        "_log_level_config_instance",
        LogLevelConfig(pattern_to_level={"unrelated": logging.ERROR}),
    )
    logger = create_logger(f"{parent_name}.parser")
    assert logger.level == logging.NOTSET

    logging.getLogger(parent_name).setLevel(TRACE)
    logger.trace("traced")

    assert [r.getMessage() for r in caplog.records if r.name == logger.name] == ["traced"]


def test_trace_records_caller(caplog: pytest.LogCaptureFixture) -> None:
    logger = create_logger(_unique_name())
    with caplog.at_level(TRACE, logger=logger.name):
        logger.trace("value=%s", 7)

    (record,) = [r for r in caplog.records if r.name == logger.name]
    assert record.levelname == "TRACE"
    assert record.getMessage() == "value=7"
    assert record.funcName == "test_trace_records_caller"


def test_trace_is_silent_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    logger = create_logger(_unique_name())
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        logger.trace("hidden")
    assert not [r for r in caplog.records if r.name == logger.name]


def test_repr() -> None:
    logger = create_logger(_unique_name(), level=logging.INFO)
    assert repr(logger) == f"<EnvelopeLogger '{logger.name}' INFO=20>"


# End of file: src/mstair/envelope/xlogging/test_logger_factory.py
