from __future__ import annotations

import json
import logging
from io import StringIO
from unittest.mock import Mock

import pytest

from aretry import run
from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)


@pytest.fixture
def json_logger() -> tuple[logging.Logger, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry.tests.structured")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger, stream


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> None:
    clear_correlation_id()


##############################################
#     Tests for correlation ID management    #
##############################################


def test_get_correlation_id_initially_none() -> None:
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("job-1")
    assert get_correlation_id() == "job-1"
    clear_correlation_id()
    assert get_correlation_id() is None


##############################################
#     Tests for StructuredFormatter          #
##############################################


def test_structured_formatter_basic_log(json_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = json_logger
    logger.info("hello")
    data = json.loads(stream.getvalue())
    assert data["message"] == "hello"
    assert data["level"] == "INFO"
    assert data["logger"] == "aretry.tests.structured"
    assert data["timestamp"].endswith("Z")
    assert "correlation_id" not in data


def test_structured_formatter_extra_fields(json_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = json_logger
    log_structured(logger, logging.DEBUG, "retrying", attempt=2, delay_ms=100)
    data = json.loads(stream.getvalue())
    assert data["attempt"] == 2
    assert data["delay_ms"] == 100
    assert "msecs" not in data


def test_structured_formatter_correlation_id(json_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = json_logger
    set_correlation_id("req-9")
    logger.warning("tagged")
    assert json.loads(stream.getvalue())["correlation_id"] == "req-9"


def test_structured_formatter_exception(json_logger: tuple[logging.Logger, StringIO]) -> None:
    logger, stream = json_logger
    try:
        raise ValueError("broken")
    except ValueError:
        logger.exception("failed")
    data = json.loads(stream.getvalue())
    assert "ValueError: broken" in data["exception"]


def test_structured_formatter_non_serializable_extra(
    json_logger: tuple[logging.Logger, StringIO],
) -> None:
    logger, stream = json_logger
    log_structured(logger, logging.INFO, "object", payload=object())
    assert json.loads(stream.getvalue())["payload"].startswith("<object object")


def test_executor_events_render_as_json(mock_sleep: Mock) -> None:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry.retry.executor")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    set_correlation_id("run-7")
    try:
        run([100], Mock(side_effect=[ValueError("x"), "ok"]))
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    first, second = (json.loads(line) for line in stream.getvalue().splitlines())
    assert first["attempt"] == 1
    assert first["delay_ms"] == 100
    assert first["error_type"] == "ValueError"
    assert first["correlation_id"] == "run-7"
    assert second["message"] == "Operation succeeded on attempt 2"
