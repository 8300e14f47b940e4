from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from reporting.config import Settings
from reporting.logging import (
    StructuredFormatter,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
)
from validations import arguments
from validations.errors import InvalidArgumentError
from validations.messages import Message

ANY = Message("0", "Any validation message")


@pytest.fixture
def root_logger() -> Generator[logging.Logger, None, None]:
    root = logging.getLogger()
    saved_level = root.level
    yield root
    # Drop handlers installed by setup_logging; pytest manages its own
    for h in list(root.handlers):
        if type(h) is logging.StreamHandler:
            root.removeHandler(h)
    root.setLevel(saved_level)


def _clear(root: logging.Logger) -> None:
    for h in list(root.handlers):
        root.removeHandler(h)


def test_setup_logging_adds_handler_and_is_idempotent(
    root_logger: logging.Logger,
) -> None:
    _clear(root_logger)

    setup_logging("DEBUG")
    assert any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers)
    assert root_logger.level == logging.DEBUG
    count = len(root_logger.handlers)

    # Calling again should not add duplicate handlers
    setup_logging("DEBUG")
    assert len(root_logger.handlers) == count


def test_setup_logging_from_settings_uses_text_format(
    root_logger: logging.Logger,
) -> None:
    _clear(root_logger)

    setup_logging_from_settings(Settings(log_level="WARNING", log_format="text"))
    assert root_logger.level == logging.WARNING
    [handler] = root_logger.handlers
    assert handler.formatter is not None
    assert not isinstance(handler.formatter, StructuredFormatter)


def test_setup_logging_json_uses_structured_formatter(
    root_logger: logging.Logger,
) -> None:
    _clear(root_logger)

    setup_logging("info", "json")
    [handler] = root_logger.handlers
    assert isinstance(handler.formatter, StructuredFormatter)
    assert root_logger.level == logging.INFO


def test_structured_formatter_includes_failure_fields() -> None:
    record = get_logger("validations.errors").makeRecord(
        "validations.errors",
        logging.DEBUG,
        __file__,
        10,
        "Validation failed: %s",
        ("boom",),
        None,
        extra={"validation_code": "0", "failure_kind": "InvalidArgument"},
    )

    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "Validation failed: boom"
    assert data["level"] == "DEBUG"
    assert data["logger"] == "validations.errors"
    assert data["validation_code"] == "0"
    assert data["failure_kind"] == "InvalidArgument"


def test_structured_formatter_omits_absent_fields() -> None:
    record = get_logger("plain").makeRecord(
        "plain", logging.INFO, __file__, 1, "hello", (), None
    )
    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "hello"
    assert "validation_code" not in data
    assert "failure_kind" not in data


def test_failed_check_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="validations")
    with pytest.raises(InvalidArgumentError):
        arguments.has_size("abc", 2, ANY)

    [record] = [r for r in caplog.records if r.name.startswith("validations")]
    assert record.levelno == logging.DEBUG
    assert record.__dict__["validation_code"] == "0"
    assert record.__dict__["failure_kind"] == "InvalidArgument"
    assert "InvalidArgument(0): Any validation message (abc, 2)" in record.getMessage()


def test_passing_check_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="validations")
    arguments.has_size("ab", 2, ANY)
    assert not [r for r in caplog.records if r.name.startswith("validations")]
