from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from reporting.config import LogFormat, Settings

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logs with stable keys."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Set by validations.errors.new_failure
        if hasattr(record, "validation_code"):
            data["validation_code"] = record.validation_code
        if hasattr(record, "failure_kind"):
            data["failure_kind"] = record.failure_kind

        return json.dumps(data, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: LogFormat = "json") -> None:
    """Configure global logging; idempotent-ish."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    # Avoid duplicate handlers if setup is called multiple times
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)


def setup_logging_from_settings(settings: Settings) -> None:
    setup_logging(settings.log_level, settings.log_format)


def get_logger(name: str) -> logging.Logger:
    """Return module logger."""
    return logging.getLogger(name)
