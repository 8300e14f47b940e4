from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

LogFormat = Literal["json", "text"]


@dataclass(frozen=True)
class Settings:
    """Logging settings loaded from environment in a type-safe, framework-free way."""

    log_level: str
    log_format: LogFormat

    @staticmethod
    def from_env() -> Settings:
        prefix = "VALIDATIONS_"
        log_level = os.getenv(f"{prefix}LOG_LEVEL", "INFO").strip().upper() or "INFO"
        raw_format = os.getenv(f"{prefix}LOG_FORMAT", "json").strip().lower()
        log_format: LogFormat = "text" if raw_format == "text" else "json"
        return Settings(log_level=log_level, log_format=log_format)
