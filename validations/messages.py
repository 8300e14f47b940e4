from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class ValidationMessage(Protocol):
    """Stable ``(code, message)`` pair identifying the rule being enforced."""

    @property
    def code(self) -> str: ...

    @property
    def message(self) -> str: ...


@dataclass(frozen=True)
class Message:
    code: str
    message: str


class MessageEnum(Enum):
    """Base for per-module message sets.

    Members are declared as ``NAME = ("code", "text")``.
    """

    @property
    def code(self) -> str:
        code: str = self.value[0]
        return code

    @property
    def message(self) -> str:
        text: str = self.value[1]
        return text
