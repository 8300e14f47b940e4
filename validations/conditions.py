"""Condition checks.

Same gates as ``validations.arguments.is_true`` / ``is_false`` but a failure
means the current state forbids the operation, so they raise
``NotAllowedError`` instead of ``InvalidArgumentError``.
"""

from __future__ import annotations

from validations.errors import NotAllowedError, new_failure
from validations.messages import ValidationMessage


def is_true(condition: bool, message: ValidationMessage) -> None:
    if not condition:
        raise new_failure(NotAllowedError, message)


def is_false(condition: bool, message: ValidationMessage) -> None:
    if condition:
        raise new_failure(NotAllowedError, message)


assert_true = is_true
assert_false = is_false

__all__ = ["assert_false", "assert_true", "is_false", "is_true"]
