"""Argument checks.

Absent values raise ``RequiredArgumentError``; present values that break a
rule raise ``InvalidArgumentError``. Every check returns ``None`` on success.
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Container, Iterable, Sized
from typing import TypeVar

from validations.errors import InvalidArgumentError, RequiredArgumentError, new_failure
from validations.messages import ValidationMessage
from validations.types import Numeric, SupportsOrdering

T = TypeVar("T")


def _is_blank_text(value: str | None) -> bool:
    return value is None or not value.strip()


def _sized_parameters(subject: Sized, *bounds: int) -> tuple[object, ...]:
    # Text failures carry the text itself; collections and mappings only the bounds.
    if isinstance(subject, str):
        return (subject, *bounds)
    return bounds


def is_null(value: object, message: ValidationMessage) -> None:
    if value is not None:
        raise new_failure(InvalidArgumentError, message)


def is_not_null(value: object, message: ValidationMessage) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)


def is_blank(value: str | None, message: ValidationMessage) -> None:
    """Require ``value`` to be the empty string.

    Blank means zero-length here; ``"  "`` is not blank.
    """
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if value != "":
        raise new_failure(InvalidArgumentError, message)


def is_not_blank(value: str | None, message: ValidationMessage) -> None:
    """Require ``value`` to be a non-empty string (whitespace counts as content)."""
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if value == "":
        raise new_failure(InvalidArgumentError, message)


def any_is_not_null(values: Iterable[object], message: ValidationMessage) -> None:
    """Require at least one element that is not ``None``; empty input fails."""
    if all(value is None for value in values):
        raise new_failure(InvalidArgumentError, message)


def any_is_not_blank(values: Iterable[str | None], message: ValidationMessage) -> None:
    """Require at least one element with non-whitespace content; empty input fails."""
    if all(_is_blank_text(value) for value in values):
        raise new_failure(InvalidArgumentError, message)


def only_one_is_not_null(values: Iterable[object], message: ValidationMessage) -> None:
    """Require exactly one element that is not ``None``.

    Fails as soon as a second present element is seen.
    """
    present = 0
    for value in values:
        if value is not None:
            present += 1
        if present > 1:
            raise new_failure(InvalidArgumentError, message)
    if present == 0:
        raise new_failure(InvalidArgumentError, message)


def only_one_is_not_blank(
    values: Iterable[str | None], message: ValidationMessage
) -> None:
    """Require exactly one element with non-whitespace content."""
    present = 0
    for value in values:
        if not _is_blank_text(value):
            present += 1
        if present > 1:
            raise new_failure(InvalidArgumentError, message)
    if present == 0:
        raise new_failure(InvalidArgumentError, message)


def is_empty(value: Sized | None, message: ValidationMessage) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if len(value) != 0:
        raise new_failure(InvalidArgumentError, message)


def is_not_empty(value: Sized | None, message: ValidationMessage) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if len(value) == 0:
        raise new_failure(InvalidArgumentError, message)


def has_size(value: Sized | None, size: int, message: ValidationMessage) -> None:
    """Require ``len(value) == size``.

    Text failures carry ``(text, size)``; collection and mapping failures
    carry only ``(size,)``.
    """
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if len(value) != size:
        raise new_failure(
            InvalidArgumentError, message, *_sized_parameters(value, size)
        )


def has_size_between(
    value: Sized | None, min_size: int, max_size: int, message: ValidationMessage
) -> None:
    """Require ``min_size <= len(value) <= max_size``."""
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    length = len(value)
    if length < min_size or length > max_size:
        raise new_failure(
            InvalidArgumentError,
            message,
            *_sized_parameters(value, min_size, max_size),
        )


def is_equal_to(value: object, other: object, message: ValidationMessage) -> None:
    if value != other:
        raise new_failure(InvalidArgumentError, message, value, other)


def is_not_equal_to(value: object, other: object, message: ValidationMessage) -> None:
    if value == other:
        raise new_failure(InvalidArgumentError, message, value, other)


def is_not_equal_to_zero(value: Numeric | None, message: ValidationMessage) -> None:
    """Fail on any numeric zero; ``Decimal("0.00")`` and ``-0.0`` included.

    A non-numeric subject such as ``"0"`` is rejected as invalid.
    """
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not isinstance(value, numbers.Number) or value == 0:
        raise new_failure(InvalidArgumentError, message, value)


# Ordering checks are written as ``not <relation>`` so NaN fails every one.


def is_less_than(
    value: SupportsOrdering[T] | None, other: T, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value < other:
        raise new_failure(InvalidArgumentError, message, value, other)


def is_less_than_zero(
    value: SupportsOrdering[int] | None, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value < 0:
        raise new_failure(InvalidArgumentError, message, value)


def is_less_than_or_equal_to(
    value: SupportsOrdering[T] | None, other: T, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value <= other:
        raise new_failure(InvalidArgumentError, message, value, other)


def is_less_than_or_equal_to_zero(
    value: SupportsOrdering[int] | None, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value <= 0:
        raise new_failure(InvalidArgumentError, message, value)


def is_greater_than(
    value: SupportsOrdering[T] | None, other: T, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value > other:
        raise new_failure(InvalidArgumentError, message, value, other)


def is_greater_than_zero(
    value: SupportsOrdering[int] | None, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value > 0:
        raise new_failure(InvalidArgumentError, message, value)


def is_greater_than_or_equal_to(
    value: SupportsOrdering[T] | None, other: T, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value >= other:
        raise new_failure(InvalidArgumentError, message, value, other)


def is_greater_than_or_equal_to_zero(
    value: SupportsOrdering[int] | None, message: ValidationMessage
) -> None:
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not value >= 0:
        raise new_failure(InvalidArgumentError, message, value)


def is_between(
    value: SupportsOrdering[T] | None, start: T, end: T, message: ValidationMessage
) -> None:
    """Require ``start <= value <= end``.

    The bounds are not checked against each other; an inverted range rejects
    every value.
    """
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if not (value >= start and value <= end):
        raise new_failure(InvalidArgumentError, message, value, start, end)


def is_true(condition: bool, message: ValidationMessage) -> None:
    if not condition:
        raise new_failure(InvalidArgumentError, message)


def is_false(condition: bool, message: ValidationMessage) -> None:
    if condition:
        raise new_failure(InvalidArgumentError, message)


def matches_pattern(
    value: str | None, pattern: str | re.Pattern[str], message: ValidationMessage
) -> None:
    """Require the whole of ``value`` to match ``pattern``."""
    if value is None:
        raise new_failure(RequiredArgumentError, message)
    if re.fullmatch(pattern, value) is None:
        raise new_failure(InvalidArgumentError, message, value)


def contains(
    value: object, collection: Container[object] | None, message: ValidationMessage
) -> None:
    """Require ``value in collection``.

    Membership is the collection's own ``in``; a ``str`` collection raises
    ``TypeError`` for a non-string value, which propagates unchanged.
    """
    if collection is None:
        raise new_failure(RequiredArgumentError, message)
    if value not in collection:
        raise new_failure(InvalidArgumentError, message, value)


def does_not_contain(
    value: object, collection: Container[object] | None, message: ValidationMessage
) -> None:
    """Require ``value not in collection``; ``str`` collections as in ``contains``."""
    if collection is None:
        raise new_failure(RequiredArgumentError, message)
    if value in collection:
        raise new_failure(InvalidArgumentError, message, value)


def is_instance_of(
    value: object, type_: type | tuple[type, ...], message: ValidationMessage
) -> None:
    if not isinstance(value, type_):
        raise new_failure(InvalidArgumentError, message, value, type_)


# Aliases matching the guard-clause vocabulary used by callers.
require_not_null = is_not_null
require_blank = is_blank
require_not_blank = is_not_blank
any_not_null = any_is_not_null
any_not_blank = any_is_not_blank
exactly_one_not_null = only_one_is_not_null
exactly_one_not_blank = only_one_is_not_blank
require_empty = is_empty
require_not_empty = is_not_empty
assert_true = is_true
assert_false = is_false

__all__ = [
    "any_is_not_blank",
    "any_is_not_null",
    "any_not_blank",
    "any_not_null",
    "assert_false",
    "assert_true",
    "contains",
    "does_not_contain",
    "exactly_one_not_blank",
    "exactly_one_not_null",
    "has_size",
    "has_size_between",
    "is_between",
    "is_blank",
    "is_empty",
    "is_equal_to",
    "is_false",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_greater_than_or_equal_to_zero",
    "is_greater_than_zero",
    "is_instance_of",
    "is_less_than",
    "is_less_than_or_equal_to",
    "is_less_than_or_equal_to_zero",
    "is_less_than_zero",
    "is_not_blank",
    "is_not_empty",
    "is_not_equal_to",
    "is_not_equal_to_zero",
    "is_not_null",
    "is_null",
    "is_true",
    "matches_pattern",
    "only_one_is_not_blank",
    "only_one_is_not_null",
    "require_blank",
    "require_empty",
    "require_not_blank",
    "require_not_empty",
    "require_not_null",
]
