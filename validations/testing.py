"""Pytest helpers for suites that exercise code guarded by these checks."""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager

import pytest

from validations.errors import ValidationError
from validations.messages import ValidationMessage


@contextmanager
def raises_validation(
    error_type: type[ValidationError],
    message: ValidationMessage,
    parameters: Sequence[object] | None = None,
) -> Generator[pytest.ExceptionInfo[ValidationError], None, None]:
    """Expect ``error_type`` carrying ``message`` (and ``parameters``, if given).

    Usage::

        with raises_validation(InvalidArgumentError, Messages.AGE, [17, 18]):
            register(age=17)
    """
    with pytest.raises(error_type) as info:
        yield info
    error = info.value
    if type(error) is not error_type:
        pytest.fail(f"expected {error_type.__name__}, got {type(error).__name__}")
    if (error.code, error.message) != (message.code, message.message):
        pytest.fail(
            f"expected message {message.code!r}/{message.message!r}, "
            f"got {error.code!r}/{error.message!r}"
        )
    if parameters is not None and error.parameters != tuple(parameters):
        pytest.fail(
            f"expected parameters {tuple(parameters)!r}, got {error.parameters!r}"
        )
