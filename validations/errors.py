from __future__ import annotations

import logging
import re
from typing import ClassVar, Literal, TypeGuard, TypeVar

from validations.messages import ValidationMessage

FailureKind = Literal[
    "RequiredMissing",
    "InvalidArgument",
    "NotAllowed",
    "NotFound",
    "Duplicate",
    "DependencyMissing",
]

FAILURE_KINDS: tuple[FailureKind, ...] = (
    "RequiredMissing",
    "InvalidArgument",
    "NotAllowed",
    "NotFound",
    "Duplicate",
    "DependencyMissing",
)

_logger = logging.getLogger(__name__)


def is_failure_kind(value: str) -> TypeGuard[FailureKind]:
    return value in FAILURE_KINDS


def render_parameter(value: object) -> str:
    """Render a failure parameter for logs and reports."""
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, re.Pattern):
        return str(value.pattern)
    return str(value)


class ValidationError(Exception):
    """Root of the failure taxonomy.

    Carries the triggering validation message and the literal values of the
    failing call, in call order. Subclasses only pin the ``kind``.
    """

    kind: ClassVar[FailureKind]

    def __init__(
        self, validation_message: ValidationMessage, *parameters: object
    ) -> None:
        super().__init__(validation_message.message)
        self.validation_message = validation_message
        self.code = validation_message.code
        self.message = validation_message.message
        self.parameters: tuple[object, ...] = parameters

    def __reduce__(self) -> tuple[type[ValidationError], tuple[object, ...]]:
        # ``args`` only holds the text; rebuild from the constructor arguments.
        return type(self), (self.validation_message, *self.parameters)

    def __str__(self) -> str:
        text = f"{self.kind}({self.code}): {self.message}"
        if self.parameters:
            rendered = ", ".join(render_parameter(p) for p in self.parameters)
            text = f"{text} ({rendered})"
        return text


class RequiredArgumentError(ValidationError):
    """A mandatory value is absent."""

    kind: ClassVar[FailureKind] = "RequiredMissing"


class InvalidArgumentError(ValidationError):
    """A present value breaks a validity rule."""

    kind: ClassVar[FailureKind] = "InvalidArgument"


class NotAllowedError(ValidationError):
    """The current state does not permit the operation."""

    kind: ClassVar[FailureKind] = "NotAllowed"


class NotFoundError(ValidationError):
    """A referenced item could not be located."""

    kind: ClassVar[FailureKind] = "NotFound"


class DuplicatedError(ValidationError):
    """A referenced item already exists."""

    kind: ClassVar[FailureKind] = "Duplicate"


class DependencyNotFoundError(ValidationError):
    """A required collaborator is absent."""

    kind: ClassVar[FailureKind] = "DependencyMissing"


E = TypeVar("E", bound=ValidationError)


def new_failure(
    error_type: type[E], validation_message: ValidationMessage, *parameters: object
) -> E:
    """Build a failure and log it at DEBUG; the caller raises it."""
    error = error_type(validation_message, *parameters)
    _logger.debug(
        "Validation failed: %s",
        error,
        extra={"validation_code": error.code, "failure_kind": error.kind},
    )
    return error
