"""Guard-clause checks for validating arguments and preconditions.

Each check either returns ``None`` or raises a ``ValidationError`` subclass
carrying the caller's ``ValidationMessage`` and the values that failed.
"""

from validations.errors import (
    DependencyNotFoundError,
    DuplicatedError,
    FailureKind,
    InvalidArgumentError,
    NotAllowedError,
    NotFoundError,
    RequiredArgumentError,
    ValidationError,
)
from validations.messages import Message, MessageEnum, ValidationMessage

__all__ = [
    "DependencyNotFoundError",
    "DuplicatedError",
    "FailureKind",
    "InvalidArgumentError",
    "Message",
    "MessageEnum",
    "NotAllowedError",
    "NotFoundError",
    "RequiredArgumentError",
    "ValidationError",
    "ValidationMessage",
]
