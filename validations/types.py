from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)

# Subjects of the zero checks; any ``numbers.Number`` is accepted at runtime.
Numeric = int | float | complex | Decimal | Fraction


class SupportsOrdering(Protocol[T_contra]):
    """Values usable on the left side of ``<``, ``<=``, ``>`` and ``>=``."""

    def __lt__(self, other: T_contra, /) -> bool: ...

    def __le__(self, other: T_contra, /) -> bool: ...

    def __gt__(self, other: T_contra, /) -> bool: ...

    def __ge__(self, other: T_contra, /) -> bool: ...
