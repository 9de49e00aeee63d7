"""Tagged optional result for operations that may remove their whole input.

Maybe[T] is either Present(value) or Absent(). Callers pattern-match on it
instead of testing for None, so the "nothing left" case cannot be skipped
by accident:

    match filter(is_even, tree):
        case Present(kept):
            ...
        case Absent():
            ...

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeIs

__all__ = ["ABSENT", "Absent", "Maybe", "Present", "is_present"]


@dataclass(frozen=True, slots=True)
class Present[T]:
    """A result that exists.

    Attributes:
        value: The wrapped result
    """

    value: T


@dataclass(frozen=True, slots=True)
class Absent:
    """No result. Use the ABSENT singleton rather than constructing new ones."""

    def __bool__(self) -> bool:
        """Absent is falsy."""
        return False


ABSENT = Absent()

type Maybe[T] = Present[T] | Absent


def is_present[T](result: Maybe[T]) -> TypeIs[Present[T]]:
    """Narrow result to Present."""
    return isinstance(result, Present)
