"""Explicit success/failure values returned by the codecs.

A codec call returns either ``Ok(value)`` or ``Err(error)``. Callers branch on
``is_ok()`` or pattern-match on the two classes, and ``unwrap()`` converts a
failure back into a raised exception when that is the more convenient style.

Example:
    >>> result = parse("+010000.0+0010000.0/")
    >>> match result:
    ...     case Ok(coord):
    ...         print(coord.get_d())
    ...     case Err(error):
    ...         print(f"rejected: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying the error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self, default):
        return default

    @property
    def value(self) -> None:
        return None


Result = Ok[T] | Err[E]
