"""Capability interfaces shared by coordinate value types.

Each capability is a small abstract base class. A value type opts into the
capabilities it supports rather than inheriting one large contract:

    Cloneable: independent value copies.
    Formattable: text rendering selected by a precision token.
    IsoSerializable: conversion to and from ISO 6709 text.

Formattable wires the precision token into Python's ``format()`` builtin and
f-strings, so ``f"{coord:DM}"`` renders the DM display form.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Cloneable(ABC):
    """Values that can produce an independent copy of themselves."""

    @abstractmethod
    def clone(self) -> Any:
        """Return a copy that shares no mutable state with this value."""

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()


class Formattable(ABC):
    """Values that render to text according to a precision token."""

    @abstractmethod
    def format(self, precision=None) -> str:
        """Render this value; ``None`` selects the default precision.

        Raises:
            FormatError: If the precision token is not recognized.
        """

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    def __str__(self) -> str:
        return self.format()


class IsoSerializable(ABC):
    """Values with an ISO 6709 text form."""

    @abstractmethod
    def to_iso(self) -> str:
        """Return the ISO 6709 text of this value."""

    @classmethod
    @abstractmethod
    def from_iso(cls, text: str):
        """Parse ISO 6709 text.

        Returns:
            Result: ``Ok`` with a new instance, or ``Err`` with a ParseError.
        """


__all__ = ["Cloneable", "Formattable", "IsoSerializable"]
