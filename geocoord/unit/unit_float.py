"""Float-based unit system with automatic conversion to the storage unit.

This module provides the UnitFloat class, the foundation for all numeric unit
types in the package. It combines Python's float type with unit safety and
automatic conversion to the family's storage unit (arc seconds for angles,
meters for lengths).

Key Features:
- Automatic conversion to the storage unit on construction
- Single-precision rounding of the stored value (see ``config.STORAGE_DTYPE``)
- Type-safe operations between compatible unit families
- Conversion methods between different units of the same family

Classes:
    UnitFloat: Base class for all float-based units.

Example:
    >>> class ArcSecond(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = '"'
    ...
    >>> class Degree(ArcSecond):
    ...     SCALE_TO_SI = 3600.0
    ...     SYMBOL = "°"
    ...
    >>> print(Degree(1.5))  # "1.5 °"
    >>> print(float(Degree(1.5)))  # 5400.0 (arc seconds)
"""

from __future__ import annotations

from typing import ClassVar

from ..config import BASE_TYPE, STORAGE_DTYPE
from .unit_base import Unit


def to_storage(value: float) -> float:
    """Round a value to the storage precision and return it as a Python float."""
    return float(STORAGE_DTYPE(value))


class UnitFloat(float, Unit):
    """Base class for type-safe unit values stored in the family storage unit.

    ``SCALE_TO_SI`` is the factor from the unit's native scale to the storage
    unit of its family. The name is kept from the general unit system even
    though the angle family stores arc seconds rather than radians.

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        SCALE_TO_SI (ClassVar[float]): Conversion factor to the storage unit.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: BASE_TYPE = 0.0):
        """Create a new instance from a value in the unit's native scale.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with the value stored in the storage unit.
        """
        return float.__new__(cls, to_storage(float(value) * cls.SCALE_TO_SI))

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create instance directly from a value already in the storage unit."""
        return float.__new__(cls, to_storage(si_value))

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: BASE_TYPE) -> UnitFloat:
        """Multiply unit by a scalar value.

        Raises:
            TypeError: If k is not a plain number.
        """
        if isinstance(k, BASE_TYPE) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"cannot multiply {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: BASE_TYPE) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: BASE_TYPE) -> UnitFloat:
        """Divide unit by a scalar value.

        Raises:
            TypeError: If k is not a plain number.
        """
        if isinstance(k, BASE_TYPE) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"cannot divide {type(self).__name__} by {type(k).__name__}")

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparisons --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Equality of stored values.

        Plain numbers compare against the stored value. Units of another
        family raise TypeError.
        """
        if not isinstance(other, Unit):
            return float(self) == other
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Return the value in the unit's native scale with its symbol (e.g. "90.0 °")."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return native and stored values (e.g. "90 ° (= 324000 stored)")."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} stored)"
