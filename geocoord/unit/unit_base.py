"""Base unit system foundation for type-safe angular and length quantities.

This module provides the Unit class that every quantity type in the package
derives from. Units are grouped into "families", one per physical quantity
(angle, length) or per axis (latitude, longitude). Units inside a family can
be combined and compared; mixing families is rejected at runtime, which is
what keeps a latitude from being added to a longitude by accident.

Key Concepts:
- ROOT Class: Each unit family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the base unit of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO

Classes:
    Unit: Abstract base class for all unit types with family management.

Example:
    >>> class Angle(Unit):
    ...     IS_FAMILY_ROOT = True  # Root of the angle family
    >>> class Degree(Angle):
    ...     pass  # ROOT = Angle
    >>> class Latitude(Degree):
    ...     IS_FAMILY_ROOT = True  # Starts its own family
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types in the package.

    Concrete units inherit from UnitFloat rather than directly from this
    class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Set the ROOT class of a new subclass.

        The ROOT is the first class in the MRO (the subclass itself included)
        that declares IS_FAMILY_ROOT=True in its own namespace.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        for base in cls.mro():
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Check that another unit type belongs to the same family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the other type is not a unit, or belongs to a
                different family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            other_name = other_root.__name__ if other_root else unit_type.__name__
            msg = f"incompatible units: {cls.ROOT.__name__} and {other_name}"
            raise TypeError(msg)
