"""Angular unit definitions for geodesic coordinates.

All angular measurements are stored in seconds of arc. At that resolution the
degrees, minutes and whole seconds of a sexagesimal value all live in the
integral part of the stored number, and only fractional seconds depend on
floating-point precision.

Classes:
    ArcSecond: Storage unit of the angle family (1/3600 degree).
    ArcMinute: 60 arc seconds.
    Degree: 3600 arc seconds.
    Radian: 180·3600/π arc seconds.

Type Aliases:
    Angle: Union type for all angular units.

Example:
    >>> heading = Degree(45)
    >>> print(heading)  # "45.0 °"
    >>> print(float(heading))  # 162000.0 (arc seconds)
    >>> print(heading.to(ArcMinute))  # 2700.0
"""

from __future__ import annotations

from ..config import ARCSEC_PER_DEGREE, ARCSEC_PER_MINUTE, ARCSEC_PER_RADIAN
from .unit_float import UnitFloat


class ArcSecond(UnitFloat):
    """Angular unit: second of arc, the storage unit for angles.

    Attributes:
        IS_FAMILY_ROOT (bool): True, root of the angle family.
        SCALE_TO_SI (float): 1.0, values are stored as given.
        SYMBOL (str): '"', the second-of-arc mark.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = '"'


class ArcMinute(ArcSecond):
    """Angular unit: minute of arc (60 arc seconds)."""

    SCALE_TO_SI = ARCSEC_PER_MINUTE
    SYMBOL = "'"


class Degree(ArcSecond):
    """Angular unit: degree (3600 arc seconds).

    Example:
        >>> bearing = Degree(90)
        >>> float(bearing)  # 324000.0
        >>> bearing.to(Radian)  # 1.5707963...
    """

    SCALE_TO_SI = ARCSEC_PER_DEGREE
    SYMBOL = "°"


class Radian(ArcSecond):
    """Angular unit: radian, for trigonometric calculations."""

    SCALE_TO_SI = ARCSEC_PER_RADIAN
    SYMBOL = "rad"


Angle = ArcSecond | ArcMinute | Degree | Radian  # Type alias for any angle unit
