"""Distance unit definitions for great-circle results.

Distances are stored in meters. The nautical mile is included because the
great-circle distance is derived from it: one minute of arc along a great
circle is one nautical mile (1852 m).

Classes:
    Meter: Storage unit of the length family.
    Kilometer: 1000 meters.
    NauticalMile: 1852 meters.

Type Aliases:
    Length: Union type for all distance units.

Example:
    >>> leg = NauticalMile(60)  # one degree of arc
    >>> print(float(leg))  # 111120.0
    >>> print(leg.to(Kilometer))  # 111.12
"""

from __future__ import annotations

from ..config import METERS_PER_NAUTICAL_MILE
from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: meter (storage unit for length).

    Attributes:
        IS_FAMILY_ROOT (bool): True, root of the length family.
        SCALE_TO_SI (float): 1.0.
        SYMBOL (str): "m".
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: kilometer (1000 meters)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """Distance unit: international nautical mile (1852 meters)."""

    SCALE_TO_SI = METERS_PER_NAUTICAL_MILE
    SYMBOL = "NM"


Length = Meter | Kilometer | NauticalMile  # Type alias for any length unit
