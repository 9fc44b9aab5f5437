"""Type-safe unit system for angular and length quantities.

Each unit family stores its values in one storage unit and converts on the
way in and out:

    - Angle family: ArcSecond (root, storage), ArcMinute, Degree, Radian
    - Length family: Meter (root, storage), Kilometer, NauticalMile

Operations between units of different families raise TypeError.

Example:
    >>> from geocoord.unit import Degree, ArcMinute, Meter, Kilometer
    >>> Degree(1) + ArcMinute(30)  # stored as 5400 arc seconds
    >>> Kilometer(1.5).to(Meter)  # 1500.0
"""

from .unit_angle import Angle, ArcMinute, ArcSecond, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter, NauticalMile
from .unit_float import UnitFloat, to_storage

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    "to_storage",
    # Angular units
    "ArcSecond",
    "ArcMinute",
    "Degree",
    "Radian",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "Length",
]
