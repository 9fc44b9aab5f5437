"""Angular coordinate components: latitude and longitude values.

A coordinate component is stored in seconds of arc, so degrees, minutes and
whole seconds all fall in the integral part of the stored value and only
fractional seconds carry decimal precision. Latitude and Longitude are
separate unit families: adding or comparing one with the other raises
TypeError.

Sexagesimal decompositions are returned as small immutable records instead
of being written into several output variables:

    DM:  (degrees, minutes, positive)
    DMS: (degrees, minutes, seconds, positive)

``positive`` is the hemisphere flag: True for North/East, False for
South/West. Degree and minute magnitudes are always unsigned.

Example:
    >>> lat = Latitude.from_dms(48, 51, 24.0, True)
    >>> lat.degrees
    48.85666...
    >>> lat.as_dm()
    DM(degrees=48, minutes=51.4, positive=True)
    >>> lat.hemisphere
    'N'
"""

from __future__ import annotations

import math
from typing import ClassVar, NamedTuple

from ..config import (
    ARCSEC_PER_DEGREE,
    ARCSEC_PER_MINUTE,
    ARCSEC_PER_RADIAN,
    LATITUDE_LIMIT_DEG,
    LONGITUDE_LIMIT_DEG,
)
from ..unit import Degree, Unit


class DM(NamedTuple):
    """Degrees and fractional minutes of one coordinate component."""

    degrees: int
    minutes: float
    positive: bool


class DMS(NamedTuple):
    """Degrees, whole minutes and fractional seconds of one coordinate component."""

    degrees: int
    minutes: int
    seconds: float
    positive: bool


class AngleValue(Degree):
    """One angular coordinate component, constructed in degrees and stored in arc seconds.

    The constructor takes decimal degrees (``Latitude(-2.4)``); ``float()`` of
    an instance gives the stored arc-second value. Instances are immutable;
    the "setters" of a coordinate component are the ``from_*`` constructors.

    Attributes:
        LIMIT_DEG (ClassVar[float]): Largest valid magnitude in degrees.
        DEGREE_WIDTH (ClassVar[int]): Zero-padded width of the degrees field.
        POSITIVE_HEMISPHERE (ClassVar[str]): Letter for values >= 0.
        NEGATIVE_HEMISPHERE (ClassVar[str]): Letter for values < 0.
    """

    LIMIT_DEG: ClassVar[float] = LONGITUDE_LIMIT_DEG
    DEGREE_WIDTH: ClassVar[int] = 3
    POSITIVE_HEMISPHERE: ClassVar[str] = "+"
    NEGATIVE_HEMISPHERE: ClassVar[str] = "-"

    @classmethod
    def coerce(cls, value) -> AngleValue:
        """Return ``value`` as an instance of this class.

        Plain numbers are read as decimal degrees. Instances of this class are
        returned unchanged.

        Raises:
            TypeError: If ``value`` is a unit of another family.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Unit):
            cls._check_same_root(type(value))
            return cls.from_si(float(value))
        return cls(value)

    @classmethod
    def from_degrees(cls, degrees: float) -> AngleValue:
        """Create a component from signed decimal degrees."""
        return cls(degrees)

    @classmethod
    def from_dm(cls, degrees: float, minutes: float, positive: bool) -> AngleValue:
        """Create a component from unsigned degrees and minutes plus a hemisphere flag."""
        sign = 1 if positive else -1
        return cls.from_si((degrees * ARCSEC_PER_DEGREE + minutes * ARCSEC_PER_MINUTE) * sign)

    @classmethod
    def from_dms(
        cls, degrees: float, minutes: float, seconds: float, positive: bool
    ) -> AngleValue:
        """Create a component from unsigned degrees, minutes and seconds plus a hemisphere flag."""
        sign = 1 if positive else -1
        return cls.from_si(
            (degrees * ARCSEC_PER_DEGREE + minutes * ARCSEC_PER_MINUTE + seconds) * sign
        )

    @property
    def degrees(self) -> float:
        """Signed decimal degrees."""
        return float(self) / ARCSEC_PER_DEGREE

    @property
    def radians(self) -> float:
        """Signed radians."""
        return float(self) / ARCSEC_PER_RADIAN

    @property
    def positive(self) -> bool:
        """Hemisphere flag: True for North/East, including zero."""
        return float(self) >= 0

    @property
    def hemisphere(self) -> str:
        """Hemisphere letter of this component."""
        return self.POSITIVE_HEMISPHERE if self.positive else self.NEGATIVE_HEMISPHERE

    def in_range(self) -> bool:
        """Check the magnitude against the component's valid range."""
        return abs(float(self)) <= self.LIMIT_DEG * ARCSEC_PER_DEGREE

    def as_d(self) -> float:
        return self.degrees

    def as_dm(self) -> DM:
        magnitude = abs(float(self))
        degrees = math.trunc(magnitude / ARCSEC_PER_DEGREE)
        minutes = (magnitude - degrees * ARCSEC_PER_DEGREE) / ARCSEC_PER_MINUTE
        return DM(degrees, minutes, self.positive)

    def as_dms(self) -> DMS:
        magnitude = abs(float(self))
        degrees = math.trunc(magnitude / ARCSEC_PER_DEGREE)
        remainder = magnitude - degrees * ARCSEC_PER_DEGREE
        minutes = math.trunc(remainder / ARCSEC_PER_MINUTE)
        seconds = remainder - minutes * ARCSEC_PER_MINUTE
        return DMS(degrees, minutes, seconds, self.positive)

    def __str__(self) -> str:
        return f"{self.degrees:g} {self.SYMBOL}{self.hemisphere}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.degrees!r})"


class Latitude(AngleValue):
    """Latitude component (North/South), valid within ±90°.

    Example:
        >>> Latitude(-2.4).as_dms()
        DMS(degrees=2, minutes=24, seconds=0.0, positive=False)
    """

    IS_FAMILY_ROOT = True
    LIMIT_DEG = LATITUDE_LIMIT_DEG
    DEGREE_WIDTH = 2
    POSITIVE_HEMISPHERE = "N"
    NEGATIVE_HEMISPHERE = "S"


class Longitude(AngleValue):
    """Longitude component (East/West), valid within ±180°.

    Example:
        >>> Longitude.from_dm(30, 40.5, False).degrees
        -30.675
    """

    IS_FAMILY_ROOT = True
    LIMIT_DEG = LONGITUDE_LIMIT_DEG
    DEGREE_WIDTH = 3
    POSITIVE_HEMISPHERE = "E"
    NEGATIVE_HEMISPHERE = "W"
