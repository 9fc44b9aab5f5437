"""Geodesic point made of a latitude and a longitude component."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..capabilities import Cloneable, Formattable, IsoSerializable
from ..unit import Meter
from .angle import DM, DMS, Latitude, Longitude


@dataclass(eq=True)
class Coordinate(Cloneable, Formattable, IsoSerializable):
    """A geographic point with latitude and longitude components.

    Components are stored in seconds of arc (see ``Latitude``/``Longitude``).
    Plain numbers passed to the constructor are read as decimal degrees, so
    ``Coordinate(-2.4, 1.5)`` is 2°24'S 1°30'E. The class is mutable through
    its setters, like a record owned by a single caller.

    Equality is exact equality of both stored components. The hash combines
    both components with a tuple hash.

    Attributes:
        latitude (Latitude): North/South component, positive North.
        longitude (Longitude): East/West component, positive East.

    Example:
        >>> c = Coordinate()
        >>> c.set_dms(0, 10, 20.8, True, 30, 40, 50.9, False)
        >>> format(c, "DMS")
        '00°10\\'20.8"N 030°40\\'50.9"W'
        >>> c.to_iso()
        '+001020.8-0304050.9/'
    """

    latitude: Latitude = field(default_factory=Latitude)
    longitude: Longitude = field(default_factory=Longitude)

    def __post_init__(self):
        self.latitude = Latitude.coerce(self.latitude)
        self.longitude = Longitude.coerce(self.longitude)

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> Coordinate:
        """Create a Coordinate from signed decimal degrees."""
        return cls(Latitude(lat), Longitude(lon))

    # -------------------------------- Multi-field setters --------------------------------
    def set_d(self, lat_deg: float, lon_deg: float) -> None:
        """Set both components from signed decimal degrees."""
        self.latitude = Latitude.from_degrees(lat_deg)
        self.longitude = Longitude.from_degrees(lon_deg)

    def set_dm(
        self,
        lat_deg: float,
        lat_min: float,
        north: bool,
        lon_deg: float,
        lon_min: float,
        east: bool,
    ) -> None:
        """Set both components from unsigned degrees and minutes with hemisphere flags."""
        self.latitude = Latitude.from_dm(lat_deg, lat_min, north)
        self.longitude = Longitude.from_dm(lon_deg, lon_min, east)

    def set_dms(
        self,
        lat_deg: float,
        lat_min: float,
        lat_sec: float,
        north: bool,
        lon_deg: float,
        lon_min: float,
        lon_sec: float,
        east: bool,
    ) -> None:
        """Set both components from unsigned degrees, minutes and seconds with hemisphere flags."""
        self.latitude = Latitude.from_dms(lat_deg, lat_min, lat_sec, north)
        self.longitude = Longitude.from_dms(lon_deg, lon_min, lon_sec, east)

    # -------------------------------- Multi-field getters --------------------------------
    def get_d(self) -> tuple[float, float]:
        """Return (latitude, longitude) in signed decimal degrees."""
        return self.latitude.as_d(), self.longitude.as_d()

    def get_dm(self) -> tuple[DM, DM]:
        return self.latitude.as_dm(), self.longitude.as_dm()

    def get_dms(self) -> tuple[DMS, DMS]:
        return self.latitude.as_dms(), self.longitude.as_dms()

    @property
    def lat_deg(self) -> float:
        return self.latitude.degrees

    @property
    def lon_deg(self) -> float:
        return self.longitude.degrees

    def is_valid(self) -> bool:
        """Check that latitude is within ±90° and longitude within ±180°."""
        return self.latitude.in_range() and self.longitude.in_range()

    def distance_to(self, other: Coordinate) -> Meter:
        """Great-circle distance to another Coordinate.

        Args:
            other (Coordinate): Target point.

        Returns:
            Meter: Haversine distance along a sphere where one minute of arc
            is one nautical mile.
        """
        from .distance import haversine

        return haversine(self, other)

    # -------------------------------- Capabilities --------------------------------
    def clone(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)

    def format(self, precision=None) -> str:
        """Render this coordinate in the D, DM, DMS (default) or ISO form.

        Raises:
            UnknownFormatSpecifierError: If the precision token is not recognized.
        """
        from ..codec import coordinate_codec

        return coordinate_codec.format(self, precision).unwrap()

    def to_iso(self) -> str:
        return self.format("ISO")

    @classmethod
    def from_iso(cls, text: str):
        """Parse an ISO 6709 record.

        Returns:
            Result: ``Ok(Coordinate)`` or ``Err(ParseError)``.
        """
        from ..codec import coordinate_codec

        return coordinate_codec.parse(text)

    @classmethod
    def parse_iso(cls, text: str) -> Coordinate:
        """Parse an ISO 6709 record.

        Raises:
            ParseError: If the record is malformed.
        """
        return cls.from_iso(text).unwrap()

    def __hash__(self) -> int:
        return hash((float(self.latitude), float(self.longitude)))
