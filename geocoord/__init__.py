"""Geodesic coordinates with an ISO 6709 text codec.

geocoord represents a single latitude/longitude point in memory and converts
it to and from the ISO 6709 (Annex H) position string and three human-readable
display forms. It also computes great-circle distances between points.

Package Components:
    Measurement Framework (geocoord.unit):
        • Type-safe angle and length units with a per-family storage unit
        • Angles stored in seconds of arc, lengths in meters
        • Single-precision storage, see geocoord.config

    Geographic Types (geocoord.geo):
        • Latitude / Longitude: one coordinate component each
        • Coordinate: latitude/longitude pair with D, DM and DMS setters/getters
        • CoordinateList: ordered sequence of coordinates
        • Haversine distance, distance matrices and path lengths

    Codecs (geocoord.codec):
        • coordinate_codec: D, DM, DMS and ISO formatting; ISO parsing
        • list_codec: concatenated ISO records for coordinate lists
        • serialization: read/write boundary for storage layers
        • Ok/Err results carrying a typed error taxonomy

Usage Patterns:
    Formatting:
        >>> from geocoord import Coordinate
        >>> c = Coordinate()
        >>> c.set_dms(0, 10, 20.8, True, 30, 40, 50.9, False)
        >>> print(f"{c:D}")
        00.1724°N 030.6808°W
        >>> print(c)
        00°10'20.8"N 030°40'50.9"W
        >>> c.to_iso()
        '+001020.8-0304050.9/'

    Parsing:
        >>> from geocoord.codec import parse_coordinate, Ok, Err
        >>> match parse_coordinate("-022400.0+0013000.0/"):
        ...     case Ok(coord):
        ...         print(coord.get_d())
        ...     case Err(error):
        ...         print(f"rejected: {error}")
        (-2.4, 1.5)

    Distances:
        >>> a, b = Coordinate(0, 0), Coordinate(1, 0)
        >>> float(a.distance_to(b))
        111120.0
"""

import logging

from .codec import (
    Err,
    FormatError,
    GeoCoordError,
    Ok,
    ParseError,
    Precision,
    read,
    write,
)
from .geo import DM, DMS, Coordinate, CoordinateList, Latitude, Longitude

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "CoordinateList",
    "Latitude",
    "Longitude",
    "DM",
    "DMS",
    "Precision",
    "Ok",
    "Err",
    "GeoCoordError",
    "ParseError",
    "FormatError",
    "read",
    "write",
]
