"""Geographic coordinate types and great-circle distance.

Components:
    Latitude: North/South component, stored in seconds of arc (±90°)
    Longitude: East/West component, stored in seconds of arc (±180°)
    DM, DMS: Immutable sexagesimal decompositions of one component
    Coordinate: Latitude/longitude pair with setters, getters and text forms
    CoordinateList: Ordered sequence of coordinates

Typical Usage:
    >>> from geocoord.geo import Coordinate, CoordinateList
    >>>
    >>> origin = Coordinate(1.0, 1.0)
    >>> target = Coordinate(-2.4, 1.5)
    >>> print(f"{float(origin.distance_to(target)):.0f} m")
    >>> print(origin.format("DM"))
    01°00.00'N 001°00.00'E
"""

from .angle import DM, DMS, AngleValue, Latitude, Longitude
from .coordinate import Coordinate
from .coordinate_list import CoordinateList
from .distance import distance_matrix, haversine, path_length

__all__ = [
    "AngleValue",
    "Latitude",
    "Longitude",
    "DM",
    "DMS",
    "Coordinate",
    "CoordinateList",
    "haversine",
    "distance_matrix",
    "path_length",
]
