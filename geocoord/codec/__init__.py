"""Text codecs for coordinates and coordinate lists.

Modules:
    coordinate_codec: ``format``/``parse`` of a single Coordinate
    list_codec: ``format``/``parse`` of a sequence of coordinates
    serialization: ``read``/``write`` boundary for storage layers
    precision: the D, DM, DMS and ISO precision tokens
    result: ``Ok``/``Err`` values returned by the codecs
    errors: error taxonomy

Example:
    >>> from geocoord.codec import coordinate_codec, Ok
    >>> coordinate_codec.parse("-022400.0+0013000.0/")
    Ok(value=Coordinate(latitude=Latitude(-2.4), longitude=Longitude(1.5)))
"""

from . import coordinate_codec, list_codec, serialization
from .errors import (
    FormatError,
    GeoCoordError,
    ListElementError,
    MissingTerminatorError,
    NumberFormatError,
    OutOfRangeError,
    ParseError,
    PrecisionMismatchError,
    TokenCountError,
    TooShortError,
    UnknownFormatSpecifierError,
)
from .precision import Precision
from .result import Err, Ok, Result
from .serialization import read, write

format_coordinate = coordinate_codec.format
parse_coordinate = coordinate_codec.parse
format_list = list_codec.format
parse_list = list_codec.parse

__all__ = [
    "coordinate_codec",
    "list_codec",
    "serialization",
    "format_coordinate",
    "parse_coordinate",
    "format_list",
    "parse_list",
    "read",
    "write",
    "Precision",
    "Ok",
    "Err",
    "Result",
    "GeoCoordError",
    "ParseError",
    "FormatError",
    "TooShortError",
    "MissingTerminatorError",
    "TokenCountError",
    "PrecisionMismatchError",
    "NumberFormatError",
    "OutOfRangeError",
    "ListElementError",
    "UnknownFormatSpecifierError",
]
