"""Text boundary for persistence and markup layers.

A storage layer (an XML element, a database column, a config value) owns the
surrounding document and hands the codec only the raw text of the field.
``write`` produces that text in ISO 6709 form and ``read`` turns it back into
a value.

Example:
    >>> write(Coordinate(1.0, 1.0))
    '+010000.0+0010000.0/'
    >>> read(" +010000.0+0010000.0/ \\n").unwrap()
    Coordinate(latitude=Latitude(1.0), longitude=Longitude(1.0))
    >>> read("+010000.0+0010000.0/", CoordinateList).unwrap()
    CoordinateList([Coordinate(latitude=Latitude(1.0), longitude=Longitude(1.0))])
"""

from __future__ import annotations

from collections.abc import Sequence

from ..geo.coordinate import Coordinate
from ..geo.coordinate_list import CoordinateList
from . import coordinate_codec, list_codec
from .precision import Precision
from .result import Result


def read(raw_text: str, kind: type = Coordinate) -> Result:
    """Parse the raw text of a stored field.

    Args:
        raw_text (str): Field content. Surrounding whitespace, such as the
            indentation of a markup element, is ignored.
        kind (type): ``Coordinate`` for a single record or ``CoordinateList``
            for concatenated records.

    Returns:
        Result: ``Ok`` with a value of ``kind``, or ``Err`` with a ParseError.

    Raises:
        TypeError: If ``kind`` is neither Coordinate nor CoordinateList.
    """
    text = raw_text.strip()
    if isinstance(kind, type) and issubclass(kind, CoordinateList):
        return list_codec.parse(text)
    if isinstance(kind, type) and issubclass(kind, Coordinate):
        return coordinate_codec.parse(text)
    raise TypeError(f"cannot read values of type {kind!r}")


def write(value: Coordinate | Sequence[Coordinate]) -> str:
    """Render a coordinate or a sequence of coordinates as ISO 6709 text.

    Raises:
        TypeError: If ``value`` is not a Coordinate or a sequence of them.
    """
    if isinstance(value, Coordinate):
        return coordinate_codec.format(value, Precision.ISO).unwrap()
    if isinstance(value, (CoordinateList, list, tuple)):
        return list_codec.format(value)
    raise TypeError(f"cannot write values of type {type(value).__name__}")
