"""ISO 6709 codec for ordered sequences of coordinates.

A list is written as the concatenation of the ISO records of its elements.
Every record already ends with ``/``, so the terminator doubles as the list
delimiter::

    +010000.0+0010000.0/-022400.0+0013000.0/-034200.0+0021200.0/
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..config import FIELD_TERMINATOR
from ..geo.coordinate import Coordinate
from ..geo.coordinate_list import CoordinateList
from . import coordinate_codec
from .errors import ListElementError, MissingTerminatorError
from .precision import Precision
from .result import Err, Ok, Result

logger = logging.getLogger(__name__)


def format(coords: Iterable[Coordinate]) -> str:
    """Concatenate the ISO 6709 records of ``coords`` in order.

    An empty sequence gives an empty string.
    """
    return "".join(coordinate_codec.format(c, Precision.ISO).unwrap() for c in coords)


def parse(text: str) -> Result:
    """Parse concatenated ISO 6709 records.

    Surrounding whitespace is ignored and an empty text is an empty list.
    Parsing stops at the first malformed record and no partial list is
    returned.

    Returns:
        Result: ``Ok(CoordinateList)`` or ``Err(ListElementError)`` naming
        the index of the failing record.
    """
    records = text.strip().split(FIELD_TERMINATOR)
    # Splitting terminated records leaves one empty piece after the last terminator
    trailing = records.pop()

    coords = CoordinateList()
    for index, record in enumerate(records):
        result = coordinate_codec.parse(record + FIELD_TERMINATOR)
        if result.is_err():
            error = ListElementError(index, result.error, text)
            logger.debug("Rejected coordinate list: %s", error)
            return Err(error)
        coords.append(result.value)

    if trailing:
        cause = MissingTerminatorError(f"record does not end with {FIELD_TERMINATOR!r}", trailing)
        error = ListElementError(len(records), cause, text)
        logger.debug("Rejected coordinate list: %s", error)
        return Err(error)

    return Ok(coords)


def parse_into(text: str, target: CoordinateList) -> Result:
    """Replace the contents of ``target`` with the records parsed from ``text``.

    ``target`` is cleared before parsing and is only filled when every record
    parses, so a failure never leaves it half populated.

    Returns:
        Result: ``Ok(target)`` or the ``Err`` from ``parse``.
    """
    target.clear()
    result = parse(text)
    if result.is_err():
        return result
    target.extend(result.value)
    return Ok(target)
