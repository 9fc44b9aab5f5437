"""Ordered sequence of coordinates, such as a route or a polygon outline."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence

from ..capabilities import Cloneable, Formattable, IsoSerializable
from ..unit import Meter
from .coordinate import Coordinate


class CoordinateList(MutableSequence, Cloneable, Formattable, IsoSerializable):
    """Mutable, ordered collection of Coordinate values.

    The list wraps a plain Python list. Duplicates are allowed and insertion
    order is both the iteration order and the serialization order. Its text
    form is the concatenation of the ISO 6709 records of its elements.

    Example:
        >>> route = CoordinateList([Coordinate(1.0, 1.0), Coordinate(-2.4, 1.5)])
        >>> route.to_iso()
        '+010000.0+0010000.0/-022400.0+0013000.0/'
    """

    def __init__(self, coordinates: Iterable[Coordinate] = ()):
        self._items: list[Coordinate] = []
        self.extend(coordinates)

    @staticmethod
    def _check(value) -> Coordinate:
        if not isinstance(value, Coordinate):
            raise TypeError(f"expected Coordinate, got {type(value).__name__}")
        return value

    # -------------------------------- Sequence protocol --------------------------------
    def __getitem__(self, index):
        if isinstance(index, slice):
            return CoordinateList(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._items[index] = [self._check(v) for v in value]
        else:
            self._items[index] = self._check(value)

    def __delitem__(self, index) -> None:
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._items)

    def insert(self, index: int, value: Coordinate) -> None:
        self._items.insert(index, self._check(value))

    def clear(self) -> None:
        self._items.clear()

    def __eq__(self, other) -> bool:
        if isinstance(other, CoordinateList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"CoordinateList({self._items!r})"

    # -------------------------------- Geometry --------------------------------
    def path_length(self) -> Meter:
        """Total great-circle length of the legs between consecutive coordinates."""
        from .distance import path_length

        return path_length(self._items)

    # -------------------------------- Capabilities --------------------------------
    def clone(self) -> CoordinateList:
        """Copy the list and every coordinate in it."""
        return CoordinateList(c.clone() for c in self._items)

    def format(self, precision=None) -> str:
        """Render the list as concatenated ISO 6709 records.

        Only the ISO form has a list representation; ``None`` selects it.

        Raises:
            UnknownFormatSpecifierError: For any other precision token.
        """
        from ..codec import list_codec
        from ..codec.errors import UnknownFormatSpecifierError
        from ..codec.precision import Precision

        if precision not in (None, "") and Precision.resolve(precision) is not Precision.ISO:
            raise UnknownFormatSpecifierError(precision)
        return list_codec.format(self._items)

    def to_iso(self) -> str:
        from ..codec import list_codec

        return list_codec.format(self._items)

    @classmethod
    def from_iso(cls, text: str):
        """Parse concatenated ISO 6709 records.

        Returns:
            Result: ``Ok(CoordinateList)`` or ``Err(ListElementError)``.
        """
        from ..codec import list_codec

        return list_codec.parse(text)

    @classmethod
    def parse_iso(cls, text: str) -> CoordinateList:
        """Parse concatenated ISO 6709 records.

        Raises:
            ParseError: If any record is malformed.
        """
        return cls.from_iso(text).unwrap()

    def load_iso(self, text: str) -> None:
        """Replace the contents of this list with the records parsed from ``text``.

        The list is cleared first and stays empty when any record fails.

        Raises:
            ParseError: If any record is malformed.
        """
        from ..codec import list_codec

        list_codec.parse_into(text, self).unwrap()
