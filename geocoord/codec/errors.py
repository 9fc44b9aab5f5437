"""Error taxonomy of the coordinate codecs.

Codec functions do not raise for malformed input; they return an ``Err``
carrying one of these exceptions. ``Result.unwrap()`` raises it, which is how
the convenience APIs surface failures.

    GeoCoordError
    ├── ParseError
    │   ├── TooShortError
    │   ├── MissingTerminatorError
    │   ├── TokenCountError
    │   ├── PrecisionMismatchError
    │   ├── NumberFormatError
    │   ├── OutOfRangeError
    │   └── ListElementError
    └── FormatError
        └── UnknownFormatSpecifierError
"""

from __future__ import annotations


class GeoCoordError(Exception):
    """Base class of all package errors."""


class ParseError(GeoCoordError, ValueError):
    """Raised when ISO 6709 text cannot be parsed.

    Attributes:
        text: The text that failed to parse.
    """

    def __init__(self, message: str, text: str | None = None):
        super().__init__(message)
        self.text = text


class TooShortError(ParseError):
    """The record is shorter than the minimum valid record length."""


class MissingTerminatorError(ParseError):
    """The record does not end with the ``/`` terminator."""


class TokenCountError(ParseError):
    """Splitting on sign characters did not give 3 or 4 tokens with an empty first token."""


class PrecisionMismatchError(ParseError):
    """Decimal point offsets of latitude and longitude are invalid or inconsistent."""


class NumberFormatError(ParseError):
    """A numeric field is not a well-formed decimal number."""


class OutOfRangeError(ParseError):
    """A parsed field lies outside its valid range."""


class ListElementError(ParseError):
    """One record of a coordinate list failed to parse.

    Attributes:
        index: Position of the failing record in the list.
        cause: The error of that record.
    """

    def __init__(self, index: int, cause: ParseError, text: str | None = None):
        super().__init__(f"record {index}: {cause}", text)
        self.index = index
        self.cause = cause


class FormatError(GeoCoordError, ValueError):
    """Raised when a value cannot be rendered to text."""


class UnknownFormatSpecifierError(FormatError):
    """The requested display precision is not one of D, DM, DMS or ISO.

    Attributes:
        specifier: The rejected precision token.
    """

    def __init__(self, specifier):
        super().__init__(f"invalid formatting string: {specifier!r}")
        self.specifier = specifier
