"""ISO 6709 and display-form codec for a single Coordinate.

Formatting renders a coordinate in one of four forms::

    D    DD.DDDD°H DDD.DDDD°H          e.g. 01.5000°N 030.6808°W
    DM   DD°MM.MM'H DDD°MM.MM'H        e.g. 01°30.00'N 030°40.85'W
    DMS  DD°MM'SS.S"H DDD°MM'SS.S"H    e.g. 01°30'00.0"N 030°40'50.9"W
    ISO  ±DDMMSS.SS±DDDMMSS.SS/        e.g. +013000.0-0304050.9/

Parsing accepts the ISO 6709 position form only, at any of its three
precisions, with an optional altitude that is validated and discarded::

    ±DD.DDDD±DDD.DDDD[±AAA.AAA]/           (eg +12.345-098.765/)
    ±DDMM.MMMM±DDDMM.MMMM[±AAA.AAA]/       (eg +1234.56-09854.321/)
    ±DDMMSS.SSSS±DDDMMSS.SSSS[±AAA.AAA]/   (eg +123456.7-0985432.1+15.9/)

Both operations return a Result instead of raising.
"""

from __future__ import annotations

import logging
import math
import re

from ..config import (
    ARCSEC_PER_DEGREE,
    ARCSEC_PER_MINUTE,
    FIELD_TERMINATOR,
    MIN_RECORD_LENGTH,
    SIGN_CHARACTERS,
)
from ..geo.angle import AngleValue, Latitude, Longitude
from ..geo.coordinate import Coordinate
from .errors import (
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

logger = logging.getLogger(__name__)

_SIGN_SPLIT_RE = re.compile(f"([{re.escape(SIGN_CHARACTERS)}])")
_DECIMAL_RE = re.compile(r"\d+(?:\.\d*)?", re.ASCII)

# Decimal point offset within the latitude token for each precision
_POINT_OFFSETS = {2: Precision.D, 4: Precision.DM, 6: Precision.DMS}


# -------------------------------- Formatting --------------------------------
def _sexagesimal(value: AngleValue, unit: float, decimals: int) -> tuple[int, int, float]:
    """Split the magnitude of ``value`` into whole degrees, whole minutes and a remainder.

    The magnitude is rounded to ``decimals`` places of ``unit`` (arc seconds or
    arc minutes) before splitting, so a remainder that would round up to 60
    is carried into the next larger field.
    """
    magnitude = round(abs(float(value)) / unit, decimals) * unit
    degrees = math.trunc(magnitude / ARCSEC_PER_DEGREE)
    remainder = magnitude - degrees * ARCSEC_PER_DEGREE
    minutes = math.trunc(remainder / ARCSEC_PER_MINUTE)
    return degrees, minutes, remainder - minutes * ARCSEC_PER_MINUTE


def _format_d(value: AngleValue) -> str:
    width = value.DEGREE_WIDTH + 5
    return f"{abs(value.degrees):0{width}.4f}°{value.hemisphere}"


def _format_dm(value: AngleValue) -> str:
    degrees, minutes, seconds = _sexagesimal(value, ARCSEC_PER_MINUTE, 2)
    total_minutes = minutes + seconds / ARCSEC_PER_MINUTE
    return f"{degrees:0{value.DEGREE_WIDTH}d}°{total_minutes:05.2f}'{value.hemisphere}"


def _format_dms(value: AngleValue) -> str:
    degrees, minutes, seconds = _sexagesimal(value, 1.0, 1)
    return f"{degrees:0{value.DEGREE_WIDTH}d}°{minutes:02d}'{seconds:04.1f}\"{value.hemisphere}"


def _format_iso(value: AngleValue) -> str:
    degrees, minutes, seconds = _sexagesimal(value, 1.0, 2)
    text = f"{seconds:05.2f}"
    if text.endswith("0"):
        text = text[:-1]
    sign = "+" if value.positive else "-"
    return f"{sign}{degrees:0{value.DEGREE_WIDTH}d}{minutes:02d}{text}"


_FORMATTERS = {
    Precision.D: _format_d,
    Precision.DM: _format_dm,
    Precision.DMS: _format_dms,
    Precision.ISO: _format_iso,
}


def format(coord: Coordinate, precision: Precision | str | None = None) -> Result:
    """Render a coordinate as text.

    Args:
        coord (Coordinate): Coordinate to render.
        precision: ``"D"``, ``"DM"``, ``"DMS"``, ``"ISO"`` (any case) or a
            Precision member. ``None`` and ``""`` select DMS.

    Returns:
        Result: ``Ok(str)``, or ``Err(UnknownFormatSpecifierError)`` for any
        other token.
    """
    try:
        resolved = Precision.resolve(precision)
    except UnknownFormatSpecifierError as error:
        logger.debug("Rejected format specifier %r", precision)
        return Err(error)

    render = _FORMATTERS[resolved]
    if resolved is Precision.ISO:
        return Ok(f"{render(coord.latitude)}{render(coord.longitude)}{FIELD_TERMINATOR}")
    return Ok(f"{render(coord.latitude)} {render(coord.longitude)}")


# -------------------------------- Parsing --------------------------------
def _number(text: str, record: str) -> float:
    """Parse an unsigned decimal with a ``.`` decimal point, independent of locale."""
    if not _DECIMAL_RE.fullmatch(text):
        raise NumberFormatError(f"invalid number {text!r}", record)
    return float(text)


def _sexagesimal_field(text: str, record: str) -> float:
    """Parse a minutes or seconds field, which must be below 60."""
    value = _number(text, record)
    if value >= 60:
        raise OutOfRangeError(f"minutes or seconds field {text!r} is not below 60", record)
    return value


def _magnitude(token: str, precision: Precision, degree_width: int, record: str) -> float:
    """Return the magnitude in arc seconds of a latitude or longitude token."""
    if precision is Precision.D:
        return _number(token, record) * ARCSEC_PER_DEGREE

    degrees = _number(token[:degree_width], record)
    if precision is Precision.DM:
        minutes = _sexagesimal_field(token[degree_width:], record)
        return degrees * ARCSEC_PER_DEGREE + minutes * ARCSEC_PER_MINUTE

    minutes = _sexagesimal_field(token[degree_width : degree_width + 2], record)
    seconds = _sexagesimal_field(token[degree_width + 2 :], record)
    return degrees * ARCSEC_PER_DEGREE + minutes * ARCSEC_PER_MINUTE + seconds


def _component(
    angle_type: type[AngleValue], sign: str, token: str, precision: Precision, record: str
) -> AngleValue:
    magnitude = _magnitude(token, precision, angle_type.DEGREE_WIDTH, record)
    if magnitude > angle_type.LIMIT_DEG * ARCSEC_PER_DEGREE:
        raise OutOfRangeError(
            f"{angle_type.__name__.lower()} {token!r} exceeds {angle_type.LIMIT_DEG:g} degrees",
            record,
        )
    return angle_type.from_si(-magnitude if sign == "-" else magnitude)


def _parse_record(text: str) -> Coordinate:
    record = text.strip()
    if len(record) < MIN_RECORD_LENGTH:
        raise TooShortError(
            f"record has {len(record)} characters, at least {MIN_RECORD_LENGTH} required", text
        )
    if not record.endswith(FIELD_TERMINATOR):
        raise MissingTerminatorError(f"record does not end with {FIELD_TERMINATOR!r}", text)
    body = record[: -len(FIELD_TERMINATOR)]

    # re.split with a capturing group alternates tokens and the signs between them
    parts = _SIGN_SPLIT_RE.split(body)
    tokens, signs = parts[0::2], parts[1::2]
    if len(tokens) not in (3, 4) or tokens[0]:
        raise TokenCountError(
            "expected a sign before latitude, longitude and optional altitude", text
        )
    lat_token, lon_token = tokens[1], tokens[2]

    point = lat_token.find(".")
    precision = _POINT_OFFSETS.get(point)
    if precision is None or lon_token.find(".") != point + 1:
        raise PrecisionMismatchError(
            f"decimal points at {point} and {lon_token.find('.')} do not match a D, DM or DMS layout",
            text,
        )

    latitude = _component(Latitude, signs[0], lat_token, precision, text)
    longitude = _component(Longitude, signs[1], lon_token, precision, text)

    # Altitude is validated and discarded
    if len(tokens) == 4:
        _number(tokens[3], text)

    return Coordinate(latitude, longitude)


def parse(text: str) -> Result:
    """Parse one ISO 6709 record.

    Surrounding whitespace is ignored. Both the latitude and the longitude
    must carry an explicit sign, including values on the equator or the prime
    meridian.

    Args:
        text (str): Record such as ``"+123456.7-0985432.1/"``.

    Returns:
        Result: ``Ok(Coordinate)`` or ``Err`` with one of TooShortError,
        MissingTerminatorError, TokenCountError, PrecisionMismatchError,
        NumberFormatError or OutOfRangeError.
    """
    try:
        return Ok(_parse_record(text))
    except ParseError as error:
        logger.debug("Rejected ISO 6709 record %r: %s", text, error)
        return Err(error)
