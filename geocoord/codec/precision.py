"""Precision tokens selecting a coordinate text form."""

from __future__ import annotations

from enum import Enum

from ..config import DEFAULT_PRECISION
from .errors import UnknownFormatSpecifierError


class Precision(Enum):
    """Text forms of a coordinate.

    D, DM and DMS are display forms with hemisphere letters. ISO is the packed
    ISO 6709 form, the only one that ``parse`` accepts back.
    """

    D = "D"
    DM = "DM"
    DMS = "DMS"
    ISO = "ISO"

    @classmethod
    def resolve(cls, token: Precision | str | None) -> Precision:
        """Resolve a precision token, case-insensitively.

        ``None`` and the empty string select the default (DMS).

        Raises:
            UnknownFormatSpecifierError: If the token is not recognized.
        """
        if isinstance(token, cls):
            return token
        if token is None or token == "":
            return cls(DEFAULT_PRECISION)
        if isinstance(token, str):
            try:
                return cls[token.upper()]
            except KeyError:
                pass
        raise UnknownFormatSpecifierError(token)
