"""Global configuration and numeric constants for the coordinate codec.

This module centralizes the numeric conventions shared by every part of the
package: the accepted input types, the precision at which angular and length
quantities are stored, and the fixed constants of the ISO 6709 text format.

There is no runtime configuration. Everything here is a module-level constant
that the unit system, the geographic types and the codecs import directly.

Type Definitions:
    BASE_TYPE: Union type of scalar inputs accepted by the unit constructors
               and by unit scaling. NumPy scalars such as float32 are included.

Storage:
    STORAGE_DTYPE: Every stored quantity is rounded through this NumPy scalar
                   type. Single precision keeps degrees, minutes and whole
                   seconds exact in the integral part of an arc-second value
                   while fractional seconds carry the remaining precision.

Example:
    >>> from geocoord.config import STORAGE_DTYPE, ARCSEC_PER_DEGREE
    >>> float(STORAGE_DTYPE(1.5 * ARCSEC_PER_DEGREE))
    5400.0
"""

from math import pi

import numpy as np

BASE_TYPE = int | float | np.floating

STORAGE_DTYPE = np.float32

# Angular resolution
ARCSEC_PER_DEGREE = 3600.0
ARCSEC_PER_MINUTE = 60.0
ARCSEC_PER_RADIAN = 180.0 * ARCSEC_PER_DEGREE / pi

LATITUDE_LIMIT_DEG = 90.0
LONGITUDE_LIMIT_DEG = 180.0

# ISO 6709 record layout
DEFAULT_PRECISION = "DMS"
MIN_RECORD_LENGTH = 18
FIELD_TERMINATOR = "/"
SIGN_CHARACTERS = "+-"

# One minute of arc along a great circle is one nautical mile
METERS_PER_NAUTICAL_MILE = 1852.0
METERS_PER_RADIAN = 180.0 * 60.0 * METERS_PER_NAUTICAL_MILE / pi
