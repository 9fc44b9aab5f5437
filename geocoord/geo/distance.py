"""Great-circle distance between coordinates.

Distances use the haversine formula on a sphere whose size is fixed by the
nautical mile: one minute of arc along a great circle is 1852 m, so a central
angle of ``d`` radians is ``d * 180 * 60 * 1852 / pi`` meters.

Longitudes are negated (positive West) before the difference is taken, as in
the aviation formulary this is taken from. Both operands get the same
treatment, so the negation cancels and does not change the result.

Functions:
    haversine: Distance between two coordinates.
    distance_matrix: Pairwise distances between two coordinate sequences.
    path_length: Summed distance along a coordinate sequence.

Example:
    >>> from geocoord import Coordinate
    >>> haversine(Coordinate(0, 0), Coordinate(1, 0))  # one degree of latitude
    111120.0
"""

from __future__ import annotations

from collections.abc import Sequence
from math import asin, cos, sin, sqrt

import numpy as np

from ..config import METERS_PER_RADIAN
from ..unit import Meter
from .coordinate import Coordinate


def _central_angle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    h = sin((lat1 - lat2) / 2) ** 2 + cos(lat1) * cos(lat2) * sin((lon1 - lon2) / 2) ** 2
    return 2 * asin(sqrt(min(1.0, max(0.0, h))))


def haversine(a: Coordinate, b: Coordinate) -> Meter:
    """Calculate the great-circle distance between two coordinates.

    Args:
        a (Coordinate): First point.
        b (Coordinate): Second point.

    Returns:
        Meter: Distance in meters. Zero for identical points, and the same
        value whichever point comes first.
    """
    d = _central_angle(
        a.latitude.radians,
        -a.longitude.radians,
        b.latitude.radians,
        -b.longitude.radians,
    )
    return Meter(d * METERS_PER_RADIAN)


def _radians(coords: Sequence[Coordinate]) -> tuple[np.ndarray, np.ndarray]:
    lat = np.array([c.latitude.radians for c in coords], dtype=np.float64)
    lon = -np.array([c.longitude.radians for c in coords], dtype=np.float64)
    return lat, lon


def distance_matrix(
    origins: Sequence[Coordinate], targets: Sequence[Coordinate]
) -> np.ndarray:
    """Calculate distances between every origin and every target.

    Vectorized with NumPy, using the same formula as ``haversine``.

    Args:
        origins: Sequence of n coordinates.
        targets: Sequence of m coordinates.

    Returns:
        np.ndarray: (n, m) array where element [i, j] is the distance in
        meters from origins[i] to targets[j].
    """
    lat1, lon1 = _radians(origins)
    lat2, lon2 = _radians(targets)
    lat1, lon1 = lat1[:, np.newaxis], lon1[:, np.newaxis]
    lat2, lon2 = lat2[np.newaxis, :], lon2[np.newaxis, :]

    h = np.sin((lat1 - lat2) / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin((lon1 - lon2) / 2) ** 2
    return 2 * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0))) * METERS_PER_RADIAN


def path_length(coords: Sequence[Coordinate]) -> Meter:
    """Sum the great-circle distances between consecutive coordinates.

    Sequences with fewer than two points have zero length.
    """
    if len(coords) < 2:
        return Meter(0.0)
    lat, lon = _radians(coords)
    h = np.sin(np.diff(lat) / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(np.diff(lon) / 2) ** 2
    legs = 2 * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0)))
    return Meter(float(legs.sum()) * METERS_PER_RADIAN)
