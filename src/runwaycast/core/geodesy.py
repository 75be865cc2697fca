"""
This module contains a set of geodesy functions on a spherical Earth model
(radius of 6371 km). All angles are in degrees, all distances are in
kilometers.

Every function accepts floats or numpy arrays of the same shape.

"""

from __future__ import annotations

from typing import Iterable, List, TypeVar

import numpy as np

EARTH_RADIUS = 6371.0  # km

# It is necessary to keep the list[float] because we need indexation later
F = TypeVar("F", float, Iterable[float], List[float])


def distance(lat1: F, lon1: F, lat2: F, lon2: F) -> F:
    """Computes the haversine distance(s) between two points (or arrays of
    points).

    :param lat1: latitude value(s)
    :param lon1: longitude value(s)
    :param lat2: latitude value(s)
    :param lon2: longitude value(s)

    :return: the great-circle distance, in km

    """
    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    dphi = phi2 - phi1
    dlambda = np.radians(lon2) - np.radians(lon1)  # type: ignore
    a = (
        np.sin(dphi / 2) ** 2
        + np.cos(phi1) * np.cos(phi2) * np.sin(dlambda / 2) ** 2
    )
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS * c  # type: ignore


def bearing(lat1: F, lon1: F, lat2: F, lon2: F) -> F:
    """Computes the initial bearing(s) between two points (or arrays of
    points).

    :param lat1: latitude value(s)
    :param lon1: longitude value(s)
    :param lat2: latitude value(s)
    :param lon2: longitude value(s)

    :return: the bearing angle, in degrees within [0, 360), from the first
        point to the second

    """
    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    dlambda = np.radians(lon2) - np.radians(lon1)  # type: ignore
    y = np.sin(dlambda) * np.cos(phi2)
    x = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(
        dlambda
    )
    return np.degrees(np.arctan2(y, x)) % 360  # type: ignore


def cross_track(
    lat: F, lon: F, lat1: F, lon1: F, lat2: F, lon2: F
) -> F:
    """Computes the distance(s) between a point and the great circle going
    through two other points, e.g. the extended centerline of a runway.

    :param lat: latitude value(s) of the point
    :param lon: longitude value(s) of the point
    :param lat1: latitude value(s) of the first point of the great circle
    :param lon1: longitude value(s) of the first point of the great circle
    :param lat2: latitude value(s) of the second point of the great circle
    :param lon2: longitude value(s) of the second point of the great circle

    :return: the (non-negative) cross-track distance, in km

    """
    d13 = distance(lat1, lon1, lat, lon) / EARTH_RADIUS  # type: ignore
    b13 = np.radians(bearing(lat1, lon1, lat, lon))
    b12 = np.radians(bearing(lat1, lon1, lat2, lon2))
    xtd = np.abs(np.arcsin(np.sin(d13) * np.sin(b13 - b12)))
    return xtd * EARTH_RADIUS  # type: ignore


def angle_diff(a: F, b: F) -> F:
    """Computes the signed smallest difference between two angles.

    >>> angle_diff(350, 10)
    -20.0

    :return: the difference ``a - b``, in degrees within [-180, 180]

    """
    diff = (np.asarray(a, dtype=float) - b + 180) % 360 - 180  # type: ignore
    diff = np.where(diff < -180, diff + 360, diff)
    diff = np.where(diff > 180, diff - 360, diff)
    if diff.ndim == 0:
        return float(diff)  # type: ignore
    return diff  # type: ignore
