"""
Local distance-per-degree on the GRS80 ellipsoid.

Each function accepts a latitude in degrees, either as a float or as a numpy array
(evaluated element-wise). Nothing is range-checked; NaN in gives NaN out.
"""

__all__ = [
    'LocalScale', 'km_per_latitude_degree', 'km_per_longitude_degree', 'local_scale',
    'meridional_radius', 'prime_vertical_radius'
]

from typing import NamedTuple, Union

import numpy as np

from faultoffset._const import GRS80_A, GRS80_E2

_FloatOrArray = Union[float, np.ndarray]


class LocalScale(NamedTuple):
    """Kilometres per degree of latitude and longitude, valid near one latitude"""
    km_per_lat_degree: _FloatOrArray
    km_per_lon_degree: _FloatOrArray


def _w(lat_deg: _FloatOrArray) -> _FloatOrArray:
    """sqrt(1 - e^2 sin^2(lat)), the term shared by both radii of curvature"""
    sin_lat = np.sin(np.deg2rad(lat_deg))
    return np.sqrt(1 - GRS80_E2 * sin_lat * sin_lat)


def meridional_radius(lat_deg: _FloatOrArray) -> _FloatOrArray:
    """
    Radius of curvature of the ellipsoid in the north-south (meridian) direction.

    Args:
        lat_deg:
            Latitude, in degrees

    Returns:
        The radius M, in meters
    """
    w = _w(lat_deg)
    return GRS80_A * (1 - GRS80_E2) / (w * w * w)


def prime_vertical_radius(lat_deg: _FloatOrArray) -> _FloatOrArray:
    """
    Radius of curvature of the ellipsoid in the east-west (prime vertical) direction.

    Args:
        lat_deg:
            Latitude, in degrees

    Returns:
        The radius N, in meters
    """
    return GRS80_A / _w(lat_deg)


def km_per_latitude_degree(lat_deg: _FloatOrArray) -> _FloatOrArray:
    """
    Meridian arc length of one degree of latitude, centred on `lat_deg`.

    Smallest at the equator (~110.57 km) and largest at the poles (~111.69 km).

    Args:
        lat_deg:
            Latitude, in degrees

    Returns:
        Kilometres per degree of latitude
    """
    return meridional_radius(lat_deg) * np.pi / 180 / 1000


def km_per_longitude_degree(lat_deg: _FloatOrArray) -> _FloatOrArray:
    """
    Arc length of one degree of longitude along the parallel at `lat_deg`.

    ~111.32 km at the equator, shrinking to zero at the poles.

    Args:
        lat_deg:
            Latitude, in degrees

    Returns:
        Kilometres per degree of longitude
    """
    return prime_vertical_radius(lat_deg) * np.cos(np.deg2rad(lat_deg)) * np.pi / 180 / 1000


def local_scale(lat_deg: _FloatOrArray) -> LocalScale:
    """Both km-per-degree factors at a single latitude"""
    return LocalScale(
        km_per_latitude_degree(lat_deg),
        km_per_longitude_degree(lat_deg),
    )
