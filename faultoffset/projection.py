"""
Spherical (great circle) calculations on a sphere of radius EARTH_RADIUS_KM.

Note that this sphere is not the GRS80 ellipsoid used in faultoffset.ellipsoid for
local scale. Both models are used together on purpose; results are calibrated to
this combination.
"""

__all__ = [
    'destination', 'great_circle_distance_km', 'initial_bearing', 'project_destination'
]

from typing import Tuple, Union

import numpy as np

from faultoffset._const import EARTH_RADIUS_KM
from faultoffset.coordinates import GeoPoint

_FloatOrArray = Union[float, np.ndarray]


def destination(
    lat_deg: _FloatOrArray,
    lon_deg: _FloatOrArray,
    bearing_deg: _FloatOrArray,
    distance_km: _FloatOrArray,
) -> Tuple[_FloatOrArray, _FloatOrArray]:
    """
    Given a start location, a direction of travel (in degrees clockwise from North), and
    a distance of travel, returns the finish location. Inputs may be floats or
    broadcastable numpy arrays.

    The resulting longitude is not wrapped into [-180, 180].

    Args:
        lat_deg:
            Start latitude, in degrees

        lon_deg:
            Start longitude, in degrees

        bearing_deg:
            The angle of heading, in degrees

        distance_km:
            The amount of movement, in kilometres

    Returns:
        (latitude, longitude) of the finish location, in degrees
    """
    lat1 = np.deg2rad(lat_deg)
    lon1 = np.deg2rad(lon_deg)
    bearing_rad = np.deg2rad(bearing_deg)

    ang_dist = np.divide(distance_km, EARTH_RADIUS_KM)

    lat2 = np.arcsin(
        np.sin(lat1) * np.cos(ang_dist)
        + np.cos(lat1) * np.sin(ang_dist) * np.cos(bearing_rad)
    )
    lon2 = lon1 + np.arctan2(
        np.sin(bearing_rad) * np.sin(ang_dist) * np.cos(lat1),
        np.cos(ang_dist) - np.sin(lat1) * np.sin(lat2),
    )

    return np.rad2deg(lat2), np.rad2deg(lon2)


def project_destination(start: GeoPoint, bearing_deg: float, distance_km: float) -> GeoPoint:
    """
    Project a point along a bearing.

    Args:
        start:
            The starting location

        bearing_deg:
            The angle of heading, in degrees clockwise from North

        distance_km:
            The amount of movement, in kilometres

    Returns:
        GeoPoint
    """
    lat, lon = destination(start.latitude, start.longitude, bearing_deg, distance_km)
    return GeoPoint(lat, lon)


def initial_bearing(start: GeoPoint, end: GeoPoint) -> float:
    """
    Calculate the initial bearing from start to end, in degrees [0, 360).

    Args:
        start:
            The start point

        end:
            The finish point

    Returns:
        (float) the bearing in degrees
    """
    lat1, lon1 = np.deg2rad(start.latitude), np.deg2rad(start.longitude)
    lat2, lon2 = np.deg2rad(end.latitude), np.deg2rad(end.longitude)

    dlon = lon2 - lon1

    y = np.sin(dlon) * np.cos(lat2)
    x = np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)

    return float((np.rad2deg(np.arctan2(y, x)) + 360) % 360)


def great_circle_distance_km(start: GeoPoint, end: GeoPoint) -> float:
    """
    Calculate the Haversine distance in km between two points

    Args:
        start:
            A point

        end:
            A second point

    Returns:
        (float) the distance in kilometres
    """
    lat1, lon1 = np.deg2rad(start.latitude), np.deg2rad(start.longitude)
    lat2, lon2 = np.deg2rad(end.latitude), np.deg2rad(end.longitude)

    d_lat, d_lon = lat2 - lat1, lon2 - lon1
    var1 = np.sin(d_lat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(d_lon / 2) ** 2

    return float(EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(var1), np.sqrt(1 - var1)))
