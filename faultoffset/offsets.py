"""
Converts a fault rupture (start point, strike, length) into planar x/y offsets, in
kilometres, around a reference origin.

x is eastward and y is northward. Each point is scaled with the ellipsoid's local
km-per-degree at the midpoint latitude between that point and the origin, so the
start and end offsets generally use different scale factors. Their frames are
therefore not exactly consistent with one another; this is intended.
"""

__all__ = ['OffsetResult', 'compute_offsets', 'compute_offsets_array', 'relative_offset']

from typing import NamedTuple, Tuple, Union

import numpy as np

from faultoffset.coordinates import GeoPoint
from faultoffset.ellipsoid import local_scale
from faultoffset.projection import destination, project_destination

_FloatOrArray = Union[float, np.ndarray]


class OffsetResult(NamedTuple):
    """Offsets of the fault start and end points from the origin, in kilometres"""
    x_start_km: _FloatOrArray
    y_start_km: _FloatOrArray
    x_end_km: _FloatOrArray
    y_end_km: _FloatOrArray

    @property
    def start(self) -> Tuple[_FloatOrArray, _FloatOrArray]:
        """(x, y) of the fault start"""
        return self.x_start_km, self.y_start_km

    @property
    def end(self) -> Tuple[_FloatOrArray, _FloatOrArray]:
        """(x, y) of the fault end"""
        return self.x_end_km, self.y_end_km


def _offset(
    lat_deg: _FloatOrArray,
    lon_deg: _FloatOrArray,
    origin_lat_deg: _FloatOrArray,
    origin_lon_deg: _FloatOrArray,
) -> Tuple[_FloatOrArray, _FloatOrArray]:
    scale = local_scale((lat_deg + origin_lat_deg) / 2)
    x = np.subtract(lon_deg, origin_lon_deg) * scale.km_per_lon_degree
    y = np.subtract(lat_deg, origin_lat_deg) * scale.km_per_lat_degree
    return x, y


def relative_offset(point: GeoPoint, origin: GeoPoint) -> Tuple[float, float]:
    """
    Planar offset of a point from the origin, linearized at their midpoint latitude.

    Args:
        point:
            The point to locate

        origin:
            The reference origin

    Returns:
        (x, y) in kilometres
    """
    x, y = _offset(point.latitude, point.longitude, origin.latitude, origin.longitude)
    return float(x), float(y)


def compute_offsets(
    origin: GeoPoint,
    fault_start: GeoPoint,
    strike_deg: float,
    length_km: float,
) -> OffsetResult:
    """
    Locate both ends of a fault rupture relative to an origin.

    The rupture end is found by travelling `length_km` from `fault_start` along
    `strike_deg` on a sphere. Nothing is validated here; NaN inputs produce NaN
    offsets.

    Args:
        origin:
            The reference origin of the x/y frame

        fault_start:
            Where the rupture starts

        strike_deg:
            Strike of the fault, in degrees clockwise from North

        length_km:
            Rupture length, in kilometres

    Returns:
        OffsetResult
    """
    fault_end = project_destination(fault_start, strike_deg, length_km)
    x_start, y_start = relative_offset(fault_start, origin)
    x_end, y_end = relative_offset(fault_end, origin)
    return OffsetResult(x_start, y_start, x_end, y_end)


def compute_offsets_array(
    origin_lat_deg: _FloatOrArray,
    origin_lon_deg: _FloatOrArray,
    start_lat_deg: _FloatOrArray,
    start_lon_deg: _FloatOrArray,
    strike_deg: _FloatOrArray,
    length_km: _FloatOrArray,
) -> OffsetResult:
    """
    Element-wise compute_offsets() over numpy-broadcastable inputs, e.g. to sweep a
    range of strike angles for one fault. Each element is an independent
    single-segment rupture.

    Returns:
        OffsetResult of numpy arrays
    """
    origin_lat_deg, origin_lon_deg, start_lat_deg, start_lon_deg, strike_deg, length_km = (
        np.broadcast_arrays(
            *(np.asarray(x, dtype=float) for x in (
                origin_lat_deg, origin_lon_deg, start_lat_deg, start_lon_deg,
                strike_deg, length_km
            ))
        )
    )
    end_lat, end_lon = destination(start_lat_deg, start_lon_deg, strike_deg, length_km)
    x_start, y_start = _offset(start_lat_deg, start_lon_deg, origin_lat_deg, origin_lon_deg)
    x_end, y_end = _offset(end_lat, end_lon, origin_lat_deg, origin_lon_deg)
    return OffsetResult(x_start, y_start, x_end, y_end)
