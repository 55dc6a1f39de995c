"""
Fault rupture offsets: converts a fault's start point, strike and length into
planar x/y kilometre offsets around a reference origin.
"""

from faultoffset._version import __version__  # noqa: F401
from faultoffset.utils.logging import LOGGER
from faultoffset.coordinates import GeoPoint
from faultoffset.ellipsoid import (
    LocalScale, km_per_latitude_degree, km_per_longitude_degree, local_scale
)
from faultoffset.projection import (
    great_circle_distance_km, initial_bearing, project_destination
)
from faultoffset.offsets import (
    OffsetResult, compute_offsets, compute_offsets_array, relative_offset
)
from faultoffset.validation import calculate_offsets

__all__ = [
    'GeoPoint',
    'LocalScale',
    'OffsetResult',
    'calculate_offsets',
    'compute_offsets',
    'compute_offsets_array',
    'great_circle_distance_km',
    'initial_bearing',
    'km_per_latitude_degree',
    'km_per_longitude_degree',
    'local_scale',
    'project_destination',
    'relative_offset',
    'LOGGER',
]
