"""
Validated entry point for callers holding raw user input (form fields, CLI args).

The functions in faultoffset.offsets trust their inputs. This module checks them
first, so a non-numeric or non-finite value is reported instead of silently
turning into NaN offsets.
"""

__all__ = ['calculate_offsets']

from typing import Annotated

from pydantic import Field, validate_call

from faultoffset.coordinates import GeoPoint
from faultoffset.offsets import OffsetResult, compute_offsets
from faultoffset.utils.logging import LOGGER, warn_once

Latitude = Annotated[float, Field(ge=-90., le=90., allow_inf_nan=False)]
Longitude = Annotated[float, Field(allow_inf_nan=False)]
Bearing = Annotated[float, Field(allow_inf_nan=False)]
Length = Annotated[float, Field(ge=0., allow_inf_nan=False)]


@validate_call
def calculate_offsets(
    origin_lat: Latitude,
    origin_lon: Longitude,
    start_lat: Latitude,
    start_lon: Longitude,
    strike_deg: Bearing,
    length_km: Length,
) -> OffsetResult:
    """
    Validate six numeric inputs and compute the fault start/end offsets.

    Numeric strings (e.g. '35.0') are accepted and parsed. Raises
    pydantic.ValidationError (a ValueError) if any value isn't a finite number, a
    latitude is outside [-90, 90], or the length is negative.

    Args:
        origin_lat:
            Origin latitude, in degrees

        origin_lon:
            Origin longitude, in degrees

        start_lat:
            Fault start latitude, in degrees

        start_lon:
            Fault start longitude, in degrees

        strike_deg:
            Fault strike, in degrees clockwise from North

        length_km:
            Rupture length, in kilometres

    Returns:
        OffsetResult
    """
    if not (-180 <= origin_lon <= 180 and -180 <= start_lon <= 180):
        warn_once(
            'Longitude outside [-180, 180]; longitudes are not normalized and offsets '
            'are computed from raw degree differences.'
        )
    if abs(start_lon - origin_lon) > 180:
        warn_once(
            'Fault start and origin are more than 180 degrees of longitude apart; the '
            'x offset is measured the long way around the globe.'
        )

    origin = GeoPoint(origin_lat, origin_lon)
    fault_start = GeoPoint(start_lat, start_lon)
    LOGGER.debug(
        'Computing offsets: origin=%r start=%r strike=%s length_km=%s',
        origin, fault_start, strike_deg, length_km
    )

    result = compute_offsets(origin, fault_start, strike_deg, length_km)
    LOGGER.debug('Offsets: %r', result)
    return result
