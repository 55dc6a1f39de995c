"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from typing import Tuple, Union

from faultoffset.utils.functions import round_half_up


class GeoPoint:
    """
    Representation of a point on the globe (i.e., a lat/lon pair), in degrees.

    Values are stored exactly as given: no range check and no wrapping across the
    poles or the antimeridian. Offsets are computed from raw degree differences, so
    whatever the caller passes is what the math sees.
    """

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        object.__setattr__(self, '_latitude', float(latitude))
        object.__setattr__(self, '_longitude', float(longitude))

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(cls, lat: Tuple[int, int, float, str], lon: Tuple[int, int, float, str]):
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float), <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float), <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            GeoPoint
        """
        def convert(dms: Tuple[int, int, float, str], quadrants: str):
            if dms[3] not in quadrants:
                raise ValueError(
                    f'Invalid quadrant {dms[3]!r}; expected one of {", ".join(quadrants)}'
                )
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return GeoPoint(convert(lat, 'NS'), convert(lon, 'EW'))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert this point to (latitude, longitude) tuples of
        degrees, minutes, seconds, hemisphere

        Returns:
            converted values as ((degrees, minutes, seconds, hemisphere), ...)
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        return (
            (*convert(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*convert(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple of (latitude, longitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
