"""
Representation of a navigable point on the globe (a latitude/longitude pair)
"""

__all__ = ['GeoPoint']

import re
from typing import Tuple, Union

from geonav.coordinates import AngularCoordinate, Latitude, Longitude
from geonav.exceptions import InvalidCoordinateKind
from geonav.units import DistanceUnit
from geonav.utils.logging import warn_once

_RE_NUMBER_STR = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'
_RE_POINT_WKT = re.compile(
    r'^\s*POINT\s?(?:[ZM]{1,2})?\s?\(\s?'
    r'(' + _RE_NUMBER_STR + r'(?:\s+' + _RE_NUMBER_STR + r'){1,3})'
    r'\s?\)\s*$',
    re.IGNORECASE
)


def _coerce_coordinate(value, cls, argument: str):
    """Converts a value to the coordinate class, or checks its kind if already a coordinate"""
    if value is None:
        raise TypeError(f'{argument} is required')

    if isinstance(value, AngularCoordinate):
        if value.kind is not cls.KIND:
            raise InvalidCoordinateKind(
                f'Expected a {cls.KIND.label} for {argument}, received a {value.kind.label}.'
            )
        return value

    return cls(value)


class GeoPoint:
    """
    A point on the globe, as expressed by a Latitude and a Longitude. Both
    navigation families (great-circle and rhumb-line) are exposed as methods,
    with this point as the source.

    Args:
        latitude:
            A Latitude, or the latitude in decimal degrees

        longitude:
            A Longitude, or the longitude in decimal degrees
    """

    def __init__(
        self,
        latitude: Union[Latitude, AngularCoordinate, float, int, str],
        longitude: Union[Longitude, AngularCoordinate, float, int, str],
    ):
        self._latitude = _coerce_coordinate(latitude, Latitude, 'latitude')
        self._longitude = _coerce_coordinate(longitude, Longitude, 'longitude')

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoPoint):
            return False

        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self) -> int:
        return hash((self.latitude, self.longitude))

    def __repr__(self) -> str:
        return f'<GeoPoint at {self.to_float()}>'

    def __str__(self) -> str:
        return f'{self.latitude}, {self.longitude}'

    @property
    def __geo_interface__(self):
        return {
            'type': 'Point',
            'coordinates': list(self.to_float(reverse=True)),
        }

    @property
    def latitude(self) -> Latitude:
        return self._latitude

    @property
    def longitude(self) -> Longitude:
        return self._longitude

    @classmethod
    def from_wkt(cls, wkt_str: str) -> 'GeoPoint':
        """
        Create a GeoPoint from a WKT point string, e.g. 'POINT (5.4253 40.7486)'.
        Note that WKT orders coordinates as longitude, latitude.

        Z and M values are accepted but discarded.

        Args:
            wkt_str:
                A WKT POINT

        Returns:
            GeoPoint
        """
        _match = _RE_POINT_WKT.match(wkt_str)
        if not _match:
            raise ValueError(f'Invalid WKT Point: {wkt_str}')

        parts = _match.group(1).split()
        if len(parts) > 2:
            warn_once(
                'Z/M values are not supported for navigation and will be ignored.'
            )

        return cls(parts[1], parts[0])

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of decimal degrees (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)

        Returns:
            Tuple[float, float]
        """
        out = (self.latitude.decimal_degrees, self.longitude.decimal_degrees)
        if reverse:
            return out[::-1]

        return out

    def to_wkt(self) -> str:
        """Converts the point to a WKT POINT string"""
        lat, lon = self.to_float()
        return f'POINT ({lon} {lat})'

    def initial_bearing_to(self, destination) -> float:
        """
        The initial bearing (degrees clockwise from north, in [0, 360)) of the
        great-circle path from this point to the destination.

        Args:
            destination:
                A GeoPoint, or a (latitude, longitude) pair

        Returns:
            float
        """
        from geonav.navigation import haversine_bearing  # pylint: disable=import-outside-toplevel
        return haversine_bearing(self, destination)

    def distance_to(
        self,
        destination,
        unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
    ) -> float:
        """
        The great-circle (haversine) distance from this point to the destination.

        Args:
            destination:
                A GeoPoint, or a (latitude, longitude) pair

            unit:
                (Default kilometers) The unit of the returned distance

        Returns:
            float
        """
        from geonav.navigation import haversine_distance  # pylint: disable=import-outside-toplevel
        return haversine_distance(self, destination, unit)

    def find_destination(
        self,
        bearing: float,
        distance: float,
        unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
    ) -> 'GeoPoint':
        """
        The point reached by travelling the given distance along the great
        circle leaving this point at the given initial bearing.

        Args:
            bearing:
                The initial bearing, in degrees clockwise from north

            distance:
                The distance to travel

            unit:
                (Default kilometers) The unit of the distance

        Returns:
            GeoPoint
        """
        from geonav.navigation import haversine_destination  # pylint: disable=import-outside-toplevel
        return haversine_destination(self, bearing, distance, unit)

    def rhumb_bearing_to(self, destination) -> float:
        """The constant bearing of the rhumb line from this point to the destination"""
        from geonav.navigation import rhumb_bearing  # pylint: disable=import-outside-toplevel
        return rhumb_bearing(self, destination)

    def rhumb_distance_to(
        self,
        destination,
        unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
    ) -> float:
        """The rhumb-line distance from this point to the destination"""
        from geonav.navigation import rhumb_distance  # pylint: disable=import-outside-toplevel
        return rhumb_distance(self, destination, unit)

    def find_rhumb_destination(
        self,
        bearing: float,
        distance: float,
        unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
    ) -> 'GeoPoint':
        """The point reached by travelling the given distance at a constant bearing"""
        from geonav.navigation import rhumb_destination  # pylint: disable=import-outside-toplevel
        return rhumb_destination(self, bearing, distance, unit)
