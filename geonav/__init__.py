
from geonav._version import __version__  # noqa: F401
from geonav.utils.logging import LOGGER
from geonav.exceptions import CoordinateRangeError, GeoNavError, InvalidCoordinateKind
from geonav.coordinates import AngularCoordinate, CoordinateKind, Latitude, Longitude
from geonav.units import DistanceUnit
from geonav.structures import GeoPoint
from geonav.navigation import (
    haversine_bearing, haversine_destination, haversine_distance,
    rhumb_bearing, rhumb_destination, rhumb_distance
)

__all__ = [
    'AngularCoordinate',
    'CoordinateKind',
    'CoordinateRangeError',
    'DistanceUnit',
    'GeoNavError',
    'GeoPoint',
    'InvalidCoordinateKind',
    'Latitude',
    'Longitude',
    'haversine_bearing',
    'haversine_destination',
    'haversine_distance',
    'rhumb_bearing',
    'rhumb_destination',
    'rhumb_distance',
    'LOGGER',
]
