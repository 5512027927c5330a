"""
Great-circle (haversine) and rhumb-line navigation on a spherical Earth.

Every function accepts its points either as GeoPoints or as
(latitude, longitude) pairs, in decimal degrees or as Latitude/Longitude
objects. All angles are converted to radians on the way in and back to
degrees on the way out.

Destination points from both families have their longitude wrapped into
[-180, 180).
"""

__all__ = [
    'as_geopoint', 'degrees_to_radians', 'radians_to_degrees',
    'haversine_bearing', 'haversine_destination', 'haversine_distance',
    'rhumb_bearing', 'rhumb_destination', 'rhumb_distance',
]

import math
from typing import Sequence, Union

from geonav.coordinates import Latitude
from geonav.structures import GeoPoint
from geonav.units import DistanceUnit, arc_length, earth_radius

PointLike = Union[GeoPoint, Sequence]

# Below this, the change in Mercator latitude is treated as zero (E-W travel)
_EPSILON = 1e-12


def as_geopoint(point: PointLike) -> GeoPoint:
    """
    Coerces a point argument to a GeoPoint.

    Args:
        point:
            A GeoPoint, or a (latitude, longitude) pair

    Returns:
        GeoPoint
    """
    if isinstance(point, GeoPoint):
        return point

    try:
        if isinstance(point, (str, bytes)):
            raise TypeError
        latitude, longitude = point
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f'Expected a GeoPoint or a (latitude, longitude) pair, received {point!r}'
        ) from exc

    return GeoPoint(latitude, longitude)


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def radians_to_degrees(radians: float) -> float:
    return radians * (180 / math.pi)


def _normalize_longitude(longitude: float) -> float:
    """Wraps a longitude in degrees into [-180, 180)"""
    return ((longitude + 540) % 360) - 180


def _mercator_latitude(phi: float) -> float:
    """
    The isometric (Mercator) latitude ln(tan(pi/4 + phi/2)), which tends to
    -inf at the south pole.
    """
    _tan = math.tan(math.pi / 4 + phi / 2)
    if _tan <= 0:
        return -math.inf

    return math.log(_tan)


def _mercator_delta(phi1: float, phi2: float) -> float:
    """The change in Mercator latitude from phi1 to phi2"""
    if phi1 == phi2:
        return 0.

    return _mercator_latitude(phi2) - _mercator_latitude(phi1)


# -------------------------------------------------------------------------
# Haversine (great circle)
# -------------------------------------------------------------------------

def haversine_bearing(source: PointLike, destination: PointLike) -> float:
    """
    Calculate the initial bearing of the great-circle path between two points.

    Args:
        source:
            The start point

        destination:
            The finish point

    Returns:
        (float) the bearing in degrees, in [0, 360)
    """
    source, destination = as_geopoint(source), as_geopoint(destination)

    lat1 = degrees_to_radians(source.latitude.decimal_degrees)
    lat2 = degrees_to_radians(destination.latitude.decimal_degrees)
    d_lon = (
        degrees_to_radians(destination.longitude.decimal_degrees) -
        degrees_to_radians(source.longitude.decimal_degrees)
    )

    y = math.cos(lat2) * math.sin(d_lon)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return (radians_to_degrees(math.atan2(y, x)) + 360) % 360


def haversine_distance(
    source: PointLike,
    destination: PointLike,
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
) -> float:
    """
    Calculate the great-circle distance between two points using the
    Haversine formula.

    Args:
        source:
            A point

        destination:
            A second point

        unit:
            (Default kilometers) The unit of the returned distance

    Returns:
        (float) the distance
    """
    source, destination = as_geopoint(source), as_geopoint(destination)

    lat1 = degrees_to_radians(source.latitude.decimal_degrees)
    lat2 = degrees_to_radians(destination.latitude.decimal_degrees)
    d_lat = degrees_to_radians(
        destination.latitude.decimal_degrees - source.latitude.decimal_degrees
    )
    d_lon = degrees_to_radians(
        destination.longitude.decimal_degrees - source.longitude.decimal_degrees
    )

    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2)
    a = min(a, 1.)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return arc_length(c, unit)


def haversine_destination(
    source: PointLike,
    bearing: float,
    distance: float,
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
) -> GeoPoint:
    """
    Given a start point, an initial bearing (in degrees clockwise from North)
    and a distance of travel along a great circle, returns the finish point.

    Args:
        source:
            The starting point

        bearing:
            The initial bearing, in degrees

        distance:
            The amount of movement

        unit:
            (Default kilometers) The unit of the distance

    Returns:
        GeoPoint
    """
    source = as_geopoint(source)
    ang_dist = distance / earth_radius(unit)

    lat1 = degrees_to_radians(source.latitude.decimal_degrees)
    lon1 = degrees_to_radians(source.longitude.decimal_degrees)
    theta = degrees_to_radians(bearing)

    sin_lat2 = (
        math.sin(lat1) * math.cos(ang_dist) +
        math.cos(lat1) * math.sin(ang_dist) * math.cos(theta)
    )
    lat2 = radians_to_degrees(math.asin(max(-1., min(1., sin_lat2))))
    lon2 = radians_to_degrees(
        lon1 + math.atan2(
            math.sin(theta) * math.sin(ang_dist) * math.cos(lat1),
            math.cos(ang_dist) - math.sin(lat1) * math.sin(degrees_to_radians(lat2))
        )
    )

    return GeoPoint(lat2, _normalize_longitude(lon2))


# -------------------------------------------------------------------------
# Rhumb line (loxodrome)
# -------------------------------------------------------------------------

def rhumb_bearing(source: PointLike, destination: PointLike) -> float:
    """
    Calculate the constant bearing of the rhumb line between two points.

    Args:
        source:
            The start point

        destination:
            The finish point

    Returns:
        (float) the bearing in degrees, in [0, 360)
    """
    source, destination = as_geopoint(source), as_geopoint(destination)

    lat1 = degrees_to_radians(source.latitude.decimal_degrees)
    lat2 = degrees_to_radians(destination.latitude.decimal_degrees)
    d_lon = degrees_to_radians(
        destination.longitude.decimal_degrees - source.longitude.decimal_degrees
    )
    d_psi = _mercator_delta(lat1, lat2)

    # Take the shorter way around across the antimeridian
    if abs(d_lon) > math.pi:
        d_lon = -(2 * math.pi - d_lon) if d_lon > 0 else 2 * math.pi + d_lon

    return (radians_to_degrees(math.atan2(d_lon, d_psi)) + 360) % 360


def rhumb_distance(
    source: PointLike,
    destination: PointLike,
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
) -> float:
    """
    Calculate the distance between two points along their rhumb line.

    Args:
        source:
            A point

        destination:
            A second point

        unit:
            (Default kilometers) The unit of the returned distance

    Returns:
        (float) the distance
    """
    source, destination = as_geopoint(source), as_geopoint(destination)

    lat1 = degrees_to_radians(source.latitude.decimal_degrees)
    lat2 = degrees_to_radians(destination.latitude.decimal_degrees)
    d_lat = degrees_to_radians(
        destination.latitude.decimal_degrees - source.latitude.decimal_degrees
    )
    d_lon = degrees_to_radians(
        abs(destination.longitude.decimal_degrees - source.longitude.decimal_degrees)
    )
    d_psi = _mercator_delta(lat1, lat2)

    # E-W lines have no change in Mercator latitude
    q = d_lat / d_psi if abs(d_psi) > _EPSILON else math.cos(lat1)

    if d_lon > math.pi:
        d_lon = 2 * math.pi - d_lon

    return arc_length(math.sqrt(d_lat ** 2 + q ** 2 * d_lon ** 2), unit)


def rhumb_destination(
    source: PointLike,
    bearing: float,
    distance: float,
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS
) -> GeoPoint:
    """
    Given a start point, a constant bearing (in degrees clockwise from North)
    and a distance of travel along the rhumb line, returns the finish point.

    Raises CoordinateRangeError if the path would carry past a pole.

    Args:
        source:
            The starting point

        bearing:
            The bearing, in degrees

        distance:
            The amount of movement

        unit:
            (Default kilometers) The unit of the distance

    Returns:
        GeoPoint
    """
    source = as_geopoint(source)
    ang_dist = distance / earth_radius(unit)

    lat1 = degrees_to_radians(source.latitude.decimal_degrees)
    lon1 = degrees_to_radians(source.longitude.decimal_degrees)
    theta = degrees_to_radians(bearing)

    lat2 = lat1 + ang_dist * math.cos(theta)
    latitude = Latitude(radians_to_degrees(lat2))

    d_psi = _mercator_delta(lat1, lat2)
    q = (lat2 - lat1) / d_psi if abs(d_psi) > _EPSILON else math.cos(lat1)

    # Longitude is undefined at the poles
    d_lon = ang_dist * math.sin(theta) / q if q else 0.
    lon2 = radians_to_degrees(lon1 + d_lon)

    return GeoPoint(latitude, _normalize_longitude(lon2))
