"""
Module for distance units and the Earth radius expressed in each
"""
__all__ = ['DistanceUnit', 'arc_length', 'convert_distance', 'earth_radius']

from enum import Enum
from typing import Union

from geonav._const import EARTH_RADIUS_KILOMETERS, EARTH_RADIUS_METERS, EARTH_RADIUS_MILES


class DistanceUnit(str, Enum):
    """The units in which navigation distances may be expressed"""

    MILES = 'mi'
    METERS = 'm'
    KILOMETERS = 'km'

    @classmethod
    def parse(cls, unit: Union['DistanceUnit', str]) -> 'DistanceUnit':
        """
        Normalizes a unit to a DistanceUnit member.

        Args:
            unit:
                A DistanceUnit, or its abbreviation ('mi', 'm', 'km') or
                name ('miles', 'meters', 'kilometers'), case-insensitive

        Returns:
            DistanceUnit
        """
        if isinstance(unit, DistanceUnit):
            return unit

        if isinstance(unit, str):
            _unit = unit.strip().lower()
            for member in cls:
                if _unit in (member.value, member.name.lower()):
                    return member

        raise ValueError(
            f"Unknown distance unit {unit!r}. Options: {[x.value for x in cls]}"
        )


_EARTH_RADII = {
    DistanceUnit.MILES: EARTH_RADIUS_MILES,
    DistanceUnit.METERS: EARTH_RADIUS_METERS,
    DistanceUnit.KILOMETERS: EARTH_RADIUS_KILOMETERS,
}


def earth_radius(unit: Union[DistanceUnit, str]) -> float:
    """
    The mean Earth radius used by the spherical model, in the requested unit.

    Args:
        unit (Union[DistanceUnit, str]): The unit of distance

    Returns:
        float: The radius
    """
    return _EARTH_RADII[DistanceUnit.parse(unit)]


# Meters are measured on the kilometer radius and then scaled
_ARC_SCALES = {
    DistanceUnit.MILES: (EARTH_RADIUS_MILES, 1.),
    DistanceUnit.METERS: (EARTH_RADIUS_KILOMETERS, 1000.),
    DistanceUnit.KILOMETERS: (EARTH_RADIUS_KILOMETERS, 1.),
}


def arc_length(angle: float, unit: Union[DistanceUnit, str]) -> float:
    """
    The length of an arc on the sphere, in the requested unit. A length in
    meters is exactly 1000 times the same length in kilometers.

    Args:
        angle (float): The central angle, in radians
        unit (Union[DistanceUnit, str]): The unit of distance

    Returns:
        float: The arc length
    """
    radius, scale = _ARC_SCALES[DistanceUnit.parse(unit)]
    return (angle * radius) * scale


def convert_distance(
    distance: float,
    from_unit: Union[DistanceUnit, str],
    to_unit: Union[DistanceUnit, str]
) -> float:
    """
    Converts a distance between units using the ratio of the Earth radii, so
    that a converted distance spans the same arc on the sphere.

    Args:
        distance (float): The distance value.
        from_unit (Union[DistanceUnit, str]): The unit the distance is in.
        to_unit (Union[DistanceUnit, str]): The unit to convert to.

    Returns:
        float: The distance in the target unit.
    """
    from_unit, to_unit = DistanceUnit.parse(from_unit), DistanceUnit.parse(to_unit)
    if from_unit is to_unit:
        return distance

    return distance * earth_radius(to_unit) / earth_radius(from_unit)
