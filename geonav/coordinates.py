"""
Representation of a single angular coordinate (a latitude or a longitude)
"""

__all__ = ['AngularCoordinate', 'CoordinateKind', 'Latitude', 'Longitude']

from enum import Enum
from functools import total_ordering
import math
from typing import Optional, Tuple, Union

from geonav.exceptions import CoordinateRangeError, InvalidCoordinateKind
from geonav.utils.logging import warn_once


class CoordinateKind(Enum):
    """
    The kind of an angular coordinate. Each kind carries its degree bounds and
    the direction labels used for (non-negative, negative) degrees.

    Note that longitudes label non-negative degrees as 'W' and negative
    degrees as 'E'.
    """

    LATITUDE = ('latitude', 90, ('N', 'S'))
    LONGITUDE = ('longitude', 180, ('W', 'E'))

    def __init__(self, label: str, max_degrees: int, directions: Tuple[str, str]):
        self.label = label
        self.max_degrees = max_degrees
        self.min_degrees = -max_degrees
        self.directions = directions

    def direction(self, degrees: int) -> str:
        """The direction label for a whole degree value"""
        return self.directions[0] if degrees >= 0 else self.directions[1]


def _validate_kind(kind) -> CoordinateKind:
    if not isinstance(kind, CoordinateKind):
        raise InvalidCoordinateKind(f'The coordinate kind {kind!r} is unknown.')
    return kind


def _as_int(value, argument: str) -> int:
    """Coerces a DMS component to int, truncating (and warning about) fractions"""
    _value = int(value)
    if _value != float(value):
        warn_once(
            f'Fractional DMS {argument} are truncated to whole numbers. '
            '(this warning will not repeat)'
        )
    return _value


@total_ordering
class AngularCoordinate:
    """
    A latitude or longitude, held both as degrees/minutes/seconds and as
    decimal degrees. Values are validated on construction and never change
    afterwards.

    Equality and ordering consider the (degrees, minutes, seconds, kind)
    representation only; two coordinates whose decimal degrees differ by less
    than one arc-second therefore compare equal.

    Args:
        decimal_degrees:
            The coordinate value, in decimal degrees

        kind:
            The CoordinateKind of the coordinate
    """

    def __init__(self, decimal_degrees: Union[float, int, str], kind: CoordinateKind):
        kind = _validate_kind(kind)
        value = float(decimal_degrees)
        if not kind.min_degrees <= value <= kind.max_degrees:
            raise CoordinateRangeError(
                'decimal_degrees',
                value,
                f'The decimal degrees of a {kind.label} cannot be greater than '
                f'{kind.max_degrees} or less than {kind.min_degrees}.'
            )

        # Each component is floored/truncated, never rounded
        degrees = math.floor(value)
        frac = value - degrees
        if frac >= 1:
            # value - floor(value) rounds up to 1.0 for tiny negative values
            degrees, frac = degrees + 1, 0.

        minutes = math.floor(60 * frac)
        seconds = min(int((3600 * frac) - (60 * minutes)), 59)

        self._set(degrees, minutes, seconds, value, kind)

    def _set(self, degrees: int, minutes: int, seconds: int, decimal_degrees: float, kind):
        self._degrees = degrees
        self._minutes = minutes
        self._seconds = seconds
        self._decimal_degrees = decimal_degrees
        self._kind = kind

    @classmethod
    def _from_dms(cls, degrees: int, minutes: int, seconds: int, kind: CoordinateKind):
        kind = _validate_kind(kind)
        degrees = _as_int(degrees, 'degrees')
        minutes = _as_int(minutes, 'minutes')
        seconds = _as_int(seconds, 'seconds')

        if not 0 <= minutes < 60:
            raise CoordinateRangeError(
                'minutes', minutes, 'Minutes must be less than 60 and cannot be negative.'
            )

        if not 0 <= seconds < 60:
            raise CoordinateRangeError(
                'seconds', seconds, 'Seconds must be less than 60 and cannot be negative.'
            )

        if (
            not kind.min_degrees <= degrees <= kind.max_degrees or
            (abs(degrees) == kind.max_degrees and (minutes != 0 or seconds != 0))
        ):
            raise CoordinateRangeError(
                'degrees',
                (degrees, minutes, seconds),
                f'A {kind.label} must be between {kind.min_degrees} and '
                f'{kind.max_degrees} degrees.'
            )

        coord = cls.__new__(cls)
        coord._set(  # pylint: disable=protected-access
            degrees, minutes, seconds, degrees + minutes / 60 + seconds / 3600, kind
        )
        return coord

    def __eq__(self, other) -> bool:
        if not isinstance(other, AngularCoordinate):
            return False

        return self._key() == other._key()

    def __lt__(self, other) -> bool:
        if not isinstance(other, AngularCoordinate):
            return NotImplemented

        if self.kind is not other.kind:
            raise TypeError(
                f'Cannot order a {self.kind.label} against a {other.kind.label}.'
            )

        return self._key()[:3] < other._key()[:3]

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self} ({self.decimal_degrees})>'

    def __str__(self) -> str:
        return f'{self.degrees}° {self.minutes}\' {self.seconds}" {self.direction}'

    def _key(self) -> Tuple[int, int, int, CoordinateKind]:
        return self._degrees, self._minutes, self._seconds, self._kind

    @property
    def decimal_degrees(self) -> float:
        """The coordinate value in decimal degrees"""
        return self._decimal_degrees

    @property
    def degrees(self) -> int:
        return self._degrees

    @property
    def direction(self) -> str:
        """The direction label (N/S for latitudes, W/E for longitudes)"""
        return self._kind.direction(self._degrees)

    @property
    def kind(self) -> CoordinateKind:
        return self._kind

    @property
    def max_degrees(self) -> int:
        return self._kind.max_degrees

    @property
    def min_degrees(self) -> int:
        return self._kind.min_degrees

    @property
    def minutes(self) -> int:
        return self._minutes

    @property
    def radians(self) -> float:
        """The coordinate value in radians"""
        return math.radians(self._decimal_degrees)

    @property
    def seconds(self) -> int:
        return self._seconds

    def to_dms(self) -> Tuple[int, int, int, str]:
        """
        Converts the coordinate to a tuple of degrees, minutes, seconds, direction

        Returns:
            (degrees, minutes, seconds, direction)
        """
        return self.degrees, self.minutes, self.seconds, self.direction

    def to_float(self) -> float:
        """The coordinate value in decimal degrees"""
        return self.decimal_degrees


class _KindedCoordinate(AngularCoordinate):
    """An AngularCoordinate whose kind is fixed by the class"""

    KIND: Optional[CoordinateKind] = None

    def __init__(self, decimal_degrees: Union[float, int, str]):
        super().__init__(decimal_degrees, self.KIND)

    @classmethod
    def from_decimal_degrees(cls, decimal_degrees: Union[float, int, str]):
        """
        Creates the coordinate from a value in decimal degrees.

        Args:
            decimal_degrees:
                The value, which must lie within the bounds of the coordinate kind

        Returns:
            The coordinate
        """
        return cls(decimal_degrees)

    @classmethod
    def from_dms(cls, degrees: int, minutes: int = 0, seconds: int = 0):
        """
        Creates the coordinate from degrees, minutes and seconds. The decimal
        degrees are computed as degrees + minutes / 60 + seconds / 3600.

        At the extreme degree values (e.g. 90 for a latitude) both minutes and
        seconds must be zero.

        Args:
            degrees:
                The signed whole degrees

            minutes:
                Whole minutes, in [0, 60)

            seconds:
                Whole seconds, in [0, 60)

        Returns:
            The coordinate
        """
        return cls._from_dms(degrees, minutes, seconds, cls.KIND)


class Latitude(_KindedCoordinate):
    """A latitude, in [-90, 90] degrees"""

    KIND = CoordinateKind.LATITUDE


class Longitude(_KindedCoordinate):
    """A longitude, in [-180, 180] degrees"""

    KIND = CoordinateKind.LONGITUDE
