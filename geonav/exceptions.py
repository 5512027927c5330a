"""Exceptions raised by geonav"""

__all__ = ['CoordinateRangeError', 'GeoNavError', 'InvalidCoordinateKind']

from typing import Any, Optional


class GeoNavError(Exception):
    """Base exception for all geonav errors"""


class CoordinateRangeError(GeoNavError, ValueError):
    """
    Raised when a degree, minute, second or decimal degree value falls
    outside the range permitted for its coordinate kind.

    Args:
        argument:
            The name of the offending argument (e.g. 'minutes')

        value:
            The offending value

        message:
            A description of the permitted range
    """

    def __init__(self, argument: str, value: Any, message: Optional[str] = None):
        self.argument = argument
        self.value = value
        super().__init__(message or f'{argument} is out of range: {value!r}')


class InvalidCoordinateKind(GeoNavError, TypeError):
    """Raised when a coordinate kind is unknown or not the kind that was expected"""
