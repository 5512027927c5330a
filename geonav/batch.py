"""
Array-returning conveniences for measuring many points at once. Every entry
is computed by the corresponding single-pair function in geonav.navigation.
"""

__all__ = ['distance_matrix', 'distances_from', 'nearest']

from typing import Callable, Iterable, Literal, Tuple, Union

import numpy as np

from geonav.navigation import PointLike, as_geopoint, haversine_distance, rhumb_distance
from geonav.units import DistanceUnit

_DISTANCE_FUNCTIONS = {
    'haversine': haversine_distance,
    'rhumb': rhumb_distance,
}

_METHOD = Literal['haversine', 'rhumb']


def _distance_function(method: str) -> Callable:
    if method not in _DISTANCE_FUNCTIONS:
        raise ValueError(
            f"Unknown method '{method}'. Options: {list(_DISTANCE_FUNCTIONS.keys())}"
        )

    return _DISTANCE_FUNCTIONS[method]


def distances_from(
    source: PointLike,
    destinations: Iterable[PointLike],
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS,
    method: _METHOD = 'haversine',
) -> np.ndarray:
    """
    Calculates the distance from a single point to each of a series of points.

    Args:
        source:
            The point to measure from

        destinations:
            The points to measure to

        unit:
            (Default kilometers) The unit of the returned distances

        method:
            (Default 'haversine') Either 'haversine' (great circle) or 'rhumb'

    Returns:
        np.ndarray of length len(destinations)
    """
    fn = _distance_function(method)
    source = as_geopoint(source)
    return np.array(
        [fn(source, destination, unit) for destination in destinations],
        dtype=float
    )


def distance_matrix(
    points: Iterable[PointLike],
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS,
    method: _METHOD = 'haversine',
) -> np.ndarray:
    """
    Calculates the pairwise distances between a series of points. Both
    distance formulas are symmetric, so only the upper triangle is computed
    and then mirrored.

    Args:
        points:
            The points to measure between

        unit:
            (Default kilometers) The unit of the returned distances

        method:
            (Default 'haversine') Either 'haversine' (great circle) or 'rhumb'

    Returns:
        np.ndarray of shape (N, N) with a zero diagonal
    """
    fn = _distance_function(method)
    _points = [as_geopoint(point) for point in points]

    matrix = np.zeros((len(_points), len(_points)), dtype=float)
    for i, point in enumerate(_points):
        for j in range(i + 1, len(_points)):
            matrix[i, j] = fn(point, _points[j], unit)

    return matrix + matrix.T


def nearest(
    source: PointLike,
    candidates: Iterable[PointLike],
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS,
    method: _METHOD = 'haversine',
) -> Tuple[int, float]:
    """
    Finds the candidate closest to the source point. Ties resolve to the
    earliest candidate.

    Args:
        source:
            The point to measure from

        candidates:
            The points to choose between

        unit:
            (Default kilometers) The unit of the returned distance

        method:
            (Default 'haversine') Either 'haversine' (great circle) or 'rhumb'

    Returns:
        The (index, distance) of the nearest candidate
    """
    distances = distances_from(source, candidates, unit, method)
    if not distances.size:
        raise ValueError('Cannot find the nearest of zero candidates.')

    idx = int(np.argmin(distances))
    return idx, float(distances[idx])
