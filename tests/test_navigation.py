import math

import pytest
from pytest import approx

from geonav import CoordinateRangeError, DistanceUnit, GeoPoint, Latitude, Longitude
from geonav.navigation import *

from tests.functions import assert_points_equal

SOURCE = GeoPoint(40.7486, 5.4253)
DESTINATION = GeoPoint(58.3838, 3.01412)

PAIRS = [
    (GeoPoint(40.7486, 5.4253), GeoPoint(58.3838, 3.01412)),
    (GeoPoint(-33.8688, 151.2093), GeoPoint(51.5074, -0.1278)),
    (GeoPoint(10., 170.), GeoPoint(-10., -170.)),
    (GeoPoint(0., 0.), GeoPoint(0.001, 0.001)),
    (GeoPoint(-60., -45.), GeoPoint(-60., 30.)),
]


def test_haversine_distance():
    actual = haversine_distance(SOURCE, DESTINATION, DistanceUnit.KILOMETERS)
    assert actual == approx(1967.0898177084771, rel=1e-9)

    # Defaults to kilometers
    assert haversine_distance(SOURCE, DESTINATION) == actual

    # One degree of arc
    expected = 6367 * math.pi / 180
    assert haversine_distance((0., 0.), (0., 1.)) == approx(expected)
    assert haversine_distance((0., 0.), (1., 0.)) == approx(expected)

    # Antimeridian test
    expected = 6367 * math.radians(2)
    assert haversine_distance((0., 179.), (0., -179.)) == approx(expected)

    # Pole to equator
    assert haversine_distance((90., 0.), (0., 45.)) == approx(6367 * math.pi / 2)

    assert haversine_distance(SOURCE, SOURCE) == 0.


def test_haversine_distance_units():
    km = haversine_distance(SOURCE, DESTINATION, DistanceUnit.KILOMETERS)
    assert haversine_distance(SOURCE, DESTINATION, DistanceUnit.METERS) == km * 1000
    assert haversine_distance(SOURCE, DESTINATION, DistanceUnit.MILES) == approx(km * 3956 / 6367, rel=1e-12)

    assert haversine_distance(SOURCE, DESTINATION, 'km') == km
    assert haversine_distance(SOURCE, DESTINATION, 'Kilometers') == km

    with pytest.raises(ValueError):
        haversine_distance(SOURCE, DESTINATION, 'furlongs')


def test_haversine_bearing():
    actual = haversine_bearing(SOURCE, DESTINATION)
    assert actual == approx(355.84047394177765, rel=1e-9)

    assert haversine_bearing((0., 0.), (1., 0.)) == approx(0.)
    assert haversine_bearing((0., 0.), (0., 1.)) == approx(90.)
    assert haversine_bearing((0., 0.), (-1., 0.)) == approx(180.)
    assert haversine_bearing((0., 0.), (0., -1.)) == approx(270.)
    assert haversine_bearing((0., 0.), (0.001, 0.001)) == approx(45., abs=1e-6)

    # Antimeridian test
    assert haversine_bearing((0., 179.), (0., -179.)) == approx(90.)


def test_haversine_destination():
    actual = haversine_destination(SOURCE, 355.84047394177765, 1967.0898177084771, DistanceUnit.KILOMETERS)
    assert round(actual.latitude.decimal_degrees, 2) == round(DESTINATION.latitude.decimal_degrees, 2)
    assert round(actual.longitude.decimal_degrees, 2) == round(DESTINATION.longitude.decimal_degrees, 2)

    assert_points_equal(actual, DESTINATION, abs_tol=1e-6)

    # Zero distance stays put
    assert_points_equal(haversine_destination((10., 20.), 123., 0.), GeoPoint(10., 20.))

    # Units are honored
    assert_points_equal(
        haversine_destination(SOURCE, 45., 1_000_000., 'm'),
        haversine_destination(SOURCE, 45., 1_000., 'km'),
    )


def test_haversine_destination_wraps_longitude():
    actual = haversine_destination((0., 179.), 90., 6367 * math.radians(2))
    assert_points_equal(actual, GeoPoint(0., -179.))

    actual = haversine_destination((0., -179.), 270., 6367 * math.radians(2))
    assert_points_equal(actual, GeoPoint(0., 179.))


def test_rhumb_distance():
    actual = rhumb_distance(SOURCE, DESTINATION, DistanceUnit.KILOMETERS)
    assert actual == approx(1967.1746504256103, rel=1e-9)

    km = actual
    assert rhumb_distance(SOURCE, DESTINATION, DistanceUnit.METERS) == km * 1000
    assert rhumb_distance(SOURCE, DESTINATION, DistanceUnit.MILES) == approx(km * 3956 / 6367, rel=1e-12)

    # Along a meridian a rhumb line is a great circle
    assert rhumb_distance((0., 10.), (45., 10.)) == approx(haversine_distance((0., 10.), (45., 10.)))


def test_rhumb_distance_east_west():
    # Constant latitude; the stretch factor falls back to cos(latitude)
    expected = 6367 * math.cos(math.radians(60)) * math.radians(10)
    assert rhumb_distance((60., 0.), (60., 10.)) == approx(expected)

    # Antimeridian test - takes the shorter way around
    expected = 6367 * math.radians(2)
    assert rhumb_distance((0., 179.), (0., -179.)) == approx(expected)


def test_rhumb_distance_poles():
    assert rhumb_distance((-90., 0.), (0., 0.)) == approx(6367 * math.pi / 2)
    assert rhumb_distance((0., 0.), (90., 0.)) == approx(6367 * math.pi / 2)


def test_rhumb_bearing():
    actual = rhumb_bearing(SOURCE, DESTINATION)
    assert actual == approx(355.00824242711576, rel=1e-9)

    assert rhumb_bearing((0., 0.), (1., 0.)) == approx(0.)
    assert rhumb_bearing((0., 0.), (0., 1.)) == approx(90.)
    assert rhumb_bearing((0., 0.), (-1., 0.)) == approx(180.)
    assert rhumb_bearing((0., 0.), (0., -1.)) == approx(270.)

    # Antimeridian test
    assert rhumb_bearing((0., 179.), (0., -179.)) == approx(90.)
    assert rhumb_bearing((0., -179.), (0., 179.)) == approx(270.)

    # Toward the poles
    assert rhumb_bearing((-90., 0.), (0., 0.)) == approx(0.)
    assert rhumb_bearing((0., 0.), (-90., 0.)) == approx(180.)


def test_rhumb_destination():
    actual = rhumb_destination(SOURCE, 355, 1967, DistanceUnit.KILOMETERS)
    assert round(actual.latitude.decimal_degrees, 2) == round(DESTINATION.latitude.decimal_degrees, 2)
    assert round(actual.longitude.decimal_degrees, 2) == round(DESTINATION.longitude.decimal_degrees, 2)

    # Due north
    actual = rhumb_destination((10., 20.), 0., 6367 * math.radians(5))
    assert_points_equal(actual, GeoPoint(15., 20.))


def test_rhumb_destination_east_west():
    # Travelling due east stays on the parallel
    actual = rhumb_destination((60., 0.), 90., 6367 * math.cos(math.radians(60)) * math.radians(10))
    assert_points_equal(actual, GeoPoint(60., 10.))

    actual = rhumb_destination((0., 0.), 270., 6367 * math.radians(10))
    assert_points_equal(actual, GeoPoint(0., -10.))


def test_rhumb_destination_wraps_longitude():
    actual = rhumb_destination((0., 179.), 90., 6367 * math.radians(2))
    assert_points_equal(actual, GeoPoint(0., -179.))


def test_rhumb_destination_poles():
    actual = rhumb_destination((-90., 0.), 45., 1000.)
    expected_lat = -90 + math.degrees(1000 / 6367) * math.cos(math.radians(45))
    assert actual.latitude.decimal_degrees == approx(expected_lat)
    assert actual.longitude.decimal_degrees == 0.

    # Travelling past a pole does not produce a valid latitude
    with pytest.raises(CoordinateRangeError):
        rhumb_destination((80., 0.), 0., 2000.)


@pytest.mark.parametrize('source,destination', PAIRS)
def test_distance_symmetry(source, destination):
    assert haversine_distance(source, destination) == approx(haversine_distance(destination, source))
    assert rhumb_distance(source, destination) == approx(rhumb_distance(destination, source))


@pytest.mark.parametrize('source,destination', PAIRS)
def test_distance_meters_match_kilometers(source, destination):
    km = haversine_distance(source, destination, DistanceUnit.KILOMETERS)
    assert haversine_distance(source, destination, DistanceUnit.METERS) == km * 1000

    km = rhumb_distance(source, destination, DistanceUnit.KILOMETERS)
    assert rhumb_distance(source, destination, DistanceUnit.METERS) == km * 1000


@pytest.mark.parametrize('source,destination', PAIRS)
def test_destination_consistency(source, destination):
    actual = haversine_destination(
        source,
        haversine_bearing(source, destination),
        haversine_distance(source, destination),
    )
    assert_points_equal(actual, destination, abs_tol=1e-6)

    actual = rhumb_destination(
        source,
        rhumb_bearing(source, destination),
        rhumb_distance(source, destination),
    )
    assert_points_equal(actual, destination, abs_tol=1e-6)


def test_bearing_range():
    values = [(lat, lon) for lat in range(-90, 91, 30) for lon in range(-180, 181, 45)]
    for source in values[::3]:
        for destination in values:
            assert 0 <= haversine_bearing(source, destination) < 360
            assert 0 <= rhumb_bearing(source, destination) < 360


def test_point_forms_converge():
    src, dst = (40.7486, 5.4253), (58.3838, 3.01412)
    src_coords = (Latitude(40.7486), Longitude(5.4253))

    for fn in (haversine_distance, rhumb_distance, haversine_bearing, rhumb_bearing):
        expected = fn(SOURCE, DESTINATION)
        assert fn(src, dst) == expected
        assert fn(src_coords, DESTINATION) == expected
        assert fn(list(src), dst) == expected


def test_as_geopoint():
    point = GeoPoint(1., 2.)
    assert as_geopoint(point) is point
    assert as_geopoint((1., 2.)) == point
    assert as_geopoint([Latitude(1.), Longitude(2.)]) == point

    for value in ('ab', 5, (1., 2., 3.), None):
        with pytest.raises(TypeError):
            as_geopoint(value)

    with pytest.raises(CoordinateRangeError):
        as_geopoint((95., 0.))


def test_angle_conversion():
    assert degrees_to_radians(180.) == approx(math.pi)
    assert degrees_to_radians(-90.) == approx(-math.pi / 2)
    assert radians_to_degrees(math.pi) == approx(180.)
    assert radians_to_degrees(degrees_to_radians(123.456)) == approx(123.456)
