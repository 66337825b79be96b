"""Tests for haversine distance and distance formatting."""

import math

import pytest

from pipe_measure import Coordinate, distance, format_distance, pipe_length
from pipe_measure.geodesy import EARTH_RADIUS_M

from helpers import make_pipe


def c(lat, lng):
    return Coordinate(lat=lat, lng=lng)


class TestDistance:
    def test_same_point_is_zero(self):
        p = c(32.0853, 34.7818)
        assert distance(p, p) == 0

    @pytest.mark.parametrize(
        "a, b",
        [
            ((0, 0), (0, 1)),
            ((32.0853, 34.7818), (31.7683, 35.2137)),
            ((-33.9, 18.4), (51.5, -0.12)),
            ((10, 179.5), (-10, -179.5)),
        ],
    )
    def test_symmetric(self, a, b):
        assert distance(c(*a), c(*b)) == distance(c(*b), c(*a))

    def test_one_degree_of_longitude_on_equator(self):
        assert distance(c(0, 0), c(0, 1)) == pytest.approx(111_195, rel=0.01)

    def test_antipodal_points(self):
        assert distance(c(0, 0), c(0, 180)) == pytest.approx(math.pi * EARTH_RADIUS_M)
        assert distance(c(90, 0), c(-90, 0)) == pytest.approx(math.pi * EARTH_RADIUS_M)

    def test_across_antimeridian_is_short(self):
        d = distance(c(0, 179.9), c(0, -179.9))
        assert d == pytest.approx(distance(c(0, 0), c(0, 0.2)), rel=1e-6)

    def test_poles_ignore_longitude(self):
        assert distance(c(90, 0), c(90, 120)) == pytest.approx(0, abs=1e-6)

    def test_out_of_range_input_is_finite(self):
        d = distance(c(200, 400), c(-300, -700))
        assert math.isfinite(d)
        assert d >= 0

    @pytest.mark.parametrize(
        "a, b",
        [
            ((1e308, 0), (-1e308, 0)),
            ((0, 1e308), (0, -1e308)),
            ((-1.7e308, 1.7e308), (1.7e308, -1.7e308)),
        ],
    )
    def test_extreme_input_is_finite(self, a, b):
        d = distance(c(*a), c(*b))
        assert math.isfinite(d)
        assert 0 <= d <= math.pi * EARTH_RADIUS_M + 1e-6
        assert d == distance(c(*b), c(*a))

    def test_pipe_length(self):
        pipe = make_pipe(1, (0, 0), (0, 1))
        assert pipe_length(pipe) == distance(c(0, 0), c(0, 1))


class TestFormatDistance:
    @pytest.mark.parametrize(
        "meters, expected",
        [
            (0, "0 m"),
            (345.4, "345 m"),
            (345.5, "346 m"),
            (999, "999 m"),
            (1000, "1.00 km"),
            (1500, "1.50 km"),
            (12_345.678, "12.35 km"),
        ],
    )
    def test_formats(self, meters, expected):
        assert format_distance(meters) == expected
