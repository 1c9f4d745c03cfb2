from __future__ import annotations

import math

import pytest

from lpbasic.network.geo import EARTH_RADIUS_KM, InvalidCoordinateError, great_circle_distance


def test_distance_to_itself_is_zero():
    assert great_circle_distance(-22.9068, -43.1729, -22.9068, -43.1729) == 0.0


def test_distance_is_symmetric():
    rio = (-22.9068, -43.1729)
    sao_paulo = (-23.5505, -46.6333)
    forward = great_circle_distance(*rio, *sao_paulo)
    backward = great_circle_distance(*sao_paulo, *rio)
    assert forward == pytest.approx(backward)
    assert forward == pytest.approx(361.0, abs=5.0)


def test_pole_to_pole_is_half_circumference():
    distance = great_circle_distance(90.0, 0.0, -90.0, 0.0)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)
    assert distance == pytest.approx(20015.0, abs=1.0)


def test_quarter_equator():
    assert great_circle_distance(0.0, 0.0, 0.0, 90.0) == pytest.approx(10007.5, abs=1.0)


def test_antipodal_points_stay_finite():
    distance = great_circle_distance(0.0, 0.0, 0.0, 180.0)
    assert math.isfinite(distance)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_custom_radius_scales_result():
    km = great_circle_distance(0.0, 0.0, 0.0, 90.0)
    unit = great_circle_distance(0.0, 0.0, 0.0, 90.0, radius_km=1.0)
    assert unit == pytest.approx(math.pi / 2)
    assert km == pytest.approx(unit * EARTH_RADIUS_KM)


@pytest.mark.parametrize(
    "coords",
    [
        (90.5, 0.0, 0.0, 0.0),
        (0.0, -180.1, 0.0, 0.0),
        (0.0, 0.0, -91.0, 0.0),
        (0.0, 0.0, 0.0, 181.0),
        (float("nan"), 0.0, 0.0, 0.0),
    ],
)
def test_out_of_range_coordinates_raise(coords):
    with pytest.raises(InvalidCoordinateError):
        great_circle_distance(*coords)


def test_invalid_coordinate_error_is_value_error():
    with pytest.raises(ValueError):
        great_circle_distance(0.0, 200.0, 0.0, 0.0)


@pytest.mark.parametrize("value", [True, "45", None])
def test_non_real_coordinates_raise(value):
    with pytest.raises(InvalidCoordinateError):
        great_circle_distance(value, 0.0, 0.0, 0.0)
