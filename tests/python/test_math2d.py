from __future__ import annotations

import math

import pytest
from pygame.math import Vector2
from pytest import approx

from flockhunt.sim.utils.math2d import (
    clamp_length,
    heading_from_velocity,
    heading_vector,
    is_zero,
    perpendicular,
    planar_distance,
    safe_normalize,
    wrap_coordinate,
)


def test_safe_normalize_zero_vector_is_zero():
    result = safe_normalize(Vector2())
    assert result.x == 0.0 and result.y == 0.0
    assert not math.isnan(result.x)


def test_perpendicular_is_clockwise_quarter_turn():
    result = perpendicular(Vector2(1.0, 0.0))
    assert (result.x, result.y) == (0.0, -1.0)
    assert Vector2(3.0, 4.0).dot(perpendicular(Vector2(3.0, 4.0))) == approx(0.0)


def test_is_zero_and_distance():
    assert is_zero(Vector2())
    assert not is_zero(Vector2(0.0, 1e-9))
    assert planar_distance(Vector2(0.0, 0.0), Vector2(3.0, 4.0)) == approx(5.0)


def test_clamp_length_caps_and_passes_through():
    assert clamp_length(Vector2(30.0, 40.0), 5.0).length() == approx(5.0)
    short = clamp_length(Vector2(1.0, 1.0), 5.0)
    assert (short.x, short.y) == (1.0, 1.0)
    assert is_zero(clamp_length(Vector2(1.0, 1.0), 0.0))


@pytest.mark.parametrize(
    "velocity, expected",
    [
        ((1.0, 0.0), 0.0),
        ((0.0, 1.0), math.pi / 2),
        ((0.0, -1.0), -math.pi / 2),
        ((-1.0, 0.0), math.pi),
        ((1.0, -1.0), -math.pi / 4),
    ],
)
def test_heading_from_velocity_quadrants(velocity, expected):
    assert heading_from_velocity(Vector2(velocity)) == approx(expected)


def test_heading_from_zero_velocity_keeps_default():
    assert heading_from_velocity(Vector2(), default=1.25) == approx(1.25)


def test_heading_vector_round_trips_heading():
    vector = heading_vector(2.0)
    assert heading_from_velocity(vector) == approx(2.0)


@pytest.mark.parametrize(
    "value, expected",
    [(1005.0, 5.0), (-5.0, 995.0), (1000.0, 0.0), (0.0, 0.0), (500.0, 500.0), (-1e-14, 0.0)],
)
def test_wrap_coordinate_stays_in_half_open_range(value, expected):
    wrapped = wrap_coordinate(value, 1000.0)
    assert wrapped == approx(expected)
    assert 0.0 <= wrapped < 1000.0
