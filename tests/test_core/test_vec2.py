"""Tests for the Vec2 geometry primitive."""

import math

import pytest

from courtflow.core.vec2 import Vec2, distance


class TestArithmetic:
    def test_add_and_subtract(self):
        assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
        assert Vec2(3, 4) - Vec2(1, 2) == Vec2(2, 2)

    def test_scale(self):
        assert Vec2(1, -2) * 3 == Vec2(3, -6)
        assert 2 * Vec2(1, -2) == Vec2(2, -4)

    def test_divide_by_zero_gives_zero(self):
        assert (Vec2(5, 5) / 0).is_zero()

    def test_immutable(self):
        v = Vec2(1, 2)
        with pytest.raises(AttributeError):
            v.x = 5


class TestGeometry:
    def test_length_and_distance(self):
        assert Vec2(3, 4).length() == 5
        assert distance(Vec2(0, 0), Vec2(3, 4)) == 5
        assert Vec2(1, 1).distance_to(Vec2(1, 1)) == 0

    def test_lerp_midpoint(self):
        assert Vec2(0, 0).lerp(Vec2(100, 0), 0.5) == Vec2(50, 0)

    def test_lerp_clamps_t(self):
        start, end = Vec2(0, 0), Vec2(100, 50)
        assert start.lerp(end, -1.0) == start
        assert start.lerp(end, 2.0) == end

    def test_clamped_to_bounds(self):
        assert Vec2(-10, 600).clamped_to(50, 50, 750, 550) == Vec2(50, 550)
        assert Vec2(400, 300).clamped_to(50, 50, 750, 550) == Vec2(400, 300)


class TestSerialization:
    def test_dict_round_trip(self):
        v = Vec2(12.5, -3.0)
        assert Vec2.from_dict(v.to_dict()) == v

    def test_rounded(self):
        v = Vec2(math.pi, math.e).rounded(2)
        assert v == Vec2(3.14, 2.72)
