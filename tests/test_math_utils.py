"""Tests for vector and bounds helpers."""

import math

import pytest

from fishgame.math_utils import Bounds, Vector2, distance


class TestVector2:
    def test_arithmetic(self):
        a = Vector2(1, 2)
        b = Vector2(3, 5)
        assert a + b == Vector2(4, 7)
        assert b - a == Vector2(2, 3)
        assert a * 2 == Vector2(2, 4)
        assert 2 * a == Vector2(2, 4)
        assert b / 2 == Vector2(1.5, 2.5)
        assert -a == Vector2(-1, -2)

    def test_length_and_normalize(self):
        v = Vector2(3, 4)
        assert v.length() == 5
        assert v.length_squared() == 25
        assert v.normalize() == Vector2(0.6, 0.8)

    def test_normalize_zero_vector(self):
        assert Vector2(0, 0).normalize() == Vector2(0, 0)

    def test_from_angle(self):
        v = Vector2.from_angle(math.pi / 2, 3)
        assert v.x == pytest.approx(0, abs=1e-12)
        assert v.y == pytest.approx(3)

    def test_copy_is_independent(self):
        v = Vector2(1, 1)
        c = v.copy()
        c.x = 5
        assert v.x == 1


def test_distance():
    assert distance(Vector2(0, 0), Vector2(3, 4)) == 5


class TestBounds:
    def test_edges(self):
        b = Bounds(0, 100, 500, 400)
        assert b.right == 500
        assert b.bottom == 500
        assert b.center == Vector2(250, 300)

    def test_contains_is_half_open(self):
        b = Bounds(0, 100, 500, 400)
        assert b.contains(Vector2(0, 100))
        assert b.contains(Vector2(499.9, 499.9))
        assert not b.contains(Vector2(500, 300))
        assert not b.contains(Vector2(250, 500))
        assert not b.contains(Vector2(250, 99))

    def test_clamp_box_inside_is_untouched(self):
        b = Bounds(0, 100, 500, 400)
        pos = Vector2(10, 200)
        assert b.clamp_box(pos, 30) == (False, False)
        assert pos == Vector2(10, 200)

    def test_clamp_box_right_and_top(self):
        b = Bounds(0, 100, 500, 400)
        pos = Vector2(480, 90)
        assert b.clamp_box(pos, 30) == (True, True)
        assert pos == Vector2(470, 100)

    def test_clamp_box_left_and_bottom(self):
        b = Bounds(0, 100, 500, 400)
        pos = Vector2(-5, 480)
        assert b.clamp_box(pos, 30) == (True, True)
        assert pos == Vector2(0, 470)
