"""Tests for the Fish entity: geometry, growth and cloning."""

import pytest

from fishgame.entities import Fish
from fishgame.math_utils import Vector2
from fishgame.movement import Chasing, FreeRoam


class TestFishGeometry:
    def test_center_and_radius(self, make_fish):
        fish = make_fish(100, 200, size=30)
        assert fish.center == Vector2(115, 215)
        assert fish.radius == 15

    def test_new_fish_roams(self, make_fish):
        fish = make_fish(100, 200)
        assert isinstance(fish.steering, FreeRoam)
        assert not fish.is_chasing
        assert fish.eat_count == 0

    def test_ids_are_unique(self, make_fish):
        a = make_fish(0, 100)
        b = make_fish(0, 100)
        assert b.fish_id > a.fish_id


class TestInitialVelocity:
    def test_default_speed_range(self, seeded_rng):
        for _ in range(50):
            fish = Fish(100, 200, 1.0, (0, 0, 0), seeded_rng)
            assert 1.0 <= fish.base_speed <= 3.0
            assert fish.vel.length() == pytest.approx(fish.base_speed)

    def test_speed_scaled_by_multiplier(self, seeded_rng):
        for _ in range(50):
            fish = Fish(100, 200, 1.4, (0, 0, 0), seeded_rng)
            assert 1.4 <= fish.base_speed <= 4.2 + 1e-9

    def test_speed_multiplier_is_read_only(self, make_fish):
        fish = make_fish(100, 200, multiplier=1.2)
        assert fish.speed_multiplier == 1.2
        with pytest.raises(AttributeError):
            fish.speed_multiplier = 2.0


class TestEat:
    def test_growth_and_speed(self, make_fish):
        fish = make_fish(100, 200, size=30)
        fish.vel = Vector2(3, 4)
        fish.base_speed = 5.0

        fish.eat(1.0)

        assert fish.size == pytest.approx(33.0)
        assert fish.base_speed == pytest.approx(5.5)
        assert fish.vel == Vector2(3.3, 4.4)
        assert fish.eat_count == 1

    def test_growth_scaled_by_level(self, make_fish):
        fish = make_fish(100, 200, size=30)
        fish.eat(1.2)
        assert fish.size == pytest.approx(33.6)

    def test_motionless_fish_only_gains_base_speed(self, make_fish):
        fish = make_fish(100, 200, speed=0.0)
        fish.eat(1.0)
        assert fish.base_speed == pytest.approx(0.5)
        assert fish.vel == Vector2(0, 0)

    def test_growth_is_monotonic(self, make_fish):
        fish = make_fish(100, 200)
        sizes = [fish.size]
        for _ in range(5):
            fish.eat(1.0)
            sizes.append(fish.size)
        assert sizes == sorted(sizes)
        assert len(set(sizes)) == len(sizes)


class TestClone:
    def test_clone_copies_parent(self, make_fish):
        parent = make_fish(120, 220, size=36.3, speed=2.0, multiplier=1.2, color=(0, 0, 255))
        parent.eat_count = 3

        child = parent.clone()

        assert child.fish_id != parent.fish_id
        assert child.pos == parent.pos
        assert child.pos is not parent.pos
        assert child.size == parent.size
        assert child.color == parent.color
        assert child.speed_multiplier == parent.speed_multiplier
        assert child.base_speed == parent.base_speed
        assert child.vel.length() == pytest.approx(parent.base_speed)
        assert child.eat_count == 0
        assert isinstance(child.steering, FreeRoam)


def test_chase_and_roam_switch_modes(make_fish):
    fish = make_fish(100, 200)
    fish.chase(Vector2(10, 150))
    assert fish.steering == Chasing(10, 150)
    assert fish.is_chasing
    fish.roam()
    assert not fish.is_chasing
