"""Tests for feeding, growth and reproduction."""

import pytest

from fishgame.config import FoodConfig, GameConfig
from fishgame.entities import FallingFood
from fishgame.events import FishBornEvent, FoodEatenEvent
from fishgame.game import FishTankGame
from fishgame.math_utils import Vector2
from fishgame.systems.feeding import feed, nearest_fish_within


class TestFeed:
    def test_third_meal_produces_clone(self, make_fish):
        fish = make_fish(100, 200)

        assert feed(fish, 1.0) is None
        assert feed(fish, 1.0) is None
        child = feed(fish, 1.0)

        assert child is not None
        assert fish.eat_count == 0
        assert child.eat_count == 0
        assert child.size == pytest.approx(fish.size)
        assert child.base_speed == pytest.approx(fish.base_speed)

    def test_cycle_repeats(self, make_fish):
        fish = make_fish(100, 200)
        clones = [feed(fish, 1.0) for _ in range(6)]
        assert [c is not None for c in clones] == [False, False, True, False, False, True]


class TestNearestFishWithin:
    def test_reach_is_strict(self, make_fish):
        fish = make_fish(0, 100)  # Center (15, 115), radius 15
        assert nearest_fish_within([fish], Vector2(40, 115), 10) is None
        assert nearest_fish_within([fish], Vector2(39.9, 115), 10) is fish

    def test_nearest_wins(self, make_fish):
        far = make_fish(100, 200)  # Center (115, 215)
        near = make_fish(104, 200)  # Center (119, 215)
        assert nearest_fish_within([far, near], Vector2(121, 215), 10) is near

    def test_first_of_equals_wins(self, make_fish):
        a = make_fish(100, 200)
        b = make_fish(100, 200)
        assert nearest_fish_within([a, b], Vector2(115, 215), 10) is a

    def test_empty_population(self):
        assert nearest_fish_within([], Vector2(0, 0), 10) is None


class TestFeedingSystem:
    def test_three_drops_add_one_fish(self, staged_game, make_fish):
        fishes = [make_fish(50 + i * 90, 300) for i in range(5)]
        game = staged_game(*fishes)
        game.level.food_charges = 3
        born = []
        game.events.subscribe(FishBornEvent, born.append)

        for _ in range(3):
            assert game.on_drag_start((100, 50))
            assert game.on_drag_release((65, 315)) is fishes[0]

        assert len(game.fishes) == 6
        assert fishes[0].eat_count == 0
        assert game.level.food_charges == 0
        assert len(born) == 1
        assert born[0].parent_id == fishes[0].fish_id

    def test_missed_drop_is_free(self, staged_game, make_fish):
        game = staged_game(make_fish(50, 300))
        game.level.food_charges = 1

        assert game.on_drag_start((100, 50))
        assert game.on_drag_release((400, 450)) is None
        assert game.level.food_charges == 1

    def test_drop_outside_tank_feeds_nobody(self, staged_game, make_fish):
        fish = make_fish(50, 100)  # Top edge touches the panel
        game = staged_game(fish)
        game.level.food_charges = 1

        assert game.on_drag_start((100, 50))
        assert game.on_drag_release((65, 95)) is None
        assert fish.eat_count == 0
        assert game.level.food_charges == 1

    def test_falling_food_eaten_by_nearest(self, staged_game, make_fish):
        farther = make_fish(435, 105)  # Center (450, 120)
        nearer = make_fish(436, 100)  # Center (451, 115)
        game = staged_game(farther, nearer)
        game.level.foods.append(FallingFood(440, 100))
        eaten = []
        game.events.subscribe(FoodEatenEvent, eaten.append)

        game.tick()

        assert game.foods == []
        assert nearer.eat_count == 1
        assert farther.eat_count == 0
        assert eaten[0].source == "falling"
        assert eaten[0].fish_id == nearer.fish_id

    def test_clone_is_safe_on_its_birth_tick(self, staged_game, make_fish):
        parent = make_fish(235, 285)  # Center (250, 300)
        parent.eat_count = 2
        predator = make_fish(240, 270, size=60)  # Center (270, 300), overlaps the parent
        game = staged_game(parent, predator)
        game.level.foods.append(FallingFood(220, 288))  # Center (230, 300) after falling

        result = game.tick()

        assert len(game.fishes) == 2
        assert game.fishes[0] is predator
        clone = game.fishes[1]
        assert clone.size == pytest.approx(33)
        assert clone.eat_count == 0
        assert game.level.death_count == 1
        assert result.details["births"] == 1

        game.tick()

        assert game.fishes == [predator]
        assert game.level.death_count == 2

    def test_falling_food_sinks(self, staged_game, make_fish):
        game = staged_game(make_fish(0, 400))
        food = FallingFood(440, 100)
        game.level.foods.append(food)

        game.tick()

        assert food.pos.y == 102
        assert game.foods == [food]

    def test_food_below_tank_is_discarded(self, staged_game):
        game = staged_game()
        game.level.foods.append(FallingFood(200, 499))

        result = game.tick()

        assert game.foods == []
        assert result.details["food_discarded"] == 1

    def test_fish_chase_nearest_food(self, staged_game, make_fish):
        fish = make_fish(200, 300, speed=1.0)
        game = staged_game(fish)
        near = FallingFood(200, 200)
        game.level.foods.extend([FallingFood(0, 100), near])

        game.steering_system.assign_targets()

        assert fish.steering.target == near.center

    def test_fish_roam_once_food_is_gone(self, staged_game, make_fish):
        fish = make_fish(200, 300, speed=1.0)
        fish.chase(Vector2(10, 10))
        game = staged_game(fish)

        game.tick()

        assert not fish.is_chasing

    def test_overflow_food_enters_under_last_slot(self, game):
        game.level.food_charges = game.config.food.panel_capacity

        food = game.add_food_charge()

        assert food is not None
        assert food.pos == Vector2(440, 100)
        assert game.level.food_charges == 15
        assert game.foods == [food]

    def test_overflow_disabled(self):
        game = FishTankGame(GameConfig(food=FoodConfig(falling_food_enabled=False)), seed=1)
        game.level.food_charges = 15
        assert game.add_food_charge() is None
        assert game.foods == []

    def test_unbounded_charges(self):
        game = FishTankGame(GameConfig(food=FoodConfig(charge_mode="unbounded")), seed=1)
        for _ in range(20):
            assert game.add_food_charge() is None
        assert game.level.food_charges == 20
        assert game.foods == []
