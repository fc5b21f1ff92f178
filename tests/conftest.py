"""Pytest configuration and fixtures for fish tank tests."""

import random

import pytest


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def game():
    """A freshly seeded game on level 1."""
    from fishgame.game import FishTankGame

    return FishTankGame(seed=42)


@pytest.fixture
def make_fish(seeded_rng):
    """Factory for hand-placed fish. Speed defaults to 0 so fish stay put."""
    from fishgame.entities import Fish

    def _make(x, y, size=30.0, speed=0.0, multiplier=1.0, color=(255, 0, 0)):
        return Fish(x, y, multiplier, color, seeded_rng, size=size, speed=speed)

    return _make


@pytest.fixture
def staged_game(game):
    """A game whose founders are replaced by the fish a test places itself."""

    def _stage(*fishes):
        game.level.fishes[:] = list(fishes)
        return game

    return _stage
