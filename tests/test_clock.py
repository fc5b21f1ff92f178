"""Tests for simulated time and the food charge timer."""

import pytest

from fishgame.clock import FoodChargeTimer, SimulationClock
from fishgame.exceptions import ConfigurationError


class TestSimulationClock:
    def test_advance(self):
        clock = SimulationClock()
        assert clock.advance(16) == 1
        assert clock.advance(20) == 2
        assert clock.elapsed_ms == 36

    def test_negative_dt_rejected(self):
        with pytest.raises(ValueError):
            SimulationClock().advance(-1)

    def test_reset(self):
        clock = SimulationClock()
        clock.advance(16)
        clock.reset()
        assert clock.frame == 0
        assert clock.elapsed_ms == 0


class TestFoodChargeTimer:
    def test_fires_once_per_interval(self):
        fired = []
        timer = FoodChargeTimer(lambda: fired.append(1), interval_ms=2000)

        for _ in range(124):
            timer.advance(16)

        assert len(fired) == 0
        timer.advance(16)
        assert len(fired) == 1
        assert timer.accumulated_ms == 0

    def test_catches_up_on_long_steps(self):
        fired = []
        timer = FoodChargeTimer(lambda: fired.append(1), interval_ms=2000)

        assert timer.advance(4500) == 2
        assert len(fired) == 2
        assert timer.accumulated_ms == 500

    def test_reset_starts_fresh_interval(self):
        fired = []
        timer = FoodChargeTimer(lambda: fired.append(1), interval_ms=2000)
        timer.advance(1900)
        timer.reset()
        timer.advance(1900)
        assert fired == []

    def test_interval_must_be_positive(self):
        with pytest.raises(ConfigurationError):
            FoodChargeTimer(lambda: None, interval_ms=0)
