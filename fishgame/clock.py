"""Explicit simulation time.

The core never reads a wall clock. Drivers (the pygame loop, the backend
runner thread, tests) pass the elapsed milliseconds in, and these two
classes turn that into frame numbers and food-charge ticks.
"""

import logging
from typing import Callable

from fishgame.config.display import FRAME_INTERVAL_MS
from fishgame.config.food import FOOD_CHARGE_INTERVAL_MS
from fishgame.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SimulationClock:
    """Frame counter plus accumulated simulated time.

    Attributes:
        frame: Number of ticks advanced so far
        elapsed_ms: Total simulated milliseconds
    """

    def __init__(self, frame_interval_ms: float = FRAME_INTERVAL_MS) -> None:
        self.frame_interval_ms = frame_interval_ms
        self.frame: int = 0
        self.elapsed_ms: float = 0.0

    def advance(self, dt_ms: float) -> int:
        """Record one tick of ``dt_ms`` and return the new frame number."""
        if dt_ms < 0:
            raise ValueError(f"dt must be non-negative, got {dt_ms}")
        self.frame += 1
        self.elapsed_ms += dt_ms
        return self.frame

    def reset(self) -> None:
        self.frame = 0
        self.elapsed_ms = 0.0

    def __repr__(self) -> str:
        return f"SimulationClock(frame={self.frame}, elapsed_ms={self.elapsed_ms:.0f})"


class FoodChargeTimer:
    """Fires a callback once per ``interval_ms`` of simulated time.

    Several intervals elapsing in one ``advance`` call fire the callback
    several times, so the charge cadence does not depend on frame rate.

    Example:
        timer = FoodChargeTimer(game.add_food_charge, interval_ms=2000)
        timer.advance(16)
    """

    def __init__(
        self, callback: Callable[[], object], interval_ms: float = FOOD_CHARGE_INTERVAL_MS
    ) -> None:
        if interval_ms <= 0:
            raise ConfigurationError(f"food charge interval must be positive, got {interval_ms}")
        self._callback = callback
        self.interval_ms = interval_ms
        self._accumulated: float = 0.0

    @property
    def accumulated_ms(self) -> float:
        return self._accumulated

    def advance(self, dt_ms: float) -> int:
        """Accumulate ``dt_ms`` and fire once per completed interval.

        Returns:
            How many times the callback fired
        """
        self._accumulated += dt_ms
        fired = 0
        while self._accumulated >= self.interval_ms:
            self._accumulated -= self.interval_ms
            self._callback()
            fired += 1
        if fired > 1:
            logger.debug("Food timer fired %d times in one step", fired)
        return fired

    def reset(self) -> None:
        """Start a fresh interval, e.g. when a new level begins."""
        self._accumulated = 0.0
