"""Base class and result type for game systems.

Every system has one responsibility, is constructed with the game it works
on, can be switched off, and reports what it did in a ``SystemResult`` so the
tick can aggregate per-frame statistics.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

__all__ = ["BaseSystem", "SystemResult"]

if TYPE_CHECKING:
    from fishgame.game import FishTankGame
    from fishgame.update_phases import UpdatePhase


@dataclass
class SystemResult:
    """Result of a system update cycle.

    Attributes:
        entities_affected: Number of entities that were modified
        entities_spawned: Number of new entities created
        entities_removed: Number of entities removed
        skipped: Whether the update was skipped (system disabled, game over)
        details: System-specific counters (e.g. {"food_eaten": 2})
    """

    entities_affected: int = 0
    entities_spawned: int = 0
    entities_removed: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)

    @staticmethod
    def empty() -> "SystemResult":
        return SystemResult()

    def __add__(self, other: "SystemResult") -> "SystemResult":
        """Combine two results, summing numeric details."""
        if other.skipped:
            return self
        if self.skipped:
            return other

        combined_details = {**self.details}
        for key, value in other.details.items():
            if key in combined_details and isinstance(value, (int, float)):
                combined_details[key] = combined_details[key] + value
            else:
                combined_details[key] = value

        return SystemResult(
            entities_affected=self.entities_affected + other.entities_affected,
            entities_spawned=self.entities_spawned + other.entities_spawned,
            entities_removed=self.entities_removed + other.entities_removed,
            skipped=False,
            details=combined_details,
        )


class BaseSystem(ABC):
    """Abstract base class for all game systems.

    Subclasses implement ``_do_update``; ``update`` handles the enabled flag
    and the update counter.
    """

    # Set by the @runs_in_phase decorator
    _phase: Optional["UpdatePhase"] = None

    def __init__(self, game: "FishTankGame", name: str) -> None:
        self._game = game
        self._name = name
        self._enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def game(self) -> "FishTankGame":
        return self._game

    @property
    def update_count(self) -> int:
        return self._update_count

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    def update(self, frame: int) -> SystemResult:
        """Run the system for one frame.

        Args:
            frame: Current simulation frame number

        Returns:
            SystemResult describing what the system did
        """
        if not self._enabled:
            return SystemResult.skipped_result()

        result = self._do_update(frame)
        self._update_count += 1
        return result if result is not None else SystemResult.empty()

    @abstractmethod
    def _do_update(self, frame: int) -> Optional[SystemResult]:
        """System-specific update logic."""

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "enabled": self._enabled,
            "update_count": self._update_count,
            "phase": self._phase.name if self._phase is not None else None,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, enabled={self._enabled})"
