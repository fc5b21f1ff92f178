"""Deferred spawn/removal requests for the fish population.

Systems never add or remove fish while they iterate over the population.
They record what should happen here and the owner applies the whole batch
once the pass is over, so a scan sees the same list from start to finish.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Set

if TYPE_CHECKING:
    from fishgame.entities import Fish


@dataclass(frozen=True)
class FishMutation:
    """A requested change to the population."""

    fish: "Fish"
    reason: str = ""
    related_id: Optional[int] = None  # Parent for spawns, predator for removals


class FishMutationQueue:
    """Collects spawn and removal requests for deferred application."""

    def __init__(self) -> None:
        self._pending_spawns: List[FishMutation] = []
        self._pending_removals: List[FishMutation] = []
        self._spawn_ids: Set[int] = set()
        self._removal_ids: Set[int] = set()

    def request_spawn(
        self, fish: "Fish", *, reason: str = "", related_id: Optional[int] = None
    ) -> bool:
        """Queue a new fish.

        Returns False if the fish is already queued for spawn or removal.
        """
        if fish.fish_id in self._spawn_ids or fish.fish_id in self._removal_ids:
            return False
        self._spawn_ids.add(fish.fish_id)
        self._pending_spawns.append(FishMutation(fish, reason, related_id))
        return True

    def request_remove(
        self, fish: "Fish", *, reason: str = "", related_id: Optional[int] = None
    ) -> bool:
        """Queue a fish for removal.

        Returns False if it is already queued for removal. A pending spawn of
        the same fish is dropped.
        """
        if fish.fish_id in self._removal_ids:
            return False
        if fish.fish_id in self._spawn_ids:
            self._spawn_ids.discard(fish.fish_id)
            self._pending_spawns = [m for m in self._pending_spawns if m.fish is not fish]
        self._removal_ids.add(fish.fish_id)
        self._pending_removals.append(FishMutation(fish, reason, related_id))
        return True

    def is_pending_removal(self, fish: "Fish") -> bool:
        return fish.fish_id in self._removal_ids

    def drain_spawns(self) -> List[FishMutation]:
        """Return and clear pending spawns."""
        spawns = self._pending_spawns
        self._pending_spawns = []
        self._spawn_ids.clear()
        return spawns

    def drain_removals(self) -> List[FishMutation]:
        """Return and clear pending removals."""
        removals = self._pending_removals
        self._pending_removals = []
        self._removal_ids.clear()
        return removals

    def clear(self) -> None:
        self._pending_spawns.clear()
        self._pending_removals.clear()
        self._spawn_ids.clear()
        self._removal_ids.clear()

    def pending_counts(self) -> Dict[str, Any]:
        return {"spawns": len(self._pending_spawns), "removals": len(self._pending_removals)}
