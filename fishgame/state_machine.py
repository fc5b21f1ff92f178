"""State machine abstractions for explicit state management.

All valid states are enumerated, valid transitions are declared up front and
an invalid transition fails immediately:

    class DoorState(Enum):
        OPEN = "open"
        CLOSED = "closed"

    door = StateMachine(DoorState.CLOSED, {
        DoorState.OPEN: [DoorState.CLOSED],
        DoorState.CLOSED: [DoorState.OPEN],
    })
    door.transition(DoorState.OPEN)

The game flow itself is described by ``GameState`` and
``GAME_STATE_TRANSITIONS`` at the bottom of this module.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, List, TypeVar

from fishgame.exceptions import InvalidTransitionError

S = TypeVar("S", bound=Enum)


@dataclass
class StateTransition(Generic[S]):
    """Record of a state transition for debugging.

    Attributes:
        from_state: The state before transition
        to_state: The state after transition
        frame: The simulation frame when transition occurred
        reason: Optional description of why transition happened
    """

    from_state: S
    to_state: S
    frame: int
    reason: str = ""


class StateMachine(Generic[S]):
    """A generic state machine with explicit transition validation."""

    def __init__(
        self,
        initial_state: S,
        valid_transitions: Dict[S, List[S]],
        track_history: bool = False,
        max_history: int = 100,
    ) -> None:
        """Initialize the state machine.

        Args:
            initial_state: The starting state
            valid_transitions: Map of state -> list of valid target states
            track_history: Whether to record transition history
            max_history: Maximum number of transitions to keep in history
        """
        if initial_state not in valid_transitions:
            raise ValueError(
                f"Initial state {initial_state} not in valid_transitions. "
                f"Valid states: {list(valid_transitions.keys())}"
            )

        self._state = initial_state
        self._transitions = valid_transitions
        self._track_history = track_history
        self._max_history = max_history
        self._history: List[StateTransition[S]] = []

    @property
    def state(self) -> S:
        """Get the current state."""
        return self._state

    @property
    def history(self) -> List[StateTransition[S]]:
        """Get transition history (empty if tracking disabled)."""
        return self._history.copy()

    def can_transition(self, target: S) -> bool:
        return target in self._transitions.get(self._state, [])

    def transition(self, target: S, frame: int = 0, reason: str = "") -> S:
        """Transition to a new state.

        Raises:
            InvalidTransitionError: If the transition is not declared valid
        """
        if not self.can_transition(target):
            valid_targets = self._transitions.get(self._state, [])
            raise InvalidTransitionError(
                f"Invalid transition: {self._state.name} -> {target.name}. "
                f"Valid targets from {self._state.name}: {[t.name for t in valid_targets]}"
            )

        old_state = self._state
        self._state = target
        if self._track_history:
            self._record_transition(old_state, target, frame, reason)
        return target

    def force_state(self, state: S, frame: int = 0, reason: str = "forced") -> None:
        """Force a state change without validation.

        Only for leaving a terminal state on an explicit restart, or for tests.
        """
        old_state = self._state
        self._state = state
        if self._track_history:
            self._record_transition(old_state, state, frame, f"[FORCED] {reason}")

    def _record_transition(self, from_state: S, to_state: S, frame: int, reason: str) -> None:
        self._history.append(
            StateTransition(from_state=from_state, to_state=to_state, frame=frame, reason=reason)
        )
        if len(self._history) > self._max_history:
            self._history = self._history[-self._max_history :]

    def get_valid_transitions(self) -> List[S]:
        return list(self._transitions.get(self._state, []))

    def __repr__(self) -> str:
        return f"StateMachine(state={self._state.name})"


# ============================================================================
# Game Flow State Machine
# ============================================================================


class GameState(Enum):
    """Progression states of a game."""

    RUNNING = "running"
    LEVEL_COMPLETE = "level_complete"  # Transient: the next level starts at once
    DEFEATED = "defeated"


GAME_STATE_TRANSITIONS: Dict[GameState, List[GameState]] = {
    GameState.RUNNING: [GameState.LEVEL_COMPLETE, GameState.DEFEATED],
    GameState.LEVEL_COMPLETE: [GameState.RUNNING],
    GameState.DEFEATED: [],  # Terminal; only an explicit restart leaves it
}


def create_game_state_machine(track_history: bool = True) -> StateMachine[GameState]:
    """Create a state machine for the level progression flow."""
    return StateMachine(
        initial_state=GameState.RUNNING,
        valid_transitions=GAME_STATE_TRANSITIONS,
        track_history=track_history,
    )
