"""Tests for the generic state machine and the game flow."""

from enum import Enum

import pytest

from fishgame.exceptions import InvalidTransitionError
from fishgame.state_machine import GameState, StateMachine, create_game_state_machine


class Light(Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


TRANSITIONS = {
    Light.RED: [Light.GREEN],
    Light.GREEN: [Light.YELLOW],
    Light.YELLOW: [Light.RED],
}


class TestStateMachine:
    def test_valid_transition(self):
        sm = StateMachine(Light.RED, TRANSITIONS)
        assert sm.transition(Light.GREEN) is Light.GREEN
        assert sm.state is Light.GREEN

    def test_invalid_transition_raises(self):
        sm = StateMachine(Light.RED, TRANSITIONS)
        with pytest.raises(InvalidTransitionError, match="RED -> YELLOW"):
            sm.transition(Light.YELLOW)
        assert sm.state is Light.RED

    def test_unknown_initial_state(self):
        with pytest.raises(ValueError):
            StateMachine(Light.RED, {Light.GREEN: []})

    def test_history_is_bounded(self):
        sm = StateMachine(Light.RED, TRANSITIONS, track_history=True, max_history=2)
        sm.transition(Light.GREEN, frame=1)
        sm.transition(Light.YELLOW, frame=2)
        sm.transition(Light.RED, frame=3)
        assert [t.frame for t in sm.history] == [2, 3]

    def test_history_disabled_by_default(self):
        sm = StateMachine(Light.RED, TRANSITIONS)
        sm.transition(Light.GREEN)
        assert sm.history == []

    def test_force_state_skips_validation(self):
        sm = StateMachine(Light.RED, TRANSITIONS, track_history=True)
        sm.force_state(Light.YELLOW, reason="test")
        assert sm.state is Light.YELLOW
        assert sm.history[0].reason == "[FORCED] test"


class TestGameFlow:
    def test_starts_running(self):
        assert create_game_state_machine().state is GameState.RUNNING

    def test_level_complete_returns_to_running(self):
        sm = create_game_state_machine()
        sm.transition(GameState.LEVEL_COMPLETE)
        assert sm.get_valid_transitions() == [GameState.RUNNING]

    def test_defeat_is_terminal(self):
        sm = create_game_state_machine()
        sm.transition(GameState.DEFEATED)
        assert not sm.can_transition(GameState.RUNNING)
        with pytest.raises(InvalidTransitionError):
            sm.transition(GameState.RUNNING)
