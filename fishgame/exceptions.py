"""Fish tank game exception hierarchy.

Normal play never raises: degenerate frames (no fish, no food, zero speed)
are handled as no-ops. These classes cover configuration mistakes and
programming errors such as an illegal state transition.
"""


class FishGameError(Exception):
    """Root of all fish tank game exceptions."""


class SimulationError(FishGameError):
    """Errors during simulation execution (game loop, systems, entities)."""


class InvalidTransitionError(SimulationError):
    """A state machine was asked for a transition it does not allow."""


class ConfigurationError(FishGameError):
    """Invalid or missing configuration."""
