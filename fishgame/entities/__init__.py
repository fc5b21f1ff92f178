"""Entity package exposing the fish and food models."""

from fishgame.entities.fish import Fish
from fishgame.entities.food import FallingFood

__all__ = ["FallingFood", "Fish"]
