"""Fish tank game core.

Pure simulation logic with no window, socket or wall-clock dependency.
Front-ends drive ``FishTankGame`` and draw its snapshots.
"""

from fishgame.config import GameConfig
from fishgame.game import FishTankGame
from fishgame.snapshot import GameSnapshot
from fishgame.state_machine import GameState

__all__ = ["FishTankGame", "GameConfig", "GameSnapshot", "GameState"]
