"""Read-only frame snapshots for renderers.

A renderer gets everything it needs to draw a frame from ``GameSnapshot``
and never touches live entities. The backend serializes the same
snapshot to JSON, and the pygame front-end draws it directly.
"""

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

if TYPE_CHECKING:
    from fishgame.game import FishTankGame

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class FishSnapshot:
    fish_id: int
    x: float
    y: float
    size: float
    color: Color
    eat_count: int
    chasing: bool


@dataclass(frozen=True)
class FoodSnapshot:
    x: float
    y: float
    size: float


@dataclass(frozen=True)
class GameSnapshot:
    """Everything visible in one frame.

    Attributes:
        frame: Tick number the snapshot was taken at
        state: ``GameState`` name (RUNNING, LEVEL_COMPLETE or DEFEATED)
        pointer: Last pointer position during a drag, else None
    """

    frame: int
    level: int
    state: str
    alive: int
    target_population: int
    deaths: int
    casualty_limit: int
    food_charges: int
    dragging: bool
    pointer: Optional[Tuple[float, float]]
    fishes: Tuple[FishSnapshot, ...]
    foods: Tuple[FoodSnapshot, ...]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_snapshot(game: "FishTankGame") -> GameSnapshot:
    level = game.level
    pointer = game.pointer
    fishes = tuple(
        FishSnapshot(
            fish_id=fish.fish_id,
            x=fish.pos.x,
            y=fish.pos.y,
            size=fish.size,
            color=fish.color,
            eat_count=fish.eat_count,
            chasing=fish.is_chasing,
        )
        for fish in level.fishes
    )
    foods = tuple(FoodSnapshot(x=f.pos.x, y=f.pos.y, size=f.size) for f in level.foods)

    return GameSnapshot(
        frame=game.frame,
        level=level.level,
        state=level.state.name,
        alive=level.alive,
        target_population=level.target_population,
        deaths=level.death_count,
        casualty_limit=game.config.level.casualty_limit,
        food_charges=level.food_charges,
        dragging=pointer.dragging,
        pointer=pointer.position.as_tuple() if pointer.dragging and pointer.position else None,
        fishes=fishes,
        foods=foods,
    )
