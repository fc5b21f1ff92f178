"""Data models for REST and WebSocket communication."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from fishgame.snapshot import GameSnapshot


class FishData(BaseModel):
    """A fish as sent to clients."""

    id: int
    x: float
    y: float
    size: float
    color: List[int]  # RGB
    eat_count: int
    chasing: bool = False


class FoodData(BaseModel):
    """A falling food pellet."""

    x: float
    y: float
    size: float


class GameStateUpdate(BaseModel):
    """Full game state pushed to WebSocket clients every frame."""

    type: str = "update"
    frame: int
    level: int
    state: str  # RUNNING, LEVEL_COMPLETE, DEFEATED
    alive: int
    target_population: int
    deaths: int
    casualty_limit: int
    food_charges: int
    dragging: bool
    pointer: Optional[List[float]] = None
    fishes: List[FishData]
    foods: List[FoodData]

    @classmethod
    def from_snapshot(cls, snapshot: GameSnapshot) -> "GameStateUpdate":
        return cls(
            frame=snapshot.frame,
            level=snapshot.level,
            state=snapshot.state,
            alive=snapshot.alive,
            target_population=snapshot.target_population,
            deaths=snapshot.deaths,
            casualty_limit=snapshot.casualty_limit,
            food_charges=snapshot.food_charges,
            dragging=snapshot.dragging,
            pointer=list(snapshot.pointer) if snapshot.pointer is not None else None,
            fishes=[
                FishData(
                    id=fish.fish_id,
                    x=fish.x,
                    y=fish.y,
                    size=fish.size,
                    color=list(fish.color),
                    eat_count=fish.eat_count,
                    chasing=fish.chasing,
                )
                for fish in snapshot.fishes
            ],
            foods=[FoodData(x=food.x, y=food.y, size=food.size) for food in snapshot.foods],
        )


class PointData(BaseModel):
    """Pointer position carried by drag commands."""

    x: float
    y: float


class CommandRequest(BaseModel):
    """A client command: ``{"command": "drag_start", "data": {"x": 40, "y": 60}}``."""

    command: str
    data: Optional[Dict[str, Any]] = None


class HealthStatus(BaseModel):
    status: str
    frame: int
    state: str
    running: bool
    uptime_seconds: float
