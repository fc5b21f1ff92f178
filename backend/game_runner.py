"""Background game runner thread."""

import asyncio
import logging
import threading
import time
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional, Set, Tuple

import orjson
from fastapi import WebSocket

from backend.models import GameStateUpdate
from backend.runner import CommandHandlerMixin
from fishgame.clock import FoodChargeTimer
from fishgame.config.display import FRAME_INTERVAL_MS, FRAME_RATE
from fishgame.events import GameOverEvent, LevelCompletedEvent, LevelStartedEvent
from fishgame.exceptions import FishGameError
from fishgame.game import FishTankGame

logger = logging.getLogger(__name__)

PendingCommand = Tuple[str, Callable[..., Any], Tuple[Any, ...]]


class GameRunner(CommandHandlerMixin):
    """Runs one game in a background thread and provides state updates.

    Every access to the game goes through ``self.lock``. Client commands are
    queued and applied by the loop right before the next tick, so input never
    interleaves with a tick in progress.
    """

    def __init__(
        self,
        game: Optional[FishTankGame] = None,
        *,
        food_interval_ms: Optional[float] = None,
        frame_rate: int = FRAME_RATE,
    ) -> None:
        self.game = game or FishTankGame()
        self.lock = threading.Lock()
        self.thread: Optional[threading.Thread] = None
        self.running = False
        self.frame_time = 1.0 / frame_rate
        self.dt_ms = FRAME_INTERVAL_MS

        interval = (
            food_interval_ms if food_interval_ms is not None else self.game.config.food.charge_interval_ms
        )
        self.food_timer = FoodChargeTimer(self.game.add_food_charge, interval)

        self._pending_commands: Deque[PendingCommand] = deque()
        self._clients: Set[WebSocket] = set()

        # FPS tracking
        self.fps_frame_count = 0
        self.last_fps_time = time.time()
        self.current_actual_fps = 0.0

        events = self.game.events
        events.subscribe(LevelStartedEvent, self._on_level_started)
        events.subscribe(LevelCompletedEvent, self._on_level_completed)
        events.subscribe(GameOverEvent, self._on_game_over)

    # =========================================================================
    # Event handlers
    # =========================================================================

    def _on_level_started(self, event: LevelStartedEvent) -> None:
        self.food_timer.reset()

    def _on_level_completed(self, event: LevelCompletedEvent) -> None:
        logger.info("Level %d complete with %d fish", event.level, event.alive)

    def _on_game_over(self, event: GameOverEvent) -> None:
        logger.info("Game over on level %d after %d deaths", event.level, event.deaths)

    # =========================================================================
    # Clients
    # =========================================================================

    @property
    def connected_clients(self) -> Set[WebSocket]:
        return self._clients

    def add_client(self, websocket: WebSocket) -> None:
        self._clients.add(websocket)
        logger.info("Client connected, %d total", len(self._clients))

    def remove_client(self, websocket: WebSocket) -> None:
        self._clients.discard(websocket)
        logger.info("Client disconnected, %d remaining", len(self._clients))

    # =========================================================================
    # Loop
    # =========================================================================

    def start(self) -> None:
        """Start the game loop in a background thread."""
        if not self.running:
            self.running = True
            self.thread = threading.Thread(target=self._run_loop, name="game-loop", daemon=True)
            self.thread.start()

    def stop(self) -> None:
        self.running = False
        if self.thread:
            self.thread.join(timeout=2.0)
            self.thread = None

    def step(self, dt_ms: Optional[float] = None) -> None:
        """Apply queued commands, tick once and advance the food timer."""
        dt = dt_ms if dt_ms is not None else self.dt_ms
        with self.lock:
            self._drain_commands()
            self.game.tick(dt)
            self.food_timer.advance(dt)

    def _drain_commands(self) -> int:
        """Apply every queued command. Caller holds the lock."""
        applied = 0
        while self._pending_commands:
            command, handler, args = self._pending_commands.popleft()
            try:
                handler(*args)
                applied += 1
            except FishGameError as e:
                logger.error("Command %s failed: %s", command, e, exc_info=True)
        return applied

    @property
    def pending_command_count(self) -> int:
        return len(self._pending_commands)

    def _run_loop(self) -> None:
        """Main game loop."""
        logger.info("Game loop: Starting")
        loop_iteration_count = 0

        # Drift correction: track when the next frame should start
        next_frame_start_time = time.time()

        try:
            while self.running:
                try:
                    next_frame_start_time += self.frame_time
                    loop_iteration_count += 1

                    try:
                        self.step()
                    except Exception as e:
                        logger.error(
                            "Game loop: Error at iteration %d: %s",
                            loop_iteration_count,
                            e,
                            exc_info=True,
                        )

                    self.fps_frame_count += 1
                    current_time = time.time()
                    if current_time - self.last_fps_time >= 5.0:
                        self.current_actual_fps = self.fps_frame_count / (
                            current_time - self.last_fps_time
                        )
                        self.fps_frame_count = 0
                        self.last_fps_time = current_time
                        with self.lock:
                            stats = self.game.get_stats()
                        logger.info(
                            "Game status FPS=%.1f, Level=%d, Fish=%d/%d, Deaths=%d, State=%s",
                            self.current_actual_fps,
                            stats["level"],
                            stats["alive"],
                            stats["target_population"],
                            stats["deaths"],
                            stats["state"],
                        )

                    now = time.time()
                    sleep_time = next_frame_start_time - now
                    if sleep_time > 0:
                        time.sleep(sleep_time)
                    elif sleep_time < -0.1:
                        # Too far behind; drop the backlog instead of spinning to catch up
                        next_frame_start_time = now

                except Exception as e:
                    logger.error(
                        "Game loop: Unexpected error at iteration %d: %s",
                        loop_iteration_count,
                        e,
                        exc_info=True,
                    )
                    time.sleep(self.frame_time)
                    next_frame_start_time = time.time()
        finally:
            logger.info("Game loop: Ended after %d frames", loop_iteration_count)

    # =========================================================================
    # State
    # =========================================================================

    def get_state(self) -> GameStateUpdate:
        with self.lock:
            snapshot = self.game.snapshot()
        return GameStateUpdate.from_snapshot(snapshot)

    async def get_state_async(self) -> GameStateUpdate:
        """Fetch state without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get_state)

    def serialize_state(self, state: GameStateUpdate) -> bytes:
        start = time.perf_counter()
        serialized = orjson.dumps(state.model_dump())
        duration_ms = (time.perf_counter() - start) * 1000
        if duration_ms > 50:
            logger.warning(
                "serialize_state: Frame %s slow serialization: %.2f ms, Size: %d bytes",
                state.frame,
                duration_ms,
                len(serialized),
            )
        return serialized

    async def handle_command_async(
        self, command: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Route commands off the event loop thread."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.handle_command, command, data)

    def get_status(self) -> Dict[str, Any]:
        with self.lock:
            stats = self.game.get_stats()
        stats.update(
            {
                "running": self.running,
                "clients": len(self._clients),
                "fps": round(self.current_actual_fps, 1),
            }
        )
        return stats

    async def get_status_async(self) -> Dict[str, Any]:
        """Fetch status without blocking the event loop on the game lock."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.get_status)
