"""Application factory and context for the fish tank game API.

All runtime state lives in an ``AppContext`` attached to ``app.state``
rather than in module globals, so each test can build a fresh app.

Usage:
------
    # Production (settings from the environment)
    app = create_app()

    # Tests: a seeded game whose loop the test drives by hand
    app = create_app(context=AppContext(seed=42, autostart=False))
"""

import asyncio
import logging
import os
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.broadcast import start_broadcast, stop_broadcast
from backend.game_runner import GameRunner
from backend.logging_config import configure_logging
from backend.models import HealthStatus
from fishgame.config import FoodConfig, GameConfig
from fishgame.exceptions import ConfigurationError
from fishgame.game import FishTankGame

DEFAULT_API_PORT = 8000


def _env_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    api_port: int = field(default_factory=lambda: _env_int("FISHGAME_API_PORT", DEFAULT_API_PORT))
    seed: Optional[int] = field(default_factory=lambda: _env_int("FISHGAME_SEED"))
    food_interval_ms: Optional[int] = field(
        default_factory=lambda: _env_int("FISHGAME_FOOD_INTERVAL_MS")
    )
    # Start the game loop thread and the broadcast task in the lifespan
    autostart: bool = True

    runner: Optional[GameRunner] = None
    broadcast_task: Optional[asyncio.Task] = None

    server_start_time: float = field(default_factory=time.time)
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("fishgame.backend"))

    def build_runner(self) -> GameRunner:
        """Create the runner and its game from the context settings."""
        food = FoodConfig()
        if self.food_interval_ms is not None:
            food = FoodConfig(charge_interval_ms=self.food_interval_ms)
        config = GameConfig(food=food, seed=self.seed)
        return GameRunner(FishTankGame(config))

    async def get_health(self) -> HealthStatus:
        runner = self.runner
        stats = await runner.get_status_async() if runner is not None else {}
        return HealthStatus(
            status="ok",
            frame=stats.get("frame", 0),
            state=stats.get("state", "UNKNOWN"),
            running=runner is not None and runner.running,
            uptime_seconds=time.time() - self.server_start_time,
        )


def create_app(*, context: Optional[AppContext] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    logger = configure_logging()

    if context is None:
        context = AppContext()
    context.logger = logger
    if context.runner is None:
        context.runner = context.build_runner()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Start the game loop and the broadcast task; stop them on shutdown."""
        ctx: AppContext = app.state.context
        try:
            if ctx.autostart:
                ctx.runner.start()
                ctx.broadcast_task = start_broadcast(ctx.runner)
                ctx.logger.info("Game loop and broadcast started")
            yield
            ctx.logger.info("LIFESPAN: Received shutdown signal")
        finally:
            if ctx.broadcast_task is not None:
                await stop_broadcast(ctx.broadcast_task)
                ctx.broadcast_task = None
            ctx.runner.stop()

    app = FastAPI(title="Fish Tank Game API", lifespan=lifespan)
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    _setup_routers(app, context)
    return app


def _setup_routers(app: FastAPI, ctx: AppContext) -> None:
    """Setup and include all API routers."""
    from backend.routers import game, websocket

    app.include_router(game.setup_router(ctx.runner))
    app.include_router(websocket.setup_router(ctx.runner))

    @app.get("/health", response_model=HealthStatus)
    async def health():
        return await ctx.get_health()

    ctx.logger.info("API routers configured")
