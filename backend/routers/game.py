"""Game REST endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from backend.game_runner import GameRunner
from backend.models import CommandRequest, GameStateUpdate

logger = logging.getLogger(__name__)


def setup_router(runner: GameRunner) -> APIRouter:
    """Setup the game router.

    Args:
        runner: The runner owning the shared game

    Returns:
        Configured APIRouter
    """
    router = APIRouter(prefix="/api", tags=["game"])

    @router.get("/state", response_model=GameStateUpdate)
    async def get_state():
        """Current game snapshot."""
        return await runner.get_state_async()

    @router.post("/commands")
    async def post_command(request: CommandRequest):
        """Queue a command for the next tick.

        Returns:
            ``{"success": true, "queued": <command>}``, or a 400 with
            ``{"success": false, "error": ...}``
        """
        response = await runner.handle_command_async(request.command, request.data)
        if not response.get("success"):
            return JSONResponse(response, status_code=400)
        return response

    @router.get("/status")
    async def get_status():
        return await runner.get_status_async()

    return router
