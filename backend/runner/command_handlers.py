"""Command handlers for GameRunner.

Client commands never touch the game directly. ``handle_command`` validates
the payload and queues the command; the runner thread drains the queue at
the next tick boundary and calls the matching ``_cmd_*`` handler here, with
the game lock held.

Commands:
- drag_start / drag_move / drag_release: pointer input, data ``{"x", "y"}``
- add_food: one food timer tick
- restart: start over at level 1
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

from pydantic import ValidationError

from backend.models import PointData

if TYPE_CHECKING:
    from backend.game_runner import GameRunner

logger = logging.getLogger(__name__)

POINTER_COMMANDS = frozenset({"drag_start", "drag_move", "drag_release"})


class CommandHandlerMixin:
    """Mixin providing command validation and handler methods for GameRunner."""

    def _command_handlers(self: "GameRunner") -> Dict[str, Callable[..., Any]]:
        return {
            "drag_start": self._cmd_drag_start,
            "drag_move": self._cmd_drag_move,
            "drag_release": self._cmd_drag_release,
            "add_food": self._cmd_add_food,
            "restart": self._cmd_restart,
        }

    def _create_error_response(self, error_msg: str) -> Dict[str, Any]:
        return {"success": False, "error": error_msg}

    def _parse_command_args(self, command: str, data: Optional[Dict[str, Any]]) -> Tuple[Any, ...]:
        """Validate command data up front so a bad payload is rejected before it is queued."""
        if command not in POINTER_COMMANDS:
            return ()
        point = PointData.model_validate(data or {})
        return ((point.x, point.y),)

    def handle_command(
        self: "GameRunner", command: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Queue a command from a client.

        Args:
            command: Command name ('drag_start', 'drag_move', 'drag_release',
                'add_food', 'restart')
            data: Optional command data

        Returns:
            ``{"success": True, "queued": command}``, or an error response
        """
        handler = self._command_handlers().get(command)
        if handler is None:
            logger.warning("Unknown command received: %s", command)
            return self._create_error_response(f"Unknown command: {command}")

        try:
            args = self._parse_command_args(command, data)
        except ValidationError as e:
            logger.warning("Invalid data for %s: %s", command, data)
            return self._create_error_response(
                f"Invalid data for {command}: {e.error_count()} validation error(s)"
            )

        with self.lock:
            self._pending_commands.append((command, handler, args))
        return {"success": True, "queued": command}

    def _cmd_drag_start(self: "GameRunner", point: Tuple[float, float]) -> None:
        if not self.game.on_drag_start(point):
            logger.debug("drag_start at %s ignored", point)

    def _cmd_drag_move(self: "GameRunner", point: Tuple[float, float]) -> None:
        self.game.on_drag_move(point)

    def _cmd_drag_release(self: "GameRunner", point: Tuple[float, float]) -> None:
        fish = self.game.on_drag_release(point)
        if fish is not None:
            logger.debug("Drop at %s fed fish %s", point, fish.fish_id)

    def _cmd_add_food(self: "GameRunner") -> None:
        self.game.add_food_charge()

    def _cmd_restart(self: "GameRunner") -> None:
        logger.info("Restart command received")
        self.game.restart()
