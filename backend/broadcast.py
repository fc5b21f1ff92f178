import asyncio
import logging
import time
from contextlib import suppress

from backend.game_runner import GameRunner
from fishgame.config.display import FRAME_RATE

logger = logging.getLogger("fishgame.backend.broadcast")


def _handle_task_exception(task: asyncio.Task) -> None:
    """Handle exceptions from background tasks."""
    try:
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Unhandled exception in task %s: %s",
                task.get_name(),
                exc,
                exc_info=(type(exc), exc, exc.__traceback__),
            )
    except asyncio.CancelledError:
        logger.debug("Task %s was cancelled", task.get_name())


async def broadcast_updates(runner: GameRunner) -> None:
    """Push the game state to every connected client once per new frame."""
    logger.info("broadcast_updates: Task started")
    last_sent_frame = -1

    try:
        while True:
            try:
                clients = runner.connected_clients
                if clients:
                    state = await runner.get_state_async()
                    if state.frame != last_sent_frame:
                        last_sent_frame = state.frame

                        serialize_start = time.perf_counter()
                        payload = runner.serialize_state(state)
                        serialize_ms = (time.perf_counter() - serialize_start) * 1000
                        if serialize_ms > 10:
                            logger.warning(
                                "broadcast_updates: Serialization exceeded budget %.2f ms (frame %s)",
                                serialize_ms,
                                state.frame,
                            )

                        disconnected = set()
                        for client in list(clients):  # Copy to avoid modification during iteration
                            try:
                                await client.send_bytes(payload)
                            except Exception as e:
                                logger.warning(
                                    "broadcast_updates: Error sending to client, marking for removal: %s",
                                    e,
                                )
                                disconnected.add(client)

                        if disconnected:
                            logger.info(
                                "broadcast_updates: Removing %d disconnected clients",
                                len(disconnected),
                            )
                            for client in disconnected:
                                runner.remove_client(client)

            except asyncio.CancelledError:
                logger.info("broadcast_updates: Task cancelled")
                raise
            except Exception as e:
                logger.error(
                    "broadcast_updates: Unexpected error in main loop: %s", e, exc_info=True
                )

            await asyncio.sleep(1 / FRAME_RATE)
    finally:
        logger.info("broadcast_updates: Task ended")


def start_broadcast(runner: GameRunner) -> asyncio.Task:
    """Start the broadcast task on the running event loop."""
    task = asyncio.create_task(broadcast_updates(runner), name="broadcast")
    task.add_done_callback(_handle_task_exception)
    return task


async def stop_broadcast(task: asyncio.Task) -> None:
    task.cancel()
    with suppress(asyncio.CancelledError):
        await task
