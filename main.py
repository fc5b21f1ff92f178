"""Main entry point for the fish tank game.

Command-line modes:
- Desktop (default): pygame window, drag food from the panel into the tank
- Web: FastAPI backend streaming the game over WebSocket
- Headless: no window, food arrives on the timer, stats are logged
"""

import argparse
import logging
import os
import sys

# Configure logging
logging.basicConfig(
    level=os.getenv("FISHGAME_LOG_LEVEL", "INFO").upper(),
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 60


def build_config(seed=None, food_interval=None):
    from fishgame.config import FoodConfig, GameConfig

    food = FoodConfig() if food_interval is None else FoodConfig(charge_interval_ms=food_interval)
    return GameConfig(food=food, seed=seed)


def run_desktop(seed=None, food_interval=None):
    """Run the pygame desktop game."""
    try:
        import fishtank
    except ImportError as e:
        logger.error("Error: pygame is not installed: %s", e)
        logger.error("Install with: pip install -e .[desktop]")
        sys.exit(1)

    fishtank.main(build_config(seed, food_interval))


def run_web_server(seed=None, food_interval=None):
    """Run the FastAPI backend."""
    import uvicorn

    from backend.app_factory import AppContext, create_app

    context = AppContext()
    if seed is not None:
        context.seed = seed
    if food_interval is not None:
        context.food_interval_ms = food_interval
    app = create_app(context=context)

    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("FISH TANK - WEB SERVER")
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("WebSocket stream at ws://localhost:%d/ws", context.api_port)
    logger.info("API docs available at http://localhost:%d/docs", context.api_port)
    logger.info("Press Ctrl+C to stop the server")
    logger.info("=" * SEPARATOR_WIDTH)

    uvicorn.run(app, host="0.0.0.0", port=context.api_port)


def run_headless(max_frames: int, stats_interval: int, seed=None, food_interval=None):
    """Run the game without a window.

    Args:
        max_frames: Maximum number of frames to simulate
        stats_interval: Log stats every N frames
        seed: Optional random seed for deterministic behavior
        food_interval: Food charge interval in milliseconds
    """
    from fishgame.game import FishTankGame

    game = FishTankGame(build_config(seed, food_interval))
    return game.run_headless(max_frames=max_frames, stats_interval=stats_interval)


def main(argv=None):
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Fish Tank Game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Play in a window (default)
  python main.py

  # Serve the game over HTTP/WebSocket
  python main.py --web

  # Headless run for testing
  python main.py --headless --max-frames 3600 --stats-interval 600 --seed 42
        """,
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--web", action="store_true", help="Run the FastAPI backend")
    mode.add_argument(
        "--headless", action="store_true", help="Run in headless mode (no UI, stats only)"
    )

    parser.add_argument(
        "--max-frames",
        type=int,
        default=3600,
        help="Maximum frames to simulate in headless mode (default: 3600)",
    )
    parser.add_argument(
        "--stats-interval",
        type=int,
        default=600,
        help="Log stats every N frames in headless mode (default: 600)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--food-interval",
        type=int,
        default=None,
        metavar="MS",
        help="Milliseconds between food charges (default: 2000)",
    )

    args = parser.parse_args(argv)

    if args.headless:
        logger.info(
            "Starting headless game: %d frames, stats every %d frames",
            args.max_frames,
            args.stats_interval,
        )
        run_headless(args.max_frames, args.stats_interval, args.seed, args.food_interval)
    elif args.web:
        run_web_server(args.seed, args.food_interval)
    else:
        run_desktop(args.seed, args.food_interval)


if __name__ == "__main__":
    main()
