"""Logging setup for the game server.

The simulation core (``fishgame``) and the server (``backend``) log through
module loggers; this puts both, plus uvicorn, on one level taken from
``FISHGAME_LOG_LEVEL``.
"""

import logging
import os
from typing import Iterable, Optional

from fishgame.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

APP_LOGGERS = ("fishgame", "backend")
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_log_level(level: Optional[str] = None) -> str:
    """Explicit level, else ``FISHGAME_LOG_LEVEL``, else INFO.

    Raises:
        ConfigurationError: If the name is not a logging level
    """
    raw = level if level is not None else os.getenv("FISHGAME_LOG_LEVEL")
    resolved = (raw or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(resolved), int):
        raise ConfigurationError(f"Unknown log level: {raw!r}")
    return resolved


def configure_logging(
    level: Optional[str] = None, loggers: Iterable[str] = APP_LOGGERS
) -> logging.Logger:
    """Configure the root handler and align the game and server loggers.

    Returns:
        The server logger (``fishgame.backend``)
    """
    resolved = resolve_log_level(level)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)

    for name in (*loggers, *SERVER_LOGGERS):
        logging.getLogger(name).setLevel(resolved)

    server_logger = logging.getLogger("fishgame.backend")
    server_logger.debug("Logging configured at %s", resolved)
    return server_logger
