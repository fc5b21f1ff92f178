"""Backend runner package.

- CommandHandlerMixin: command validation, queueing and handlers
"""

from backend.runner.command_handlers import CommandHandlerMixin

__all__ = ["CommandHandlerMixin"]
