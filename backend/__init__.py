"""Backend package for the fish tank game API.

This package provides the FastAPI web server that runs one shared game in a
background thread, streams snapshots over WebSocket and accepts pointer
commands.
"""

__version__ = "1.0.0"
