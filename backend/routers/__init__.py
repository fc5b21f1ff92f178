"""API routers: REST game endpoints and the WebSocket stream."""
