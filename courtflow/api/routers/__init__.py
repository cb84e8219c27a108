"""API routers for animation sequences and playback."""

from courtflow.api.routers.animations import router as animations_router
from courtflow.api.routers.playback import router as playback_router
from courtflow.api.routers.playback_websocket import router as playback_websocket_router

__all__ = [
    "animations_router",
    "playback_router",
    "playback_websocket_router",
]
