"""Shared service instances for the API routers."""

from typing import Optional

from courtflow.config import get_config
from courtflow.services import AnimationService
from courtflow.storage import create_repositories

_animation_service: Optional[AnimationService] = None


def get_animation_service() -> AnimationService:
    """Get the global animation service, building it from config on first use."""
    global _animation_service
    if _animation_service is None:
        config = get_config()
        animations, plays = create_repositories(config)
        _animation_service = AnimationService(animations, plays, config)
    return _animation_service


def set_animation_service(service: Optional[AnimationService]) -> None:
    """
    Replace the global animation service.

    Passing None rebuilds it from config on next use. Useful for testing.
    """
    global _animation_service
    _animation_service = service
