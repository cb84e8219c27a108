"""Application services."""

from courtflow.services.animation_service import DEFAULT_ANIMATION_NAME, AnimationService

__all__ = ["AnimationService", "DEFAULT_ANIMATION_NAME"]
