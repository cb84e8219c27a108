"""Core geometry, enums and models."""

from courtflow.core.enums import (
    ActionType,
    ArrowType,
    InterpolationType,
    KeyframeType,
    PlaybackDirection,
)
from courtflow.core.vec2 import Vec2, distance

__all__ = [
    "ActionType",
    "ArrowType",
    "InterpolationType",
    "KeyframeType",
    "PlaybackDirection",
    "Vec2",
    "distance",
]
