"""Data models for diagrams and animation timelines."""

from courtflow.core.models.animation import (
    ActiveAction,
    AnimatedPlayer,
    AnimationFrame,
    AnimationSequence,
    AnimationSettings,
    Keyframe,
    MovementPath,
)
from courtflow.core.models.diagram import (
    ActionStyle,
    CourtDimensions,
    EntityReference,
    PlayAction,
    PlayDiagram,
    Player,
)

__all__ = [
    "ActionStyle",
    "ActiveAction",
    "AnimatedPlayer",
    "AnimationFrame",
    "AnimationSequence",
    "AnimationSettings",
    "CourtDimensions",
    "EntityReference",
    "Keyframe",
    "MovementPath",
    "PlayAction",
    "PlayDiagram",
    "Player",
]
