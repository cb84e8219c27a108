"""API request and response schemas."""

from courtflow.api.schemas.animation import (
    AnimationFrameSchema,
    AnimationSequenceResponse,
    AnimationSettingsSchema,
    AnimationSummaryResponse,
    CreateAnimationRequest,
    KeyframeSchema,
    PlayDiagramSchema,
    UpdateAnimationRequest,
)
from courtflow.api.schemas.playback import (
    CreatePlaybackSessionRequest,
    PlaybackCommandRequest,
    PlaybackSessionResponse,
    PlaybackStateSchema,
)

__all__ = [
    "AnimationFrameSchema",
    "AnimationSequenceResponse",
    "AnimationSettingsSchema",
    "AnimationSummaryResponse",
    "CreateAnimationRequest",
    "CreatePlaybackSessionRequest",
    "KeyframeSchema",
    "PlayDiagramSchema",
    "PlaybackCommandRequest",
    "PlaybackSessionResponse",
    "PlaybackStateSchema",
    "UpdateAnimationRequest",
]
