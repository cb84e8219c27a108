"""Playback transport, frame lookup, trails and live sessions."""

from courtflow.playback.lookup import TimelineIndex, nearest_frame, nearest_keyframe
from courtflow.playback.session_manager import (
    FrameUpdate,
    PlaybackSession,
    PlaybackSessionManager,
    get_session_manager,
)
from courtflow.playback.trails import TrailRecorder
from courtflow.playback.transport import (
    SPEED_PRESETS,
    AnimationPlayback,
    PlaybackTransport,
    format_time,
)

__all__ = [
    "AnimationPlayback",
    "FrameUpdate",
    "PlaybackSession",
    "PlaybackSessionManager",
    "PlaybackTransport",
    "SPEED_PRESETS",
    "TimelineIndex",
    "TrailRecorder",
    "format_time",
    "get_session_manager",
    "nearest_frame",
    "nearest_keyframe",
]
