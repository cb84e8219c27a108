"""Pydantic schemas for playback sessions."""

from typing import Literal, Optional

from pydantic import Field

from courtflow.api.schemas.animation import AnimationFrameSchema, CamelModel, KeyframeSchema


class CreatePlaybackSessionRequest(CamelModel):
    """Open a transport over a stored sequence (the play's default if no id)."""

    play_id: str
    animation_id: Optional[str] = None
    loop: Optional[bool] = None
    playback_speed: Optional[float] = Field(default=None, gt=0, le=4)
    auto_play: bool = False


class PlaybackCommandRequest(CamelModel):
    """Arguments for seek, speed and loop commands."""

    timestamp: Optional[float] = None
    speed: Optional[float] = None
    loop: Optional[bool] = None


class PlaybackStateSchema(CamelModel):
    is_playing: bool
    current_time: float
    playback_speed: float
    direction: Literal["forward", "backward"]
    loop: bool
    duration: float
    progress: float
    time_label: str
    current_keyframe: Optional[KeyframeSchema] = None


class PlaybackSessionResponse(CamelModel):
    session_id: str
    animation_id: str
    is_running: bool
    playback: PlaybackStateSchema
    frame: Optional[AnimationFrameSchema] = None
