"""Pydantic schemas for diagrams and animation sequences.

Field names are snake_case in Python and camelCase on the wire, matching
the to_dict() output of the core models.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing to camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Vec2Schema(BaseModel):
    """2D court position."""

    x: float = 0.0
    y: float = 0.0


# =============================================================================
# Diagram
# =============================================================================


class PlayerSchema(CamelModel):
    id: str
    label: str = ""
    x: float
    y: float
    position: Optional[str] = None


class EntityReferenceSchema(CamelModel):
    player_id: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None


class ActionStyleSchema(CamelModel):
    color: Optional[str] = None
    stroke_width: Optional[float] = None
    dash_array: Optional[list[float]] = None
    arrow_type: Optional[Literal["solid", "dashed", "dotted"]] = None


class PlayActionSchema(CamelModel):
    id: str
    type: Literal["pass", "cut", "screen", "dribble", "shot"]
    from_ref: EntityReferenceSchema = Field(default_factory=EntityReferenceSchema, alias="from")
    to_ref: EntityReferenceSchema = Field(default_factory=EntityReferenceSchema, alias="to")
    style: Optional[ActionStyleSchema] = None
    sequence: Optional[int] = None


class CourtDimensionsSchema(CamelModel):
    width: float = Field(default=800.0, gt=0)
    height: float = Field(default=600.0, gt=0)


class PlayDiagramSchema(CamelModel):
    """The editor's diagram document."""

    players: list[PlayerSchema] = Field(default_factory=list)
    actions: list[PlayActionSchema] = Field(default_factory=list)
    court_dimensions: Optional[CourtDimensionsSchema] = None


# =============================================================================
# Timeline
# =============================================================================


class KeyframeSchema(CamelModel):
    id: str
    timestamp: float = Field(ge=0)
    name: str
    type: Literal["movement", "action", "highlight", "pause"] = "movement"
    description: Optional[str] = None


class AnimatedPlayerSchema(CamelModel):
    id: str
    label: str = ""
    position: Vec2Schema
    rotation: float = 0.0
    scale: float = 1.0
    opacity: float = 1.0
    highlight: bool = False
    velocity: Vec2Schema = Field(default_factory=Vec2Schema)


class ActiveActionSchema(CamelModel):
    id: str
    type: Literal["pass", "cut", "screen", "dribble", "shot"]
    from_player: str
    progress: float = Field(ge=0, le=1)
    to_player: Optional[str] = None
    to_position: Optional[Vec2Schema] = None
    style: Optional[ActionStyleSchema] = None


class AnimationFrameSchema(CamelModel):
    timestamp: float
    players: list[AnimatedPlayerSchema] = Field(default_factory=list)
    actions: list[ActiveActionSchema] = Field(default_factory=list)


class MovementPathSchema(CamelModel):
    player_id: str
    start_time: float
    end_time: float
    start_position: Vec2Schema
    end_position: Vec2Schema
    type: Literal["linear", "curve", "sprint", "jog"] = "linear"
    speed: float = 1.0
    waypoints: list[Vec2Schema] = Field(default_factory=list)


class AnimationSettingsSchema(CamelModel):
    """Sequence settings. Every field is optional so it doubles as a patch."""

    fps: Optional[int] = Field(default=None, gt=0, le=120)
    auto_play: Optional[bool] = None
    loop: Optional[bool] = None
    show_trails: Optional[bool] = None
    trail_length: Optional[int] = Field(default=None, ge=0, le=60)
    highlight_active_player: Optional[bool] = None
    transition_duration: Optional[int] = Field(default=None, ge=0)


# =============================================================================
# Requests / responses
# =============================================================================


class CreateAnimationRequest(CamelModel):
    """Request to generate a new sequence for a play.

    Duration bounds are checked by the service so the error names the field
    with a 400, like every other constraint violation.
    """

    name: str = Field(min_length=1)
    duration: float = 10000
    description: Optional[str] = None
    settings: Optional[AnimationSettingsSchema] = None


class UpdateAnimationRequest(CamelModel):
    """Partial update. Frames and keyframes replace the stored lists."""

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    duration: Optional[float] = None
    frames: Optional[list[AnimationFrameSchema]] = None
    keyframes: Optional[list[KeyframeSchema]] = None
    settings: Optional[AnimationSettingsSchema] = None


class AnimationSequenceResponse(CamelModel):
    id: str
    play_id: str
    name: str
    description: Optional[str] = None
    duration: float
    frames: list[AnimationFrameSchema]
    keyframes: list[KeyframeSchema]
    settings: AnimationSettingsSchema
    is_default: bool
    created_at: str
    movement_paths: list[MovementPathSchema] = Field(default_factory=list)


class AnimationSummaryResponse(CamelModel):
    """List entry without the frame data."""

    id: str
    play_id: str
    name: str
    description: Optional[str] = None
    duration: float
    frame_count: int
    keyframe_count: int
    is_default: bool
    created_at: str
