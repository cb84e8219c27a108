"""Animation timeline models.

Paths, keyframes and frames are derived artifacts: they are regenerated
wholesale, never patched. AnimationSequence is the durable aggregate that
owns them.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Optional

from courtflow.core.constants import DEFAULT_FPS
from courtflow.core.enums import ActionType, InterpolationType, KeyframeType
from courtflow.core.models.diagram import ActionStyle, Player
from courtflow.core.vec2 import Vec2


@dataclass(frozen=True)
class MovementPath:
    """
    Time-bounded movement of one player between two points.

    Invariant: start_time < end_time. Paths for the same player never
    overlap in time (adjacent windows may share an endpoint).
    """

    player_id: str
    start_time: float
    end_time: float
    start_position: Vec2
    end_position: Vec2
    type: InterpolationType = InterpolationType.LINEAR
    speed: float = 1.0
    waypoints: tuple[Vec2, ...] = ()

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    def covers(self, timestamp: float) -> bool:
        """True if the path is active at timestamp (inclusive bounds)."""
        return self.start_time <= timestamp <= self.end_time

    def progress_at(self, timestamp: float) -> float:
        """Fraction of the path elapsed at timestamp, clamped to [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return max(0.0, min(1.0, (timestamp - self.start_time) / self.duration))

    def position_at(self, timestamp: float) -> Vec2:
        """Interpolated position. Every type is sampled linearly."""
        return self.start_position.lerp(self.end_position, self.progress_at(timestamp))

    def velocity(self) -> Vec2:
        """Displacement per second while the path is active."""
        seconds = self.duration / 1000.0
        return (self.end_position - self.start_position) / seconds

    def to_dict(self) -> dict:
        data = {
            "playerId": self.player_id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "startPosition": self.start_position.to_dict(),
            "endPosition": self.end_position.to_dict(),
            "type": self.type.value,
            "speed": self.speed,
        }
        if self.waypoints:
            data["waypoints"] = [w.to_dict() for w in self.waypoints]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "MovementPath":
        return cls(
            player_id=data["playerId"],
            start_time=float(data["startTime"]),
            end_time=float(data["endTime"]),
            start_position=Vec2.from_dict(data["startPosition"]),
            end_position=Vec2.from_dict(data["endPosition"]),
            type=InterpolationType(data.get("type", "linear")),
            speed=float(data.get("speed", 1.0)),
            waypoints=tuple(Vec2.from_dict(w) for w in data.get("waypoints", [])),
        )


@dataclass(frozen=True)
class Keyframe:
    """A named, timestamped narrative marker on the timeline."""

    id: str
    timestamp: float
    name: str
    type: KeyframeType = KeyframeType.MOVEMENT
    description: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "timestamp": self.timestamp,
            "name": self.name,
            "type": self.type.value,
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Keyframe":
        return cls(
            id=str(data["id"]),
            timestamp=float(data["timestamp"]),
            name=data["name"],
            type=KeyframeType(data.get("type", "movement")),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class AnimatedPlayer:
    """A diagram player with rendering-only fields for one frame."""

    id: str
    label: str
    position: Vec2
    rotation: float = 0.0  # Degrees
    scale: float = 1.0
    opacity: float = 1.0
    highlight: bool = False
    velocity: Vec2 = field(default_factory=Vec2.zero)

    @classmethod
    def at_rest(cls, player: Player) -> "AnimatedPlayer":
        """Player at its static diagram position with default render fields."""
        return cls(id=player.id, label=player.label, position=player.pos)

    @property
    def is_moving(self) -> bool:
        return not self.velocity.is_zero()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "position": self.position.to_dict(),
            "rotation": self.rotation,
            "scale": self.scale,
            "opacity": self.opacity,
            "highlight": self.highlight,
            "velocity": self.velocity.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnimatedPlayer":
        velocity = data.get("velocity")
        return cls(
            id=data["id"],
            label=data.get("label", ""),
            position=Vec2.from_dict(data["position"]),
            rotation=float(data.get("rotation", 0.0)),
            scale=float(data.get("scale", 1.0)),
            opacity=float(data.get("opacity", 1.0)),
            highlight=bool(data.get("highlight", False)),
            velocity=Vec2.from_dict(velocity) if velocity else Vec2.zero(),
        )


@dataclass(frozen=True)
class ActiveAction:
    """An action visible at a frame, with references already resolved."""

    id: str
    type: ActionType
    from_player: str
    progress: float
    to_player: Optional[str] = None
    to_position: Optional[Vec2] = None
    style: Optional[ActionStyle] = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "fromPlayer": self.from_player,
            "progress": self.progress,
        }
        if self.to_player is not None:
            data["toPlayer"] = self.to_player
        if self.to_position is not None:
            data["toPosition"] = self.to_position.to_dict()
        if self.style is not None:
            data["style"] = self.style.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ActiveAction":
        to_position = data.get("toPosition")
        style = data.get("style")
        return cls(
            id=data["id"],
            type=ActionType(data["type"]),
            from_player=data.get("fromPlayer", ""),
            progress=float(data["progress"]),
            to_player=data.get("toPlayer"),
            to_position=Vec2.from_dict(to_position) if to_position else None,
            style=ActionStyle.from_dict(style) if style else None,
        )


@dataclass(frozen=True)
class AnimationFrame:
    """Full snapshot of players and in-progress actions at one timestamp."""

    timestamp: float
    players: tuple[AnimatedPlayer, ...] = ()
    actions: tuple[ActiveAction, ...] = ()

    def get_player(self, player_id: str) -> Optional[AnimatedPlayer]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def summary(self) -> dict:
        """Counts shown by the study tools' frame analysis."""
        return {
            "timestamp": self.timestamp,
            "activeActions": len(self.actions),
            "activePlayers": len(self.players),
            "playerMovements": sum(1 for p in self.players if p.is_moving),
        }

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "players": [p.to_dict() for p in self.players],
            "actions": [a.to_dict() for a in self.actions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnimationFrame":
        return cls(
            timestamp=float(data["timestamp"]),
            players=tuple(AnimatedPlayer.from_dict(p) for p in data.get("players", [])),
            actions=tuple(ActiveAction.from_dict(a) for a in data.get("actions", [])),
        )


_SETTINGS_KEYS = {
    "fps": "fps",
    "autoPlay": "auto_play",
    "loop": "loop",
    "showTrails": "show_trails",
    "trailLength": "trail_length",
    "highlightActivePlayer": "highlight_active_player",
    "transitionDuration": "transition_duration",
}


@dataclass(frozen=True)
class AnimationSettings:
    """Playback and rendering preferences stored with a sequence."""

    fps: int = DEFAULT_FPS
    auto_play: bool = False
    loop: bool = False
    show_trails: bool = True
    trail_length: int = 5  # Previous positions kept per player
    highlight_active_player: bool = True
    transition_duration: int = 100  # ms between frames when smoothing

    def merged(self, patch: Optional[dict]) -> "AnimationSettings":
        """Return settings with a partial camelCase patch applied."""
        if not patch:
            return self
        changes = {
            _SETTINGS_KEYS[key]: value
            for key, value in patch.items()
            if key in _SETTINGS_KEYS and value is not None
        }
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for key, attr in _SETTINGS_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "AnimationSettings":
        return cls().merged(data)


@dataclass
class AnimationSequence:
    """
    A named, durable animation of a play.

    Owns its frames and keyframes exclusively. Updating the duration does
    not resample the frames; see AnimationService.regenerate.
    """

    id: str
    play_id: str
    name: str
    duration: float
    frames: list[AnimationFrame] = field(default_factory=list)
    keyframes: list[Keyframe] = field(default_factory=list)
    settings: AnimationSettings = field(default_factory=AnimationSettings)
    description: Optional[str] = None
    is_default: bool = False
    movement_paths: list[MovementPath] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self, include_paths: bool = False) -> dict:
        data = {
            "id": self.id,
            "playId": self.play_id,
            "name": self.name,
            "description": self.description,
            "duration": self.duration,
            "frames": [f.to_dict() for f in self.frames],
            "keyframes": [k.to_dict() for k in self.keyframes],
            "settings": self.settings.to_dict(),
            "isDefault": self.is_default,
            "createdAt": self.created_at.isoformat(),
        }
        if include_paths:
            data["movementPaths"] = [p.to_dict() for p in self.movement_paths]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AnimationSequence":
        return cls(
            id=data["id"],
            play_id=data["playId"],
            name=data["name"],
            description=data.get("description"),
            duration=float(data["duration"]),
            frames=[AnimationFrame.from_dict(f) for f in data.get("frames", [])],
            keyframes=[Keyframe.from_dict(k) for k in data.get("keyframes", [])],
            settings=AnimationSettings.from_dict(data.get("settings")),
            is_default=bool(data.get("isDefault", False)),
            movement_paths=[MovementPath.from_dict(p) for p in data.get("movementPaths", [])],
            created_at=(
                datetime.fromisoformat(data["createdAt"]) if data.get("createdAt")
                else datetime.now(timezone.utc)
            ),
        )
