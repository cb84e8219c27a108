"""Play diagram models.

A diagram is what the editor hands to the engine: player start positions
and the ordered actions drawn between them. It is never mutated by
generation.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from courtflow.core.constants import COURT_HEIGHT, COURT_MARGIN, COURT_WIDTH
from courtflow.core.enums import ActionType, ArrowType
from courtflow.core.vec2 import Vec2
from courtflow.errors import ValidationError


def _number(value: Any, name: str) -> float:
    """Coerce a JSON number, rejecting bools and strings."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number", field=name)
    return float(value)


def _optional_number(value: Any, name: str) -> Optional[float]:
    if value is None:
        return None
    return _number(value, name)


@dataclass(frozen=True)
class CourtDimensions:
    """Logical size of the court the diagram was drawn on."""

    width: float = COURT_WIDTH
    height: float = COURT_HEIGHT

    def bounds(self, margin: float = COURT_MARGIN) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) inset by margin."""
        return (margin, margin, self.width - margin, self.height - margin)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

    @classmethod
    def from_dict(cls, data: dict) -> "CourtDimensions":
        return cls(
            width=_number(data.get("width", COURT_WIDTH), "courtDimensions.width"),
            height=_number(data.get("height", COURT_HEIGHT), "courtDimensions.height"),
        )


@dataclass(frozen=True)
class Player:
    """A player marker on the diagram."""

    id: str
    label: str
    x: float
    y: float
    position: Optional[str] = None  # Free-text role from the editor ("PG", "C")

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_dict(self) -> dict:
        data = {"id": self.id, "label": self.label, "x": self.x, "y": self.y}
        if self.position is not None:
            data["position"] = self.position
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        if not isinstance(data, dict):
            raise ValidationError("Player must be an object", field="players")
        if "id" not in data:
            raise ValidationError("Player is missing an id", field="players.id")
        return cls(
            id=str(data["id"]),
            label=str(data.get("label", "")),
            x=_number(data.get("x"), "players.x"),
            y=_number(data.get("y"), "players.y"),
            position=data.get("position"),
        )


@dataclass(frozen=True)
class EntityReference:
    """Endpoint of an action: a player, a raw coordinate, or both."""

    player_id: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        """True when both coordinates are given (0 is a valid coordinate)."""
        return self.x is not None and self.y is not None

    @property
    def point(self) -> Optional[Vec2]:
        if not self.has_coordinates:
            return None
        return Vec2(self.x, self.y)

    def to_dict(self) -> dict:
        data = {}
        if self.player_id is not None:
            data["playerId"] = self.player_id
        if self.x is not None:
            data["x"] = self.x
        if self.y is not None:
            data["y"] = self.y
        return data

    @classmethod
    def from_dict(cls, data: Any, name: str) -> "EntityReference":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValidationError(f"Action {name} must be an object", field=f"actions.{name}")
        player_id = data.get("playerId")
        return cls(
            player_id=str(player_id) if player_id is not None else None,
            x=_optional_number(data.get("x"), f"actions.{name}.x"),
            y=_optional_number(data.get("y"), f"actions.{name}.y"),
        )


@dataclass(frozen=True)
class ActionStyle:
    """Optional rendering hints for an action arrow."""

    color: Optional[str] = None
    stroke_width: Optional[float] = None
    dash_array: Optional[tuple[float, ...]] = None
    arrow_type: Optional[ArrowType] = None

    def to_dict(self) -> dict:
        data: dict = {}
        if self.color is not None:
            data["color"] = self.color
        if self.stroke_width is not None:
            data["strokeWidth"] = self.stroke_width
        if self.dash_array is not None:
            data["dashArray"] = list(self.dash_array)
        if self.arrow_type is not None:
            data["arrowType"] = self.arrow_type.value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ActionStyle":
        dash = data.get("dashArray")
        arrow = data.get("arrowType")
        try:
            arrow_type = ArrowType(arrow) if arrow is not None else None
        except ValueError:
            raise ValidationError(f"Unknown arrow type: {arrow}", field="actions.style.arrowType")
        return cls(
            color=data.get("color"),
            stroke_width=_optional_number(data.get("strokeWidth"), "actions.style.strokeWidth"),
            dash_array=tuple(float(d) for d in dash) if dash is not None else None,
            arrow_type=arrow_type,
        )


@dataclass(frozen=True)
class PlayAction:
    """A typed action drawn between two endpoints."""

    id: str
    type: ActionType
    from_ref: EntityReference = field(default_factory=EntityReference)
    to_ref: EntityReference = field(default_factory=EntityReference)
    style: Optional[ActionStyle] = None
    sequence: Optional[int] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "type": self.type.value,
            "from": self.from_ref.to_dict(),
            "to": self.to_ref.to_dict(),
        }
        if self.style is not None:
            data["style"] = self.style.to_dict()
        if self.sequence is not None:
            data["sequence"] = self.sequence
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "PlayAction":
        if not isinstance(data, dict):
            raise ValidationError("Action must be an object", field="actions")
        if "id" not in data:
            raise ValidationError("Action is missing an id", field="actions.id")
        try:
            action_type = ActionType(data.get("type"))
        except ValueError:
            raise ValidationError(f"Unknown action type: {data.get('type')}", field="actions.type")
        style = data.get("style")
        return cls(
            id=str(data["id"]),
            type=action_type,
            from_ref=EntityReference.from_dict(data.get("from"), "from"),
            to_ref=EntityReference.from_dict(data.get("to"), "to"),
            style=ActionStyle.from_dict(style) if style else None,
            sequence=data.get("sequence"),
        )


@dataclass(frozen=True)
class PlayDiagram:
    """
    Static play diagram: players and ordered actions.

    Actions keep the order the editor stored them in; that order drives
    the action windows of the timeline.
    """

    players: tuple[Player, ...] = ()
    actions: tuple[PlayAction, ...] = ()
    court: CourtDimensions = field(default_factory=CourtDimensions)

    def get_player(self, player_id: Optional[str]) -> Optional[Player]:
        """Find a player by id, None when absent."""
        if player_id is None:
            return None
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    @property
    def is_empty(self) -> bool:
        return not self.players and not self.actions

    def to_dict(self) -> dict:
        return {
            "players": [p.to_dict() for p in self.players],
            "actions": [a.to_dict() for a in self.actions],
            "courtDimensions": self.court.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "PlayDiagram":
        """Decode the editor's diagram JSON.

        Missing players/actions are treated as empty. Structurally broken
        input raises ValidationError; references to unknown players are
        accepted here and skipped during generation.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValidationError("Diagram must be an object", field="diagram")
        players = data.get("players") or []
        actions = data.get("actions") or []
        court = data.get("courtDimensions")
        return cls(
            players=tuple(Player.from_dict(p) for p in players),
            actions=tuple(PlayAction.from_dict(a) for a in actions),
            court=CourtDimensions.from_dict(court) if court else CourtDimensions(),
        )
