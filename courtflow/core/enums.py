"""Enumerations shared by diagrams, timelines and playback."""

from enum import Enum


class ActionType(str, Enum):
    """Kinds of action a coach can draw on a play diagram."""

    PASS = "pass"
    CUT = "cut"
    SCREEN = "screen"
    DRIBBLE = "dribble"
    SHOT = "shot"

    @property
    def display(self) -> str:
        """Capitalized name used in keyframe labels."""
        return self.value.capitalize()


class ArrowType(str, Enum):
    """Line style of an action arrow."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"


class InterpolationType(str, Enum):
    """How a movement path moves between its endpoints.

    Every type is sampled linearly for now; the others are accepted so
    stored paths from newer editors still load.
    """

    LINEAR = "linear"
    CURVE = "curve"
    SPRINT = "sprint"
    JOG = "jog"


class KeyframeType(str, Enum):
    """Semantic category of a keyframe."""

    MOVEMENT = "movement"
    ACTION = "action"
    HIGHLIGHT = "highlight"
    PAUSE = "pause"


class PlaybackDirection(str, Enum):
    """Direction the transport advances time."""

    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def sign(self) -> int:
        return 1 if self == PlaybackDirection.FORWARD else -1
