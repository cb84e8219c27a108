"""Keyframe extraction.

Keyframes mark narrative time, not motion: an action gets a keyframe even
when it produced no movement path.
"""

from courtflow.animation.timing import action_windows
from courtflow.core.enums import KeyframeType
from courtflow.core.models import Keyframe, PlayDiagram

START_KEYFRAME_ID = "start"
END_KEYFRAME_ID = "end"


def build_keyframes(diagram: PlayDiagram, duration: float) -> list[Keyframe]:
    """Start, one keyframe per action at its window start, end.

    Ordered by timestamp ascending.
    """
    keyframes = [
        Keyframe(
            id=START_KEYFRAME_ID,
            timestamp=0.0,
            name="Play Start",
            description="Initial setup",
            type=KeyframeType.MOVEMENT,
        )
    ]

    windows = action_windows(len(diagram.actions), duration)
    for action, window in zip(diagram.actions, windows):
        keyframes.append(Keyframe(
            id=f"action_{action.id}",
            timestamp=window.start,
            name=f"{action.type.display} Action",
            description=f"Player executes {action.type.value}",
            type=KeyframeType.ACTION,
        ))

    keyframes.append(Keyframe(
        id=END_KEYFRAME_ID,
        timestamp=float(duration),
        name="Play Complete",
        description="Final positions",
        type=KeyframeType.MOVEMENT,
    ))

    return keyframes
