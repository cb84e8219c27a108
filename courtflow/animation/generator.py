"""Default animation generation: paths, then keyframes, then frames."""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from courtflow.animation.keyframes import build_keyframes
from courtflow.animation.paths import build_movement_paths
from courtflow.animation.sampler import sample_frames
from courtflow.core.constants import DEFAULT_FPS
from courtflow.core.models import AnimationFrame, Keyframe, MovementPath, PlayDiagram

logger = logging.getLogger(__name__)


@dataclass
class GeneratedAnimation:
    """Everything generation derives from one diagram."""
    frames: list[AnimationFrame] = field(default_factory=list)
    keyframes: list[Keyframe] = field(default_factory=list)
    movement_paths: list[MovementPath] = field(default_factory=list)


def generate_default_animation(
    diagram: PlayDiagram,
    duration: float,
    fps: float = DEFAULT_FPS,
    rng: Optional[random.Random] = None,
) -> GeneratedAnimation:
    """Run the full pipeline for a diagram.

    Pure and synchronous; safe to call concurrently for different diagrams.
    """
    paths = build_movement_paths(diagram, duration, rng=rng)
    keyframes = build_keyframes(diagram, duration)
    frames = sample_frames(diagram, paths, duration, fps)

    logger.debug(
        "Generated animation: %d players, %d actions -> %d paths, %d keyframes, %d frames",
        len(diagram.players), len(diagram.actions), len(paths), len(keyframes), len(frames),
    )
    return GeneratedAnimation(frames=frames, keyframes=keyframes, movement_paths=paths)
