"""Timeline generation: movement paths, keyframes and frame sampling."""

from courtflow.animation.generator import GeneratedAnimation, generate_default_animation
from courtflow.animation.keyframes import build_keyframes
from courtflow.animation.paths import build_demo_paths, build_movement_paths
from courtflow.animation.roles import CourtRole
from courtflow.animation.sampler import frame_count, frame_timestamps, sample_frames
from courtflow.animation.timing import ActionWindow, action_windows

__all__ = [
    "ActionWindow",
    "CourtRole",
    "GeneratedAnimation",
    "action_windows",
    "build_demo_paths",
    "build_keyframes",
    "build_movement_paths",
    "frame_count",
    "frame_timestamps",
    "generate_default_animation",
    "sample_frames",
]
