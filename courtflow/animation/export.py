"""Export animation sequences to JSON for video/image renderers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from courtflow.animation.sampler import frame_timestamps
from courtflow.core.models import AnimationFrame, AnimationSequence
from courtflow.playback.lookup import TimelineIndex


def export_frames(sequence: AnimationSequence, fps: Optional[float] = None) -> Iterator[AnimationFrame]:
    """Replay the full duration at fps, yielding the nearest stored frame.

    Deterministic: the same sequence always yields the same frames. fps
    defaults to the sequence's own setting.
    """
    index = TimelineIndex(sequence.frames)
    if len(index) == 0:
        return
    for timestamp in frame_timestamps(sequence.duration, fps or sequence.settings.fps):
        yield index.nearest(timestamp)


@dataclass
class SequenceExport:
    """Complete sequence export."""
    metadata: Dict[str, Any]
    keyframes: List[dict]
    frames: List[dict]

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(
            {"metadata": self.metadata, "keyframes": self.keyframes, "frames": self.frames},
            indent=2,
        )

    def save(self, path: str) -> None:
        """Save to file."""
        with open(path, 'w') as f:
            f.write(self.to_json())


def export_sequence(sequence: AnimationSequence, fps: Optional[float] = None) -> SequenceExport:
    """Build an export of sequence resampled at fps."""
    export_fps = fps or sequence.settings.fps
    frames = [frame.to_dict() for frame in export_frames(sequence, export_fps)]
    return SequenceExport(
        metadata={
            "id": sequence.id,
            "playId": sequence.play_id,
            "name": sequence.name,
            "description": sequence.description,
            "duration": sequence.duration,
            "fps": export_fps,
            "frameCount": len(frames),
            "settings": sequence.settings.to_dict(),
        },
        keyframes=[k.to_dict() for k in sequence.keyframes],
        frames=frames,
    )
