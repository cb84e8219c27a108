"""Nearest-match lookups over frames and keyframes.

Playback time moves in 60Hz ticks scaled by speed, so it rarely lands on
a sampled timestamp. Lookups pick the closest sample rather than the one
at or before the current time.
"""

from bisect import bisect_left
from typing import Optional, Sequence, TypeVar

from courtflow.core.models import AnimationFrame, Keyframe

T = TypeVar("T")


def nearest_index(timestamps: Sequence[float], timestamp: float) -> Optional[int]:
    """Index of the closest value in a sorted sequence.

    Ties go to the earlier value. None for an empty sequence.
    """
    if not timestamps:
        return None
    i = bisect_left(timestamps, timestamp)
    if i == 0:
        return 0
    if i == len(timestamps):
        return len(timestamps) - 1
    before = timestamps[i - 1]
    after = timestamps[i]
    return i if after - timestamp < timestamp - before else i - 1


class TimelineIndex:
    """Sorted view over items with a timestamp, for repeated lookups."""

    def __init__(self, items: Sequence[T]) -> None:
        self._items = sorted(items, key=lambda item: item.timestamp)
        self._timestamps = [item.timestamp for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list:
        return list(self._items)

    def nearest(self, timestamp: float, max_distance: Optional[float] = None):
        """Closest item, or None if empty or farther than max_distance."""
        i = nearest_index(self._timestamps, timestamp)
        if i is None:
            return None
        if max_distance is not None and abs(self._timestamps[i] - timestamp) > max_distance:
            return None
        return self._items[i]

    def before(self, timestamp: float):
        """Latest item strictly before timestamp."""
        i = bisect_left(self._timestamps, timestamp)
        return self._items[i - 1] if i > 0 else None

    def after(self, timestamp: float):
        """Earliest item strictly after timestamp."""
        for i in range(bisect_left(self._timestamps, timestamp), len(self._items)):
            if self._timestamps[i] > timestamp:
                return self._items[i]
        return None


def nearest_frame(frames: Sequence[AnimationFrame], timestamp: float) -> Optional[AnimationFrame]:
    """Frame whose timestamp is closest to timestamp."""
    return TimelineIndex(frames).nearest(timestamp)


def nearest_keyframe(
    keyframes: Sequence[Keyframe],
    timestamp: float,
    max_distance: float,
) -> Optional[Keyframe]:
    """Closest keyframe, only if within max_distance ms."""
    return TimelineIndex(keyframes).nearest(timestamp, max_distance=max_distance)
