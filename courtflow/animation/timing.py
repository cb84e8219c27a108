"""Action window timing.

Every action gets an equal slice of the action time, in diagram order:

    |-- setup 10% --|-- action 1 --|-- action 2 --| ... |-- cooldown 10% --|
                    |<-------------- action time 80% -------------->|

Path building, keyframes and frame sampling all read windows from here
so they can never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass

from courtflow.core.constants import ACTION_FRACTION, SETUP_FRACTION


@dataclass(frozen=True, slots=True)
class ActionWindow:
    """Time slice [start, end] owned by one diagram action."""
    index: int
    start: float
    end: float

    def contains(self, timestamp: float) -> bool:
        return self.start <= timestamp <= self.end

    def progress_at(self, timestamp: float) -> float:
        """Normalized position inside the window, clamped to [0, 1]."""
        width = self.end - self.start
        if width <= 0:
            return 1.0
        return max(0.0, min(1.0, (timestamp - self.start) / width))


def action_windows(action_count: int, duration: float) -> list[ActionWindow]:
    """Windows for action_count actions over a timeline of duration ms.

    Returns an empty list for zero actions.
    """
    if action_count <= 0:
        return []
    setup_time = duration * SETUP_FRACTION
    slice_width = (duration * ACTION_FRACTION) / action_count
    windows = []
    for index in range(action_count):
        start = setup_time + index * slice_width
        windows.append(ActionWindow(index=index, start=start, end=start + slice_width))
    return windows
