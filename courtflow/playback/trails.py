"""Per-player position history for drawing movement trails.

A rendering aid owned by one playback session; it is never part of the
sequence data.
"""

from collections import deque
from typing import Optional

from courtflow.core.enums import PlaybackDirection
from courtflow.core.models import AnimationFrame
from courtflow.core.vec2 import Vec2


class TrailRecorder:
    """Rolling window of the last trail_length positions per player."""

    def __init__(self, trail_length: int = 5) -> None:
        self.trail_length = max(0, trail_length)
        self._trails: dict[str, deque[Vec2]] = {}
        self._last_timestamp: Optional[float] = None

    @property
    def last_timestamp(self) -> Optional[float]:
        """Timestamp of the most recently recorded frame."""
        return self._last_timestamp

    def record(
        self,
        frame: AnimationFrame,
        direction: PlaybackDirection = PlaybackDirection.FORWARD,
    ) -> None:
        """Append each player's position from frame.

        A frame that jumps against the direction of play (restart, loop
        wrap, scrubbing) clears the trails first. Re-recording the same
        timestamp is a no-op.
        """
        last = self._last_timestamp
        if last is not None:
            if frame.timestamp == last:
                return
            if (frame.timestamp - last) * direction.sign < 0:
                self.reset()
        self._last_timestamp = frame.timestamp
        if self.trail_length == 0:
            return

        for player in frame.players:
            trail = self._trails.get(player.id)
            if trail is None:
                trail = deque(maxlen=self.trail_length)
                self._trails[player.id] = trail
            trail.append(player.position)

    def reset(self) -> None:
        self._trails.clear()
        self._last_timestamp = None

    def trail(self, player_id: str) -> list[Vec2]:
        """Oldest-first positions for a player."""
        return list(self._trails.get(player_id, ()))

    def to_dict(self) -> dict[str, list[dict]]:
        return {pid: [p.to_dict() for p in trail] for pid, trail in self._trails.items()}
