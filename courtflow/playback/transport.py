"""Playback transport state machine.

The transport owns an AnimationPlayback record and applies the legal
transitions to it: tick, play/pause, seek, speed, loop, restart and
keyframe navigation. It assumes a well-formed sequence (validated at
creation) and never raises while playing; out-of-range input is clamped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from courtflow.core.constants import KEYFRAME_SNAP_MS, SPEED_PRESETS, TICK_HZ
from courtflow.core.enums import PlaybackDirection
from courtflow.core.models import AnimationFrame, AnimationSequence, Keyframe
from courtflow.playback.lookup import TimelineIndex

logger = logging.getLogger(__name__)

__all__ = ["AnimationPlayback", "PlaybackTransport", "SPEED_PRESETS", "format_time"]


@dataclass
class AnimationPlayback:
    """Ephemeral playback state for one viewing session.

    Invariant: 0 <= current_time <= duration whenever observed.
    """
    is_playing: bool = False
    current_time: float = 0.0
    playback_speed: float = 1.0
    direction: PlaybackDirection = PlaybackDirection.FORWARD
    loop: bool = False

    def to_dict(self) -> dict:
        return {
            "isPlaying": self.is_playing,
            "currentTime": self.current_time,
            "playbackSpeed": self.playback_speed,
            "direction": self.direction.value,
            "loop": self.loop,
        }


class PlaybackTransport:
    """
    Drives playback of one animation sequence.

    Usage:
        transport = PlaybackTransport(sequence)
        transport.play()

        # Once per host animation frame (60Hz):
        transport.tick()
        frame = transport.current_frame()
    """

    def __init__(
        self,
        sequence: AnimationSequence,
        playback: Optional[AnimationPlayback] = None,
        tick_hz: int = TICK_HZ,
        keyframe_snap_ms: float = KEYFRAME_SNAP_MS,
    ) -> None:
        self.sequence = sequence
        self.playback = playback or AnimationPlayback(loop=sequence.settings.loop)
        self.tick_ms = 1000.0 / tick_hz
        self.keyframe_snap_ms = keyframe_snap_ms
        self._frames = TimelineIndex(sequence.frames)
        self._keyframes = TimelineIndex(sequence.keyframes)
        self.playback.current_time = self._clamp(self.playback.current_time)
        if sequence.settings.auto_play:
            self.playback.is_playing = True

    @property
    def duration(self) -> float:
        return self.sequence.duration

    @property
    def current_time(self) -> float:
        return self.playback.current_time

    @property
    def is_playing(self) -> bool:
        return self.playback.is_playing

    # =========================================================================
    # Transitions
    # =========================================================================

    def tick(self) -> float:
        """Advance one 60Hz step if playing.

        Past either end: wrap to the opposite end when looping, otherwise
        clamp and stop.

        Returns:
            Current time after the step
        """
        pb = self.playback
        if not pb.is_playing:
            return pb.current_time

        new_time = pb.current_time + self.tick_ms * pb.playback_speed * pb.direction.sign

        if pb.loop:
            if new_time >= self.duration:
                new_time = 0.0
            elif new_time < 0:
                new_time = self.duration
        else:
            if new_time >= self.duration:
                new_time = self.duration
                pb.is_playing = False
            elif new_time < 0:
                new_time = 0.0
                pb.is_playing = False

        pb.current_time = new_time
        return new_time

    def play(self) -> None:
        self.playback.is_playing = True

    def pause(self) -> None:
        self.playback.is_playing = False

    def toggle(self) -> bool:
        """Flip play/pause. Returns the new is_playing."""
        self.playback.is_playing = not self.playback.is_playing
        return self.playback.is_playing

    def seek(self, timestamp: float) -> float:
        """Jump to timestamp (clamped). Does not change play/pause."""
        self.playback.current_time = self._clamp(timestamp)
        return self.playback.current_time

    def set_speed(self, speed: float) -> None:
        """Replace the speed multiplier. Non-positive values are ignored."""
        if speed <= 0:
            logger.warning("Ignoring non-positive playback speed %s", speed)
            return
        self.playback.playback_speed = speed

    def set_loop(self, loop: bool) -> None:
        """Takes effect at the next boundary crossing."""
        self.playback.loop = loop

    def set_direction(self, direction: PlaybackDirection) -> None:
        self.playback.direction = direction

    def restart(self) -> None:
        """Back to the start, paused."""
        self.seek(0.0)
        self.pause()

    def previous_keyframe(self) -> Optional[Keyframe]:
        """Seek to the nearest keyframe strictly before the current time."""
        keyframe = self._keyframes.before(self.playback.current_time)
        if keyframe is not None:
            self.seek(keyframe.timestamp)
        return keyframe

    def next_keyframe(self) -> Optional[Keyframe]:
        """Seek to the nearest keyframe strictly after the current time."""
        keyframe = self._keyframes.after(self.playback.current_time)
        if keyframe is not None:
            self.seek(keyframe.timestamp)
        return keyframe

    # =========================================================================
    # Resolution
    # =========================================================================

    def current_frame(self) -> Optional[AnimationFrame]:
        """Sampled frame closest to the current time."""
        return self._frames.nearest(self.playback.current_time)

    def current_keyframe(self) -> Optional[Keyframe]:
        """Closest keyframe, or None outside the snap distance.

        The dead zone keeps labels from flickering between two keyframes
        while scrubbing through open timeline.
        """
        return self._keyframes.nearest(self.playback.current_time, max_distance=self.keyframe_snap_ms)

    @property
    def progress(self) -> float:
        """Fraction of the timeline played, 0-1."""
        if self.duration <= 0:
            return 0.0
        return self.playback.current_time / self.duration

    def snapshot(self) -> dict:
        """Playback state plus what a transport UI displays."""
        keyframe = self.current_keyframe()
        return {
            **self.playback.to_dict(),
            "duration": self.duration,
            "progress": self.progress,
            "timeLabel": f"{format_time(self.current_time)} / {format_time(self.duration)}",
            "currentKeyframe": keyframe.to_dict() if keyframe else None,
        }

    def _clamp(self, timestamp: float) -> float:
        return max(0.0, min(float(self.duration), timestamp))


def format_time(milliseconds: float) -> str:
    """Format ms as M:SS."""
    seconds = int(milliseconds // 1000)
    minutes, remaining = divmod(seconds, 60)
    return f"{minutes}:{remaining:02d}"
