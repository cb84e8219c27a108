"""Session manager for live animation playback.

Each session owns a transport and a trail recorder and, while playing, an
asyncio task that ticks the transport at 60Hz and hands every resolved
frame to a render callback.
"""

import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Union
from uuid import UUID, uuid4

from courtflow.core.enums import PlaybackDirection
from courtflow.core.models import AnimationFrame, AnimationSequence
from courtflow.playback.trails import TrailRecorder
from courtflow.playback.transport import AnimationPlayback, PlaybackTransport

logger = logging.getLogger(__name__)


@dataclass
class FrameUpdate:
    """What the render callback receives each tick."""
    session_id: UUID
    playback: dict
    frame: Optional[AnimationFrame]
    trails: dict[str, list[dict]]

    def to_dict(self) -> dict:
        return {
            "sessionId": str(self.session_id),
            "playback": self.playback,
            "frame": self.frame.to_dict() if self.frame else None,
            "trails": self.trails,
        }


Callback = Callable[[Any], Union[None, Awaitable[None]]]


@dataclass
class PlaybackSession:
    """A playback session over one animation sequence."""

    session_id: UUID
    transport: PlaybackTransport
    trails: TrailRecorder
    on_tick: Optional[Callback] = None
    on_complete: Optional[Callback] = None

    _task: Optional[asyncio.Task] = field(default=None, repr=False)
    _stop_requested: bool = field(default=False, repr=False)

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def frame_update(self) -> FrameUpdate:
        """Resolve the current frame and record it into the trails."""
        frame = self.transport.current_frame()
        if frame is not None and self.transport.sequence.settings.show_trails:
            self.trails.record(frame, self.transport.playback.direction)
        return FrameUpdate(
            session_id=self.session_id,
            playback=self.transport.snapshot(),
            frame=frame,
            trails=self.trails.to_dict(),
        )


class PlaybackSessionManager:
    """
    Manages active playback sessions.

    The session table is guarded by an asyncio lock. Transport commands
    and ticks run without awaiting in between, so a transport is never
    mutated by two coroutines at once.
    """

    def __init__(self) -> None:
        self._sessions: dict[UUID, PlaybackSession] = {}
        self._lock = asyncio.Lock()

    async def create_session(
        self,
        sequence: AnimationSequence,
        playback: Optional[AnimationPlayback] = None,
        tick_hz: Optional[int] = None,
        keyframe_snap_ms: Optional[float] = None,
    ) -> PlaybackSession:
        """Create a paused session at t=0 (unless playback is given)."""
        kwargs: dict[str, Any] = {}
        if tick_hz:
            kwargs["tick_hz"] = tick_hz
        if keyframe_snap_ms is not None:
            kwargs["keyframe_snap_ms"] = keyframe_snap_ms
        transport = PlaybackTransport(sequence, playback=playback, **kwargs)
        # auto_play only applies once a tick loop is started
        autoplay = transport.is_playing
        transport.pause()

        session = PlaybackSession(
            session_id=uuid4(),
            transport=transport,
            trails=TrailRecorder(sequence.settings.trail_length),
        )
        async with self._lock:
            self._sessions[session.session_id] = session

        logger.info("Created playback session %s for animation %s", session.session_id, sequence.id)
        if autoplay:
            await self.start(session.session_id)
        return session

    async def get_session(self, session_id: UUID) -> Optional[PlaybackSession]:
        async with self._lock:
            return self._sessions.get(session_id)

    async def list_sessions(self) -> list[UUID]:
        async with self._lock:
            return list(self._sessions.keys())

    async def delete_session(self, session_id: UUID) -> bool:
        """
        Delete a session, stopping its tick loop.

        Returns True if the session existed.
        """
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            await self._stop_session(session)
            del self._sessions[session_id]
            return True

    async def cleanup_all(self) -> None:
        """Stop and drop every session (application shutdown)."""
        async with self._lock:
            for session in self._sessions.values():
                await self._stop_session(session)
            self._sessions.clear()

    # =========================================================================
    # Tick loop control
    # =========================================================================

    async def start(
        self,
        session_id: UUID,
        on_tick: Optional[Callback] = None,
        on_complete: Optional[Callback] = None,
    ) -> bool:
        """
        Start playing and run the tick loop.

        Callbacks may be plain functions or coroutine functions. Passing
        None keeps any callbacks registered earlier.

        Returns:
            False if the session does not exist
        """
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False

            if on_tick is not None:
                session.on_tick = on_tick
            if on_complete is not None:
                session.on_complete = on_complete

            transport = session.transport
            if not transport.playback.loop and self._at_end(transport):
                # Playing from the end replays from the start
                transport.seek(0.0 if transport.playback.direction == PlaybackDirection.FORWARD
                               else transport.duration)
            transport.play()

            if not session.is_running:
                session._stop_requested = False
                session._task = asyncio.create_task(self._run_tick_loop(session))
            return True

    async def pause(self, session_id: UUID) -> bool:
        """Pause playback; the tick loop exits on its next iteration."""
        return await self._apply(session_id, lambda t: t.pause())

    async def stop(self, session_id: UUID) -> bool:
        """Pause and wait for the tick loop to finish."""
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            await self._stop_session(session)
            return True

    # =========================================================================
    # Transport commands
    # =========================================================================

    async def seek(self, session_id: UUID, timestamp: float) -> bool:
        return await self._apply(session_id, lambda t: t.seek(timestamp))

    async def set_speed(self, session_id: UUID, speed: float) -> bool:
        return await self._apply(session_id, lambda t: t.set_speed(speed))

    async def set_loop(self, session_id: UUID, loop: bool) -> bool:
        return await self._apply(session_id, lambda t: t.set_loop(loop))

    async def set_direction(self, session_id: UUID, direction: PlaybackDirection) -> bool:
        return await self._apply(session_id, lambda t: t.set_direction(direction))

    async def restart(self, session_id: UUID) -> bool:
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            session.transport.restart()
            session.trails.reset()
            return True

    async def previous_keyframe(self, session_id: UUID) -> bool:
        return await self._apply(session_id, lambda t: t.previous_keyframe())

    async def next_keyframe(self, session_id: UUID) -> bool:
        return await self._apply(session_id, lambda t: t.next_keyframe())

    async def _apply(self, session_id: UUID, command: Callable[[PlaybackTransport], Any]) -> bool:
        async with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            command(session.transport)
            return True

    # =========================================================================
    # Internals
    # =========================================================================

    @staticmethod
    def _at_end(transport: PlaybackTransport) -> bool:
        if transport.playback.direction == PlaybackDirection.FORWARD:
            return transport.current_time >= transport.duration
        return transport.current_time <= 0

    async def _stop_session(self, session: PlaybackSession) -> None:
        """Stop a session's tick loop (must hold lock)."""
        session.transport.pause()
        if session.is_running:
            session._stop_requested = True
            try:
                await asyncio.wait_for(session._task, timeout=1.0)
            except asyncio.TimeoutError:
                session._task.cancel()
                try:
                    await session._task
                except asyncio.CancelledError:
                    pass
        session._task = None

    async def _run_tick_loop(self, session: PlaybackSession) -> None:
        """Tick until paused, stopped, or the transport stops itself at an end."""
        transport = session.transport
        interval = transport.tick_ms / 1000.0
        completed = False

        while not session._stop_requested:
            # No await between the check and the tick, so commands from
            # other coroutines land between ticks, never inside one
            if not transport.is_playing:
                break
            transport.tick()
            update = session.frame_update()
            completed = not transport.is_playing

            await self._notify(session.on_tick, update)
            if completed:
                break
            await asyncio.sleep(interval)

        if completed:
            logger.debug("Playback session %s reached the end", session.session_id)
            await self._notify(session.on_complete, transport.snapshot())

    @staticmethod
    async def _notify(callback: Optional[Callback], payload: Any) -> None:
        if callback is None:
            return
        try:
            result = callback(payload)
            if inspect.isawaitable(result):
                await result
        except Exception:
            # Render callbacks must not stop playback
            logger.exception("Playback callback failed")


# Global session manager instance
_session_manager: Optional[PlaybackSessionManager] = None


def get_session_manager() -> PlaybackSessionManager:
    """Get the global playback session manager."""
    global _session_manager
    if _session_manager is None:
        _session_manager = PlaybackSessionManager()
    return _session_manager
