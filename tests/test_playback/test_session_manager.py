"""Tests for the async playback session manager."""

import asyncio

import pytest

from courtflow.core.models import AnimationSettings
from courtflow.playback import FrameUpdate, PlaybackSessionManager


@pytest.fixture
def manager() -> PlaybackSessionManager:
    return PlaybackSessionManager()


class TestSessions:
    def test_create_get_delete(self, manager, cut_sequence, run):
        async def scenario():
            session = await manager.create_session(cut_sequence)
            assert await manager.get_session(session.session_id) is session
            assert await manager.list_sessions() == [session.session_id]
            assert await manager.delete_session(session.session_id) is True
            assert await manager.delete_session(session.session_id) is False
            assert await manager.get_session(session.session_id) is None

        run(scenario())

    def test_created_paused_at_zero(self, manager, cut_sequence, run):
        session = run(manager.create_session(cut_sequence))
        assert not session.transport.is_playing
        assert session.transport.current_time == 0
        assert not session.is_running

    def test_commands_on_missing_session(self, manager, run):
        from uuid import uuid4

        missing = uuid4()
        assert run(manager.seek(missing, 100)) is False
        assert run(manager.start(missing)) is False


class TestTickLoop:
    def test_plays_to_the_end_and_completes(self, manager, cut_sequence, run):
        cut_sequence.duration = 1000
        cut_sequence.frames = cut_sequence.frames[:31]
        updates: list[FrameUpdate] = []
        completed: list[dict] = []

        async def scenario():
            session = await manager.create_session(cut_sequence, tick_hz=1000)
            await manager.set_speed(session.session_id, 4.0)
            await manager.start(session.session_id, on_tick=updates.append, on_complete=completed.append)
            await asyncio.wait_for(session._task, timeout=5)
            return session

        session = run(scenario())
        assert session.transport.current_time == 1000
        assert not session.transport.is_playing
        assert len(completed) == 1
        assert completed[0]["currentTime"] == 1000
        assert updates[-1].frame.timestamp == 1000
        assert updates[-1].trails["p1"]

    def test_async_callbacks_and_pause(self, manager, cut_sequence, run):
        ticks = []

        async def on_tick(update: FrameUpdate) -> None:
            ticks.append(update.playback["currentTime"])

        async def scenario():
            session = await manager.create_session(cut_sequence, tick_hz=1000)
            await manager.start(session.session_id, on_tick=on_tick)
            await asyncio.sleep(0.05)
            await manager.stop(session.session_id)
            return session

        session = run(scenario())
        assert ticks
        assert ticks == sorted(ticks)
        assert not session.is_running
        assert not session.transport.is_playing

    def test_failing_callback_does_not_stop_playback(self, manager, cut_sequence, run):
        calls = []

        def on_tick(update):
            calls.append(update)
            raise RuntimeError("renderer crashed")

        async def scenario():
            session = await manager.create_session(cut_sequence, tick_hz=1000)
            await manager.start(session.session_id, on_tick=on_tick)
            await asyncio.sleep(0.03)
            await manager.cleanup_all()

        run(scenario())
        assert len(calls) > 1

    def test_start_at_end_replays(self, manager, cut_sequence, run):
        async def scenario():
            session = await manager.create_session(cut_sequence, tick_hz=1000)
            await manager.seek(session.session_id, 10000)
            await manager.start(session.session_id)
            time_after_start = session.transport.current_time
            await manager.stop(session.session_id)
            return time_after_start

        assert run(scenario()) < 10000

    def test_autoplay_starts_loop(self, manager, cut_sequence, run):
        cut_sequence.settings = AnimationSettings(auto_play=True)

        async def scenario():
            session = await manager.create_session(cut_sequence, tick_hz=1000)
            running = session.is_running
            await manager.cleanup_all()
            return running

        assert run(scenario()) is True

    def test_restart_resets_trails(self, manager, cut_sequence, run):
        async def scenario():
            session = await manager.create_session(cut_sequence)
            await manager.seek(session.session_id, 5000)
            session.frame_update()
            await manager.restart(session.session_id)
            return session

        session = run(scenario())
        assert session.trails.to_dict() == {}
        assert session.transport.current_time == 0
