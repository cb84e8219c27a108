"""Tests for the playback transport state machine."""

import pytest

from courtflow.core.enums import KeyframeType, PlaybackDirection
from courtflow.core.models import AnimationSequence, AnimationSettings, Keyframe
from courtflow.playback import AnimationPlayback, PlaybackTransport, format_time
from courtflow.playback.lookup import nearest_index

TICK_MS = 1000 / 60


@pytest.fixture
def transport(cut_sequence) -> PlaybackTransport:
    return PlaybackTransport(cut_sequence)


@pytest.fixture
def two_keyframe_sequence() -> AnimationSequence:
    return AnimationSequence(
        id="kf",
        play_id="play-1",
        name="Two keyframes",
        duration=10000,
        keyframes=[
            Keyframe(id="start", timestamp=0, name="Play Start"),
            Keyframe(id="mid", timestamp=5000, name="Screen", type=KeyframeType.ACTION),
        ],
    )


class TestTick:
    def test_paused_tick_does_nothing(self, transport):
        assert transport.tick() == 0

    def test_tick_advances_sixtieth_of_a_second(self, transport):
        transport.play()
        assert transport.tick() == pytest.approx(TICK_MS)

    def test_speed_scales_tick(self, transport):
        transport.set_speed(2.0)
        transport.play()
        assert transport.tick() == pytest.approx(2 * TICK_MS)

    def test_backward_direction(self, transport):
        transport.seek(5000)
        transport.set_direction(PlaybackDirection.BACKWARD)
        transport.play()
        assert transport.tick() == pytest.approx(5000 - TICK_MS)

    def test_loop_wraps_to_start(self, transport):
        transport.set_loop(True)
        transport.seek(9990)
        transport.play()
        assert transport.tick() == 0
        assert transport.is_playing

    def test_loop_backward_wraps_to_end(self, transport):
        transport.set_loop(True)
        transport.set_direction(PlaybackDirection.BACKWARD)
        transport.seek(5)
        transport.play()
        assert transport.tick() == 10000
        assert transport.is_playing

    def test_no_loop_clamps_and_stops(self, transport):
        transport.seek(9990)
        transport.play()
        assert transport.tick() == 10000
        assert not transport.is_playing
        assert transport.tick() == 10000

    def test_no_loop_backward_stops_at_zero(self, transport):
        transport.set_direction(PlaybackDirection.BACKWARD)
        transport.seek(5)
        transport.play()
        assert transport.tick() == 0
        assert not transport.is_playing

    def test_time_stays_in_range_for_many_ticks(self, transport):
        transport.set_loop(True)
        transport.set_speed(2.0)
        transport.play()
        for _ in range(1000):
            assert 0 <= transport.tick() <= transport.duration


class TestCommands:
    def test_seek_clamps(self, transport):
        assert transport.seek(-50) == 0
        assert transport.seek(20000) == 10000

    def test_seek_keeps_play_state(self, transport):
        transport.play()
        transport.seek(3000)
        assert transport.is_playing

    def test_toggle(self, transport):
        assert transport.toggle() is True
        assert transport.toggle() is False

    def test_restart(self, transport):
        transport.seek(4000)
        transport.play()
        transport.restart()
        assert transport.current_time == 0
        assert not transport.is_playing

    def test_non_positive_speed_ignored(self, transport):
        transport.set_speed(0)
        transport.set_speed(-1)
        assert transport.playback.playback_speed == 1.0

    def test_loop_defaults_from_settings(self, cut_sequence):
        cut_sequence.settings = AnimationSettings(loop=True)
        assert PlaybackTransport(cut_sequence).playback.loop is True

    def test_initial_time_clamped(self, cut_sequence):
        transport = PlaybackTransport(cut_sequence, playback=AnimationPlayback(current_time=99999))
        assert transport.current_time == 10000


class TestKeyframes:
    def test_dead_zone(self, two_keyframe_sequence):
        transport = PlaybackTransport(two_keyframe_sequence)
        transport.seek(4600)
        assert transport.current_keyframe().id == "mid"
        transport.seek(4000)
        assert transport.current_keyframe() is None
        transport.seek(4400)
        assert transport.current_keyframe() is None

    def test_next_and_previous(self, transport):
        assert transport.next_keyframe().id == "action_a1"
        assert transport.current_time == 1000
        assert transport.next_keyframe().id == "end"
        assert transport.next_keyframe() is None
        assert transport.current_time == 10000
        assert transport.previous_keyframe().id == "action_a1"

    def test_previous_at_start_is_noop(self, transport):
        assert transport.previous_keyframe() is None
        assert transport.current_time == 0

    def test_navigation_from_between_keyframes(self, transport):
        transport.seek(4000)
        assert transport.previous_keyframe().timestamp == 1000


class TestResolution:
    def test_nearest_frame(self, transport):
        transport.seek(5010)
        assert transport.current_frame().timestamp == 5000

    def test_ties_go_to_earlier(self):
        assert nearest_index([0, 100], 50) == 0
        assert nearest_index([0, 100], 51) == 1

    def test_empty_frames(self, two_keyframe_sequence):
        assert PlaybackTransport(two_keyframe_sequence).current_frame() is None

    def test_snapshot(self, transport):
        transport.seek(6500)
        snapshot = transport.snapshot()
        assert snapshot["currentTime"] == 6500
        assert snapshot["progress"] == 0.65
        assert snapshot["timeLabel"] == "0:06 / 0:10"
        assert snapshot["currentKeyframe"] is None

    @pytest.mark.parametrize("ms,label", [(0, "0:00"), (9999, "0:09"), (75000, "1:15")])
    def test_format_time(self, ms, label):
        assert format_time(ms) == label
