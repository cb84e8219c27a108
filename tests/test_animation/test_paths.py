"""Tests for movement path building and demo motion."""

import random

import pytest

from courtflow.animation import CourtRole, action_windows, build_movement_paths
from courtflow.animation.roles import demo_target
from courtflow.core.enums import InterpolationType
from courtflow.core.models import PlayDiagram
from courtflow.core.vec2 import Vec2


class TestActionWindows:
    def test_single_action_spans_action_time(self):
        (window,) = action_windows(1, 10000)
        assert window.start == 1000
        assert window.end == 9000

    def test_windows_split_evenly_in_order(self):
        windows = action_windows(4, 10000)
        assert [w.start for w in windows] == [1000, 3000, 5000, 7000]
        assert windows[-1].end == 9000

    def test_zero_actions(self):
        assert action_windows(0, 10000) == []

    def test_progress_clamped(self):
        (window,) = action_windows(1, 10000)
        assert window.progress_at(0) == 0.0
        assert window.progress_at(5000) == 0.5
        assert window.progress_at(9500) == 1.0


class TestCutPaths:
    def test_cut_produces_one_linear_path(self, cut_diagram):
        paths = build_movement_paths(cut_diagram, 10000)
        assert len(paths) == 1
        path = paths[0]
        assert path.player_id == "p1"
        assert path.type == InterpolationType.LINEAR
        assert (path.start_time, path.end_time) == (1000, 9000)
        assert path.start_position == Vec2(400, 350)
        assert path.end_position == Vec2(400, 150)

    def test_cut_uses_its_own_window(self, mixed_diagram):
        paths = build_movement_paths(mixed_diagram, 9000)
        # Cut is the second of three actions: window [3300, 5700]
        assert len(paths) == 1
        assert paths[0].start_time == pytest.approx(3300)
        assert paths[0].end_time == pytest.approx(5700)

    def test_non_cut_actions_produce_no_paths(self):
        diagram = PlayDiagram.from_dict({
            "players": [{"id": "p1", "label": "1", "x": 400, "y": 350}],
            "actions": [
                {"id": "a1", "type": "pass", "from": {"playerId": "p1"}, "to": {"x": 100, "y": 100}},
                {"id": "a2", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 300, "y": 200}},
            ],
        })
        paths = build_movement_paths(diagram, 10000)
        assert len(paths) == 1
        assert paths[0].start_time == 5000

    def test_cut_target_at_origin_is_valid(self):
        diagram = PlayDiagram.from_dict({
            "players": [{"id": "p1", "label": "1", "x": 400, "y": 350}],
            "actions": [{"id": "a1", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 0, "y": 0}}],
        })
        (path,) = build_movement_paths(diagram, 10000)
        assert path.end_position == Vec2(0, 0)

    def test_unresolvable_cuts_fall_back_to_demo(self):
        diagram = PlayDiagram.from_dict({
            "players": [{"id": "p1", "label": "1", "x": 400, "y": 350}],
            "actions": [
                {"id": "a1", "type": "cut", "from": {"playerId": "ghost"}, "to": {"x": 1, "y": 1}},
                {"id": "a2", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 1}},
            ],
        })
        (path,) = build_movement_paths(diagram, 10000)
        # Demo move for a point guard
        assert path.start_time == 2000
        assert path.end_position == Vec2(400, 250)

    def test_paths_never_overlap_per_player(self):
        diagram = PlayDiagram.from_dict({
            "players": [{"id": "p1", "label": "1", "x": 400, "y": 350}],
            "actions": [
                {"id": "a1", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 300, "y": 300}},
                {"id": "a2", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 200, "y": 200}},
            ],
        })
        first, second = build_movement_paths(diagram, 10000)
        assert first.start_time < first.end_time <= second.start_time < second.end_time


class TestDemoPaths:
    def test_empty_diagram_has_no_paths(self):
        assert build_movement_paths(PlayDiagram(), 10000) == []

    def test_one_path_per_player_staggered(self, five_player_diagram):
        paths = build_movement_paths(five_player_diagram, 10000)
        assert [p.player_id for p in paths] == ["p1", "p2", "p3", "p4", "p5"]
        assert [p.start_time for p in paths] == [2000, 2500, 3000, 3500, 4000]
        assert all(p.end_time - p.start_time == 2000 for p in paths)

    def test_role_moves(self, five_player_diagram):
        targets = {p.player_id: p.end_position for p in build_movement_paths(five_player_diagram, 10000)}
        assert targets["p1"] == Vec2(400, 250)  # PG drives
        assert targets["p2"] == Vec2(650, 330)  # SG to the corner
        assert targets["p3"] == Vec2(160, 350)  # SF to the opposite wing
        assert targets["p4"] == Vec2(680, 120)  # PF steps in
        assert targets["p5"] == Vec2(130, 110)  # C slides

    def test_moves_never_pass_eighty_percent(self, five_player_diagram):
        paths = build_movement_paths(five_player_diagram, 3000)
        # Start at 600ms, stagger 500ms, cut off at 2400ms
        assert [p.start_time for p in paths] == pytest.approx([600, 1100, 1600, 2100])
        assert all(p.end_time <= 2400 for p in paths)
        assert all(p.start_time < p.end_time for p in paths)

    def test_targets_clamped_to_court(self):
        diagram = PlayDiagram.from_dict({
            "players": [{"id": "p2", "label": "2", "x": 740, "y": 540}],
        })
        (path,) = build_movement_paths(diagram, 10000)
        assert path.end_position == Vec2(750, 550)

    def test_unknown_label_jitter_is_deterministic(self):
        diagram = PlayDiagram.from_dict({"players": [{"id": "x", "label": "X", "x": 400, "y": 300}]})
        first = build_movement_paths(diagram, 10000)
        second = build_movement_paths(diagram, 10000)
        assert first == second
        offset = first[0].end_position - Vec2(400, 300)
        assert abs(offset.x) <= 30 and abs(offset.y) <= 30

    def test_injected_rng(self):
        diagram = PlayDiagram.from_dict({"players": [{"id": "x", "label": "X", "x": 400, "y": 300}]})
        a = build_movement_paths(diagram, 10000, rng=random.Random(7))
        b = build_movement_paths(diagram, 10000, rng=random.Random(7))
        assert a == b


class TestCourtRole:
    @pytest.mark.parametrize("label,role", [
        ("1", CourtRole.POINT_GUARD),
        (" 5 ", CourtRole.CENTER),
        ("PG", None),
        ("", None),
    ])
    def test_from_label(self, label, role):
        assert CourtRole.from_label(label) == role

    def test_point_guard_floor(self):
        assert demo_target("1", Vec2(300, 150), random.Random(0)) == Vec2(300, 100)
