"""Tests for diagram and timeline model decoding."""

import pytest

from courtflow.core.enums import ActionType, ArrowType
from courtflow.core.models import (
    AnimationFrame,
    AnimationSequence,
    AnimationSettings,
    EntityReference,
    PlayDiagram,
)
from courtflow.errors import ValidationError


class TestPlayDiagram:
    def test_missing_lists_are_empty(self):
        diagram = PlayDiagram.from_dict({})
        assert diagram.players == ()
        assert diagram.actions == ()
        assert diagram.is_empty

    def test_none_is_empty_diagram(self):
        assert PlayDiagram.from_dict(None).is_empty

    def test_decodes_actions_with_from_and_to(self, cut_diagram):
        action = cut_diagram.actions[0]
        assert action.type == ActionType.CUT
        assert action.from_ref.player_id == "p1"
        assert action.to_ref.point.y == 150

    def test_unknown_action_type_rejected(self):
        with pytest.raises(ValidationError) as exc:
            PlayDiagram.from_dict({"actions": [{"id": "a1", "type": "lob"}]})
        assert exc.value.field == "actions.type"

    def test_non_numeric_coordinate_rejected(self):
        with pytest.raises(ValidationError):
            PlayDiagram.from_dict({"players": [{"id": "p1", "label": "1", "x": "left", "y": 0}]})

    def test_style_decoded(self):
        diagram = PlayDiagram.from_dict({"actions": [{
            "id": "a1", "type": "pass",
            "from": {"playerId": "p1"}, "to": {"playerId": "p2"},
            "style": {"color": "#f00", "arrowType": "dashed", "dashArray": [4, 2]},
        }]})
        style = diagram.actions[0].style
        assert style.arrow_type == ArrowType.DASHED
        assert style.dash_array == (4.0, 2.0)

    def test_round_trip(self, mixed_diagram):
        assert PlayDiagram.from_dict(mixed_diagram.to_dict()) == mixed_diagram

    def test_default_court_bounds(self):
        assert PlayDiagram().court.bounds() == (50, 50, 750, 550)


class TestEntityReference:
    def test_zero_coordinate_counts(self):
        assert EntityReference(x=0, y=0).has_coordinates

    def test_partial_coordinates_do_not(self):
        assert not EntityReference(x=10).has_coordinates
        assert EntityReference(x=10).point is None


class TestAnimationModels:
    def test_settings_merge_partial_patch(self):
        settings = AnimationSettings().merged({"loop": True, "trailLength": 8, "unknown": 1})
        assert settings.loop is True
        assert settings.trail_length == 8
        assert settings.fps == 30

    def test_settings_merge_ignores_none(self):
        assert AnimationSettings().merged({"fps": None}).fps == 30

    def test_frame_summary(self, cut_sequence):
        frame = next(f for f in cut_sequence.frames if f.timestamp == 5000)
        summary = frame.summary()
        assert summary["activePlayers"] == 5
        assert summary["activeActions"] == 1
        assert summary["playerMovements"] == 1

    def test_sequence_round_trip_with_paths(self, cut_sequence):
        data = cut_sequence.to_dict(include_paths=True)
        restored = AnimationSequence.from_dict(data)
        assert restored.to_dict(include_paths=True) == data
        assert restored.movement_paths == cut_sequence.movement_paths

    def test_sequence_dict_omits_paths_by_default(self, cut_sequence):
        assert "movementPaths" not in cut_sequence.to_dict()

    def test_frame_round_trip(self, cut_sequence):
        frame = cut_sequence.frames[150]
        assert AnimationFrame.from_dict(frame.to_dict()) == frame
