"""Shared pytest fixtures for courtflow tests."""

import asyncio

import pytest

from courtflow.animation import generate_default_animation
from courtflow.config import AnimationConfig
from courtflow.core.models import AnimationSequence, AnimationSettings, PlayDiagram
from courtflow.services import AnimationService
from courtflow.storage import InMemoryAnimationRepository, InMemoryPlayRepository


# =============================================================================
# Diagram Fixtures
# =============================================================================


FIVE_PLAYERS = [
    {"id": "p1", "label": "1", "x": 400, "y": 350},
    {"id": "p2", "label": "2", "x": 600, "y": 300},
    {"id": "p3", "label": "3", "x": 200, "y": 300},
    {"id": "p4", "label": "4", "x": 650, "y": 150},
    {"id": "p5", "label": "5", "x": 150, "y": 150},
]


@pytest.fixture
def five_player_diagram() -> PlayDiagram:
    """Five players, no actions (triggers demo motion)."""
    return PlayDiagram.from_dict({"players": FIVE_PLAYERS, "actions": []})


@pytest.fixture
def cut_diagram() -> PlayDiagram:
    """Five players, P1 cuts from (400,350) to (400,150)."""
    return PlayDiagram.from_dict({
        "players": FIVE_PLAYERS,
        "actions": [
            {"id": "a1", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 400, "y": 150}},
        ],
    })


@pytest.fixture
def mixed_diagram() -> PlayDiagram:
    """Pass, cut and screen in order."""
    return PlayDiagram.from_dict({
        "players": FIVE_PLAYERS,
        "actions": [
            {"id": "a1", "type": "pass", "from": {"playerId": "p1"}, "to": {"playerId": "p2"}},
            {"id": "a2", "type": "cut", "from": {"playerId": "p1"}, "to": {"x": 400, "y": 150}},
            {"id": "a3", "type": "screen", "from": {"playerId": "p5"}, "to": {"x": 180, "y": 250}},
        ],
    })


# =============================================================================
# Sequence Fixtures
# =============================================================================


@pytest.fixture
def cut_sequence(cut_diagram) -> AnimationSequence:
    """10 second sequence for the cut diagram at 30 fps."""
    generated = generate_default_animation(cut_diagram, 10000, fps=30)
    return AnimationSequence(
        id="anim-1",
        play_id="play-1",
        name="Cut",
        duration=10000,
        frames=generated.frames,
        keyframes=generated.keyframes,
        settings=AnimationSettings(),
        movement_paths=generated.movement_paths,
    )


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def config() -> AnimationConfig:
    return AnimationConfig(
        default_duration_ms=10000,
        default_fps=30,
        tick_hz=60,
        keyframe_snap_ms=500,
        data_dir=None,
        log_level="DEBUG",
    )


@pytest.fixture
def plays(cut_diagram) -> InMemoryPlayRepository:
    return InMemoryPlayRepository({"play-1": cut_diagram})


@pytest.fixture
def service(plays, config) -> AnimationService:
    """Animation service over in-memory storage with play-1 stored."""
    return AnimationService(InMemoryAnimationRepository(), plays, config)


@pytest.fixture
def run():
    """Run a coroutine to completion."""
    return asyncio.run
