"""Movement path builder.

Derives per-player interpolation segments from the diagram's cut actions,
or synthesizes demonstration motion when the diagram has none so the
animation is never static.
"""

import logging
import random
from typing import Optional

from courtflow.animation.roles import demo_target
from courtflow.animation.timing import action_windows
from courtflow.core.constants import (
    DEMO_END_FRACTION,
    DEMO_MOVE_MS,
    DEMO_STAGGER_MS,
    DEMO_START_FRACTION,
)
from courtflow.core.enums import ActionType, InterpolationType
from courtflow.core.models import MovementPath, PlayAction, PlayDiagram, Player

logger = logging.getLogger(__name__)


def build_movement_paths(
    diagram: PlayDiagram,
    duration: float,
    rng: Optional[random.Random] = None,
) -> list[MovementPath]:
    """
    Build movement paths for a diagram over a timeline of duration ms.

    Each resolvable cut moves its player from the diagram spot to the cut
    target across that action's window. If nothing resolves and the
    diagram has players, every player gets a demo move instead.

    Args:
        diagram: Source diagram
        duration: Timeline length in milliseconds
        rng: Random source for unrecognized labels. Defaults to a
            generator seeded from each player's id, so the same diagram
            always yields the same paths.

    Returns:
        Paths ordered by action (or by player for demo motion)
    """
    paths: list[MovementPath] = []

    windows = action_windows(len(diagram.actions), duration)
    for action, window in zip(diagram.actions, windows):
        path = _cut_path(diagram, action, window.start, window.end)
        if path is not None:
            paths.append(path)

    if not paths and diagram.players:
        paths = build_demo_paths(diagram, duration, rng)
        logger.debug(
            "No cut movement in diagram (%d actions), synthesized %d demo paths",
            len(diagram.actions), len(paths),
        )

    return paths


def _cut_path(
    diagram: PlayDiagram,
    action: PlayAction,
    start_time: float,
    end_time: float,
) -> Optional[MovementPath]:
    """Path for a cut action, None if the action is not a resolvable cut."""
    if action.type != ActionType.CUT:
        return None

    player = diagram.get_player(action.from_ref.player_id)
    target = action.to_ref.point
    if player is None or target is None:
        logger.debug("Skipping unresolvable cut %s", action.id)
        return None
    if end_time <= start_time:
        return None

    return MovementPath(
        player_id=player.id,
        start_time=start_time,
        end_time=end_time,
        start_position=player.pos,
        end_position=target,
        type=InterpolationType.LINEAR,
        speed=1.0,
    )


def build_demo_paths(
    diagram: PlayDiagram,
    duration: float,
    rng: Optional[random.Random] = None,
) -> list[MovementPath]:
    """
    Synthesize one small role-based move per player.

    Moves start at 20% of the timeline, staggered 500ms per player, last
    up to 2s and never run past 80%. Players whose staggered start lands
    at or after the 80% mark stay still.
    """
    min_x, min_y, max_x, max_y = diagram.court.bounds()
    base_start = duration * DEMO_START_FRACTION
    latest_end = duration * DEMO_END_FRACTION

    paths = []
    for index, player in enumerate(diagram.players):
        start_time = base_start + index * DEMO_STAGGER_MS
        end_time = min(latest_end, start_time + DEMO_MOVE_MS)
        if end_time <= start_time:
            continue

        target = demo_target(player.label, player.pos, rng or _player_rng(player))
        paths.append(MovementPath(
            player_id=player.id,
            start_time=start_time,
            end_time=end_time,
            start_position=player.pos,
            end_position=target.clamped_to(min_x, min_y, max_x, max_y),
            type=InterpolationType.LINEAR,
            speed=1.0,
        ))

    return paths


def _player_rng(player: Player) -> random.Random:
    # String seeds are hashed with sha512, so this is stable across runs
    return random.Random(f"{player.id}:{player.label}")
