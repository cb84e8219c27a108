"""Frame sampler.

Samples movement paths and action windows at a fixed rate into full
frame snapshots. A frame is a pure function of (diagram, paths,
timestamp, duration), so resampling the same inputs always produces the
same frames and playback only ever has to pick the nearest one.
"""

import logging
import math
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from courtflow.animation.timing import ActionWindow, action_windows
from courtflow.core.models import (
    ActiveAction,
    AnimatedPlayer,
    AnimationFrame,
    MovementPath,
    PlayAction,
    PlayDiagram,
)
from courtflow.errors import ValidationError

logger = logging.getLogger(__name__)


def frame_count(duration: float, fps: float) -> int:
    """Number of frames for a timeline, including both t=0 and the end."""
    return math.floor(duration / 1000 * fps) + 1


def frame_timestamps(duration: float, fps: float) -> list[float]:
    """Uniform sample times 1000/fps apart.

    Each timestamp is computed from its index so there is no accumulated
    drift; the last one equals duration whenever duration * fps / 1000 is
    a whole number.
    """
    return [min(float(duration), i * 1000.0 / fps) for i in range(frame_count(duration, fps))]


def sample_frames(
    diagram: PlayDiagram,
    paths: Sequence[MovementPath],
    duration: float,
    fps: float,
) -> list[AnimationFrame]:
    """
    Sample the whole timeline into frames.

    Args:
        diagram: Source diagram (players and actions)
        paths: Movement paths from build_movement_paths
        duration: Timeline length in milliseconds
        fps: Samples per second

    Returns:
        frame_count(duration, fps) frames in timestamp order

    Raises:
        ValidationError: fps is not positive or duration is negative
    """
    if fps <= 0:
        raise ValidationError(f"fps must be positive, got {fps}", field="fps")
    if duration < 0:
        raise ValidationError(f"duration must not be negative, got {duration}", field="duration")

    paths_by_player = index_paths(paths)
    windows = action_windows(len(diagram.actions), duration)

    frames = [
        sample_frame(diagram, paths_by_player, windows, timestamp)
        for timestamp in frame_timestamps(duration, fps)
    ]
    logger.debug(
        "Sampled %d frames (%.0fms at %sfps, %d paths, %d actions)",
        len(frames), duration, fps, len(paths), len(diagram.actions),
    )
    return frames


def index_paths(paths: Iterable[MovementPath]) -> dict[str, list[MovementPath]]:
    """Group paths by player, keeping their original order."""
    by_player: dict[str, list[MovementPath]] = defaultdict(list)
    for path in paths:
        by_player[path.player_id].append(path)
    return by_player


def sample_frame(
    diagram: PlayDiagram,
    paths_by_player: dict[str, list[MovementPath]],
    windows: Sequence[ActionWindow],
    timestamp: float,
) -> AnimationFrame:
    """Build the snapshot at a single timestamp."""
    players = []
    for player in diagram.players:
        player_paths = paths_by_player.get(player.id, ())
        path = _active_path(player_paths, timestamp)
        if path is None:
            finished = _last_finished_path(player_paths, timestamp)
            if finished is None:
                players.append(AnimatedPlayer.at_rest(player))
            else:
                players.append(AnimatedPlayer(
                    id=player.id,
                    label=player.label,
                    position=finished.end_position,
                ))
        else:
            players.append(AnimatedPlayer(
                id=player.id,
                label=player.label,
                position=path.position_at(timestamp),
                velocity=path.velocity(),
            ))

    actions = []
    for action, window in zip(diagram.actions, windows):
        if not window.contains(timestamp):
            continue
        active = _resolve_action(diagram, action, window.progress_at(timestamp))
        if active is not None:
            actions.append(active)

    return AnimationFrame(timestamp=timestamp, players=tuple(players), actions=tuple(actions))


def _active_path(paths: Iterable[MovementPath], timestamp: float) -> Optional[MovementPath]:
    """First path covering timestamp (the earlier one wins at a shared endpoint)."""
    for path in paths:
        if path.covers(timestamp):
            return path
    return None


def _last_finished_path(paths: Iterable[MovementPath], timestamp: float) -> Optional[MovementPath]:
    """Latest path that ended before timestamp. The player holds its end spot."""
    finished = None
    for path in paths:
        if path.end_time < timestamp and (finished is None or path.end_time > finished.end_time):
            finished = path
    return finished


def _resolve_action(diagram: PlayDiagram, action: PlayAction, progress: float) -> Optional[ActiveAction]:
    """Denormalize an action's endpoints; None if it names a missing player."""
    from_id = action.from_ref.player_id
    if from_id is not None and diagram.get_player(from_id) is None:
        return None
    to_id = action.to_ref.player_id
    if to_id is not None and diagram.get_player(to_id) is None:
        return None

    return ActiveAction(
        id=action.id,
        type=action.type,
        from_player=from_id or "",
        to_player=to_id,
        to_position=action.to_ref.point,
        progress=progress,
        style=action.style,
    )
