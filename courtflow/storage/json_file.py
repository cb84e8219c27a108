"""JSON-file repositories rooted at a data directory.

Layout:
    <data_dir>/plays/<play_id>.json
    <data_dir>/animations/<animation_id>.json

Each record is written to a temporary file and moved into place, so a
reader never sees a half-written sequence.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from courtflow.core.models import AnimationSequence, PlayDiagram
from courtflow.errors import ValidationError
from courtflow.storage.base import AnimationRepository, PlayRepository

logger = logging.getLogger(__name__)


def _write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(".json.tmp")
    with open(tmp_path, "w") as f:
        json.dump(data, f, indent=2)
    os.replace(tmp_path, path)


def _read_json(path: Path) -> Optional[dict]:
    if not path.exists():
        return None
    with open(path) as f:
        return json.load(f)


def _safe_name(identifier: str) -> str:
    # Ids become file names; keep them inside the directory
    if not identifier or "/" in identifier or "\\" in identifier or identifier.startswith("."):
        raise ValidationError(f"Invalid record id: {identifier!r}", field="id")
    return f"{identifier}.json"


class JsonFilePlayRepository(PlayRepository):
    def __init__(self, data_dir: Union[str, Path]) -> None:
        self.directory = Path(data_dir) / "plays"

    async def get_diagram(self, play_id: str) -> Optional[PlayDiagram]:
        data = _read_json(self.directory / _safe_name(play_id))
        if data is None:
            return None
        return PlayDiagram.from_dict(data)

    async def save_diagram(self, play_id: str, diagram: PlayDiagram) -> None:
        _write_json(self.directory / _safe_name(play_id), diagram.to_dict())


class JsonFileAnimationRepository(AnimationRepository):
    """One JSON file per sequence, movement paths included."""

    def __init__(self, data_dir: Union[str, Path]) -> None:
        self.directory = Path(data_dir) / "animations"
        self._lock = asyncio.Lock()

    async def get(self, animation_id: str) -> Optional[AnimationSequence]:
        async with self._lock:
            data = _read_json(self.directory / _safe_name(animation_id))
        if data is None:
            return None
        return AnimationSequence.from_dict(data)

    async def list_for_play(self, play_id: str) -> list[AnimationSequence]:
        if not self.directory.exists():
            return []
        sequences = []
        async with self._lock:
            for path in sorted(self.directory.glob("*.json")):
                data = _read_json(path)
                if data is None or data.get("playId") != play_id:
                    continue
                sequences.append(AnimationSequence.from_dict(data))
        sequences.sort(key=lambda s: s.created_at)
        return sequences

    async def save(self, sequence: AnimationSequence) -> None:
        async with self._lock:
            _write_json(
                self.directory / _safe_name(sequence.id),
                sequence.to_dict(include_paths=True),
            )
        logger.debug("Saved animation %s to %s", sequence.id, self.directory)

    async def delete(self, animation_id: str) -> bool:
        path = self.directory / _safe_name(animation_id)
        async with self._lock:
            if not path.exists():
                return False
            path.unlink()
        return True
