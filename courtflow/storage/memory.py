"""In-memory repositories (tests, the CLI demo, and servers without a data dir)."""

import asyncio
import copy
from typing import Optional

from courtflow.core.models import AnimationSequence, PlayDiagram
from courtflow.storage.base import AnimationRepository, PlayRepository


class InMemoryPlayRepository(PlayRepository):
    def __init__(self, diagrams: Optional[dict[str, PlayDiagram]] = None) -> None:
        self._diagrams: dict[str, PlayDiagram] = dict(diagrams or {})

    async def get_diagram(self, play_id: str) -> Optional[PlayDiagram]:
        return self._diagrams.get(play_id)

    async def save_diagram(self, play_id: str, diagram: PlayDiagram) -> None:
        # Diagrams are frozen, so storing the instance is safe
        self._diagrams[play_id] = diagram


class InMemoryAnimationRepository(AnimationRepository):
    """
    Sequences kept in a dict keyed by id.

    Callers get copies, so mutating a returned sequence never changes the
    stored one until it is saved.
    """

    def __init__(self) -> None:
        self._sequences: dict[str, AnimationSequence] = {}
        self._lock = asyncio.Lock()

    async def get(self, animation_id: str) -> Optional[AnimationSequence]:
        async with self._lock:
            sequence = self._sequences.get(animation_id)
            return copy.copy(sequence) if sequence else None

    async def list_for_play(self, play_id: str) -> list[AnimationSequence]:
        async with self._lock:
            matches = [s for s in self._sequences.values() if s.play_id == play_id]
        matches.sort(key=lambda s: s.created_at)
        return [copy.copy(s) for s in matches]

    async def save(self, sequence: AnimationSequence) -> None:
        async with self._lock:
            self._sequences[sequence.id] = copy.copy(sequence)

    async def delete(self, animation_id: str) -> bool:
        async with self._lock:
            return self._sequences.pop(animation_id, None) is not None
