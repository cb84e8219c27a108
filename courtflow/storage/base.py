"""Storage ports for diagrams and animation sequences.

The service layer only talks to these interfaces; adapters decide where
the records live. Every operation is a coroutine so adapters can guard
writes with an asyncio lock.
"""

from abc import ABC, abstractmethod
from typing import Optional

from courtflow.core.models import AnimationSequence, PlayDiagram


class PlayRepository(ABC):
    """Read/write access to the diagram stored for each play."""

    @abstractmethod
    async def get_diagram(self, play_id: str) -> Optional[PlayDiagram]:
        """Return the play's diagram, or None if the play is unknown."""

    @abstractmethod
    async def save_diagram(self, play_id: str, diagram: PlayDiagram) -> None:
        """Create or replace the play's diagram."""


class AnimationRepository(ABC):
    """Persistence for animation sequences.

    Writes are atomic per sequence id. Concurrent saves of the same id are
    last-write-wins.
    """

    @abstractmethod
    async def get(self, animation_id: str) -> Optional[AnimationSequence]:
        ...

    @abstractmethod
    async def list_for_play(self, play_id: str) -> list[AnimationSequence]:
        """All sequences for a play in creation order."""

    @abstractmethod
    async def save(self, sequence: AnimationSequence) -> None:
        ...

    @abstractmethod
    async def delete(self, animation_id: str) -> bool:
        """Remove a sequence. Returns False if it did not exist."""

    async def find_default(self, play_id: str) -> Optional[AnimationSequence]:
        for sequence in await self.list_for_play(play_id):
            if sequence.is_default:
                return sequence
        return None

    async def set_default(self, sequence: AnimationSequence) -> None:
        """Save sequence as the play's only default."""
        for other in await self.list_for_play(sequence.play_id):
            if other.id != sequence.id and other.is_default:
                other.is_default = False
                await self.save(other)
        sequence.is_default = True
        await self.save(sequence)
