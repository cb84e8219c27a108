"""Court roles and the demonstration moves used when a play has none.

Diagram labels "1".."5" follow the usual numbering (1 = point guard,
5 = center). Each role maps to a small, recognizable move; any other
label gets a random shift.
"""

import random
from enum import Enum
from typing import Callable, Optional

from courtflow.core.constants import DEMO_JITTER
from courtflow.core.vec2 import Vec2


class CourtRole(str, Enum):
    """Basketball position numbers."""

    POINT_GUARD = "1"
    SHOOTING_GUARD = "2"
    SMALL_FORWARD = "3"
    POWER_FORWARD = "4"
    CENTER = "5"

    @classmethod
    def from_label(cls, label: str) -> Optional["CourtRole"]:
        """Role for a diagram label, None when the label is not a number 1-5."""
        try:
            return cls(label.strip())
        except ValueError:
            return None


DemoMove = Callable[[Vec2], Vec2]

# The basket sits at the top of the diagram, so "toward the basket" is -Y.
DEMO_MOVES: dict[CourtRole, DemoMove] = {
    # Drive toward the basket
    CourtRole.POINT_GUARD: lambda p: Vec2(p.x, max(p.y - 100, 100)),
    # Drift to the corner
    CourtRole.SHOOTING_GUARD: lambda p: Vec2(p.x + 50, p.y + 30),
    # Shift to the opposite wing
    CourtRole.SMALL_FORWARD: lambda p: Vec2(p.x - 40, p.y + 50),
    # Step in toward the basket
    CourtRole.POWER_FORWARD: lambda p: Vec2(p.x + 30, max(p.y - 50, 120)),
    # Slide along the lane
    CourtRole.CENTER: lambda p: Vec2(p.x - 20, max(p.y - 40, 100)),
}


def jitter(position: Vec2, rng: random.Random, spread: float = DEMO_JITTER) -> Vec2:
    """Shift a position by up to spread/2 in each axis."""
    return Vec2(
        position.x + (rng.random() - 0.5) * spread,
        position.y + (rng.random() - 0.5) * spread,
    )


def demo_target(label: str, position: Vec2, rng: random.Random) -> Vec2:
    """Unclamped demo destination for a player with this label."""
    role = CourtRole.from_label(label)
    if role is None:
        return jitter(position, rng)
    return DEMO_MOVES[role](position)
