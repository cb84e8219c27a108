"""2D vector implementation for court positions.

All player positions and velocities use Vec2.
Units are logical court units unless otherwise specified.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector.

    Coordinate system:
        Origin (0, 0) = Top-left corner of the court diagram
        +X = Right
        +Y = Away from the basket (the basket sits near y = 0)

    Default court is 800 x 600 units.
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> Vec2:
        if scalar == 0:
            return Vec2(0, 0)
        return Vec2(self.x / scalar, self.y / scalar)

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def length(self) -> float:
        """Magnitude of vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (other - self).length()

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation to another vector.

        t is clamped to [0, 1]; interpolation never extrapolates.
        """
        t = max(0.0, min(1.0, t))
        return Vec2(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t
        )

    # =========================================================================
    # Utility
    # =========================================================================

    def clamped_to(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Vec2:
        """Return vector with each component clamped into a rectangle."""
        return Vec2(
            max(min_x, min(max_x, self.x)),
            max(min_y, min(max_y, self.y)),
        )

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def rounded(self, decimals: int = 2) -> Vec2:
        """Return vector with rounded components."""
        return Vec2(round(self.x, decimals), round(self.y, decimals))

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    def __repr__(self) -> str:
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0, 0)

    @classmethod
    def from_dict(cls, data: dict) -> Vec2:
        """Create from an {x, y} mapping."""
        return cls(float(data["x"]), float(data["y"]))


def distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return a.distance_to(b)
