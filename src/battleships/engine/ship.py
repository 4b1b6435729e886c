"""Ship domain model for the Battleships engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ShipOrientation(Enum):
    """Axis along which a ship's segments extend from its first segment."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class ShipSegment:
    """One cell of a ship, tracking its board position and hit status."""

    x_index: int
    y_index: int
    is_hit: bool = False
    ship: Ship | None = field(default=None, repr=False, compare=False)


@dataclass
class Ship:
    """Represents a single ship placed on a board."""

    orientation: ShipOrientation = ShipOrientation.HORIZONTAL
    segments: list[ShipSegment] = field(default_factory=list)
    is_sunk: bool = False

    def coordinates(self) -> list[tuple[int, int]]:
        """Return the ``(x, y)`` cells occupied by this ship, in segment order."""
        return [(segment.x_index, segment.y_index) for segment in self.segments]

    @property
    def length(self) -> int:
        return len(self.segments)
