"""Single-player board for the Battleships engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .ship import Ship

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .game import Game


@dataclass
class Board:
    """A player's grid of ``width`` x ``height`` cells and the ships placed on it.

    Ships are kept in placement order. ``game`` points back at the owning
    game so placement can look up the ship length bounds; the board does not
    own it.
    """

    height: int = 10
    width: int = 10
    ships: list[Ship] = field(default_factory=list)
    game: Game | None = field(default=None, repr=False, compare=False)

    def contains(self, x_index: int, y_index: int) -> bool:
        """Check whether a coordinate lies inside the board boundaries."""
        return 0 <= x_index <= self.width - 1 and 0 <= y_index <= self.height - 1

    def occupied_coordinates(self) -> set[tuple[int, int]]:
        coords: set[tuple[int, int]] = set()
        for ship in self.ships:
            coords.update(ship.coordinates())
        return coords
