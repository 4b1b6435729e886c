"""Game, player and attack result models for the Battleships engine."""

from __future__ import annotations

from dataclasses import dataclass, field

from .board import Board


@dataclass
class Player:
    """A named participant owning exactly one board."""

    name: str
    board: Board = field(default_factory=Board)


@dataclass(eq=False)
class Game:
    """State of a single match between two players.

    ``minimum_ship_length`` and ``maximum_ship_length`` are inclusive bounds
    applied to every ship placed on either player's board. Neither the bounds
    nor the board dimensions are validated here.
    """

    player_one: Player
    player_two: Player
    minimum_ship_length: int = 1
    maximum_ship_length: int = 5

    @property
    def players(self) -> tuple[Player, Player]:
        return self.player_one, self.player_two


@dataclass(frozen=True)
class AttackResult:
    """Outcome of a single attack against a board."""

    is_hit: bool = False
    is_ship_sunk: bool = False
    is_game_over: bool = False
