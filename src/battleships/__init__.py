"""Two-player Battleships game model: board setup, ship placement and attacks."""

from .engine import (
    AttackResult,
    Board,
    Game,
    GameManager,
    PlacementFailure,
    PlacementResult,
    Player,
    Ship,
    ShipOrientation,
    ShipSegment,
)

__all__ = [
    "AttackResult",
    "Board",
    "Game",
    "GameManager",
    "PlacementFailure",
    "PlacementResult",
    "Player",
    "Ship",
    "ShipOrientation",
    "ShipSegment",
]
