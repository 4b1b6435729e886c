"""Battleships engine: entities and the service that mutates them."""

from .board import Board
from .game import AttackResult, Game, Player
from .manager import GameManager, PlacementFailure, PlacementResult
from .ship import Ship, ShipOrientation, ShipSegment

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
