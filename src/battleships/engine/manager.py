"""Game creation, ship placement and attack resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from battleships.telemetry import get_meter, get_tracer

from .board import Board
from .game import AttackResult, Game, Player
from .ship import Ship, ShipOrientation, ShipSegment

logger = logging.getLogger(__name__)
tracer = get_tracer("battleships.engine.manager")
meter = get_meter("battleships.engine.manager")

GAME_COUNTER = meter.create_counter(
    "battleships_engine_games_created",
    unit="1",
    description="Number of games created",
)

PLACEMENT_COUNTER = meter.create_counter(
    "battleships_engine_ship_placements",
    unit="1",
    description="Number of attempted ship placements",
)

ATTACK_COUNTER = meter.create_counter(
    "battleships_engine_attacks",
    unit="1",
    description="Attacks resolved against a board",
)


class PlacementFailure(Enum):
    """Why a ship could not be placed."""

    LENGTH_OUT_OF_RANGE = "length_out_of_range"
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERLAP = "overlap"


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a placement attempt: the placed ship or the first failed check."""

    ship: Ship | None = None
    failure: PlacementFailure | None = None

    @property
    def placed(self) -> bool:
        return self.ship is not None

    @classmethod
    def ok(cls, ship: Ship) -> PlacementResult:
        return cls(ship=ship)

    @classmethod
    def fail(cls, failure: PlacementFailure) -> PlacementResult:
        return cls(failure=failure)


def _next_position(x_index: int, y_index: int, orientation: ShipOrientation) -> tuple[int, int]:
    if orientation is ShipOrientation.HORIZONTAL:
        return x_index + 1, y_index
    if orientation is ShipOrientation.VERTICAL:
        return x_index, y_index + 1
    raise ValueError(f"Unsupported ship orientation: {orientation!r}")


def _find_segment(board: Board, x_index: int, y_index: int) -> tuple[Ship, ShipSegment] | None:
    for ship in board.ships:
        for segment in ship.segments:
            if segment.x_index == x_index and segment.y_index == y_index:
                return ship, segment
    return None


class GameManager:
    """Stateless service operating on games and boards.

    Expected invalid input (a bad ship length, a ship leaving the board or
    overlapping another one) is reported through return values and never
    raises. ``ValueError`` is reserved for misuse such as a board that is
    not attached to a game.
    """

    def create_game(
        self,
        player_one_name: str,
        player_two_name: str,
        board_height: int = 10,
        board_width: int = 10,
        min_ship_length: int = 1,
        max_ship_length: int = 5,
    ) -> Game:
        """Create a game with two players, each owning an empty board.

        Arguments are taken as given: non-positive dimensions or a minimum
        length above the maximum are not rejected.
        """
        with tracer.start_as_current_span("game_manager.create_game") as span:
            span.set_attribute("board.height", board_height)
            span.set_attribute("board.width", board_width)
            span.set_attribute("ship.min_length", min_ship_length)
            span.set_attribute("ship.max_length", max_ship_length)
            game = Game(
                player_one=Player(
                    name=player_one_name,
                    board=Board(height=board_height, width=board_width),
                ),
                player_two=Player(
                    name=player_two_name,
                    board=Board(height=board_height, width=board_width),
                ),
                minimum_ship_length=min_ship_length,
                maximum_ship_length=max_ship_length,
            )
            for player in game.players:
                player.board.game = game

            GAME_COUNTER.add(1)
            logger.info(
                "game_created",
                extra={
                    "player_one": player_one_name,
                    "player_two": player_two_name,
                    "board_height": board_height,
                    "board_width": board_width,
                    "min_ship_length": min_ship_length,
                    "max_ship_length": max_ship_length,
                },
            )
            return game

    def add_ship(
        self,
        board: Board,
        x_index: int,
        y_index: int,
        orientation: ShipOrientation,
        length: int,
    ) -> bool:
        """Add a ship starting at ``(x_index, y_index)``; return False if it was rejected."""
        return self.place_ship(board, x_index, y_index, orientation, length).placed

    def place_ship(
        self,
        board: Board,
        x_index: int,
        y_index: int,
        orientation: ShipOrientation,
        length: int,
    ) -> PlacementResult:
        """Place a ship and report why it was rejected, if it was.

        The ship is built segment by segment from the starting cell, stepping
        along X for horizontal ships and along Y for vertical ones. It is
        appended to ``board.ships`` only when every segment is on the board
        and free; a rejected ship leaves the board untouched.
        """
        with tracer.start_as_current_span("game_manager.place_ship") as span:
            span.set_attribute("ship.x_index", x_index)
            span.set_attribute("ship.y_index", y_index)
            span.set_attribute("ship.length", length)
            if board.game is None:
                raise ValueError("Board is not attached to a game.")
            if not isinstance(orientation, ShipOrientation):
                raise ValueError(f"Unsupported ship orientation: {orientation!r}")
            span.set_attribute("ship.orientation", orientation.value)

            result = self._build_ship(board, board.game, x_index, y_index, orientation, length)
            details = {
                "x_index": x_index,
                "y_index": y_index,
                "orientation": orientation.name,
                "length": length,
            }
            if result.ship is not None:
                board.ships.append(result.ship)
                span.set_attribute("placement.result", "success")
                PLACEMENT_COUNTER.add(1, attributes={"result": "success"})
                logger.info("ship_placed", extra={**details, "ship_count": len(board.ships)})
                return result

            reason = result.failure.value if result.failure else "unknown"
            span.set_attribute("placement.result", "failed")
            span.set_attribute("placement.reason", reason)
            PLACEMENT_COUNTER.add(1, attributes={"result": "failed", "reason": reason})
            logger.warning("ship_placement_failed", extra={**details, "reason": reason})
            return result

    def attack(self, board: Board, x_index: int, y_index: int) -> AttackResult:
        """Attack a cell of ``board``.

        A miss leaves the board unchanged. A hit marks the segment, then
        recomputes the ship's sunk flag and whether every ship on the board
        is sunk. Attacking the same cell again yields the same result.
        """
        with tracer.start_as_current_span("game_manager.attack") as span:
            span.set_attribute("attack.x_index", x_index)
            span.set_attribute("attack.y_index", y_index)
            found = _find_segment(board, x_index, y_index)
            if found is None:
                span.set_attribute("attack.outcome", "miss")
                ATTACK_COUNTER.add(1, attributes={"outcome": "miss"})
                logger.info("attack_miss", extra={"x_index": x_index, "y_index": y_index})
                return AttackResult()

            ship, segment = found
            segment.is_hit = True
            ship.is_sunk = all(part.is_hit for part in ship.segments)
            game_over = all(existing.is_sunk for existing in board.ships)
            result = AttackResult(is_hit=True, is_ship_sunk=ship.is_sunk, is_game_over=game_over)

            outcome = "sunk" if ship.is_sunk else "hit"
            span.set_attribute("attack.outcome", outcome)
            span.set_attribute("attack.game_over", game_over)
            ATTACK_COUNTER.add(1, attributes={"outcome": outcome})
            logger.info(
                "attack_hit",
                extra={
                    "x_index": x_index,
                    "y_index": y_index,
                    "ship_sunk": ship.is_sunk,
                    "game_over": game_over,
                },
            )
            return result

    def _build_ship(
        self,
        board: Board,
        game: Game,
        x_index: int,
        y_index: int,
        orientation: ShipOrientation,
        length: int,
    ) -> PlacementResult:
        if not game.minimum_ship_length <= length <= game.maximum_ship_length:
            return PlacementResult.fail(PlacementFailure.LENGTH_OUT_OF_RANGE)

        occupied = board.occupied_coordinates()
        ship = Ship(orientation=orientation)
        for _ in range(length):
            if not board.contains(x_index, y_index):
                return PlacementResult.fail(PlacementFailure.OUT_OF_BOUNDS)
            if (x_index, y_index) in occupied:
                return PlacementResult.fail(PlacementFailure.OVERLAP)
            ship.segments.append(ShipSegment(x_index=x_index, y_index=y_index, ship=ship))
            x_index, y_index = _next_position(x_index, y_index, orientation)
        return PlacementResult.ok(ship)
