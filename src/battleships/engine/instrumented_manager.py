"""Instrumented game manager with telemetry hooks."""

from __future__ import annotations

import time
from weakref import WeakKeyDictionary, WeakSet

from battleships.engine.board import Board
from battleships.engine.game import AttackResult, Game
from battleships.engine.manager import GameManager, PlacementResult
from battleships.engine.ship import ShipOrientation
from battleships.telemetry import get_logger, get_tracer, record_game_metric


class InstrumentedGameManager(GameManager):
    """Wraps GameManager with tracing, metrics, and logging."""

    def __init__(self) -> None:
        self._logger = get_logger("battleships.engine")
        self._tracer = get_tracer("battleships.engine")
        self._game_start_times: WeakKeyDictionary[Game, float] = WeakKeyDictionary()
        self._attack_counts: WeakKeyDictionary[Game, int] = WeakKeyDictionary()
        self._completed_games: WeakSet[Game] = WeakSet()

    def create_game(self, *args, **kwargs) -> Game:
        with self._tracer.start_as_current_span("battleships.engine.create_game") as span:
            game = super().create_game(*args, **kwargs)
            self._game_start_times[game] = time.perf_counter()
            self._attack_counts[game] = 0
            board = game.player_one.board
            span.set_attribute("board.height", board.height)
            span.set_attribute("board.width", board.width)
            record_game_metric(
                "battleships_games_created_total",
                1,
                {"board_height": board.height, "board_width": board.width},
            )
            self._logger.info(
                "Game created: %s vs %s on %dx%d",
                game.player_one.name,
                game.player_two.name,
                board.width,
                board.height,
            )
            return game

    def place_ship(
        self,
        board: Board,
        x_index: int,
        y_index: int,
        orientation: ShipOrientation,
        length: int,
    ) -> PlacementResult:
        with self._tracer.start_as_current_span("battleships.engine.place_ship") as span:
            span.set_attribute("coord.x", x_index)
            span.set_attribute("coord.y", y_index)
            span.set_attribute("ship.length", length)

            try:
                result = super().place_ship(board, x_index, y_index, orientation, length)
            except ValueError as exc:
                record_game_metric(
                    "battleships_ship_placements_total",
                    1,
                    {"result": "error", "reason": "invalid_request"},
                )
                span.record_exception(exc)
                span.set_attribute("error", True)
                self._logger.error(
                    "Invalid placement at (%d,%d) length=%d: %s", x_index, y_index, length, exc
                )
                raise

            reason = result.failure.value if result.failure else "none"
            span.set_attribute("placed", result.placed)
            span.set_attribute("reason", reason)
            record_game_metric(
                "battleships_ship_placements_total",
                1,
                {"result": "success" if result.placed else "failed", "reason": reason},
            )
            self._logger.info(
                "place_ship coord=(%d,%d) length=%d placed=%s reason=%s",
                x_index,
                y_index,
                length,
                result.placed,
                reason,
            )
            return result

    def attack(self, board: Board, x_index: int, y_index: int) -> AttackResult:
        with self._tracer.start_as_current_span("battleships.engine.attack") as span:
            span.set_attribute("coord.x", x_index)
            span.set_attribute("coord.y", y_index)

            result = super().attack(board, x_index, y_index)

            span.set_attribute("hit", result.is_hit)
            span.set_attribute("sunk", result.is_ship_sunk)
            span.set_attribute("game_over", result.is_game_over)

            game = board.game
            if game is not None and game in self._attack_counts:
                self._attack_counts[game] += 1

            record_game_metric("battleships_attacks_total", 1)
            record_game_metric(
                "battleships_attacks_by_result_total",
                1,
                {"result": "hit" if result.is_hit else "miss"},
            )
            if result.is_ship_sunk:
                record_game_metric("battleships_ships_sunk_total", 1)

            self._logger.info(
                "attack coord=(%d,%d) hit=%s sunk=%s game_over=%s",
                x_index,
                y_index,
                result.is_hit,
                result.is_ship_sunk,
                result.is_game_over,
            )

            if result.is_game_over and game is not None and game not in self._completed_games:
                self._finish_game(game, board)

            return result

    def _finish_game(self, game: Game, defeated_board: Board) -> None:
        self._completed_games.add(game)
        started = self._game_start_times.pop(game, None)
        duration = (time.perf_counter() - started) if started is not None else 0.0
        attacks = self._attack_counts.pop(game, 0)
        if defeated_board is game.player_one.board:
            winner_role, winner = "player_two", game.player_two
        else:
            winner_role, winner = "player_one", game.player_one

        record_game_metric("battleships_game_completed_total", 1, {"winner": winner_role})
        record_game_metric("battleships_game_duration_seconds", duration, {"winner": winner_role})

        with self._tracer.start_as_current_span("battleships.engine.game_complete") as span:
            span.set_attribute("winner", winner.name)
            span.set_attribute("attacks", attacks)
            span.set_attribute("duration_ms", duration * 1000)

        self._logger.info(
            "Game finished. Winner=%s attacks=%d duration_s=%.3f", winner.name, attacks, duration
        )
