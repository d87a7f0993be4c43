from __future__ import annotations

import logging
from threading import Lock
from typing import Any

from checkers.game import handle_square_click
from checkers.rules import legal_destinations
from checkers.state import GameState

from .schemas import ClickRequest
from .serializers import serialize_destinations, serialize_game

logger = logging.getLogger(__name__)


class GameSession:
    """Thread-safe holder of the current game state.

    The engine never keeps state of its own: each click feeds ``self.state``
    in and stores whatever comes back.
    """

    def __init__(self) -> None:
        self.lock = Lock()
        self.state = GameState.initial()
        self.move_count = 0

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.state = GameState.initial()
            self.move_count = 0
            logger.info("Game reset to the opening position.")
            return self._serialize_locked()

    def click(self, payload: ClickRequest) -> dict[str, Any]:
        with self.lock:
            before = self.state
            after = handle_square_click(before, payload.row, payload.col)
            if after.board != before.board:
                self.move_count += 1
            self.state = after
            return self._serialize_locked()

    def get_valid_moves(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            square = self.state.piece_at((row, col))
            if square.is_empty:
                raise ValueError(f"No piece at row {row}, col {col}.")
            if not square.belongs_to(self.state.current_player):
                raise ValueError("It is not this piece's turn.")
            destinations = legal_destinations(self.state, (row, col))
            return serialize_destinations((row, col), destinations)

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.state, self.move_count)
