from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .move import Coordinate
from .pieces import Color, Square


@dataclass(frozen=True, slots=True)
class GameState:
    """Snapshot of a game between two clicks.

    Every engine transition returns a fresh instance; nothing here is ever
    mutated, so a view can hold on to a snapshot for as long as it likes.
    """

    board: Board
    current_player: Color = Color.RED
    selected_square: Optional[Coordinate] = None
    red_score: int = 0
    black_score: int = 0

    @classmethod
    def initial(cls) -> "GameState":
        return cls(board=Board.start())

    def piece_at(self, coord: Coordinate) -> Square:
        return self.board.getPiece(*coord)

    def score_for(self, color: Color) -> int:
        return self.red_score if color is Color.RED else self.black_score

    def replace(self, **changes) -> "GameState":
        return dataclasses.replace(self, **changes)
