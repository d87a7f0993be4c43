from __future__ import annotations

from typing import Any, Optional

from checkers.board import Board
from checkers.move import Coordinate
from checkers.pieces import Color, Square
from checkers.state import GameState


def _coord_tuple_to_dict(coord: Coordinate) -> dict[str, int]:
    row, col = coord
    return {"row": row, "col": col}


def serialize_piece(coord: Coordinate, square: Square) -> dict[str, Any]:
    row, col = coord
    return {
        "row": row,
        "col": col,
        "color": square.owner.value,
        "isKing": square.is_king,
    }


def serialize_board(board: Board) -> list[list[str]]:
    return [list(row) for row in board.to_state()]


def serialize_selection(selected: Optional[Coordinate]) -> Optional[dict[str, int]]:
    return _coord_tuple_to_dict(selected) if selected is not None else None


def serialize_destinations(origin: Coordinate, destinations: tuple[Coordinate, ...]) -> dict[str, Any]:
    return {
        "piece": _coord_tuple_to_dict(origin),
        "destinations": [_coord_tuple_to_dict(coord) for coord in destinations],
    }


def serialize_game(state: GameState, move_count: int) -> dict[str, Any]:
    pieces = state.board.getAllPieces()
    counts = state.board.count_pieces()
    kings = {
        color: sum(1 for _, square in pieces if square.is_king and square.owner is color)
        for color in Color
    }

    return {
        "board": serialize_board(state.board),
        "pieces": [serialize_piece(coord, square) for coord, square in pieces],
        "turn": state.current_player.value,
        "turnLabel": state.current_player.label,
        "selected": serialize_selection(state.selected_square),
        "scores": {
            "red": state.red_score,
            "black": state.black_score,
        },
        "pieceCounts": {
            color.value: {"total": counts[color], "kings": kings[color]}
            for color in Color
        },
        "moveCount": move_count,
    }
