from __future__ import annotations

import logging

from .move import Coordinate, Move
from .pieces import FORWARD, PROMOTION_ROW, Color, Square
from .state import GameState

logger = logging.getLogger(__name__)


def is_valid_move(state: GameState, start: Coordinate, end: Coordinate) -> bool:
    """Return True when ``start -> end`` is a simple step or a capture jump.

    The destination square is not required to be empty, and a man may jump
    backwards even though it can only step forwards.
    """
    piece = state.piece_at(start)
    move = Move(start, end)
    row_delta, col_delta = move.row_delta, move.col_delta

    if abs(col_delta) == 1:
        if piece.is_man and row_delta == FORWARD[piece]:
            return True
        if piece.is_king and abs(row_delta) == 1:
            return True

    if abs(row_delta) == 2 and abs(col_delta) == 2:
        jumped = state.piece_at(move.midpoint)
        return jumped.belongs_to(state.current_player.opponent)

    return False


def legal_destinations(state: GameState, origin: Coordinate) -> tuple[Coordinate, ...]:
    if not state.piece_at(origin).belongs_to(state.current_player):
        return ()
    return tuple(
        coord for coord in state.board.coordinates() if is_valid_move(state, origin, coord)
    )


def apply_move(state: GameState, start: Coordinate, end: Coordinate) -> GameState:
    """Execute an already validated move and return the resulting state.

    A capture keeps the turn with the mover; a simple step hands it over.
    The selection is left as-is for the caller to clear.
    """
    move = Move(start, end)
    piece = state.piece_at(start)
    landed = piece
    if piece.is_man and end[0] == PROMOTION_ROW[piece]:
        landed = piece.promote()

    changes = [(start, Square.EMPTY), (end, landed)]
    red_score, black_score = state.red_score, state.black_score
    next_player = state.current_player.opponent

    if move.is_capture:
        changes.append((move.midpoint, Square.EMPTY))
        if state.current_player is Color.RED:
            red_score += 1
        else:
            black_score += 1
        next_player = state.current_player
        logger.debug("%s captured at %s with %s", state.current_player.label, move.midpoint, move)
    else:
        logger.debug("%s moved %s", state.current_player.label, move)

    if landed is not piece:
        logger.debug("%s promoted to %s at %s", piece.value, landed.value, end)

    return state.replace(
        board=state.board.with_squares(changes),
        current_player=next_player,
        red_score=red_score,
        black_score=black_score,
    )
