from __future__ import annotations

from .rules import apply_move, is_valid_move
from .state import GameState


def handle_square_click(state: GameState, row: int, col: int) -> GameState:
    """Advance ``state`` by one click on ``(row, col)``.

    With nothing selected, a click on one of the mover's pieces picks it up and
    anything else is ignored. With a piece selected, the click is treated as the
    destination: a legal move is played, and the selection is dropped either way.
    """
    clicked = (row, col)
    origin = state.selected_square

    if origin is None:
        if state.piece_at(clicked).belongs_to(state.current_player):
            return state.replace(selected_square=clicked)
        return state

    if is_valid_move(state, origin, clicked):
        state = apply_move(state, origin, clicked)
    return state.replace(selected_square=None)
