"""Checkers rules engine package."""

from .board import BOARD_SIZE, Board
from .game import handle_square_click
from .move import Coordinate, Move
from .pieces import Color, Square
from .rules import apply_move, is_valid_move, legal_destinations
from .state import GameState

__all__ = [
	"BOARD_SIZE",
	"Board",
	"GameState",
	"Move",
	"Coordinate",
	"Color",
	"Square",
	"handle_square_click",
	"is_valid_move",
	"legal_destinations",
	"apply_move",
]
