from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .move import Coordinate
from .pieces import Color, Square

BOARD_SIZE = 8
ROWS_PER_SIDE = 3

Grid = tuple[tuple[Square, ...], ...]
BoardState = tuple[tuple[str, ...], ...]


@dataclass(frozen=True, slots=True)
class Board:
    squares: Grid

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple(tuple(Square.EMPTY for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE)))

    @classmethod
    def start(cls) -> "Board":
        rows: list[tuple[Square, ...]] = []
        for row in range(BOARD_SIZE):
            cells: list[Square] = []
            for col in range(BOARD_SIZE):
                square = Square.EMPTY
                if is_dark_square(row, col):
                    if row < ROWS_PER_SIDE:
                        square = Square.BLACK_MAN
                    elif row >= BOARD_SIZE - ROWS_PER_SIDE:
                        square = Square.RED_MAN
                cells.append(square)
            rows.append(tuple(cells))
        return cls(tuple(rows))

    @classmethod
    def from_pieces(cls, pieces: dict[Coordinate, Square]) -> "Board":
        """Build a board holding only the given pieces; handy for set-up positions."""
        return cls.empty().with_squares(pieces.items())

    def getPiece(self, row: int, col: int) -> Square:
        if self._is_within_bounds(row, col):
            return self.squares[row][col]
        return Square.EMPTY

    def getAllPieces(self) -> list[tuple[Coordinate, Square]]:
        pieces: list[tuple[Coordinate, Square]] = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                square = self.squares[row][col]
                if not square.is_empty:
                    pieces.append(((row, col), square))
        return pieces

    def count_pieces(self) -> dict[Color, int]:
        counts = {Color.RED: 0, Color.BLACK: 0}
        for _, square in self.getAllPieces():
            counts[square.owner] += 1
        return counts

    def with_squares(self, changes: Iterable[tuple[Coordinate, Square]]) -> "Board":
        grid = [list(row) for row in self.squares]
        for (row, col), square in changes:
            grid[row][col] = square
        return Board(tuple(tuple(row) for row in grid))

    def to_state(self) -> BoardState:
        return tuple(tuple(square.value for square in row) for row in self.squares)

    def coordinates(self) -> Iterator[Coordinate]:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield (row, col)

    def _is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def __str__(self) -> str:
        return "\n".join(" ".join(repr(square) for square in row) for row in self.squares)


def is_dark_square(row: int, col: int) -> bool:
    return (row + col) % 2 == 1
