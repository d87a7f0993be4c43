from __future__ import annotations

from enum import Enum
from typing import Optional


class Color(Enum):
    RED = "red"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Square(Enum):
    EMPTY = "empty"
    RED_MAN = "red_man"
    BLACK_MAN = "black_man"
    RED_KING = "red_king"
    BLACK_KING = "black_king"

    @property
    def owner(self) -> Optional[Color]:
        return _OWNERS[self]

    @property
    def is_empty(self) -> bool:
        return self is Square.EMPTY

    @property
    def is_king(self) -> bool:
        return self in (Square.RED_KING, Square.BLACK_KING)

    @property
    def is_man(self) -> bool:
        return self in (Square.RED_MAN, Square.BLACK_MAN)

    def belongs_to(self, color: Color) -> bool:
        return _OWNERS[self] is color

    def promote(self) -> "Square":
        return _PROMOTIONS.get(self, self)

    def __repr__(self) -> str:
        if self is Square.EMPTY:
            return "."
        symbol = "r" if self.owner is Color.RED else "b"
        return symbol.upper() if self.is_king else symbol


_OWNERS: dict[Square, Optional[Color]] = {
    Square.EMPTY: None,
    Square.RED_MAN: Color.RED,
    Square.RED_KING: Color.RED,
    Square.BLACK_MAN: Color.BLACK,
    Square.BLACK_KING: Color.BLACK,
}

_PROMOTIONS = {
    Square.RED_MAN: Square.RED_KING,
    Square.BLACK_MAN: Square.BLACK_KING,
}

# Row a man must reach to be crowned.
PROMOTION_ROW = {
    Square.RED_MAN: 0,
    Square.BLACK_MAN: 7,
}

# Row direction of a man's simple step.
FORWARD = {
    Square.RED_MAN: -1,
    Square.BLACK_MAN: 1,
}
