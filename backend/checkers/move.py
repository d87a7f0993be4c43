from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    end: Coordinate

    @property
    def row_delta(self) -> int:
        return self.end[0] - self.start[0]

    @property
    def col_delta(self) -> int:
        return self.end[1] - self.start[1]

    @property
    def is_capture(self) -> bool:
        return abs(self.row_delta) == 2

    @property
    def midpoint(self) -> Optional[Coordinate]:
        if not self.is_capture:
            return None
        return ((self.start[0] + self.end[0]) // 2, (self.start[1] + self.end[1]) // 2)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{row},{col}" for row, col in (self.start, self.end))
