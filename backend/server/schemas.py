from __future__ import annotations

from pydantic import BaseModel, Field

from checkers.board import BOARD_SIZE


class CoordinateModel(BaseModel):
    row: int = Field(..., ge=0, le=BOARD_SIZE - 1)
    col: int = Field(..., ge=0, le=BOARD_SIZE - 1)


class ClickRequest(CoordinateModel):
    pass
