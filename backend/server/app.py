from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from checkers.board import BOARD_SIZE

from .schemas import ClickRequest
from .session import GameSession


def create_app() -> FastAPI:
    app = FastAPI(title="Checkers Rules Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = GameSession()

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/valid-moves")
    def read_valid_moves(
        row: int = Query(..., ge=0, le=BOARD_SIZE - 1),
        col: int = Query(..., ge=0, le=BOARD_SIZE - 1),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.get_valid_moves(row, col)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/click")
    def click_square(payload: ClickRequest, session: GameSession = Depends(get_session)):
        return session.click(payload)

    @app.post("/reset")
    def reset_game(session: GameSession = Depends(get_session)):
        return session.reset()

    return app


app = create_app()
