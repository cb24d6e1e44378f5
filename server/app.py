from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.options import RuleOptions

from .schemas import ClickRequest, ResetRequest
from .session import GameSession


def create_app(options: Optional[RuleOptions] = None) -> FastAPI:
    app = FastAPI(title="Checkers Backend", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    session = GameSession(options)
    app.state.session = session

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.post("/click")
    def click_cell(payload: ClickRequest, session: GameSession = Depends(get_session)):
        return session.click(payload)

    @app.post("/reset")
    def reset_game(payload: Optional[ResetRequest] = None, session: GameSession = Depends(get_session)):
        return session.reset(payload)

    return app


app = create_app(RuleOptions.from_env())
