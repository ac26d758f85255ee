"""FastAPI application factory for the stand-in game service."""

import logging
from typing import Annotated, Generator, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.models import (
    GameStateModel,
    MoveRequest,
    MoveResponse,
    WinRecordResponse,
)
from src.core.config import Settings, get_settings
from src.core.exceptions import InvalidRequestError, RepositoryError
from src.db.database import SessionFactory, create_session_factory
from src.db.repository import GameRecordRepository
from src.db.sql_repository import SQLGameRecordRepository
from src.server.table import GameTable

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def get_table(request: Request) -> GameTable:
    return request.app.state.table


def get_repository(request: Request) -> Generator[GameRecordRepository, None, None]:
    with request.app.state.session_factory() as db:
        yield SQLGameRecordRepository(db)


Table = Annotated[GameTable, Depends(get_table)]
Repository = Annotated[GameRecordRepository, Depends(get_repository)]


def create_router() -> APIRouter:
    router = APIRouter(prefix=API_PREFIX)

    @router.post("/new-game", response_model=GameStateModel, response_model_by_alias=True)
    def new_game(table: Table) -> GameStateModel:
        return GameStateModel.from_session(table.new_game())

    @router.post("/make-move", response_model=MoveResponse, response_model_by_alias=True)
    def make_move(body: MoveRequest, table: Table, repo: Repository) -> MoveResponse:
        session, outcome = table.play(
            body.move.from_.to_coordinate(), body.move.to.to_coordinate()
        )
        if outcome is not None:
            repo.record_result(outcome)
            logger.info("Game finished: %s", outcome)
        return MoveResponse(game_state=GameStateModel.from_session(session))

    @router.get("/win-record", response_model=WinRecordResponse)
    def win_record(repo: Repository) -> WinRecordResponse:
        tally = repo.win_record()
        return WinRecordResponse(wins=tally.wins, losses=tally.losses, draws=tally.draws)

    return router


def create_app(
    settings: Optional[Settings] = None,
    session_factory: Optional[SessionFactory] = None,
) -> FastAPI:
    """Create and configure the stand-in game service.

    Args:
        settings: Optional settings override.
        session_factory: Optional database sessions override (tests pass an in-memory database).

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(title="Checkers stand-in service", version="0.1.0")
    app.state.table = GameTable()
    app.state.session_factory = session_factory or create_session_factory(
        settings.database_url
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(InvalidRequestError)
    @app.exception_handler(RequestValidationError)
    async def invalid_request_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.info("Invalid request body on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=400, content={"detail": "Invalid request body"})

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Database error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"detail": "Database error"})

    app.include_router(create_router())
    return app
