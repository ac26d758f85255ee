"""Typed access to the three operations of the game service."""

from typing import Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from src.api.models import (
    GameStateModel,
    MoveRequest,
    MoveResponse,
    WinRecordResponse,
)
from src.checkers.square import Coordinate
from src.client.transport import JSON, Transport
from src.core.exceptions import RemoteServiceError
from src.core.models import Session, Tally

ModelT = TypeVar("ModelT", bound=BaseModel)

NEW_GAME_PATH = "/new-game"
MAKE_MOVE_PATH = "/make-move"
WIN_RECORD_PATH = "/win-record"


class GameApi(Protocol):
    """What the controller needs from the game service."""

    async def new_game(self) -> Session:
        """Start a game and return its initial state."""
        ...

    async def make_move(self, origin: Coordinate, target: Coordinate) -> Session:
        """Submit a move. The returned state already contains the opponent's reply."""
        ...

    async def win_record(self) -> Tally:
        """Read the cumulative results."""
        ...


class GameApiClient:
    """GameApi implemented on top of a Transport"""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    async def new_game(self) -> Session:
        payload = await self.transport.request("POST", NEW_GAME_PATH)
        return _parse(GameStateModel, payload).to_session()

    async def make_move(self, origin: Coordinate, target: Coordinate) -> Session:
        request = MoveRequest.between(origin, target)
        payload = await self.transport.request(
            "POST", MAKE_MOVE_PATH, request.model_dump(by_alias=True)
        )
        return _parse(MoveResponse, payload).game_state.to_session()

    async def win_record(self) -> Tally:
        payload = await self.transport.request("GET", WIN_RECORD_PATH)
        return _parse(WinRecordResponse, payload).to_tally()


def _parse(model: type[ModelT], payload: JSON) -> ModelT:
    """Validate a response body, treating a malformed body like any other transport failure."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise RemoteServiceError(
            f"Unexpected {model.__name__} payload: {exc.error_count()} error(s)\n{exc}"
        ) from exc
