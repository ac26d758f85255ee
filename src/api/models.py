"""Requests and Response models exchanged with the game service"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.checkers.board import Board
from src.checkers.square import BOARD_DIMENSIONS, Coordinate
from src.core.exceptions import InvalidRequestError
from src.core.models import Session, Tally
from src.core.shared_types import Side

BoardIndex = Annotated[int, Field(ge=0, lt=BOARD_DIMENSIONS[0])]
Count = Annotated[int, Field(ge=0)]

# "draw" and "" both mean nobody won
NO_WINNER = {"", "draw"}


class WireModel(BaseModel):
    """Field names are snake_case in Python and camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)


# --- SHARED MODELS ---
class PositionModel(WireModel):
    row: BoardIndex
    col: BoardIndex

    @classmethod
    def from_coordinate(cls, coordinate: Coordinate) -> "PositionModel":
        return cls(row=coordinate.row, col=coordinate.col)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.col)


class MoveModel(WireModel):
    from_: PositionModel = Field(alias="from")
    to: PositionModel


# --- REQUEST MODELS ---
class MoveRequest(WireModel):
    move: MoveModel

    @classmethod
    def between(cls, origin: Coordinate, target: Coordinate) -> "MoveRequest":
        return cls(
            move=MoveModel(
                from_=PositionModel.from_coordinate(origin),
                to=PositionModel.from_coordinate(target),
            )
        )


# --- RESPONSE MODELS ---
class GameStateModel(WireModel):
    board: list[list[Optional[str]]]
    current_turn: Side = Field(alias="currentTurn")
    game_over: bool = Field(alias="gameOver")
    winner: Optional[str] = None

    @field_validator("board")
    @classmethod
    def validate_board(
        cls, value: list[list[Optional[str]]]
    ) -> list[list[Optional[str]]]:
        try:
            Board.from_wire(value)
        except InvalidRequestError as exc:
            # ValueError is what pydantic collects into a ValidationError
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("winner")
    @classmethod
    def validate_winner(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value in NO_WINNER:
            return None
        return Side(value).value

    @classmethod
    def from_session(cls, session: Session) -> "GameStateModel":
        return cls(
            board=session.board.to_wire(),
            current_turn=session.current_turn,
            game_over=session.game_over,
            winner=session.winner.value if session.winner else None,
        )

    def to_session(self) -> Session:
        return Session(
            board=Board.from_wire(self.board),
            current_turn=self.current_turn,
            game_over=self.game_over,
            winner=Side(self.winner) if self.winner else None,
        )


class MoveResponse(WireModel):
    game_state: GameStateModel = Field(alias="gameState")
    bot_move: Optional[MoveModel] = Field(default=None, alias="botMove")


class WinRecordResponse(WireModel):
    wins: Count
    losses: Count
    draws: Count

    def to_tally(self) -> Tally:
        return Tally(wins=self.wins, losses=self.losses, draws=self.draws)
