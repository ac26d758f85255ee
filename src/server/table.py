"""
In-memory game of the stand-in service.

This is NOT a checkers rule engine. A move simply relocates the piece, displacing whatever stood on the target.
The turn goes straight back to the player (there is no bot strategy), and the game ends once the bot has no pieces left.
It exists so the client can be played and tested end to end without the real service.
"""

import logging
from typing import Optional

from src.checkers.board import Board
from src.checkers.square import Coordinate
from src.core.models import Session
from src.core.shared_types import Outcome, Side

logger = logging.getLogger(__name__)


class GameTable:
    """Holds the single game the stand-in service is playing."""

    def __init__(self) -> None:
        self.session: Optional[Session] = None

    def new_game(self) -> Session:
        self.session = Session(
            board=Board.starting(), current_turn=Side.HUMAN, game_over=False
        )
        return self.session

    def play(self, origin: Coordinate, target: Coordinate) -> tuple[Session, Optional[Outcome]]:
        """Apply a move. Returns the new state, and the outcome if this move ended the game.

        A move that cannot be applied (no game, game over, no player piece on `origin`) returns the state unchanged.
        """
        session = self.session or self.new_game()
        if not session.awaits_human or not session.board.is_owned_by(origin, Side.HUMAN):
            logger.info("Move %s -> %s not applied.", origin, target)
            return session, None

        board = session.board
        board = board.place(target, board.piece(origin)).place(origin, None)

        if board.count_pieces(Side.OPPONENT) == 0:
            self.session = Session(
                board=board, current_turn=Side.HUMAN, game_over=True, winner=Side.HUMAN
            )
            return self.session, Outcome.WIN

        self.session = Session(board=board, current_turn=Side.HUMAN, game_over=False)
        return self.session, None
