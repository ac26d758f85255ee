"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator, Optional

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.checkers.board import Board
from src.checkers.pieces import Piece
from src.checkers.square import Coordinate
from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def session_factory() -> Generator[sessionmaker[Session], None, None]:
    """Factory bound to the test database. Tables are removed at teardown to make tests independent of each other."""
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session_repo(
    session_factory: sessionmaker[Session],
) -> Generator[Session, None, None]:
    """Connection to a test database."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def board_with() -> Callable[[dict[tuple[int, int], Optional[Piece]]], Board]:
    """Call the inner function with {(row, col): piece} to get an otherwise empty board."""

    def _create_board(pieces: dict[tuple[int, int], Optional[Piece]]) -> Board:
        board = Board.empty()
        for (row, col), piece in pieces.items():
            board = board.place(Coordinate(row, col), piece)
        return board

    return _create_board
