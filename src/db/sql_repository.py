"""Implementation of (GameRecord)Repository using SQLAlchemy"""

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import RepositoryError
from src.core.models import Tally
from src.core.shared_types import Outcome
from src.db.schema import DBGame


class SQLGameRecordRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def record_result(self, outcome: Outcome) -> None:
        """Store the outcome of a finished game."""
        try:
            self.db.add(DBGame(winner=outcome.value))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise RepositoryError(f"Could not store {outcome=}.") from exc

    def win_record(self) -> Tally:
        """Count stored outcomes into wins, losses and draws."""
        query = select(DBGame.winner, func.count()).group_by(DBGame.winner)
        try:
            counts: dict[str, int] = {
                winner: count for winner, count in self.db.execute(query)
            }
        except SQLAlchemyError as exc:
            raise RepositoryError("Could not read the win record.") from exc

        # Rows with an unknown winner are not counted
        return Tally(
            wins=counts.get(Outcome.WIN.value, 0),
            losses=counts.get(Outcome.LOSS.value, 0),
            draws=counts.get(Outcome.DRAW.value, 0),
        )
