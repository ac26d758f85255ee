"""Protocol repository for finished games (SQLAlchemy implementation in sql_repository.py)"""

from typing import Protocol

from src.core.models import Tally
from src.core.shared_types import Outcome


class GameRecordRepository(Protocol):
    """Persistence layer orchestration"""

    def record_result(self, outcome: Outcome) -> None:
        """Store the outcome of a finished game."""
        ...

    def win_record(self) -> Tally:
        """Count stored outcomes into wins, losses and draws."""
        ...
