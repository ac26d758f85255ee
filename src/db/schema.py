"""Database tables / schema"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    """One finished game. The winner is "player", "bot" or "draw"."""

    __tablename__ = "games"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    winner: Mapped[str]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
