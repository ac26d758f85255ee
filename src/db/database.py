"""Generate database sessions"""

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

SessionFactory = sessionmaker[Session]


def create_session_factory(database_url: str, echo: bool = False) -> SessionFactory:
    """Engine + session factory for the given URL. Ensures all tables are created."""
    connect_args = (
        {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    )
    engine = create_engine(database_url, echo=echo, connect_args=connect_args)
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine)
