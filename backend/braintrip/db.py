"""
Database setup for trip persistence.
Provides SQLAlchemy engine/session utilities; SQLite by default.
"""
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """Engine + session factory for one database URL."""

    def __init__(self, url: str) -> None:
        kwargs: dict = {}
        if url.startswith("sqlite"):
            # check_same_thread=False allows usage across FastAPI threads
            kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                # One shared connection, or every session sees an empty database.
                kwargs["poolclass"] = StaticPool
        self.url = url
        self.engine = create_engine(url, **kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, autocommit=False)

    def init(self) -> None:
        """Create tables if they don't exist."""
        from braintrip.repositories import models  # noqa: F401  Ensures models are registered

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Iterator[Session]:
        """FastAPI dependency-style session generator."""
        session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
