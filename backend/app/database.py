import logging
from typing import Any, Mapping

from fastapi import Depends
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.config import DATABASE_URL
from app.models.base import Base
import app.models  # noqa: F401 - register tables for create_all

logger = logging.getLogger(__name__)


def make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # Sync handlers run on the threadpool; the engine is shared across threads.
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


engine = make_engine(DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine) -> None:
    """Create users, suppliers, rfps and bids if they do not exist yet. Safe to call repeatedly."""
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready at %s", bind.url.render_as_string(hide_password=True))


class StorageError(Exception):
    """Any failure reported by the store: constraint violation, I/O, bad SQL."""


class Store:
    """
    Thin access layer over a session: three statement shapes plus commit.

    Statements use named placeholders (``:email``) bound from ``params``.
    Every SQLAlchemy failure rolls the session back and surfaces as StorageError.
    """

    def __init__(self, session: Session):
        self.session = session

    def _run(self, statement: str, params: Mapping[str, Any] | None):
        try:
            return self.session.execute(text(statement), dict(params or {}))
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning("Statement failed: %s", e)
            raise StorageError(str(getattr(e, "orig", None) or e)) from e

    def execute(self, statement: str, params: Mapping[str, Any] | None = None) -> int:
        """
        Run a mutating statement. An INSERT ending in ``RETURNING id`` yields the new row id;
        anything else yields the affected-row count.
        """
        result = self._run(statement, params)
        if result.returns_rows:
            return result.scalar_one()
        return result.rowcount

    def fetch_one(self, statement: str, params: Mapping[str, Any] | None = None) -> dict | None:
        row = self._run(statement, params).mappings().first()
        return dict(row) if row is not None else None

    def fetch_all(self, statement: str, params: Mapping[str, Any] | None = None) -> list[dict]:
        return [dict(row) for row in self._run(statement, params).mappings().all()]

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning("Commit failed: %s", e)
            raise StorageError(str(e)) from e


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> Store:
    return Store(db)
