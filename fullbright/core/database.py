"""PostgreSQL engine construction and per-request session management."""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from fullbright.core.errors import StorageError

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the connection pool. Nothing connects until the first query."""
    return create_engine(
        database_url,
        pool_pre_ping=True,
        echo=echo,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Sessions keep loaded attributes after commit; reads after a commit do not hit the database."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session from the app's pool and closes it when done."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def storage_errors(db: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise any SQLAlchemy failure as a generic StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database error during %s", action)
        raise StorageError(e) from e


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning("Database connectivity check failed: %s", e)
        return False
