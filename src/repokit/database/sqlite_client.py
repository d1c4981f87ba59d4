from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from repokit.config.loader import RepokitSettings
from repokit.database.sql_logging import install_sql_logging


def get_engine(url: str, settings: Optional[RepokitSettings] = None) -> Engine:
    """Create an engine; SQL statement logging is attached when enabled in settings."""
    settings = settings or RepokitSettings()
    engine = create_engine(url, future=True)
    if settings.data.logging_sql:
        install_sql_logging(engine)
    return engine


def get_session(url: str, settings: Optional[RepokitSettings] = None) -> Session:
    """Get a SQLAlchemy session (caller must close it)."""
    engine = get_engine(url, settings)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)()


@contextmanager
def session_context(
    url: str,
    settings: Optional[RepokitSettings] = None,
) -> Generator[Session, None, None]:
    """
    Context manager for SQLAlchemy sessions.

    Rolls back on error and always closes the session. Commits are left to
    the caller (normally a TransactionalWriter).

    Usage:
        with session_context("sqlite:///app.db") as session:
            repo = OrderRepository(session)
    """
    session = get_session(url, settings)
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
