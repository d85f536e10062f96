"""
Database handle for the saved-calculation store.

The engine is created on first use through get_engine() and torn down by
dispose_engine() at application shutdown. Nothing connects at import time.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Return the process-wide engine, creating it on first call."""
    global _engine
    if _engine is None:
        url = database_url or settings.DATABASE_URL
        connect_args = {}
        if url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        _engine = create_engine(url, connect_args=connect_args, echo=settings.DATABASE_ECHO)
        logger.info("Database engine created for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _session_factory


def init_db() -> None:
    """Create tables for every model registered on Base."""
    from . import models  # noqa: F401  registers tables on Base.metadata
    Base.metadata.create_all(bind=get_engine())


def dispose_engine() -> None:
    """Release pooled connections. The next get_engine() call starts fresh."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None


def get_db():
    """FastAPI dependency, one session per request."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()
