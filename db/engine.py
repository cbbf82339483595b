"""
SQLAlchemy engine and session configuration.

Provides database connection, session factory, and initialization utilities.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config.settings import AppSettings

logger = logging.getLogger(__name__)

Base = declarative_base()

_settings = AppSettings.from_env()
DATABASE_URL = _settings.database.url


def build_engine(url: str, echo: bool = False):
    """Create an engine; SQLite connections may be shared across threads."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, echo=echo)


engine = build_engine(DATABASE_URL, echo=_settings.database.echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create all database tables. Safe to call multiple times."""
    from db import models  # noqa: F401  registers the ORM models
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database initialized")


def get_db():
    """Yield a database session. For use as a FastAPI dependency."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
