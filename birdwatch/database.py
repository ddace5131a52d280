"""
Database setup - engine, session factory and declarative base.

``init_engine`` builds the engine for a given ``Settings``; ``create_app``
keeps it and its session factory on ``app.state``. Controllers get a
session per request through the ``get_db`` dependency; scripts such as the
seed command build their own engine the same way.
"""

import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from birdwatch.config import Settings

logger = logging.getLogger(__name__)

Base = declarative_base()


def init_engine(settings: Settings) -> Engine:
    """Create the engine for ``settings.database_url``."""
    return create_engine(
        settings.database_url,
        # SQLite connections are per-thread by default; FastAPI runs sync
        # endpoints in a threadpool
        connect_args={"check_same_thread": False} if settings.is_sqlite else {},
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    """FastAPI dependency yielding a session that is always closed."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine) -> None:
    """Create any missing tables for the registered entities."""
    # Entities must be imported so they are registered on Base.metadata
    from birdwatch.models import entities  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready")


def ping(db: Session) -> bool:
    """Return True if the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database ping failed: {e}")
        return False
