"""
Database connection and session management for the YouTube digest application.

The engine is created on first use and reused for the lifetime of the
process; it is never torn down explicitly.
"""

from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from ytdigest.config import config

# Create base class for SQLAlchemy models
Base = declarative_base()

_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None



def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine

    if _engine is None:
        url = config.DATABASE_URL
        _engine = create_engine(
            url,
            connect_args={"check_same_thread": False} if url.startswith("sqlite") else {}
        )
    return _engine


def get_session_factory() -> sessionmaker:
    """Return the process-wide session factory bound to the engine."""
    global _SessionLocal

    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def init_db(engine: Optional[Engine] = None) -> None:
    """Initialize the database by creating all tables."""
    from ytdigest.db.models import Summary  # noqa: F401

    # Create all tables
    Base.metadata.create_all(bind=engine or get_engine())
