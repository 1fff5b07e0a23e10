"""
Database configuration and session management for the Inventory Tracker.

The record store is an explicitly constructed handle (engine plus session
factory). It is opened at startup, attached to the FastAPI application and
disposed on shutdown; request handlers receive sessions through ``get_db``.
"""
import logging
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import DATABASE_URL, DATABASE_ECHO

logger = logging.getLogger(__name__)

# Base class for declarative models
Base = declarative_base()

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # One shared connection, otherwise every session sees an empty database
        if url in IN_MEMORY_URLS:
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True}


class Store:
    """
    Handle on the inventory record store.

    Attributes:
        url (str): SQLAlchemy database URL
        engine: SQLAlchemy engine bound to ``url``
        SessionLocal: Session factory bound to ``engine``
    """

    def __init__(self, url: str = DATABASE_URL, echo: bool = DATABASE_ECHO):
        self.url = url
        self.engine = create_engine(url, echo=echo, **_engine_options(url))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info(f"Record store opened ({self.engine.url.render_as_string(hide_password=True)})")

    def create_all(self) -> None:
        """Create any missing tables."""
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()
        logger.info("Record store closed")


def get_db(request: Request):
    """
    Dependency function that provides a database session.

    Yields:
        Session: SQLAlchemy session from the store attached to the application

    Usage:
        Use as a FastAPI dependency to inject database sessions into route handlers.
    """
    db = request.app.state.store.session()
    try:
        yield db
    finally:
        db.close()
