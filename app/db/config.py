"""Database configuration for the Task API."""
from typing import Generator
from fastapi import Request
from sqlmodel import create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.utils.logger import get_logger

logger = get_logger(__name__)

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str) -> Engine:
    """Create the SQLModel engine for the given database URL."""
    if not database_url.startswith("sqlite"):
        logger.info("Using PostgreSQL-compatible database", backend=database_url.split(":", 1)[0])
        return create_engine(database_url, echo=False, pool_pre_ping=True)

    in_memory = database_url in IN_MEMORY_SQLITE_URLS
    logger.info("Using SQLite database", in_memory=in_memory)

    # In-memory databases live in a single connection shared by every session
    engine_kwargs = {"poolclass": StaticPool} if in_memory else {}
    engine = create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
        **engine_kwargs,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        if not in_memory:
            cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def get_session(request: Request) -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(request.app.state.engine) as session:
        yield session
