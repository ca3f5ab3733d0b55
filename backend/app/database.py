"""
SQLAlchemy engine and session. Supports PostgreSQL and SQLite (for local use without Docker).
Sync usage; one DB session per request via get_db.
"""
import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from app.config import settings

logger = logging.getLogger(__name__)

_is_sqlite = settings.is_sqlite
_connect_args = {"check_same_thread": False} if _is_sqlite else {}
engine = create_engine(
    settings.database_url,
    pool_pre_ping=not _is_sqlite,
    connect_args=_connect_args,
    echo=False,  # Set True for SQL logging during development
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def enable_sqlite_foreign_keys(target_engine) -> None:
    """SQLite ships with FK enforcement off; turn it on per connection so ON DELETE CASCADE holds."""

    @event.listens_for(target_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if _is_sqlite:
    enable_sqlite_foreign_keys(engine)


def init_sqlite_db():
    """When using SQLite: create tables. Call once at app startup (PostgreSQL uses Alembic)."""
    if not _is_sqlite:
        return
    # Import all models so they register with Base before create_all
    from app.models import biography_session, biography_response  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("SQLite init: biography tables ready (%s)", settings.database_url)


def get_db():
    """Dependency: yield a DB session, close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
