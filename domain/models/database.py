"""
Database configuration and session management.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings

logger = logging.getLogger("cookingrecipes.database")

# Every table except LoggingInfo lives in this schema
SCHEMA = "public"

# Create SQLAlchemy Base
Base = declarative_base()


def utcnow() -> datetime:
    """Timestamp default for publication / add times"""
    return datetime.now(timezone.utc)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite has no "public" schema; map it onto the default one.
        # StaticPool keeps a single in-memory database across threads.
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
            "execution_options": {"schema_translate_map": {SCHEMA: None}},
        }
    return {"pool_pre_ping": True}


# Create engine
engine = create_engine(
    settings.database_url,
    echo=settings.db_echo,
    future=True,
    **_engine_options(settings.database_url),
)

if settings.is_sqlite():

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database():
    """Initialize database schema"""
    with engine.begin() as conn:
        if not settings.is_sqlite():
            conn.exec_driver_sql(f'CREATE SCHEMA IF NOT EXISTS "{SCHEMA}";')
        Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
