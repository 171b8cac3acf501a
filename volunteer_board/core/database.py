# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Database engine and schema: single source of truth for DB connectivity.

The engine is built explicitly and handed to the repository; nothing in this
module opens a connection at import time.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine

from volunteer_board.core.config import Settings, settings as default_settings
from volunteer_board.core.logging import get_logger

logger = get_logger(__name__)

metadata = MetaData()

volunteers = Table(
    "volunteers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("date", String(10), nullable=False),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("phone_number", String(64), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Index("idx_volunteers_date", "date"),
    Index("uq_volunteers_date_phone", "date", "phone_number", unique=True),
)


def _sqlite_engine(url: str) -> Engine:
    """SQLite engine whose transactions take the write lock up front.

    pysqlite defers BEGIN until the first write, so a count followed by an
    insert would not be atomic. Driver-level transaction handling is turned
    off and every transaction starts with BEGIN IMMEDIATE instead.
    """
    engine = create_engine(url, connect_args={"check_same_thread": False, "timeout": 30})

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def build_engine(settings: Settings = default_settings) -> Engine:
    """Create the pooled engine described by ``settings``."""
    url = settings.DATABASE_URL
    if url.startswith("sqlite"):
        # SQLite pools do not take sizing arguments.
        engine = _sqlite_engine(url)
    else:
        engine = create_engine(
            url,
            pool_pre_ping=True,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    logger.info("Database engine created dialect=%s", engine.dialect.name)
    return engine


def create_schema(engine: Engine) -> None:
    """Create the volunteers table and its indexes if missing."""
    metadata.create_all(engine)
