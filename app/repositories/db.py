"""DuckDB connection management."""

import threading
from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def db_exists(path: str = DB_PATH) -> bool:
    """Check if database file exists."""
    return Path(path).exists()


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def _ensure_db_exists(path: str) -> None:
    """Create DB with tables if it doesn't exist."""
    if not db_exists(path):
        logger.info("DB not found: {}. Creating empty DB.", path)
        conn = duckdb.connect(path)
        init_tables(conn)
        conn.close()


def _connections() -> dict[str, duckdb.DuckDBPyConnection]:
    if not hasattr(_local, "conns"):
        _local.conns = {}
    return _local.conns


def get_db(path: str = DB_PATH, read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection for a database file."""
    conns = _connections()
    if conns.get(path) is None:
        _ensure_db_exists(path)
        conn = duckdb.connect(path, read_only=read_only)
        if not read_only:
            init_tables(conn)
        conns[path] = conn
        logger.debug("DB connected: {} (read_only={})", path, read_only)
    return conns[path]


def close_db(path: str | None = None) -> None:
    """Close thread-local connection(s); all of them when no path is given."""
    conns = _connections()
    paths = [path] if path else list(conns)
    for p in paths:
        conn = conns.pop(p, None)
        if conn is not None:
            conn.close()
            logger.debug("DB connection closed: {}", p)
