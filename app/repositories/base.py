"""Base repository class."""

from typing import Any

import duckdb
from loguru import logger

from app.repositories.db import get_db
from app.repositories.errors import StorageUnavailableError
from settings import DB_PATH


class BaseRepository:
    """Base repository over a lazily opened DuckDB connection."""

    def __init__(self, db_path: str = DB_PATH, read_only: bool = False):
        self._db_path = db_path
        self._read_only = read_only
        self._db: duckdb.DuckDBPyConnection | None = None
        logger.debug("{} initialized ({})", self.__class__.__name__, db_path)

    @property
    def db(self) -> duckdb.DuckDBPyConnection:
        """Connection, opened on first use."""
        if self._db is None:
            try:
                self._db = get_db(self._db_path, self._read_only)
            except duckdb.Error as e:
                raise StorageUnavailableError(f"Cannot open {self._db_path}: {e}") from e
        return self._db

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        try:
            if params:
                return self.db.execute(query, params)
            return self.db.execute(query)
        except duckdb.Error as e:
            raise StorageUnavailableError(str(e)) from e

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
