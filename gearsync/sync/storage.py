"""Shared SQLite plumbing for the local stores."""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..config import Config

__all__ = ["SQLiteStore", "DEFAULT_DB_NAME"]

logger = logging.getLogger(__name__)

DEFAULT_DB_NAME = "gear_sync.db"


class SQLiteStore:
    """Thread-local SQLite connection with a committing cursor context.

    Subclasses create their tables in ``_create_schema``.
    """

    def __init__(self, db_path: Optional[Path] = None):
        if db_path is None:
            db_path = Config.get_data_dir() / DEFAULT_DB_NAME

        self.db_path = db_path
        self._local = threading.local()
        self._init_db()

    def _get_connection(self) -> sqlite3.Connection:
        """Get thread-local database connection."""
        if not hasattr(self._local, "connection"):
            self._local.connection = sqlite3.connect(str(self.db_path))
            self._local.connection.row_factory = sqlite3.Row
        return self._local.connection

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Context manager for database cursor."""
        conn = self._get_connection()
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()

    def _init_db(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._cursor() as cursor:
            self._create_schema(cursor)

    def _create_schema(self, cursor: sqlite3.Cursor) -> None:
        raise NotImplementedError

    def close(self) -> None:
        """Close database connection."""
        if hasattr(self._local, "connection"):
            self._local.connection.close()
            del self._local.connection
