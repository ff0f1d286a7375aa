"""Persistent "Strava quota reached today" mark."""

import logging
import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from .storage import SQLiteStore

__all__ = ["RateLimitTracker"]

logger = logging.getLogger(__name__)


def _local_today() -> date:
    return datetime.now().date()


class RateLimitTracker(SQLiteStore):
    """Records the local dates on which Strava refused further requests.

    The mark resets at local midnight: ``has_been_reached()`` only looks at
    today's date. The synchronizer writes the mark, the coordinator reads it
    before starting a run.

    Usage:
        tracker = RateLimitTracker()
        tracker.mark_as_reached()
        tracker.has_been_reached()  # True until midnight
    """

    def __init__(
        self,
        db_path: Optional[Path] = None,
        today: Callable[[], date] = _local_today,
    ):
        self._today = today
        super().__init__(db_path)

    def _create_schema(self, cursor: sqlite3.Cursor) -> None:
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS rate_limit_reached (
                date TEXT PRIMARY KEY,
                reached_at TEXT NOT NULL
            )
            """
        )

    def mark_as_reached(self) -> None:
        today = self._today()
        with self._cursor() as cursor:
            cursor.execute(
                """
                INSERT OR IGNORE INTO rate_limit_reached (date, reached_at)
                VALUES (?, ?)
                """,
                (today.isoformat(), datetime.now(timezone.utc).isoformat()),
            )
        logger.info(f"Strava rate limit marked as reached for {today}")

    def has_been_reached(self) -> bool:
        with self._cursor() as cursor:
            cursor.execute(
                "SELECT 1 FROM rate_limit_reached WHERE date = ?",
                (self._today().isoformat(),),
            )
            return cursor.fetchone() is not None

    def clear(self) -> None:
        """Forget today's mark (manual override)."""
        with self._cursor() as cursor:
            cursor.execute(
                "DELETE FROM rate_limit_reached WHERE date = ?",
                (self._today().isoformat(),),
            )
