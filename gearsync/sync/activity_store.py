"""SQLite store for activities imported from Strava."""

import logging
import sqlite3
from typing import Optional

from .models import Activity
from .storage import SQLiteStore

__all__ = ["ActivityStore"]

logger = logging.getLogger(__name__)


class ActivityStore(SQLiteStore):
    """Imported activities. Written by the activity importer, read for gear ids."""

    def _create_schema(self, cursor: sqlite3.Cursor) -> None:
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS activities (
                activity_id TEXT PRIMARY KEY,
                activity_type TEXT NOT NULL,
                name TEXT NOT NULL DEFAULT '',
                start_date TEXT NOT NULL,
                gear_id TEXT
            )
            """
        )
        cursor.execute(
            """
            CREATE INDEX IF NOT EXISTS idx_activities_gear_id ON activities(gear_id)
            """
        )

    def add(self, activity: Activity) -> None:
        """Insert or replace an activity."""
        with self._cursor() as cursor:
            cursor.execute(
                """
                INSERT OR REPLACE INTO activities
                    (activity_id, activity_type, name, start_date, gear_id)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    activity.activity_id,
                    activity.activity_type.value,
                    activity.name,
                    activity.start_date.isoformat(),
                    activity.gear_id,
                ),
            )

    def find(self, activity_id: str) -> Optional[Activity]:
        with self._cursor() as cursor:
            cursor.execute(
                "SELECT * FROM activities WHERE activity_id = ?", (activity_id,)
            )
            row = cursor.fetchone()
        return Activity.from_row(row) if row else None

    def find_unique_gear_ids(self) -> list[str]:
        """Distinct gear ids referenced by any activity, sorted ascending."""
        with self._cursor() as cursor:
            cursor.execute(
                """
                SELECT DISTINCT gear_id FROM activities
                WHERE gear_id IS NOT NULL AND gear_id != ''
                ORDER BY gear_id
                """
            )
            return [row["gear_id"] for row in cursor.fetchall()]
