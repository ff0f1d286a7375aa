"""SQLite store for gear mirrored from Strava."""

import json
import logging
import sqlite3
from typing import Optional

from .models import Gear
from .storage import SQLiteStore

__all__ = ["GearStore", "GearAlreadyExists"]

logger = logging.getLogger(__name__)


class GearAlreadyExists(Exception):
    """add() called for a gear id that is already stored."""

    pass


class GearStore(SQLiteStore):
    """Gear records keyed by Strava gear id."""

    def _create_schema(self, cursor: sqlite3.Cursor) -> None:
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS gear (
                gear_id TEXT PRIMARY KEY,
                name TEXT NOT NULL,
                distance_in_meter REAL NOT NULL CHECK (distance_in_meter >= 0),
                converted_distance REAL NOT NULL CHECK (converted_distance >= 0),
                is_retired INTEGER NOT NULL DEFAULT 0,
                created_on TEXT NOT NULL,
                data TEXT
            )
            """
        )

    def find(self, gear_id: str) -> Optional[Gear]:
        """Return the stored gear, or None when it was never imported."""
        with self._cursor() as cursor:
            cursor.execute("SELECT * FROM gear WHERE gear_id = ?", (gear_id,))
            row = cursor.fetchone()
        return Gear.from_row(row) if row else None

    def find_all(self) -> list[Gear]:
        with self._cursor() as cursor:
            cursor.execute("SELECT * FROM gear ORDER BY gear_id")
            return [Gear.from_row(row) for row in cursor.fetchall()]

    def add(self, gear: Gear) -> None:
        try:
            with self._cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO gear (
                        gear_id, name, distance_in_meter, converted_distance,
                        is_retired, created_on, data
                    )
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    gear.to_row(),
                )
        except sqlite3.IntegrityError as e:
            if "UNIQUE" not in str(e):
                raise
            raise GearAlreadyExists(gear.gear_id) from e
        logger.debug(f"Added gear {gear.gear_id}")

    def update(self, gear: Gear) -> None:
        """Persist the mutable fields of a stored gear.

        created_on is written once by add() and never touched here.
        """
        with self._cursor() as cursor:
            cursor.execute(
                """
                UPDATE gear
                SET name = ?, distance_in_meter = ?, converted_distance = ?,
                    is_retired = ?, data = ?
                WHERE gear_id = ?
                """,
                (
                    gear.name,
                    gear.distance_in_meter,
                    gear.converted_distance,
                    int(gear.is_retired),
                    json.dumps(gear.data),
                    gear.gear_id,
                ),
            )
            updated = cursor.rowcount
        if not updated:
            logger.warning(f"Update for unknown gear {gear.gear_id} ignored")
        else:
            logger.debug(f"Updated gear {gear.gear_id}")
