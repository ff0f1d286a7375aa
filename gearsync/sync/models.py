"""Records mirrored from Strava into the local stores."""

import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..activity_type import ActivityType

__all__ = ["Gear", "Activity", "InvalidGearPayload", "validate_distance"]


class InvalidGearPayload(ValueError):
    """Gear payload from Strava cannot be stored as-is."""

    pass


def validate_distance(value: object, key: str) -> float:
    """Return a payload distance as float, rejecting missing, non-finite or negative values."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidGearPayload(f"Gear {key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidGearPayload(f"Gear {key} must be finite, got {value!r}")
    if value < 0:
        raise InvalidGearPayload(f"Gear {key} cannot be negative, got {value!r}")
    return float(value)


@dataclass
class Gear:
    """A piece of equipment (bike, shoes) as known to Strava."""

    gear_id: str
    name: str
    distance_in_meter: float
    converted_distance: float
    created_on: datetime
    is_retired: bool = False
    data: dict = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        gear_id: str,
        data: dict,
        distance_in_meter: object,
        created_on: datetime,
    ) -> "Gear":
        """Build a new gear from a Strava payload.

        converted_distance falls back to the meter distance when Strava omits it.
        """
        distance = validate_distance(distance_in_meter, "distance")
        converted = data.get("converted_distance")
        return cls(
            gear_id=gear_id,
            name=data.get("name") or gear_id,
            distance_in_meter=distance,
            converted_distance=(
                distance
                if converted is None
                else validate_distance(converted, "converted_distance")
            ),
            created_on=created_on,
            is_retired=bool(data.get("retired", False)),
            data=data,
        )

    def update_distance(
        self, distance_in_meter: object, converted_distance: object = None
    ) -> "Gear":
        """Both values are validated before either is applied.

        A missing converted_distance keeps the stored one.
        """
        distance = validate_distance(distance_in_meter, "distance")
        if converted_distance is not None:
            self.converted_distance = validate_distance(
                converted_distance, "converted_distance"
            )
        self.distance_in_meter = distance
        return self

    def update_is_retired(self, is_retired: bool) -> "Gear":
        self.is_retired = bool(is_retired)
        return self

    def to_row(self) -> tuple:
        return (
            self.gear_id,
            self.name,
            self.distance_in_meter,
            self.converted_distance,
            int(self.is_retired),
            self.created_on.isoformat(),
            json.dumps(self.data),
        )

    @classmethod
    def from_row(cls, row) -> "Gear":
        """Create from database row."""
        return cls(
            gear_id=row["gear_id"],
            name=row["name"],
            distance_in_meter=row["distance_in_meter"],
            converted_distance=row["converted_distance"],
            is_retired=bool(row["is_retired"]),
            created_on=datetime.fromisoformat(row["created_on"]),
            data=json.loads(row["data"]) if row["data"] else {},
        )


@dataclass
class Activity:
    """An activity previously imported from Strava."""

    activity_id: str
    activity_type: ActivityType
    name: str
    start_date: datetime
    gear_id: Optional[str] = None

    @classmethod
    def from_strava(cls, data: dict) -> "Activity":
        """Create from a Strava activity summary.

        Raises:
            InvalidActivityType: If the sport type is not one we import.
        """
        start_date = datetime.fromisoformat(data["start_date"].replace("Z", "+00:00"))
        return cls(
            activity_id=str(data["id"]),
            activity_type=ActivityType.from_label(
                data.get("sport_type") or data.get("type")
            ),
            name=data.get("name", ""),
            start_date=start_date,
            gear_id=data.get("gear_id") or None,
        )

    @classmethod
    def from_row(cls, row) -> "Activity":
        return cls(
            activity_id=row["activity_id"],
            activity_type=ActivityType(row["activity_type"]),
            name=row["name"],
            start_date=datetime.fromisoformat(row["start_date"]),
            gear_id=row["gear_id"],
        )
