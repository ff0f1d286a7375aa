"""Strava activity types and the capabilities derived from them."""

from enum import Enum

__all__ = [
    "ActivityType",
    "InvalidActivityType",
    "supports_weather",
    "supports_reverse_geocoding",
    "is_virtual",
    "is_ride",
    "is_run",
]


class InvalidActivityType(ValueError):
    """Raised for a Strava sport label we do not import."""

    def __init__(self, label: object):
        self.label = label
        super().__init__(f"Invalid activity type: {label!r}")


class ActivityType(Enum):
    """Activity types imported from Strava, keyed by their API label."""

    RIDE = "Ride"
    VIRTUAL_RIDE = "VirtualRide"
    RUN = "Run"

    @classmethod
    def from_label(cls, label: str) -> "ActivityType":
        """Parse a raw Strava label ("Ride", "VirtualRide", "Run")."""
        try:
            return cls(label)
        except ValueError:
            raise InvalidActivityType(label) from None


# (weather, reverse geocoding, virtual, ride, run)
_CAPABILITIES: dict[ActivityType, tuple[bool, bool, bool, bool, bool]] = {
    ActivityType.RIDE: (True, True, False, True, False),
    ActivityType.VIRTUAL_RIDE: (False, False, True, True, False),
    ActivityType.RUN: (True, True, False, False, True),
}


def supports_weather(activity_type: ActivityType) -> bool:
    return _CAPABILITIES[activity_type][0]


def supports_reverse_geocoding(activity_type: ActivityType) -> bool:
    return _CAPABILITIES[activity_type][1]


def is_virtual(activity_type: ActivityType) -> bool:
    return _CAPABILITIES[activity_type][2]


def is_ride(activity_type: ActivityType) -> bool:
    return _CAPABILITIES[activity_type][3]


def is_run(activity_type: ActivityType) -> bool:
    return _CAPABILITIES[activity_type][4]
