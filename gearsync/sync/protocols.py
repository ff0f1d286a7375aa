"""Protocol types for GearSynchronizer dependencies.

Defines the interfaces that GearSynchronizer requires from its collaborators,
enabling easier testing and looser coupling.
"""

import time
from datetime import datetime, timezone
from typing import Optional, Protocol, runtime_checkable

from .models import Gear


@runtime_checkable
class RemoteGearClientProtocol(Protocol):
    """Interface for reading gear from Strava."""

    rate_limit_usage: dict

    def get_gear(self, gear_id: str) -> dict: ...


@runtime_checkable
class ActivityRepositoryProtocol(Protocol):
    """Interface for the activities already imported locally."""

    def find_unique_gear_ids(self) -> list[str]: ...


@runtime_checkable
class GearRepositoryProtocol(Protocol):
    """Interface for local gear persistence."""

    def find(self, gear_id: str) -> Optional[Gear]: ...

    def add(self, gear: Gear) -> None: ...

    def update(self, gear: Gear) -> None: ...


@runtime_checkable
class RateLimitTrackerProtocol(Protocol):
    """Interface for the daily "quota reached" mark."""

    def mark_as_reached(self) -> None: ...

    def has_been_reached(self) -> bool: ...


@runtime_checkable
class ClockProtocol(Protocol):
    def now(self) -> datetime: ...


@runtime_checkable
class SleepProtocol(Protocol):
    def pause(self, seconds: float) -> None: ...


class SystemClock:
    """Wall clock, UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class SystemSleep:
    """Blocking sleep."""

    def pause(self, seconds: float) -> None:
        time.sleep(seconds)
