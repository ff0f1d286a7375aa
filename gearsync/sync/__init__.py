"""Sync module - reads Strava gear and mirrors it into the local stores."""

from .activity_store import ActivityStore
from .gear_store import GearStore
from .gear_synchronizer import GearSynchronizer, GearSyncStats, RunOutcome
from .models import Activity, Gear, InvalidGearPayload
from .protocols import (
    ActivityRepositoryProtocol,
    GearRepositoryProtocol,
    RateLimitTrackerProtocol,
    RemoteGearClientProtocol,
    SystemClock,
    SystemSleep,
)
from .rate_limit import RateLimitTracker
from .retry import RetryConfig, retry_with_backoff
from .strava_client import (
    StravaAuthError,
    StravaClient,
    StravaClientError,
    StravaErrorStatusCode,
)

__all__ = [
    "ActivityStore",
    "GearStore",
    "GearSynchronizer",
    "GearSyncStats",
    "RunOutcome",
    "Activity",
    "Gear",
    "InvalidGearPayload",
    "ActivityRepositoryProtocol",
    "GearRepositoryProtocol",
    "RateLimitTrackerProtocol",
    "RemoteGearClientProtocol",
    "SystemClock",
    "SystemSleep",
    "RateLimitTracker",
    "RetryConfig",
    "retry_with_backoff",
    "StravaAuthError",
    "StravaClient",
    "StravaClientError",
    "StravaErrorStatusCode",
]
