"""Gear synchronizer - mirrors Strava gear into the local gear store."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..config import DEFAULT_THROTTLE_SECONDS
from .models import Gear
from .protocols import (
    ActivityRepositoryProtocol,
    ClockProtocol,
    GearRepositoryProtocol,
    RateLimitTrackerProtocol,
    RemoteGearClientProtocol,
    SleepProtocol,
    SystemClock,
    SystemSleep,
)
from .strava_client import StravaClientError, StravaErrorStatusCode

__all__ = ["GearSynchronizer", "GearSyncStats", "RunOutcome"]

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = (
    "You probably reached Strava API rate limits. "
    "You will need to import the rest of your gear tomorrow"
)


class RunOutcome(Enum):
    COMPLETED = "completed"
    STOPPED_BY_RATE_LIMIT = "stopped_by_rate_limit"


@dataclass
class GearSyncStats:
    """Statistics from a gear sync run."""

    gears_created: int = 0
    gears_updated: int = 0
    outcome: Optional[RunOutcome] = None


class GearSynchronizer:
    """Fetches every gear referenced by an imported activity and upserts it.

    Gear ids are processed one at a time with a blocking pause between
    requests. A response with a recognized quota status code marks the rate
    limit as reached and ends the run early; gear processed before that stays
    stored. Any other error propagates.
    """

    def __init__(
        self,
        strava: RemoteGearClientProtocol,
        activities: ActivityRepositoryProtocol,
        gears: GearRepositoryProtocol,
        rate_limit: RateLimitTrackerProtocol,
        clock: Optional[ClockProtocol] = None,
        sleep: Optional[SleepProtocol] = None,
        throttle_seconds: float = DEFAULT_THROTTLE_SECONDS,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.strava = strava
        self.activities = activities
        self.gears = gears
        self.rate_limit = rate_limit
        self.clock = clock or SystemClock()
        self.sleep = sleep or SystemSleep()
        self.throttle_seconds = throttle_seconds
        self._output = output
        self.last_stats = GearSyncStats()

    def synchronize(self) -> RunOutcome:
        """Run one reconciliation pass.

        Returns:
            RunOutcome.COMPLETED once every gear id was processed, or
            RunOutcome.STOPPED_BY_RATE_LIMIT when Strava refused a request
            with a recognized quota status code.

        Raises:
            StravaClientError: For any other Strava failure.
            InvalidGearPayload: If Strava returned unusable distances.
        """
        stats = GearSyncStats()
        self.last_stats = stats
        self._write("Importing gear...")

        for gear_id in sorted(self.activities.find_unique_gear_ids()):
            try:
                strava_gear = self.strava.get_gear(gear_id)
            except StravaClientError as e:
                if StravaErrorStatusCode.try_from(e.status_code) is None:
                    # Only the recognized quota codes are recoverable.
                    raise
                # Lets a large initial import continue tomorrow.
                self.rate_limit.mark_as_reached()
                self._write(RATE_LIMIT_MESSAGE, logging.WARNING)
                stats.outcome = RunOutcome.STOPPED_BY_RATE_LIMIT
                return stats.outcome

            gear = self._upsert(gear_id, strava_gear, stats)
            self._write(f'  => Imported/updated gear "{gear.name}"')
            self.sleep.pause(self.throttle_seconds)

        stats.outcome = RunOutcome.COMPLETED
        return stats.outcome

    def _upsert(self, gear_id: str, strava_gear: dict, stats: GearSyncStats) -> Gear:
        gear = self.gears.find(gear_id)
        if gear is None:
            gear = Gear.create(
                gear_id=gear_id,
                data=strava_gear,
                distance_in_meter=strava_gear.get("distance"),
                created_on=self.clock.now(),
            )
            self.gears.add(gear)
            stats.gears_created += 1
            return gear

        gear.update_distance(
            strava_gear.get("distance"), strava_gear.get("converted_distance")
        ).update_is_retired(strava_gear.get("retired", False))
        self.gears.update(gear)
        stats.gears_updated += 1
        return gear

    def _write(self, message: str, level: int = logging.INFO) -> None:
        logger.log(level, message.strip())
        if self._output:
            self._output(message)
