"""Gear Sync - Main entry point."""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from . import __version__
from .config import Config, setup_logging
from .credentials import TokenStore
from .notifications import notify_rate_limit_reached, notify_sync_failed
from .sync import (
    ActivityStore,
    GearStore,
    GearSynchronizer,
    InvalidGearPayload,
    RateLimitTracker,
    RunOutcome,
    StravaAuthError,
    StravaClient,
    StravaClientError,
)

logger = logging.getLogger(__name__)


class SyncCoordinator:
    """Owns the scheduler and decides whether a gear sync may run.

    A run is skipped for the rest of the day once the rate limit mark is set.
    """

    def __init__(
        self,
        config: Config,
        synchronizer: GearSynchronizer,
        rate_limit: RateLimitTracker,
        notify: bool = True,
    ) -> None:
        self.config = config
        self.synchronizer = synchronizer
        self.rate_limit = rate_limit
        self.notify = notify
        self.scheduler = BlockingScheduler()

    def run_once(self) -> Optional[RunOutcome]:
        """Run a single gear sync. Returns None when skipped.

        Raises:
            StravaClientError: Propagated from the synchronizer.
        """
        if self.rate_limit.has_been_reached():
            logger.info("Strava rate limit reached earlier today, skipping gear sync")
            return None

        outcome = self.synchronizer.synchronize()
        stats = self.synchronizer.last_stats
        logger.info(
            f"Gear sync {outcome.value}: {stats.gears_created} created, "
            f"{stats.gears_updated} updated"
        )
        daily = self.synchronizer.strava.rate_limit_usage.get("daily")
        if daily:
            logger.info(
                f"Strava daily usage: {daily['used']}/{daily['limit']} requests"
            )
        if outcome is RunOutcome.STOPPED_BY_RATE_LIMIT and self.notify:
            notify_rate_limit_reached()
        return outcome

    def _scheduled_sync(self) -> None:
        try:
            self.run_once()
        except StravaAuthError as e:
            logger.error(f"Auth error during gear sync: {e}, stopping scheduler")
            if self.notify:
                notify_sync_failed(str(e))
            self.scheduler.shutdown(wait=False)
        except (StravaClientError, InvalidGearPayload) as e:
            # Next interval retries.
            logger.error(f"Gear sync failed: {e}")
            if self.notify:
                notify_sync_failed(str(e))

    def start(self) -> None:
        """Run the initial sync and block on the periodic scheduler."""
        self.scheduler.add_job(
            self._scheduled_sync,
            trigger=IntervalTrigger(seconds=self.config.sync.interval_seconds),
            id="gear_sync_job",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
            next_run_time=datetime.now(timezone.utc),
        )
        logger.info(
            f"Gear sync loop started (interval: {self.config.sync.interval_seconds}s)"
        )
        self.scheduler.start()

    def stop(self) -> None:
        """Shut down the scheduler if running."""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)


def build_coordinator(
    config: Config,
    token: str,
    db_path: Optional[Path] = None,
) -> SyncCoordinator:
    """Wire the Strava client, stores and synchronizer together."""
    strava = StravaClient(
        api_url=config.api_url,
        token=token,
        timeout=config.sync.request_timeout,
    )
    rate_limit = RateLimitTracker(db_path=db_path)
    synchronizer = GearSynchronizer(
        strava=strava,
        activities=ActivityStore(db_path=db_path),
        gears=GearStore(db_path=db_path),
        rate_limit=rate_limit,
        throttle_seconds=config.sync.throttle_seconds,
    )
    return SyncCoordinator(config, synchronizer, rate_limit)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gear-sync",
        description="Mirror Strava gear referenced by imported activities",
    )
    parser.add_argument(
        "--once", action="store_true", help="Run a single sync and exit"
    )
    parser.add_argument(
        "--db", type=Path, help="SQLite database path (default: user data dir)"
    )
    parser.add_argument(
        "--store-token",
        metavar="TOKEN",
        help="Store a Strava access token in the system keychain and exit",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.debug)
    config = Config.load()
    if config.debug_mode and not args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    tokens = TokenStore()
    if args.store_token:
        return 0 if tokens.store(args.store_token) else 1

    token = config.resolve_access_token() or tokens.load()
    if not token:
        logger.error(
            "No Strava access token. Use --store-token or set STRAVA_ACCESS_TOKEN."
        )
        return 1

    coordinator = build_coordinator(config, token, db_path=args.db)
    logger.info(f"Gear Sync {__version__} starting (pid {os.getpid()})")

    if args.once:
        try:
            coordinator.run_once()
        except (StravaClientError, InvalidGearPayload) as e:
            logger.error(f"Gear sync failed: {e}")
            return 1
        return 0

    try:
        coordinator.start()
    except (KeyboardInterrupt, SystemExit):
        coordinator.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
