"""Configuration management for Gear Sync."""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir, user_data_dir, user_log_dir

__all__ = [
    "Config",
    "SyncSettings",
    "setup_logging",
    "DEFAULT_API_URL",
    "DEFAULT_THROTTLE_SECONDS",
    "ACCESS_TOKEN_ENV",
]

logger = logging.getLogger(__name__)

APP_NAME = "Gear Sync"
APP_AUTHOR = "GearSync"

DEFAULT_API_URL = "https://www.strava.com/api/v3"
ACCESS_TOKEN_ENV = "STRAVA_ACCESS_TOKEN"

# Sync settings
DEFAULT_SYNC_INTERVAL = 3600  # seconds
DEFAULT_THROTTLE_SECONDS = 10  # pause between two gear requests
DEFAULT_REQUEST_TIMEOUT = 30
MIN_SYNC_INTERVAL = 300


@dataclass
class SyncSettings:
    """Sync configuration."""

    interval_seconds: int = DEFAULT_SYNC_INTERVAL
    throttle_seconds: float = DEFAULT_THROTTLE_SECONDS
    request_timeout: int = DEFAULT_REQUEST_TIMEOUT


@dataclass
class Config:
    """Main configuration object."""

    api_url: str = DEFAULT_API_URL
    access_token: Optional[str] = None
    sync: SyncSettings = field(default_factory=SyncSettings)
    debug_mode: bool = False

    @classmethod
    def get_config_dir(cls) -> Path:
        """Get the configuration directory path."""
        return Path(user_config_dir(APP_NAME, APP_AUTHOR))

    @classmethod
    def get_data_dir(cls) -> Path:
        """Get the data directory path (SQLite databases)."""
        return Path(user_data_dir(APP_NAME, APP_AUTHOR))

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the log directory path."""
        return Path(user_log_dir(APP_NAME, APP_AUTHOR))

    @classmethod
    def get_config_file(cls) -> Path:
        """Get the config file path."""
        return cls.get_config_dir() / "config.json"

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> "Config":
        """Load config from file, or return defaults."""
        config_file = config_file or cls.get_config_file()
        if config_file.exists():
            try:
                with open(config_file, "r") as f:
                    data = json.load(f)
                return cls._from_dict(data)
            except (OSError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        return cls()

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary."""
        sync_data = data.pop("sync", {})
        sync = SyncSettings(**sync_data) if sync_data else SyncSettings()
        sync.interval_seconds = max(MIN_SYNC_INTERVAL, sync.interval_seconds)
        sync.throttle_seconds = max(0, sync.throttle_seconds)

        return cls(
            sync=sync,
            **{k: v for k, v in data.items() if k in cls.__dataclass_fields__},
        )

    def save(self, config_file: Optional[Path] = None) -> None:
        """Save config to file."""
        config_file = config_file or self.get_config_file()
        config_file.parent.mkdir(parents=True, exist_ok=True)

        data = asdict(self)
        with open(config_file, "w") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Config saved to {config_file}")

    def resolve_access_token(self) -> Optional[str]:
        """Token from the environment wins over the one stored in config."""
        return os.getenv(ACCESS_TOKEN_ENV) or self.access_token


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    log_dir = Config.get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "gear-sync.log"

    level = logging.DEBUG if debug else logging.INFO
    format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler(),
        ],
    )

    # Reduce noise from libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("apscheduler").setLevel(logging.WARNING)
