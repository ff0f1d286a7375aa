"""Strava API client - reads gear."""

import logging
from enum import IntEnum
from typing import Optional

from ..config import DEFAULT_API_URL
from .http_client import BaseApiClient, StravaClientError, StravaAuthError

__all__ = [
    "StravaClient",
    "StravaClientError",
    "StravaAuthError",
    "StravaErrorStatusCode",
]

logger = logging.getLogger(__name__)


class StravaErrorStatusCode(IntEnum):
    """Status codes meaning Strava will not serve more requests today."""

    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504

    @classmethod
    def try_from(cls, status_code: Optional[int]) -> Optional["StravaErrorStatusCode"]:
        if status_code is None:
            return None
        try:
            return cls(status_code)
        except ValueError:
            return None


class StravaClient(BaseApiClient):
    """Client for the Strava v3 API."""

    def __init__(self, api_url: str = DEFAULT_API_URL, **kwargs):
        super().__init__(api_url, **kwargs)

    def get_gear(self, gear_id: str) -> dict:
        """Fetch a gear record (GET /gear/{id}).

        Raises:
            StravaAuthError: Token rejected.
            StravaClientError: Any other failure; ``status_code`` is set when
                Strava answered with a non-2xx status.
        """
        gear = self._request("GET", f"gear/{gear_id}")
        if not isinstance(gear, dict):
            raise StravaClientError(f"Unexpected gear payload for {gear_id}")
        logger.debug(f"Fetched gear {gear_id}")
        return gear
