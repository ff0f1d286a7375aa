"""Base HTTP client with retry logic for the Strava API."""

import logging
import time
from typing import Callable, Optional

import requests

from .. import __version__
from .retry import RetryConfig, retry_with_backoff, RetryExhausted

__all__ = [
    "BaseApiClient",
    "StravaClientError",
    "StravaAuthError",
]

logger = logging.getLogger(__name__)


class StravaClientError(Exception):
    """Strava API error.

    ``status_code`` is the HTTP status of the failed response, or None when
    no response was received (connection failure, timeout) or the body could
    not be decoded.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class StravaAuthError(StravaClientError):
    """Access token rejected."""

    pass


class _TransientError(Exception):
    """Internal: Marks an error as transient/retryable."""

    pass


class BaseApiClient:
    """Base HTTP client with retry logic.

    Handles:
    - Session management
    - Bearer token header
    - Retry with exponential backoff on network faults
    - Error classification (every API error carries its status code)
    - Strava rate limit usage headers
    """

    DEFAULT_RETRY_CONFIG = RetryConfig(
        max_retries=2,
        base_delay=2.0,
        max_delay=30.0,
        exponential_base=2.0,
        jitter=True,
    )

    USER_AGENT = f"GearSync/{__version__}"

    def __init__(
        self,
        api_url: str,
        token: Optional[str] = None,
        timeout: int = 30,
        retry_config: Optional[RetryConfig] = None,
        session: Optional[requests.Session] = None,
        retry_sleep: Optional[Callable[[float], None]] = None,
    ):
        """Initialize base API client.

        Args:
            api_url: Strava API base URL
            token: OAuth access token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry with exponential backoff
            session: Optional requests session (for dependency injection/testing)
            retry_sleep: Delay used between retries (defaults to time.sleep)
        """
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.retry_config = retry_config or self.DEFAULT_RETRY_CONFIG
        self._retry_sleep = retry_sleep or time.sleep
        self._session = session or requests.Session()
        self._owns_session = session is None
        self.rate_limit_usage: dict[str, dict[str, int]] = {}

    def _get_headers(self) -> dict:
        """Get request headers with authentication."""
        headers = {
            "Accept": "application/json",
            "User-Agent": self.USER_AGENT,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _update_rate_limits(self, headers) -> None:
        """Parse Strava rate limit headers: 'fifteen_min,daily'."""
        usage = headers.get("X-RateLimit-Usage")
        limit = headers.get("X-RateLimit-Limit")
        if not usage or not limit:
            return
        try:
            used = [int(v) for v in usage.split(",")]
            limits = [int(v) for v in limit.split(",")]
        except ValueError:
            logger.debug(f"Unparseable rate limit headers: {usage!r} / {limit!r}")
            return
        self.rate_limit_usage = {
            "15min": {"used": used[0], "limit": limits[0]},
            "daily": {"used": used[-1], "limit": limits[-1]},
        }
        logger.debug(f"Strava rate limit usage: {self.rate_limit_usage}")

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
    ) -> dict:
        """Make request to the Strava API.

        Args:
            method: HTTP method
            endpoint: API endpoint (relative to api_url)
            params: Query string parameters

        Returns:
            Response data as dict

        Raises:
            StravaAuthError: For 401 responses (not retried)
            StravaClientError: For other errors
        """
        url = f"{self.api_url}/{endpoint.lstrip('/')}"
        kwargs: dict = {"timeout": self.timeout, "headers": self._get_headers()}
        if params:
            kwargs["params"] = params

        def do_request() -> dict:
            try:
                response = self._session.request(method, url, **kwargs)
            except requests.exceptions.ConnectionError:
                raise _TransientError("Cannot connect to Strava API")
            except requests.exceptions.Timeout:
                raise _TransientError("Request timed out")

            self._update_rate_limits(response.headers)

            if response.status_code == 401:
                raise StravaAuthError("Invalid or expired access token", status_code=401)

            try:
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                error_detail = ""
                try:
                    body = response.json()
                    if isinstance(body, dict):
                        error_detail = body.get("message", "")
                except ValueError:
                    pass
                raise StravaClientError(
                    f"API error ({response.status_code}): {error_detail or str(e)}",
                    status_code=response.status_code,
                ) from e

            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise StravaClientError(f"Malformed response from {url}") from e

        try:
            return retry_with_backoff(
                do_request,
                config=self.retry_config,
                retryable_exceptions=(_TransientError,),
                sleep=self._retry_sleep,
            )
        except RetryExhausted as e:
            if e.last_error:
                raise StravaClientError(str(e.last_error)) from e.last_error
            raise StravaClientError("Request failed after retries") from e

    def close(self) -> None:
        """Close the session if we own it."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "BaseApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
