"""Backoff retry for transient Strava transport failures."""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_retries: int = 2
    base_delay: float = 2.0  # seconds
    max_delay: float = 30.0  # seconds
    exponential_base: float = 2.0
    jitter: bool = True


class RetryExhausted(Exception):
    """All retry attempts exhausted."""

    def __init__(self, attempts: int, last_error: Optional[Exception] = None):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Retry exhausted after {attempts} attempts")


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """Delay before retry number ``attempt`` (0-indexed), capped at max_delay."""
    delay = min(config.base_delay * (config.exponential_base ** attempt), config.max_delay)

    if config.jitter:
        # +/- 25%
        jitter_range = delay * 0.25
        delay = delay + random.uniform(-jitter_range, jitter_range)

    return max(0, delay)


def retry_with_backoff(
    func: Callable[[], T],
    config: Optional[RetryConfig] = None,
    retryable_exceptions: tuple = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Execute a function with exponential backoff retry.

    Args:
        func: Function to execute
        config: Retry configuration
        retryable_exceptions: Tuple of exceptions that should trigger retry
        sleep: Blocking delay used between attempts

    Returns:
        Result of successful function call

    Raises:
        RetryExhausted: If all retries fail
        Exception: If a non-retryable exception occurs
    """
    if config is None:
        config = RetryConfig()

    last_error: Optional[Exception] = None

    for attempt in range(config.max_retries + 1):
        try:
            return func()
        except retryable_exceptions as e:
            last_error = e

            if attempt >= config.max_retries:
                break

            delay = calculate_delay(attempt, config)
            logger.warning(
                f"Attempt {attempt + 1} failed: {e}. "
                f"Retrying in {delay:.1f}s..."
            )
            sleep(delay)

    raise RetryExhausted(config.max_retries + 1, last_error)
