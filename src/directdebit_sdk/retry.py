"""
Retry policy for API calls.

Transport failures and non-2xx responses are retried up to the attempt
limit. Logical errors carried inside a successful response, malformed bodies
and cancellation are never retried.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

import httpx

from .constants import RetryDefaults
from .models.errors import APIError, RateLimitError


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    Attributes:
        max_attempts: Default total attempts per call (1 means no retries)
        base_delay: Initial delay between attempts in seconds
        max_delay: Maximum delay between attempts in seconds
        exponential_base: Base for exponential backoff calculation
        jitter: Maximum jitter factor (0.0-1.0) applied to delays
    """

    max_attempts: int = RetryDefaults.MAX_ATTEMPTS
    base_delay: float = RetryDefaults.BASE_DELAY
    max_delay: float = RetryDefaults.MAX_DELAY
    exponential_base: float = RetryDefaults.EXPONENTIAL_BASE
    jitter: float = RetryDefaults.JITTER

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not 0.0 <= self.jitter <= 1.0:
            raise ValueError("jitter must be between 0 and 1")

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay after the given attempt number.

        Uses exponential backoff with optional jitter.

        Args:
            attempt: The attempt number (0-based)

        Returns:
            Delay in seconds
        """
        delay = min(self.base_delay * (self.exponential_base ** attempt), self.max_delay)

        if self.jitter > 0:
            jitter_range = delay * self.jitter
            delay = delay + random.uniform(-jitter_range, jitter_range)

        return max(0.0, delay)

    def delay_for(self, error: BaseException, attempt: int) -> float:
        """Delay before retrying after ``error``; honours ``Retry-After``."""
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return min(float(error.retry_after), self.max_delay)
        return self.calculate_delay(attempt)


def is_retryable(error: BaseException) -> bool:
    """Whether an attempt that failed with ``error`` may be retried.

    Only connection-level failures and HTTP error statuses qualify. An
    ``APIError`` without a status did not come from the HTTP layer.
    """
    if isinstance(error, httpx.TransportError):
        return True
    return isinstance(error, APIError) and _is_http_error(error.status_code)


def _is_http_error(status_code: Optional[int]) -> bool:
    return status_code is not None and not 200 <= status_code < 300
