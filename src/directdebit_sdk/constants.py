"""
Constants for the DirectDebit SDK.

Wire-level names (headers, API version, endpoints) and client defaults live
here so the executor, config and tests agree on one set of values.
"""
from __future__ import annotations

from typing import Final

CLIENT_LIBRARY: Final[str] = "directdebit-sdk-python"
CLIENT_VERSION: Final[str] = "1.0.0"
USER_AGENT: Final[str] = f"{CLIENT_LIBRARY}/{CLIENT_VERSION}"

API_VERSION: Final[str] = "2015-07-06"


class Endpoints:
    """Base URLs per environment."""

    LIVE: Final[str] = "https://api.gocardless.com"
    SANDBOX: Final[str] = "https://api-sandbox.gocardless.com"


class Headers:
    """Request and response header names."""

    AUTHORIZATION: Final[str] = "Authorization"
    API_VERSION: Final[str] = "GoCardless-Version"
    CLIENT_LIBRARY: Final[str] = "GoCardless-Client-Library"
    CLIENT_VERSION: Final[str] = "GoCardless-Client-Version"
    USER_AGENT: Final[str] = "User-Agent"
    CONTENT_TYPE: Final[str] = "Content-Type"
    IDEMPOTENCY_KEY: Final[str] = "Idempotency-Key"
    REQUEST_ID: Final[str] = "x-request-id"
    RETRY_AFTER: Final[str] = "Retry-After"
    WEBHOOK_SIGNATURE: Final[str] = "Webhook-Signature"


class RetryDefaults:
    """Retry configuration defaults."""

    MAX_ATTEMPTS: Final[int] = 3
    BASE_DELAY: Final[float] = 0.5
    MAX_DELAY: Final[float] = 8.0
    EXPONENTIAL_BASE: Final[float] = 2.0
    JITTER: Final[float] = 0.1


DEFAULT_TIMEOUT: Final[float] = 30.0
JSON_CONTENT_TYPE: Final[str] = "application/json"
MASK_PATTERN: Final[str] = "***MASKED***"
