"""
Logging utilities for the DirectDebit SDK with sensitive data masking.

The SDK logs through the standard ``logging`` module under the
``directdebit_sdk`` namespace and never installs handlers; configure them in
the host application::

    import logging
    logging.getLogger("directdebit_sdk").setLevel(logging.DEBUG)
"""
from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from .constants import MASK_PATTERN, Headers

_SENSITIVE_HEADERS = frozenset({
    Headers.AUTHORIZATION.lower(),
    Headers.WEBHOOK_SIGNATURE.lower(),
    "cookie",
    "set-cookie",
})

_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+", re.IGNORECASE)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def mask_value(value: str, show_chars: int = 4) -> str:
    """Mask a sensitive value, optionally showing first/last characters.

    Args:
        value: The value to mask
        show_chars: Number of characters to show at start and end

    Returns:
        Masked string
    """
    if not value or len(value) <= show_chars * 2:
        return MASK_PATTERN

    return f"{value[:show_chars]}...{value[-show_chars:]}"


def mask_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Mask sensitive HTTP headers.

    Idempotency keys stay visible; they are what correlates retries.
    """
    result = {}
    for key, value in headers.items():
        if key.lower() in _SENSITIVE_HEADERS:
            result[key] = MASK_PATTERN
        else:
            result[key] = value
    return result


def mask_text(text: str) -> str:
    """Mask bearer tokens embedded in free text (e.g. exception messages)."""
    return _BEARER_RE.sub(r"\1***", text)


def log_request(
    logger: logging.Logger,
    method: str,
    url: str,
    headers: Mapping[str, str],
    attempt: int,
    body: Optional[Any] = None,
) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "API request %s %s (attempt %d)",
        method,
        url,
        attempt,
        extra={
            "http_method": method,
            "url": url,
            "headers": mask_headers(headers),
            "has_body": body is not None,
            "attempt": attempt,
        },
    )


def log_response(
    logger: logging.Logger,
    method: str,
    url: str,
    status_code: int,
    duration_ms: float,
    request_id: Optional[str] = None,
) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "API response %s %s -> %d in %.1fms",
        method,
        url,
        status_code,
        duration_ms,
        extra={
            "http_method": method,
            "url": url,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
            "request_id": request_id,
        },
    )
