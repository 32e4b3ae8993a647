"""
Verification and parsing of incoming webhooks.

The API signs each webhook body with the endpoint secret (HMAC-SHA256, hex
encoded) and sends the result in the ``Webhook-Signature`` header. Always
verify against the raw request body before trusting any event in it.
"""
from __future__ import annotations

import hashlib
import hmac
import json
from typing import Union

from pydantic import ValidationError as PydanticValidationError

from .logging import get_logger
from .models.errors import InvalidSignatureError, MalformedResponseError
from .models.event import WebhookEvent

logger = get_logger(__name__)


def _to_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def compute_signature(body: Union[str, bytes], secret: str) -> str:
    """Compute the signature the API would send for ``body``."""
    return hmac.new(_to_bytes(secret), _to_bytes(body), hashlib.sha256).hexdigest()


def verify_signature(body: Union[str, bytes], signature: str, secret: str) -> bool:
    """Check a ``Webhook-Signature`` header value (timing-safe)."""
    if not secret:
        raise ValueError("webhook secret is required")
    if not signature:
        return False
    return hmac.compare_digest(compute_signature(body, secret), signature)


def parse_webhook(body: Union[str, bytes], signature: str, secret: str) -> list[WebhookEvent]:
    """Verify a webhook and return the events it carries.

    Args:
        body: Raw request body, exactly as received
        signature: Value of the ``Webhook-Signature`` header
        secret: The endpoint's webhook secret

    Raises:
        InvalidSignatureError: The signature does not match
        MalformedResponseError: The body is not a valid events payload
    """
    if not verify_signature(body, signature, secret):
        logger.warning("Rejected webhook with invalid signature")
        raise InvalidSignatureError()

    try:
        payload = json.loads(_to_bytes(body))
        return [WebhookEvent.model_validate(e) for e in payload["events"]]
    except (ValueError, KeyError, TypeError, PydanticValidationError) as e:
        raise MalformedResponseError(f"Invalid webhook payload: {e}") from e
