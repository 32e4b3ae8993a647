"""
DirectDebit Python SDK

Client library for the direct-debit payments API: webhooks, blocks, cursor
pagination, idempotent retries and incoming webhook verification.
"""

from .client import AsyncDirectDebitClient, DirectDebitClient
from .config import ClientSettings, load_settings
from .constants import CLIENT_VERSION
from .models.block import (
    Block,
    BlockByRefParams,
    BlockByRefResult,
    BlockCreateParams,
    BlockListParams,
    BlockListResult,
    BlockType,
    ReasonType,
    ReferenceType,
)
from .models.errors import (
    APIError,
    AuthenticationError,
    DirectDebitError,
    ErrorCode,
    FieldError,
    InternalServerError,
    InvalidApiUsageError,
    InvalidSignatureError,
    InvalidStateError,
    MalformedResponseError,
    MissingResultError,
    RateLimitError,
    RequestCancelledError,
    ValidationFailedError,
)
from .models.event import WebhookEvent
from .models.webhook import CreatedAtFilter, Webhook, WebhookListParams, WebhookListResult
from .options import RequestOptions
from .pagination import AsyncCursorPaginator, CursorPaginator, CursorState, PaginatorState
from .retry import RetryConfig
from .webhook_signature import compute_signature, parse_webhook, verify_signature

__version__ = CLIENT_VERSION

__all__ = [
    # Clients
    "DirectDebitClient",
    "AsyncDirectDebitClient",
    "ClientSettings",
    "load_settings",
    "RequestOptions",
    "RetryConfig",
    # Pagination
    "CursorPaginator",
    "AsyncCursorPaginator",
    "CursorState",
    "PaginatorState",
    # Errors
    "DirectDebitError",
    "APIError",
    "AuthenticationError",
    "ErrorCode",
    "FieldError",
    "InternalServerError",
    "InvalidApiUsageError",
    "InvalidSignatureError",
    "InvalidStateError",
    "MalformedResponseError",
    "MissingResultError",
    "RateLimitError",
    "RequestCancelledError",
    "ValidationFailedError",
    # Webhook models
    "Webhook",
    "WebhookListParams",
    "WebhookListResult",
    "CreatedAtFilter",
    "WebhookEvent",
    "compute_signature",
    "verify_signature",
    "parse_webhook",
    # Block models
    "Block",
    "BlockCreateParams",
    "BlockListParams",
    "BlockListResult",
    "BlockByRefParams",
    "BlockByRefResult",
    "BlockType",
    "ReasonType",
    "ReferenceType",
]
