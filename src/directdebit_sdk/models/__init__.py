"""DirectDebit SDK Models."""
from .base import Cursors, DirectDebitModel, ListMeta, ListParams, ListResult
from .block import (
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
from .errors import (
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
from .event import WebhookEvent
from .webhook import CreatedAtFilter, Webhook, WebhookListParams, WebhookListResult

__all__ = [
    "DirectDebitModel",
    "Cursors",
    "ListMeta",
    "ListParams",
    "ListResult",
    "Block",
    "BlockByRefParams",
    "BlockByRefResult",
    "BlockCreateParams",
    "BlockListParams",
    "BlockListResult",
    "BlockType",
    "ReasonType",
    "ReferenceType",
    "Webhook",
    "WebhookListParams",
    "WebhookListResult",
    "CreatedAtFilter",
    "WebhookEvent",
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
]
