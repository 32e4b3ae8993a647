"""
Resources for the DirectDebit SDK.

This module exports both sync and async resource classes for all API endpoints.
"""
from .base import AsyncBaseResource, SyncBaseResource
from .blocks import AsyncBlocksResource, BlocksResource
from .webhooks import AsyncWebhooksResource, WebhooksResource

__all__ = [
    # Base classes
    "AsyncBaseResource",
    "SyncBaseResource",
    # Webhooks
    "WebhooksResource",
    "AsyncWebhooksResource",
    # Blocks
    "BlocksResource",
    "AsyncBlocksResource",
]
