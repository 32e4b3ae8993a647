"""
Webhooks resource for the DirectDebit SDK.

Webhooks here are the delivery attempts the API made to your endpoint; they
can be listed, inspected and re-sent.
"""
from __future__ import annotations

from typing import Optional

from ..models.webhook import Webhook, WebhookListParams, WebhookListResult
from ..options import RequestOptions
from ..pagination import AsyncCursorPaginator, CursorPaginator
from ..request import path_for
from .base import AsyncBaseResource, SyncBaseResource

_COLLECTION = "/webhooks"
_ITEM = "/webhooks/{identity}"
_RETRY = "/webhooks/{identity}/actions/retry"
_KEY = "webhooks"


class AsyncWebhooksResource(AsyncBaseResource):
    """Async resource for webhook operations."""

    async def list(
        self,
        params: Optional[WebhookListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> WebhookListResult:
        """Return a cursor-paginated page of webhooks."""
        return await self._call(
            "GET",
            _COLLECTION,
            _KEY,
            WebhookListResult,
            params=params or WebhookListParams(),
            wrapped=False,
            options=options,
        )

    def all(
        self,
        params: Optional[WebhookListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> AsyncCursorPaginator[WebhookListParams, WebhookListResult]:
        """Paginate over every webhook matching ``params``."""

        async def fetch_page(p: WebhookListParams) -> WebhookListResult:
            return await self.list(p, options=options)

        return self._create_paginator(fetch_page, params or WebhookListParams())

    async def get(self, identity: str, options: Optional[RequestOptions] = None) -> Webhook:
        """Retrieve the details of an existing webhook."""
        return await self._call("GET", path_for(_ITEM, identity=identity), _KEY, Webhook, options=options)

    async def retry(self, identity: str, options: Optional[RequestOptions] = None) -> Webhook:
        """Request that a previous webhook be sent again."""
        return await self._call("POST", path_for(_RETRY, identity=identity), _KEY, Webhook, options=options)


class WebhooksResource(SyncBaseResource):
    """Sync resource for webhook operations.

    Example:
        ```python
        failed = client.webhooks.all(WebhookListParams(successful=False, limit=50))
        for webhook in failed:
            client.webhooks.retry(webhook.id)
        ```
    """

    def list(
        self,
        params: Optional[WebhookListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> WebhookListResult:
        """Return a cursor-paginated page of webhooks.

        Args:
            params: Filters and cursor parameters
            options: Per-call overrides

        Returns:
            WebhookListResult with items and cursor metadata
        """
        return self._call(
            "GET",
            _COLLECTION,
            _KEY,
            WebhookListResult,
            params=params or WebhookListParams(),
            wrapped=False,
            options=options,
        )

    def all(
        self,
        params: Optional[WebhookListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> CursorPaginator[WebhookListParams, WebhookListResult]:
        """Paginate over every webhook matching ``params``."""
        return self._create_paginator(
            lambda p: self.list(p, options=options),
            params or WebhookListParams(),
        )

    def get(self, identity: str, options: Optional[RequestOptions] = None) -> Webhook:
        """Retrieve the details of an existing webhook.

        Args:
            identity: Webhook ID, e.g. ``WB123``
            options: Per-call overrides
        """
        return self._call("GET", path_for(_ITEM, identity=identity), _KEY, Webhook, options=options)

    def retry(self, identity: str, options: Optional[RequestOptions] = None) -> Webhook:
        """Request that a previous webhook be sent again.

        Sent with an idempotency key, so the SDK's own retries never trigger
        a second redelivery.
        """
        return self._call("POST", path_for(_RETRY, identity=identity), _KEY, Webhook, options=options)
