"""Webhook models for the DirectDebit SDK."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from .base import DirectDebitModel, ListParams, ListResult


class Webhook(DirectDebitModel):
    """A webhook delivery attempt made by the API."""

    id: str = ""
    created_at: Optional[str] = None
    is_test: bool = False
    url: Optional[str] = None
    successful: bool = False
    request_body: Optional[str] = None
    request_headers: dict[str, Any] = Field(default_factory=dict)
    response_body: Optional[str] = None
    response_body_truncated: bool = False
    response_code: Optional[int] = None
    response_headers: dict[str, Any] = Field(default_factory=dict)
    response_headers_content_truncated: bool = False
    response_headers_count_truncated: bool = False


class CreatedAtFilter(DirectDebitModel):
    """Timestamp range filter, encoded as ``created_at[gt]=...``."""

    gt: Optional[str] = None
    gte: Optional[str] = None
    lt: Optional[str] = None
    lte: Optional[str] = None


class WebhookListParams(ListParams):
    """Filters for listing webhooks."""

    created_at: Optional[CreatedAtFilter] = None
    is_test: Optional[bool] = None
    successful: Optional[bool] = None


class WebhookListResult(ListResult):
    """A page of webhooks."""

    webhooks: list[Webhook] = Field(default_factory=list)

    @property
    def items(self) -> list[Webhook]:
        return self.webhooks
