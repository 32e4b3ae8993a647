"""Event models for incoming webhook payloads."""
from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from .base import DirectDebitModel


class WebhookEvent(DirectDebitModel):
    """An event delivered in the body of an incoming webhook."""

    id: str
    created_at: Optional[str] = None
    action: str = ""
    resource_type: str = ""
    links: dict[str, str] = Field(default_factory=dict)
    details: dict[str, Any] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)
