"""
Per-call request overrides.

Every resource method accepts an optional ``RequestOptions``. Options are
immutable; the ``with_*`` helpers return updated copies so a base set of
options can be shared and specialised per call::

    base = RequestOptions(headers={"Accept-Language": "fr"})
    block = client.blocks.create(params, options=base.with_idempotency_key("order-42"))
"""
from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional


@dataclass(frozen=True)
class RequestOptions:
    """Overrides applied to a single API call.

    Attributes:
        retries: Total attempts for the call, including the first; falls back
            to the client retry config (3 by default)
        headers: Extra headers; these win over every default header
        idempotency_key: Key for write calls; generated per call when unset
        cancel_event: When set, no further attempts are made and the call
            raises ``RequestCancelledError``
    """

    retries: Optional[int] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    idempotency_key: Optional[str] = None
    cancel_event: Optional[threading.Event] = None

    def __post_init__(self) -> None:
        if self.retries is not None and self.retries < 1:
            raise ValueError("retries must be at least 1")

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def with_retries(self, retries: int) -> "RequestOptions":
        return replace(self, retries=retries)

    def with_headers(self, headers: Mapping[str, str]) -> "RequestOptions":
        """Return a copy with ``headers`` merged over the current overrides."""
        return replace(self, headers={**self.headers, **headers})

    def with_idempotency_key(self, key: str) -> "RequestOptions":
        return replace(self, idempotency_key=key)

    def with_cancel_event(self, event: threading.Event) -> "RequestOptions":
        return replace(self, cancel_event=event)
