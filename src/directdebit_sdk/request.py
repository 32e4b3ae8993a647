"""
Request descriptors and header construction.

A ``RequestDescriptor`` captures everything needed to issue one logical API
call. It is built fresh for each call and reused unchanged across that
call's retry attempts, which is what keeps the idempotency key stable.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from .constants import (
    API_VERSION,
    CLIENT_LIBRARY,
    CLIENT_VERSION,
    JSON_CONTENT_TYPE,
    USER_AGENT,
    Headers,
    RetryDefaults,
)
from .options import RequestOptions
from .query import QueryPairs, encode_query


def new_idempotency_key() -> str:
    """Generate a random idempotency key."""
    return str(uuid.uuid4())


def path_for(template: str, **identities: str) -> str:
    """Fill a path template, URL-quoting each identity."""
    return template.format(**{k: quote(str(v), safe="") for k, v in identities.items()})


@dataclass(frozen=True)
class RequestDescriptor:
    """A single API call, ready to be executed.

    Attributes:
        method: HTTP method
        path: Path relative to the API endpoint
        params: Encoded query pairs (zero values already dropped)
        body: JSON body, or None for no body
        headers: Caller header overrides
        retries: Total attempts allowed for this call
        idempotency_key: Key sent with write calls
    """

    method: str
    path: str
    params: QueryPairs = field(default_factory=list)
    body: Optional[dict[str, Any]] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    retries: int = RetryDefaults.MAX_ATTEMPTS
    idempotency_key: Optional[str] = None

    @property
    def is_write(self) -> bool:
        return self.method != "GET"

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        *,
        params: Optional[Union[BaseModel, Mapping[str, Any]]] = None,
        body: Optional[dict[str, Any]] = None,
        options: Optional[RequestOptions] = None,
        default_retries: int = RetryDefaults.MAX_ATTEMPTS,
    ) -> "RequestDescriptor":
        """Build a descriptor from typed params and per-call options."""
        options = options or RequestOptions()
        method = method.upper()

        idempotency_key = options.idempotency_key
        if method != "GET" and not idempotency_key:
            idempotency_key = new_idempotency_key()

        return cls(
            method=method,
            path=path,
            params=encode_query(params),
            body=body,
            headers=dict(options.headers),
            retries=options.retries if options.retries is not None else default_retries,
            idempotency_key=idempotency_key,
        )


def build_headers(
    descriptor: RequestDescriptor,
    access_token: str,
    api_version: str = API_VERSION,
) -> httpx.Headers:
    """Assemble request headers for ``descriptor``.

    Standard headers are set first, write calls add content type and
    idempotency key, and caller overrides are applied last. Overrides match
    header names case-insensitively.
    """
    headers = httpx.Headers({
        Headers.AUTHORIZATION: f"Bearer {access_token}",
        Headers.API_VERSION: api_version,
        Headers.CLIENT_LIBRARY: CLIENT_LIBRARY,
        Headers.CLIENT_VERSION: CLIENT_VERSION,
        Headers.USER_AGENT: USER_AGENT,
    })
    if descriptor.is_write:
        headers[Headers.CONTENT_TYPE] = JSON_CONTENT_TYPE
        if descriptor.idempotency_key:
            headers[Headers.IDEMPOTENCY_KEY] = descriptor.idempotency_key

    headers.update(descriptor.headers)
    return headers
