"""
Base resource classes for the DirectDebit SDK.

Resources turn typed parameters into ``RequestDescriptor`` values and hand
them to the client's request executor, supporting both the synchronous and
asynchronous clients.
"""
from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Awaitable,
    Callable,
    Dict,
    Optional,
    TypeVar,
)

from pydantic import BaseModel

from ..options import RequestOptions
from ..pagination import AsyncCursorPaginator, CursorPaginator

if TYPE_CHECKING:
    from ..client import AsyncDirectDebitClient, DirectDebitClient

T = TypeVar("T", bound=BaseModel)
P = TypeVar("P")
R = TypeVar("R")


class AsyncBaseResource:
    """Base class for async API resources.

    Attributes:
        _client: The async client instance
    """

    def __init__(self, client: "AsyncDirectDebitClient") -> None:
        self._client = client

    async def _call(
        self,
        method: str,
        path: str,
        result_key: str,
        model: type[T],
        *,
        params: Optional[BaseModel] = None,
        body: Optional[Dict[str, Any]] = None,
        wrapped: bool = True,
        options: Optional[RequestOptions] = None,
    ) -> T:
        """Build a descriptor for one call and execute it.

        Args:
            method: HTTP method
            path: API endpoint path
            result_key: Response key holding the result
            model: Result model
            params: Query parameters model
            body: JSON body
            wrapped: Whether the result sits under ``result_key``
            options: Per-call overrides

        Returns:
            The decoded result
        """
        descriptor = self._client._build(method, path, params=params, body=body, options=options)
        return await self._client._request(descriptor, result_key, model, wrapped=wrapped, options=options)

    def _create_paginator(
        self,
        fetch_page: Callable[[P], Awaitable[R]],
        params: P,
    ) -> AsyncCursorPaginator:
        return AsyncCursorPaginator(fetch_page, params)


class SyncBaseResource:
    """Base class for sync API resources.

    Attributes:
        _client: The sync client instance
    """

    def __init__(self, client: "DirectDebitClient") -> None:
        self._client = client

    def _call(
        self,
        method: str,
        path: str,
        result_key: str,
        model: type[T],
        *,
        params: Optional[BaseModel] = None,
        body: Optional[Dict[str, Any]] = None,
        wrapped: bool = True,
        options: Optional[RequestOptions] = None,
    ) -> T:
        """Build a descriptor for one call and execute it."""
        descriptor = self._client._build(method, path, params=params, body=body, options=options)
        return self._client._request(descriptor, result_key, model, wrapped=wrapped, options=options)

    def _create_paginator(
        self,
        fetch_page: Callable[[P], R],
        params: P,
    ) -> CursorPaginator:
        return CursorPaginator(fetch_page, params)


__all__ = [
    "AsyncBaseResource",
    "SyncBaseResource",
]
