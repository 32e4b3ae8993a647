"""
Blocks resource for the DirectDebit SDK.

This module provides both async and sync interfaces for block operations.
"""
from __future__ import annotations

from typing import Optional

from ..models.block import (
    Block,
    BlockByRefParams,
    BlockByRefResult,
    BlockCreateParams,
    BlockListParams,
    BlockListResult,
)
from ..options import RequestOptions
from ..pagination import AsyncCursorPaginator, CursorPaginator
from ..request import path_for
from .base import AsyncBaseResource, SyncBaseResource

_COLLECTION = "/blocks"
_ITEM = "/blocks/{identity}"
_DISABLE = "/blocks/{identity}/actions/disable"
_ENABLE = "/blocks/{identity}/actions/enable"
_BLOCK_BY_REF = "/block_by_ref"
_KEY = "blocks"


class AsyncBlocksResource(AsyncBaseResource):
    """Async resource for block operations.

    Example:
        ```python
        async with AsyncDirectDebitClient(access_token="...") as client:
            block = await client.blocks.create(BlockCreateParams(
                block_type=BlockType.EMAIL,
                reason_type=ReasonType.IDENTITY_FRAUD,
                resource_reference="fraud@example.com",
            ))
            await client.blocks.disable(block.id)
        ```
    """

    async def create(self, params: BlockCreateParams, options: Optional[RequestOptions] = None) -> Block:
        """Create a block."""
        return await self._call("POST", _COLLECTION, _KEY, Block, body={_KEY: params.to_dict()}, options=options)

    async def get(self, identity: str, options: Optional[RequestOptions] = None) -> Block:
        """Retrieve the details of an existing block."""
        return await self._call("GET", path_for(_ITEM, identity=identity), _KEY, Block, options=options)

    async def list(
        self,
        params: Optional[BlockListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> BlockListResult:
        """Return a cursor-paginated page of blocks."""
        return await self._call(
            "GET",
            _COLLECTION,
            _KEY,
            BlockListResult,
            params=params or BlockListParams(),
            wrapped=False,
            options=options,
        )

    def all(
        self,
        params: Optional[BlockListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> AsyncCursorPaginator[BlockListParams, BlockListResult]:
        """Paginate over every block matching ``params``."""

        async def fetch_page(p: BlockListParams) -> BlockListResult:
            return await self.list(p, options=options)

        return self._create_paginator(fetch_page, params or BlockListParams())

    async def disable(self, identity: str, options: Optional[RequestOptions] = None) -> Block:
        """Disable a block so it no longer applies."""
        return await self._call("POST", path_for(_DISABLE, identity=identity), _KEY, Block, options=options)

    async def enable(self, identity: str, options: Optional[RequestOptions] = None) -> Block:
        """Re-enable a previously disabled block."""
        return await self._call("POST", path_for(_ENABLE, identity=identity), _KEY, Block, options=options)

    async def block_by_ref(
        self,
        params: BlockByRefParams,
        options: Optional[RequestOptions] = None,
    ) -> BlockByRefResult:
        """Create blocks for every identifying value of a customer or mandate."""
        return await self._call(
            "POST",
            _BLOCK_BY_REF,
            _KEY,
            BlockByRefResult,
            body={"data": params.to_dict()},
            wrapped=False,
            options=options,
        )


class BlocksResource(SyncBaseResource):
    """Sync resource for block operations."""

    def create(self, params: BlockCreateParams, options: Optional[RequestOptions] = None) -> Block:
        """Create a block.

        Args:
            params: Block type, reason and the value to block
            options: Per-call overrides (e.g. a fixed idempotency key)

        Returns:
            The created block
        """
        return self._call("POST", _COLLECTION, _KEY, Block, body={_KEY: params.to_dict()}, options=options)

    def get(self, identity: str, options: Optional[RequestOptions] = None) -> Block:
        """Retrieve the details of an existing block."""
        return self._call("GET", path_for(_ITEM, identity=identity), _KEY, Block, options=options)

    def list(
        self,
        params: Optional[BlockListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> BlockListResult:
        """Return a cursor-paginated page of blocks.

        Args:
            params: Filters and cursor parameters
            options: Per-call overrides

        Returns:
            BlockListResult with items and cursor metadata
        """
        return self._call(
            "GET",
            _COLLECTION,
            _KEY,
            BlockListResult,
            params=params or BlockListParams(),
            wrapped=False,
            options=options,
        )

    def all(
        self,
        params: Optional[BlockListParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> CursorPaginator[BlockListParams, BlockListResult]:
        """Paginate over every block matching ``params``."""
        return self._create_paginator(
            lambda p: self.list(p, options=options),
            params or BlockListParams(),
        )

    def disable(self, identity: str, options: Optional[RequestOptions] = None) -> Block:
        """Disable a block so it no longer applies."""
        return self._call("POST", path_for(_DISABLE, identity=identity), _KEY, Block, options=options)

    def enable(self, identity: str, options: Optional[RequestOptions] = None) -> Block:
        """Re-enable a previously disabled block."""
        return self._call("POST", path_for(_ENABLE, identity=identity), _KEY, Block, options=options)

    def block_by_ref(
        self,
        params: BlockByRefParams,
        options: Optional[RequestOptions] = None,
    ) -> BlockByRefResult:
        """Create blocks for every identifying value of a customer or mandate.

        Returns every resulting block; the HTTP status (201 vs 200) is not
        surfaced since both carry the same body.
        """
        return self._call(
            "POST",
            _BLOCK_BY_REF,
            _KEY,
            BlockByRefResult,
            body={"data": params.to_dict()},
            wrapped=False,
            options=options,
        )
