"""
Cursor pagination for the DirectDebit SDK.

List endpoints return an opaque ``meta.cursors.after`` token with each page.
The paginators here thread that token into the next request until the server
returns an empty cursor.

Pagination state is an explicit value (``CursorState``) moved along by pure
functions; the paginator classes only hold the current state and a fetch
callable. A paginator is single-pass and must not be shared between
concurrent callers: partition the listing with disjoint filters and use one
paginator per caller instead.

Example:
    ```python
    paginator = client.blocks.all(BlockListParams(limit=100))

    for block in paginator:
        print(block.id)

    # Or page by page
    while paginator.has_next():
        page = paginator.value()
        print(len(page.blocks), page.meta.cursors.after)
    ```
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Deque,
    Generic,
    Iterator,
    List,
    Optional,
    TypeVar,
)

from .models.base import ListParams, ListResult

P = TypeVar("P", bound=ListParams)
R = TypeVar("R", bound=ListResult)


class PaginatorState(str, Enum):
    """Where a paginator is in its single pass over a listing."""

    FRESH = "fresh"
    HAS_MORE = "has_more"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class CursorState(Generic[R]):
    """Snapshot of pagination progress.

    Attributes:
        state: Current paginator state
        cursor: ``after`` cursor for the next fetch ("" before the first)
        last_page: Most recently fetched page
    """

    state: PaginatorState = PaginatorState.FRESH
    cursor: str = ""
    last_page: Optional[R] = None


def has_next(state: CursorState[Any]) -> bool:
    """More pages are available until a fetched page returns no cursor."""
    return state.state is not PaginatorState.EXHAUSTED


def advance(state: CursorState[R], page: R) -> CursorState[R]:
    """Return the state after ``page`` has been fetched."""
    cursor = page.next_cursor
    return replace(
        state,
        state=PaginatorState.HAS_MORE if cursor else PaginatorState.EXHAUSTED,
        cursor=cursor,
        last_page=page,
    )


def page_params(params: P, state: CursorState[Any]) -> P:
    """Copy the base params with ``after`` set to the current cursor."""
    return params.model_copy(update={"after": state.cursor or None})


class CursorPaginator(Generic[P, R]):
    """Synchronous cursor paginator over a list endpoint.

    Each ``value()`` call blocks on one list request; there is no read-ahead.
    """

    def __init__(self, fetch_page: Callable[[P], R], params: P) -> None:
        """Initialize the paginator.

        Args:
            fetch_page: Issues the list request for a given params value
            params: Base list parameters; ``after`` is managed here
        """
        self._fetch_page = fetch_page
        self._params = params
        self._state: CursorState[R] = CursorState()
        self._pending: Deque[Any] = deque()

    @property
    def state(self) -> CursorState[R]:
        return self._state

    def has_next(self) -> bool:
        return has_next(self._state)

    def value(self) -> R:
        """Fetch the next page.

        Once exhausted, returns the last page again without a request.
        """
        if not has_next(self._state):
            assert self._state.last_page is not None
            return self._state.last_page

        page = self._fetch_page(page_params(self._params, self._state))
        self._state = advance(self._state, page)
        return page

    def pages(self) -> Iterator[R]:
        """Iterate over the remaining pages."""
        while self.has_next():
            yield self.value()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over items across the remaining pages.

        Items of a fetched page that were not consumed (e.g. after ``take``)
        are yielded first on the next iteration.
        """
        while self._pending or self.has_next():
            if not self._pending:
                self._pending.extend(self.value().items)
                continue
            yield self._pending.popleft()

    def all(self) -> List[Any]:
        """Fetch all remaining items.

        Warning:
            Loads every page into memory.
        """
        return list(self)

    def take(self, n: int) -> List[Any]:
        """Fetch up to ``n`` items, stopping as soon as enough are collected.

        Remaining items of the last page fetched stay buffered for the next
        iteration.
        """
        items: List[Any] = []
        if n <= 0:
            return items
        for item in self:
            items.append(item)
            if len(items) >= n:
                break
        return items


class AsyncCursorPaginator(Generic[P, R]):
    """Async cursor paginator over a list endpoint."""

    def __init__(self, fetch_page: Callable[[P], Awaitable[R]], params: P) -> None:
        self._fetch_page = fetch_page
        self._params = params
        self._state: CursorState[R] = CursorState()
        self._pending: Deque[Any] = deque()

    @property
    def state(self) -> CursorState[R]:
        return self._state

    def has_next(self) -> bool:
        return has_next(self._state)

    async def value(self) -> R:
        """Fetch the next page, or the cached last page once exhausted."""
        if not has_next(self._state):
            assert self._state.last_page is not None
            return self._state.last_page

        page = await self._fetch_page(page_params(self._params, self._state))
        self._state = advance(self._state, page)
        return page

    async def pages(self) -> AsyncIterator[R]:
        while self.has_next():
            yield await self.value()

    async def __aiter__(self) -> AsyncIterator[Any]:
        while self._pending or self.has_next():
            if not self._pending:
                self._pending.extend((await self.value()).items)
                continue
            yield self._pending.popleft()

    async def all(self) -> List[Any]:
        return [item async for item in self]

    async def take(self, n: int) -> List[Any]:
        items: List[Any] = []
        if n <= 0:
            return items
        async for item in self:
            items.append(item)
            if len(items) >= n:
                break
        return items


__all__ = [
    "PaginatorState",
    "CursorState",
    "has_next",
    "advance",
    "page_params",
    "CursorPaginator",
    "AsyncCursorPaginator",
]
