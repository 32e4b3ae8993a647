"""
DirectDebit Python SDK clients.

Example usage:
    ```python
    from directdebit_sdk import BlockCreateParams, DirectDebitClient, WebhookListParams

    with DirectDebitClient(access_token="...", environment="sandbox") as client:
        block = client.blocks.create(
            BlockCreateParams(block_type="email", reason_type="identity_fraud",
                              resource_reference="fraud@example.com"),
        )

        for webhook in client.webhooks.all(WebhookListParams(successful=False)):
            client.webhooks.retry(webhook.id)
    ```
"""
from __future__ import annotations

import asyncio
import threading
import time
from typing import Any, Optional, TypeVar, Union

import httpx
from pydantic import BaseModel

from .config import ClientSettings, load_settings
from .constants import Headers
from .envelope import decode_envelope, unwrap_envelope
from .logging import get_logger, log_request, log_response, mask_text, mask_value
from .models.errors import APIError, MalformedResponseError, RequestCancelledError
from .options import RequestOptions
from .request import RequestDescriptor, build_headers
from .resources.blocks import AsyncBlocksResource, BlocksResource
from .resources.webhooks import AsyncWebhooksResource, WebhooksResource
from .retry import RetryConfig, is_retryable

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

_CANCEL_POLL_INTERVAL = 0.05


async def _wait_for_event(event: threading.Event, timeout: float) -> bool:
    """Sleep up to ``timeout`` seconds, waking early once ``event`` is set."""
    deadline = time.monotonic() + timeout
    while not event.is_set():
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        await asyncio.sleep(min(_CANCEL_POLL_INTERVAL, remaining))
    return event.is_set()


class _BaseClient:
    """Configuration shared by the sync and async clients."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        retry: Optional[RetryConfig] = None,
        settings: Optional[ClientSettings] = None,
    ):
        settings = settings or load_settings()
        if environment is not None or base_url is not None:
            updates: dict[str, Any] = {}
            if environment is not None:
                updates["environment"] = environment
            if base_url is not None:
                updates["base_url"] = base_url.rstrip("/")
            settings = settings.model_copy(update=updates)

        token = access_token or settings.access_token
        if not token:
            raise ValueError("Access token is required")

        self._settings = settings
        self._access_token = token
        self._base_url = settings.endpoint
        self._api_version = settings.api_version
        self._timeout = timeout if isinstance(timeout, httpx.Timeout) else httpx.Timeout(
            timeout if timeout is not None else settings.timeout
        )
        self._retry = retry or RetryConfig(
            max_attempts=settings.max_attempts,
            base_delay=settings.retry_base_delay,
            max_delay=settings.retry_max_delay,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r}, access_token={mask_value(self._access_token)!r})"

    def _build(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Any] = None,
        body: Optional[dict[str, Any]] = None,
        options: Optional[RequestOptions] = None,
    ) -> RequestDescriptor:
        return RequestDescriptor.build(
            method,
            path,
            params=params,
            body=body,
            options=options,
            default_retries=self._retry.max_attempts,
        )

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _decode(
        self,
        response: httpx.Response,
        result_key: str,
        model: type[T],
        wrapped: bool,
    ) -> T:
        request_id = response.headers.get(Headers.REQUEST_ID)
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Response body is not valid JSON (HTTP {response.status_code})",
                request_id=request_id,
            ) from e

        envelope = decode_envelope(
            body,
            result_key,
            model,
            wrapped=wrapped,
            status_code=response.status_code,
            request_id=request_id,
        )
        return unwrap_envelope(envelope)

    @staticmethod
    def _error_from_response(response: httpx.Response) -> APIError:
        try:
            body = response.json()
        except ValueError:
            body = {"error": {"message": response.text or f"HTTP {response.status_code}"}}
        return APIError.from_response(response.status_code, body, response.headers)

    def _log_retry(self, descriptor: RequestDescriptor, attempt: int, delay: float, error: BaseException) -> None:
        logger.warning(
            "Retrying %s %s after attempt %d/%d in %.2fs: %s",
            descriptor.method,
            descriptor.path,
            attempt + 1,
            descriptor.retries,
            delay,
            mask_text(str(error)),
            extra={"idempotency_key": descriptor.idempotency_key},
        )


class DirectDebitClient(_BaseClient):
    """
    Synchronous DirectDebit API client.

    Provides access to the API resources:
    - webhooks: List, fetch and retry webhook deliveries
    - blocks: Create, list, enable and disable blocks

    Args:
        access_token: Bearer token (falls back to ``DIRECTDEBIT_ACCESS_TOKEN``)
        environment: ``"live"`` or ``"sandbox"``
        base_url: Explicit API base URL, overriding ``environment``
        timeout: Request timeout in seconds or an ``httpx.Timeout``
        retry: Retry configuration (default: 3 attempts with backoff)
        http_client: Optional pre-configured ``httpx.Client``; not closed by
            this client
        settings: Optional settings object instead of the environment
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        retry: Optional[RetryConfig] = None,
        http_client: Optional[httpx.Client] = None,
        settings: Optional[ClientSettings] = None,
    ):
        super().__init__(
            access_token,
            environment=environment,
            base_url=base_url,
            timeout=timeout,
            retry=retry,
            settings=settings,
        )
        self._client = http_client
        self._owns_client = http_client is None

        self.webhooks = WebhooksResource(self)
        self.blocks = BlocksResource(self)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self._timeout)
            self._owns_client = True
        return self._client

    def _send(self, descriptor: RequestDescriptor, options: Optional[RequestOptions] = None) -> httpx.Response:
        """Issue ``descriptor`` with retries; return the first 2xx response."""
        client = self._get_client()
        url = self._url(descriptor.path)
        headers = build_headers(descriptor, self._access_token, self._api_version)
        cancel_event = options.cancel_event if options else None

        last_error: Optional[BaseException] = None
        for attempt in range(descriptor.retries):
            if cancel_event is not None and cancel_event.is_set():
                raise RequestCancelledError() from last_error

            log_request(logger, descriptor.method, url, headers, attempt + 1, descriptor.body)
            started = time.monotonic()
            try:
                response = client.request(
                    descriptor.method,
                    url,
                    params=descriptor.params,
                    json=descriptor.body,
                    headers=headers,
                )
            except httpx.TransportError as e:
                last_error = e
            else:
                log_response(
                    logger,
                    descriptor.method,
                    url,
                    response.status_code,
                    (time.monotonic() - started) * 1000,
                    response.headers.get(Headers.REQUEST_ID),
                )
                if response.is_success:
                    return response
                last_error = self._error_from_response(response)

            if not is_retryable(last_error) or attempt + 1 >= descriptor.retries:
                break

            delay = self._retry.delay_for(last_error, attempt)
            self._log_retry(descriptor, attempt, delay, last_error)
            if cancel_event is not None:
                if cancel_event.wait(delay):
                    raise RequestCancelledError() from last_error
            elif delay > 0:
                time.sleep(delay)

        assert last_error is not None
        raise last_error

    def _request(
        self,
        descriptor: RequestDescriptor,
        result_key: str,
        model: type[T],
        *,
        wrapped: bool = True,
        options: Optional[RequestOptions] = None,
    ) -> T:
        """Execute ``descriptor`` and decode the expected result.

        Raises:
            APIError: HTTP error after retries, or an error in a 2xx body
            MissingResultError: The body held neither error nor result
            MalformedResponseError: The body could not be decoded
            httpx.TransportError: Connection failure after retries
        """
        response = self._send(descriptor, options)
        return self._decode(response, result_key, model, wrapped)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "DirectDebitClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncDirectDebitClient(_BaseClient):
    """
    Async DirectDebit API client.

    Same surface as ``DirectDebitClient`` with awaitable methods. Cancelling
    the awaiting task aborts the in-flight request and is never retried.

    Example:
        ```python
        async with AsyncDirectDebitClient(access_token="...") as client:
            webhook = await client.webhooks.get("WB123")
            async for block in client.blocks.all(BlockListParams()):
                ...
        ```
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        environment: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[Union[float, httpx.Timeout]] = None,
        retry: Optional[RetryConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[ClientSettings] = None,
    ):
        super().__init__(
            access_token,
            environment=environment,
            base_url=base_url,
            timeout=timeout,
            retry=retry,
            settings=settings,
        )
        self._client = http_client
        self._owns_client = http_client is None

        self.webhooks = AsyncWebhooksResource(self)
        self.blocks = AsyncBlocksResource(self)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def _send(self, descriptor: RequestDescriptor, options: Optional[RequestOptions] = None) -> httpx.Response:
        client = await self._get_client()
        url = self._url(descriptor.path)
        headers = build_headers(descriptor, self._access_token, self._api_version)
        cancel_event = options.cancel_event if options else None

        last_error: Optional[BaseException] = None
        for attempt in range(descriptor.retries):
            if cancel_event is not None and cancel_event.is_set():
                raise RequestCancelledError() from last_error

            log_request(logger, descriptor.method, url, headers, attempt + 1, descriptor.body)
            started = time.monotonic()
            try:
                response = await client.request(
                    descriptor.method,
                    url,
                    params=descriptor.params,
                    json=descriptor.body,
                    headers=headers,
                )
            except httpx.TransportError as e:
                last_error = e
            else:
                log_response(
                    logger,
                    descriptor.method,
                    url,
                    response.status_code,
                    (time.monotonic() - started) * 1000,
                    response.headers.get(Headers.REQUEST_ID),
                )
                if response.is_success:
                    return response
                last_error = self._error_from_response(response)

            if not is_retryable(last_error) or attempt + 1 >= descriptor.retries:
                break

            delay = self._retry.delay_for(last_error, attempt)
            self._log_retry(descriptor, attempt, delay, last_error)
            if cancel_event is not None:
                if await _wait_for_event(cancel_event, delay):
                    raise RequestCancelledError() from last_error
            elif delay > 0:
                await asyncio.sleep(delay)

        assert last_error is not None
        raise last_error

    async def _request(
        self,
        descriptor: RequestDescriptor,
        result_key: str,
        model: type[T],
        *,
        wrapped: bool = True,
        options: Optional[RequestOptions] = None,
    ) -> T:
        response = await self._send(descriptor, options)
        return self._decode(response, result_key, model, wrapped)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    aclose = close

    async def __aenter__(self) -> "AsyncDirectDebitClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
