"""
Pytest configuration and fixtures for DirectDebit SDK tests.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx
import pytest

from directdebit_sdk import AsyncDirectDebitClient, ClientSettings, DirectDebitClient, RetryConfig


@dataclass
class _MockEntry:
    method: str
    path: str
    response: Optional[httpx.Response] = None
    exception: Optional[Exception] = None
    callback: Optional[Callable[[httpx.Request], httpx.Response]] = None


class MockAPI:
    """Queue of canned responses served through ``httpx.MockTransport``.

    Entries are matched on method and path (query ignored) in the order they
    were added; every request that reaches the transport is recorded.
    """

    def __init__(self) -> None:
        self._entries: list[_MockEntry] = []
        self.requests: list[httpx.Request] = []

    def add_response(
        self,
        *,
        path: str,
        method: str = "GET",
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        if content is None and json is not None:
            content = json_dumps_bytes(json)
            response_headers = {"content-type": "application/json"}
            response_headers.update(headers or {})
        else:
            response_headers = headers or {}

        response = httpx.Response(status_code=status_code, headers=response_headers, content=content or b"")
        self._entries.append(_MockEntry(method=method.upper(), path=path, response=response))

    def add_exception(self, exception: Exception, *, path: str, method: str = "GET") -> None:
        self._entries.append(_MockEntry(method=method.upper(), path=path, exception=exception))

    def add_callback(
        self,
        callback: Callable[[httpx.Request], httpx.Response],
        *,
        path: str,
        method: str = "GET",
    ) -> None:
        self._entries.append(_MockEntry(method=method.upper(), path=path, callback=callback))

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        entry = self._pop_match(request.method, request_path(request))
        if entry.callback is not None:
            return entry.callback(request)
        if entry.exception is not None:
            raise entry.exception
        assert entry.response is not None
        return entry.response

    def requests_for(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method.upper() and request_path(r) == path]

    def _pop_match(self, method: str, path: str) -> _MockEntry:
        for idx, entry in enumerate(self._entries):
            if entry.method == method and entry.path == path:
                return self._entries.pop(idx)
        raise AssertionError(
            f"No mocked response for {method} {path}. "
            f"Available: {[f'{e.method} {e.path}' for e in self._entries]}"
        )


def json_dumps_bytes(payload: Any) -> bytes:
    return json.dumps(payload, default=str).encode("utf-8")


def request_path(request: httpx.Request) -> str:
    """Path as sent on the wire, percent-escapes intact."""
    return request.url.raw_path.split(b"?", 1)[0].decode("ascii")


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None


# Mock response data
MOCK_RESPONSES = {
    "webhook": {
        "id": "WB123",
        "created_at": "2024-03-01T10:00:00.000Z",
        "is_test": True,
        "url": "https://example.com/hooks",
        "successful": False,
        "request_body": '{"events": []}',
        "request_headers": {"Content-Type": "application/json"},
        "response_body": "Internal Server Error",
        "response_body_truncated": False,
        "response_code": 500,
        "response_headers": {},
        "response_headers_content_truncated": False,
        "response_headers_count_truncated": False,
    },
    "block": {
        "id": "BLC123",
        "active": True,
        "block_type": "email",
        "reason_type": "identity_fraud",
        "reason_description": "Reported by bank",
        "resource_reference": "fraud@example.com",
        "created_at": "2024-03-01T10:00:00.000Z",
        "updated_at": "2024-03-01T10:00:00.000Z",
    },
    "validation_error": {
        "error": {
            "message": "Validation failed",
            "documentation_url": "https://developer.example.com/api-reference#validation_failed",
            "type": "validation_failed",
            "request_id": "req_abc",
            "code": 422,
            "errors": [
                {
                    "field": "resource_reference",
                    "message": "must be a valid email address",
                    "request_pointer": "/blocks/resource_reference",
                }
            ],
        }
    },
}


def list_page(key: str, items: list[dict[str, Any]], after: Optional[str] = None, limit: int = 50) -> dict[str, Any]:
    """Body of one list-endpoint page."""
    return {key: items, "meta": {"cursors": {"after": after, "before": None}, "limit": limit}}


@pytest.fixture
def access_token() -> str:
    """Test access token."""
    return "sandbox_test_token_0123456789"


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return "https://api.test.local"


@pytest.fixture
def retry_config() -> RetryConfig:
    """Retry config without delays."""
    return RetryConfig(max_attempts=3, base_delay=0, jitter=0)


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(access_token="", environment="sandbox", base_url="")


@pytest.fixture
def api_mock() -> MockAPI:
    return MockAPI()


@pytest.fixture
def client(access_token, base_url, retry_config, settings, api_mock):
    """Sync client wired to the mock transport."""
    http_client = httpx.Client(transport=httpx.MockTransport(api_mock.handle))
    client = DirectDebitClient(
        access_token,
        base_url=base_url,
        retry=retry_config,
        http_client=http_client,
        settings=settings,
    )
    yield client
    http_client.close()


@pytest.fixture
async def async_client(access_token, base_url, retry_config, settings, api_mock):
    """Async client wired to the mock transport."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(api_mock.handle))
    client = AsyncDirectDebitClient(
        access_token,
        base_url=base_url,
        retry=retry_config,
        http_client=http_client,
        settings=settings,
    )
    yield client
    await http_client.aclose()
