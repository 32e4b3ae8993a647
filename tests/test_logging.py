"""Tests for logging helpers and what the client logs."""
from __future__ import annotations

import logging

import httpx

from conftest import MOCK_RESPONSES

from directdebit_sdk.constants import MASK_PATTERN
from directdebit_sdk.logging import mask_headers, mask_text, mask_value


class TestMasking:
    def test_mask_value(self):
        assert mask_value("sandbox_abcdefghijkl") == "sand...ijkl"
        assert mask_value("short") == MASK_PATTERN
        assert mask_value("") == MASK_PATTERN

    def test_mask_headers(self):
        """Should hide credentials but keep idempotency keys visible."""
        masked = mask_headers({
            "Authorization": "Bearer secret",
            "webhook-signature": "abc",
            "Idempotency-Key": "key-1",
            "User-Agent": "ua",
        })
        assert masked["Authorization"] == MASK_PATTERN
        assert masked["webhook-signature"] == MASK_PATTERN
        assert masked["Idempotency-Key"] == "key-1"
        assert masked["User-Agent"] == "ua"

    def test_mask_text(self):
        assert mask_text("failed with Bearer abc.def-123") == "failed with Bearer ***"


class TestClientLogging:
    def test_debug_logs_are_masked(self, client, api_mock, access_token, caplog):
        api_mock.add_response(path="/blocks/BLC123", json={"blocks": MOCK_RESPONSES["block"]})

        with caplog.at_level(logging.DEBUG, logger="directdebit_sdk"):
            client.blocks.get("BLC123")

        messages = [r.getMessage() for r in caplog.records]
        assert any("API request GET https://api.test.local/blocks/BLC123" in m for m in messages)
        assert any("-> 200" in m for m in messages)
        for record in caplog.records:
            headers = getattr(record, "headers", None)
            if headers is not None:
                assert MASK_PATTERN in headers.values()
                assert all(access_token not in value for value in headers.values())
            assert access_token not in record.getMessage()

    def test_retry_logged_as_warning(self, client, api_mock, caplog):
        api_mock.add_exception(httpx.ConnectError("refused"), path="/blocks/BLC123")
        api_mock.add_response(path="/blocks/BLC123", json={"blocks": MOCK_RESPONSES["block"]})

        with caplog.at_level(logging.WARNING, logger="directdebit_sdk"):
            client.blocks.get("BLC123")

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Retrying GET /blocks/BLC123 after attempt 1/3" in warnings[0].getMessage()
