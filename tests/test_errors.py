"""Tests for directdebit_sdk.models.errors."""

from __future__ import annotations

from directdebit_sdk.models.errors import (
    APIError,
    AuthenticationError,
    DirectDebitError,
    ErrorCode,
    InternalServerError,
    InvalidApiUsageError,
    InvalidSignatureError,
    InvalidStateError,
    MissingResultError,
    RateLimitError,
    RequestCancelledError,
    ValidationFailedError,
)


class TestDirectDebitError:
    def test_defaults(self):
        err = DirectDebitError("boom")
        assert err.message == "boom"
        assert err.code == ErrorCode.UNKNOWN_ERROR.value
        assert err.details == {}
        assert err.request_id is None
        assert str(err) == "[UNKNOWN_ERROR] boom"

    def test_to_dict_shape(self):
        err = DirectDebitError(
            message="m",
            code="CUSTOM",
            details={"k": "v"},
            request_id="req_1",
        )
        as_dict = err.to_dict()
        assert as_dict["error"]["code"] == "CUSTOM"
        assert as_dict["error"]["message"] == "m"
        assert as_dict["error"]["details"] == {"k": "v"}
        assert as_dict["error"]["request_id"] == "req_1"

    def test_sdk_errors_codes(self):
        assert MissingResultError("blocks").code == ErrorCode.MISSING_RESULT.value
        assert RequestCancelledError().code == ErrorCode.REQUEST_CANCELLED.value
        assert InvalidSignatureError().code == ErrorCode.INVALID_SIGNATURE.value


class TestAPIError:
    def test_from_response_with_error_object(self):
        err = APIError.from_response(
            422,
            {
                "error": {
                    "message": "Validation failed",
                    "type": "validation_failed",
                    "code": 422,
                    "request_id": "r",
                    "errors": [{"field": "email", "message": "is invalid"}],
                }
            },
        )
        assert isinstance(err, ValidationFailedError)
        assert err.status_code == 422
        assert err.message == "Validation failed"
        assert err.type == "validation_failed"
        assert err.code == "422"
        assert err.request_id == "r"
        assert err.errors[0].field == "email"
        assert err.details["errors"] == [{"message": "is invalid", "field": "email"}]

    def test_from_response_maps_types(self):
        assert isinstance(
            APIError.from_response(400, {"error": {"message": "x", "type": "invalid_api_usage"}}),
            InvalidApiUsageError,
        )
        assert isinstance(
            APIError.from_response(500, {"error": {"message": "x", "type": "gocardless"}}),
            InternalServerError,
        )

    def test_unknown_type(self):
        err = APIError.from_response(418, {"error": {"message": "teapot", "type": "novel"}})
        assert type(err) is APIError
        assert err.code == ErrorCode.API_ERROR.value

    def test_from_response_with_string_detail(self):
        err = APIError.from_response(500, {"detail": "oops"})
        assert err.status_code == 500
        assert err.message == "oops"

    def test_from_response_without_body(self):
        err = APIError.from_response(502, None)
        assert err.message == "HTTP 502"

    def test_request_id_from_headers(self):
        err = APIError.from_response(500, {"error": {"message": "x"}}, {"x-request-id": "hdr"})
        assert err.request_id == "hdr"

    def test_authentication_error(self):
        err = APIError.from_response(401, {"error": {"message": "Invalid token", "type": "invalid_api_usage"}})
        assert isinstance(err, AuthenticationError)
        assert err.status_code == 401
        assert err.code == ErrorCode.AUTHENTICATION_ERROR.value

    def test_rate_limit_error(self):
        err = APIError.from_response(
            429,
            {"error": {"message": "Too many requests", "type": "invalid_api_usage"}},
            {"Retry-After": "30"},
        )
        assert isinstance(err, RateLimitError)
        assert err.retry_after == 30

    def test_rate_limit_unparseable_retry_after(self):
        err = APIError.from_response(429, {}, {"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"})
        assert isinstance(err, RateLimitError)
        assert err.retry_after is None

    def test_status_overrides_type(self):
        """Should pick the 401/429 subclass even when the type names another."""
        err = APIError.from_response(
            429,
            {"error": {"message": "slow down", "type": "invalid_api_usage"}},
            {"Retry-After": "5"},
        )
        assert isinstance(err, RateLimitError)
        assert err.type == "invalid_api_usage"
        assert err.retry_after == 5

    def test_type_decides_for_other_statuses(self):
        err = APIError.from_response(400, {"error": {"message": "x", "type": "invalid_state"}})
        assert isinstance(err, InvalidStateError)


class TestMalformedErrorObjects:
    """Tests for error objects whose fields have the wrong shape."""

    def test_non_object_field_errors_dropped(self):
        err = APIError.from_response(
            422,
            {"error": {"message": "x", "type": "validation_failed", "errors": ["bad", {"field": "email", "message": "m"}]}},
        )
        assert isinstance(err, ValidationFailedError)
        assert [e.field for e in err.errors] == ["email"]

    def test_field_errors_as_mapping(self):
        err = APIError.from_response(500, {"error": {"message": "x", "errors": {"a": 1}}})
        assert type(err) is APIError
        assert err.errors == ()

    def test_invalid_field_error_entry_dropped(self):
        err = APIError.from_response(422, {"error": {"message": "x", "errors": [{"message": ["not", "a", "string"]}]}})
        assert err.errors == ()

    def test_non_string_fields_ignored(self):
        err = APIError.from_response(400, {"error": {"message": 12, "type": ["validation_failed"], "request_id": 3}})
        assert type(err) is APIError
        assert err.message == "Unknown error"
        assert err.type is None
        assert err.request_id is None
