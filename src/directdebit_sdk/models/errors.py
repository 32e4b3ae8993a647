"""Error models for the DirectDebit SDK."""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..constants import Headers


class ErrorCode(str, Enum):
    """SDK-level error codes."""

    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    API_ERROR = "API_ERROR"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_API_USAGE = "INVALID_API_USAGE"
    INVALID_STATE = "INVALID_STATE"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    MISSING_RESULT = "MISSING_RESULT"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    REQUEST_CANCELLED = "REQUEST_CANCELLED"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"


class DirectDebitError(Exception):
    """Base exception for the DirectDebit SDK."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or ErrorCode.UNKNOWN_ERROR.value
        self.details = details or {}
        self.request_id = request_id

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "request_id": self.request_id,
            }
        }


class FieldError(BaseModel):
    """A single field-level entry from an API error's ``errors`` list."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    message: str = ""
    field: Optional[str] = None
    request_pointer: Optional[str] = None
    reason: Optional[str] = None
    links: Optional[dict[str, str]] = None


class APIError(DirectDebitError):
    """Structured error returned by the API.

    Raised both for non-2xx responses and for a 2xx body that carries an
    ``error`` object. ``status_code`` is the HTTP status of the response.
    """

    default_code = ErrorCode.API_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        type: Optional[str] = None,
        code: Optional[str] = None,
        errors: tuple[FieldError, ...] = (),
        request_id: Optional[str] = None,
        documentation_url: Optional[str] = None,
    ):
        super().__init__(
            message,
            code=code or self.default_code.value,
            details={"errors": [e.model_dump(exclude_none=True) for e in errors]} if errors else None,
            request_id=request_id,
        )
        self.status_code = status_code
        self.type = type
        self.errors = tuple(errors)
        self.documentation_url = documentation_url

    @classmethod
    def from_error_object(
        cls,
        error: Mapping[str, Any],
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> "APIError":
        """Build the matching ``APIError`` subclass from an ``error`` object.

        A 401 or 429 status selects its subclass whatever the ``type`` says,
        so rate limits always carry ``retry_after``. Otherwise ``type`` picks
        the subclass. Fields of the wrong shape are dropped.
        """
        error_type = _as_str(error.get("type"))
        error_cls = _ERRORS_BY_STATUS.get(status_code) or _ERRORS_BY_TYPE.get(error_type, APIError)
        code = error.get("code")
        return error_cls(
            message=_as_str(error.get("message")) or "Unknown error",
            status_code=status_code,
            type=error_type,
            code=str(code) if code is not None else None,
            errors=_field_errors(error.get("errors")),
            request_id=_as_str(error.get("request_id")) or request_id,
            documentation_url=_as_str(error.get("documentation_url")),
        )

    @classmethod
    def from_response(
        cls,
        status_code: int,
        body: Any,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "APIError":
        """Create an ``APIError`` from an HTTP error response."""
        headers = headers or {}
        request_id = headers.get(Headers.REQUEST_ID)

        error_data: Any = None
        if isinstance(body, Mapping):
            error_data = body.get("error", body.get("detail"))
        if isinstance(error_data, str):
            error_data = {"message": error_data}
        if not isinstance(error_data, Mapping):
            error_data = {"message": f"HTTP {status_code}"}

        err = cls.from_error_object(error_data, status_code=status_code, request_id=request_id)
        if isinstance(err, RateLimitError):
            err.retry_after = _parse_retry_after(headers.get(Headers.RETRY_AFTER))
        return err


class ValidationFailedError(APIError):
    """One or more request parameters were rejected."""

    default_code = ErrorCode.VALIDATION_FAILED


class InvalidApiUsageError(APIError):
    """The request was malformed or used the API incorrectly."""

    default_code = ErrorCode.INVALID_API_USAGE


class InvalidStateError(APIError):
    """The resource is not in a state that allows the action."""

    default_code = ErrorCode.INVALID_STATE


class InternalServerError(APIError):
    """The API failed while processing the request."""

    default_code = ErrorCode.INTERNAL_ERROR


class AuthenticationError(APIError):
    """Authentication error."""

    default_code = ErrorCode.AUTHENTICATION_ERROR

    def __init__(self, message: str = "Invalid or missing access token", status_code: Optional[int] = 401, **kwargs: Any):
        super().__init__(message, status_code=status_code, **kwargs)


class RateLimitError(APIError):
    """Rate limit exceeded error."""

    default_code = ErrorCode.RATE_LIMIT_EXCEEDED

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        status_code: Optional[int] = 429,
        retry_after: Optional[int] = None,
        **kwargs: Any,
    ):
        super().__init__(message, status_code=status_code, **kwargs)
        self.retry_after = retry_after


class MissingResultError(DirectDebitError):
    """A response carried neither an error nor the expected result."""

    def __init__(self, result_key: str, request_id: Optional[str] = None):
        super().__init__(
            "missing result",
            code=ErrorCode.MISSING_RESULT.value,
            details={"result_key": result_key},
            request_id=request_id,
        )
        self.result_key = result_key


class MalformedResponseError(DirectDebitError):
    """A response body could not be decoded into the expected shape."""

    def __init__(self, message: str, request_id: Optional[str] = None):
        super().__init__(message, code=ErrorCode.MALFORMED_RESPONSE.value, request_id=request_id)


class RequestCancelledError(DirectDebitError):
    """The caller cancelled the request before it completed."""

    def __init__(self, message: str = "Request cancelled"):
        super().__init__(message, code=ErrorCode.REQUEST_CANCELLED.value)


class InvalidSignatureError(DirectDebitError):
    """An incoming webhook failed signature verification."""

    def __init__(self, message: str = "Webhook signature does not match"):
        super().__init__(message, code=ErrorCode.INVALID_SIGNATURE.value)


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _field_errors(raw: Any) -> tuple[FieldError, ...]:
    """Parse the ``errors`` list, dropping entries that are not field objects."""
    if not isinstance(raw, (list, tuple)):
        return ()
    parsed = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            continue
        try:
            parsed.append(FieldError.model_validate(entry))
        except PydanticValidationError:
            continue
    return tuple(parsed)


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return max(0, int(value))
    except ValueError:
        return None


_ERRORS_BY_TYPE: dict[Optional[str], type[APIError]] = {
    "validation_failed": ValidationFailedError,
    "invalid_api_usage": InvalidApiUsageError,
    "invalid_state": InvalidStateError,
    "gocardless": InternalServerError,
}

_ERRORS_BY_STATUS: dict[Optional[int], type[APIError]] = {
    401: AuthenticationError,
    429: RateLimitError,
}
