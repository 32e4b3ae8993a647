"""
Response envelopes.

Every API response body is either an ``error`` object or a payload keyed by
the resource name. ``decode_envelope`` inspects which key is present and
returns exactly one of ``ErrorEnvelope`` or ``PayloadEnvelope``; a body with
neither raises ``MissingResultError``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .models.errors import APIError, MalformedResponseError, MissingResultError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ErrorEnvelope:
    """A response whose body carried an ``error`` object."""

    error: APIError


@dataclass(frozen=True)
class PayloadEnvelope(Generic[T]):
    """A response whose body carried the expected result."""

    payload: T


ResponseEnvelope = Union[ErrorEnvelope, PayloadEnvelope[T]]


def decode_envelope(
    body: Any,
    result_key: str,
    model: type[T],
    wrapped: bool = True,
    status_code: Optional[int] = None,
    request_id: Optional[str] = None,
) -> ResponseEnvelope[T]:
    """Decode a response body into an envelope.

    Args:
        body: Parsed JSON body
        result_key: Key whose presence marks a successful result
        model: Model to validate the payload against
        wrapped: Validate ``body[result_key]`` when True, otherwise the whole
            body (list pages keep ``meta`` next to the items)
        status_code: HTTP status, recorded on a decoded error
        request_id: Fallback request id for errors

    Raises:
        MissingResultError: Neither ``error`` nor ``result_key`` is present
        MalformedResponseError: The body is not an object or fails validation
    """
    if not isinstance(body, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(body).__name__}",
            request_id=request_id,
        )

    error = body.get("error")
    if error is not None:
        if not isinstance(error, dict):
            error = {"message": str(error)}
        return ErrorEnvelope(APIError.from_error_object(error, status_code=status_code, request_id=request_id))

    if body.get(result_key) is None:
        raise MissingResultError(result_key, request_id=request_id)

    try:
        payload = model.model_validate(body[result_key] if wrapped else body)
    except PydanticValidationError as e:
        raise MalformedResponseError(
            f"Response does not match {model.__name__}: {e.error_count()} validation error(s)",
            request_id=request_id,
        ) from e
    return PayloadEnvelope(payload)


def unwrap_envelope(envelope: ResponseEnvelope[T]) -> T:
    """Return the payload, or raise the API error the envelope carries."""
    if isinstance(envelope, ErrorEnvelope):
        raise envelope.error
    return envelope.payload
