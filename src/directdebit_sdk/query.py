"""
Query string encoding for list and filter parameters.

Parameters are flattened into ordered ``(key, value)`` pairs. Fields holding
their zero value (``None``, ``""``, ``0``, ``False``, empty containers) are
dropped, so an unset filter and a zero filter encode identically. Nested
objects use bracket notation (``created_at[gt]=...``) and lists repeat the
key.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

QueryPairs = list[tuple[str, str]]


def is_zero(value: Any) -> bool:
    """Return True when ``value`` is the zero value of its type."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return len(value) == 0
    return False


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(prefix: str, value: Any, out: QueryPairs) -> None:
    if is_zero(value):
        return
    if isinstance(value, Mapping):
        for key, nested in value.items():
            _flatten(f"{prefix}[{key}]", nested, out)
    elif isinstance(value, (list, tuple)):
        for item in value:
            if not is_zero(item):
                out.append((prefix, _format_scalar(item)))
    else:
        out.append((prefix, _format_scalar(value)))


def encode_query(params: Optional[Union[BaseModel, Mapping[str, Any]]]) -> QueryPairs:
    """Encode a params model (or mapping) into query pairs.

    Args:
        params: A pydantic model or plain mapping; ``None`` yields no pairs

    Returns:
        Ordered list of ``(key, value)`` string pairs
    """
    if params is None:
        return []
    if isinstance(params, BaseModel):
        data = params.model_dump(mode="json", by_alias=True)
    else:
        data = dict(params)

    pairs: QueryPairs = []
    for key, value in data.items():
        _flatten(key, value, pairs)
    return pairs


def prune_zero(data: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively drop zero-valued entries from a JSON-ready mapping."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            value = prune_zero(value)
        if not is_zero(value):
            result[key] = value
    return result
