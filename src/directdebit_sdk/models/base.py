"""Base models for the DirectDebit SDK."""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..query import prune_zero


class DirectDebitModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a JSON-ready dict, dropping zero-valued fields."""
        return prune_zero(self.model_dump(mode="json", by_alias=True, exclude_none=True))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DirectDebitModel":
        """Create model from dictionary."""
        return cls.model_validate(data)


class Cursors(DirectDebitModel):
    """Opaque pagination cursors returned with a list page."""

    after: Optional[str] = None
    before: Optional[str] = None


class ListMeta(DirectDebitModel):
    """Pagination metadata for list responses."""

    cursors: Cursors = Field(default_factory=Cursors)
    limit: Optional[int] = None


class ListParams(DirectDebitModel):
    """Parameters shared by every cursor-paginated list endpoint."""

    after: Optional[str] = None
    before: Optional[str] = None
    limit: Optional[int] = None


class ListResult(DirectDebitModel):
    """A single page from a list endpoint.

    Subclasses declare the resource-named item list and expose it through
    ``items``.
    """

    meta: ListMeta = Field(default_factory=ListMeta)

    @property
    @abstractmethod
    def items(self) -> list[Any]:
        """The resource-named item list of this page."""

    @property
    def next_cursor(self) -> str:
        return self.meta.cursors.after or ""
