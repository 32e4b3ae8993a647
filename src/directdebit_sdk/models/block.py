"""Block models for the DirectDebit SDK.

Blocks stop a customer-identifying value (email, email domain, bank account
or bank name) from being used to set up new mandates.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import Field

from .base import DirectDebitModel, ListParams, ListResult


class BlockType(str, Enum):
    """What a block matches on."""

    EMAIL = "email"
    EMAIL_DOMAIN = "email_domain"
    BANK_ACCOUNT = "bank_account"
    BANK_NAME = "bank_name"


class ReasonType(str, Enum):
    """Why a block was created."""

    IDENTITY_FRAUD = "identity_fraud"
    NO_INTENT_TO_PAY = "no_intent_to_pay"
    UNFAIR_CHARGEBACK = "unfair_chargeback"
    OTHER = "other"


class ReferenceType(str, Enum):
    """Resource types that ``block_by_ref`` can derive blocks from."""

    CUSTOMER = "customer"
    MANDATE = "mandate"


class Block(DirectDebitModel):
    """A block."""

    id: str = ""
    active: bool = False
    block_type: Optional[str] = None
    reason_type: Optional[str] = None
    reason_description: Optional[str] = None
    resource_reference: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BlockCreateParams(DirectDebitModel):
    """Request to create a block."""

    block_type: Optional[BlockType] = None
    reason_type: Optional[ReasonType] = None
    resource_reference: Optional[str] = None
    reason_description: Optional[str] = None
    active: Optional[bool] = None


class BlockListParams(ListParams):
    """Filters for listing blocks."""

    block: Optional[str] = None
    block_type: Optional[BlockType] = None
    reason_type: Optional[ReasonType] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class BlockListResult(ListResult):
    """A page of blocks."""

    blocks: list[Block] = Field(default_factory=list)

    @property
    def items(self) -> list[Block]:
        return self.blocks


class BlockByRefParams(DirectDebitModel):
    """Request to block every identifying value of an existing resource."""

    reference_type: Optional[ReferenceType] = None
    reference_value: Optional[str] = None
    reason_type: Optional[ReasonType] = None
    reason_description: Optional[str] = None
    active: Optional[bool] = None


class BlockByRefResult(ListResult):
    """Blocks created (or found) for a reference.

    The API answers 201 when at least one block was created and 200 when all
    of them already existed; both carry the same body.
    """

    blocks: list[Block] = Field(default_factory=list)

    @property
    def items(self) -> list[Block]:
        return self.blocks
