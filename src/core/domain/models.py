"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Item parsing is exactly a "cast + required" step: lax coercion of
  `"3"` into `3`, clear per-field errors, immutable results.
- The same models serialize cleanly for the JSON export.

Note:
- Money is always an `int` in minor units (cents). There are no floats here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

Receipt = dict[str, int]
"""Recipient identifier -> assigned amount in minor units."""


class Item(BaseModel):
    """A validated purchase line.

    No range checks happen here: a negative price is a valid item. Positivity
    is only enforced on the purchase total.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Item name as typed by the buyer.",
    )
    amount: int = Field(
        ...,
        description="Quantity bought.",
    )
    price: int = Field(
        ...,
        description="Unit price in minor currency units (e.g. cents).",
    )

    @field_validator("amount", "price", mode="before")
    @classmethod
    def _reject_booleans(cls, value: Any) -> Any:
        # bool is an int subclass; true/false are not quantities or prices.
        if isinstance(value, bool):
            raise ValueError("expected an integer, got a boolean")
        return value

    @property
    def subtotal(self) -> int:
        return self.amount * self.price


class IssueKind(str, Enum):
    """Why a single field of a raw item was rejected."""

    MISSING = "missing"
    INVALID_TYPE = "invalid_type"


class FieldIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Field name, or 'item' for the whole record.")
    kind: IssueKind
    message: str = Field(default="", description="Human-readable detail.")


class InvalidItem(BaseModel):
    """A raw item that could not become an `Item`.

    Collected next to the valid items and reported to the user; it never
    interrupts the rest of the batch.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(
        default=0,
        ge=0,
        description="Position of the raw record in the input batch.",
    )
    raw: Any = Field(
        default=None,
        description="The record exactly as it was received.",
    )
    issues: list[FieldIssue] = Field(
        default_factory=list,
        description="One entry per rejected field.",
    )

    @property
    def fields(self) -> list[str]:
        return [issue.field for issue in self.issues]

    def describe(self) -> str:
        """One-line summary, e.g. `price: missing; amount: invalid_type`."""

        return "; ".join(f"{issue.field}: {issue.kind.value}" for issue in self.issues)
