"""Split orchestration.

Chains the core steps (dedupe recipients, validate items, total, split) so
that every entry point (CLI, tests, future APIs) runs the same flow. Side
effects such as printing stay with the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from core.domain.errors import NoItemsError, NoRecipientsError
from core.domain.models import InvalidItem, Item, Receipt
from core.interfaces.source import PurchaseSource
from core.services.calculator import compute_total, split, unique_recipients
from core.services.item_validator import validate_items

logger = logging.getLogger(__name__)


@dataclass
class SplitRequest:
    """Raw input of a split run."""

    items: Sequence[Any] = ()
    recipients: Sequence[str] = ()

    @classmethod
    def from_source(cls, source: PurchaseSource) -> "SplitRequest":
        return cls(items=source.read_items(), recipients=source.read_recipients())


@dataclass
class SplitResult:
    """Output of a successful run."""

    receipt: Receipt
    total: int
    items: list[Item] = field(default_factory=list)
    invalid_items: list[InvalidItem] = field(default_factory=list)
    recipients: list[str] = field(default_factory=list)


def run_split(request: SplitRequest) -> SplitResult:
    """Run the whole flow.

    Raises a `SplitError` subclass when the run cannot produce a receipt:
    - `NoItemsError`: no raw items at all.
    - `NoRecipientsError`: no recipients at all.
    - `NonPositiveAmountError`: the valid items sum to zero or less.

    Rejected items do not stop the run; they are returned in
    `SplitResult.invalid_items`.
    """

    if not request.items:
        raise NoItemsError()
    if not request.recipients:
        raise NoRecipientsError()

    recipients = unique_recipients(request.recipients)
    items, invalid_items = validate_items(request.items)
    if invalid_items:
        logger.warning("%d of %d items were rejected", len(invalid_items), len(request.items))

    total = compute_total(items)
    receipt = split(recipients, total)

    return SplitResult(
        receipt=receipt,
        total=total,
        items=items,
        invalid_items=invalid_items,
        recipients=recipients,
    )
