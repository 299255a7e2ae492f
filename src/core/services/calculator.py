"""Purchase total and the split among recipients.

Rules:
- All arithmetic is integer arithmetic on minor units.
- Every cent of the total ends up in the receipt: `sum(receipt.values()) == total`.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from core.domain.errors import NonPositiveAmountError, NoRecipientsError
from core.domain.models import Item, Receipt

logger = logging.getLogger(__name__)


def compute_total(items: Iterable[Item]) -> int:
    """Sum `amount * price` over all items.

    Raises `NonPositiveAmountError` when the total is zero or negative. An
    empty item list sums to zero and fails the same way.
    """

    total = sum(item.subtotal for item in items)
    if total <= 0:
        raise NonPositiveAmountError(total)
    return total


def unique_recipients(recipients: Iterable[str]) -> list[str]:
    """Drop duplicate identifiers, keeping the first occurrence of each."""

    return list(dict.fromkeys(recipients))


def split(recipients: Sequence[str], total: int) -> Receipt:
    """Split `total` evenly among the unique `recipients`.

    Each recipient gets `total // n`. The `total % n` leftover cents go one by
    one to the recipients with the smallest identifiers (plain string order),
    so `split(["b", "a"], 3)` gives `a` two cents. The receipt itself keeps
    the first-occurrence order of `recipients`.
    """

    unique = unique_recipients(recipients)
    if not unique:
        raise NoRecipientsError()

    base, remainder = divmod(total, len(unique))
    receipt: Receipt = {recipient: base for recipient in unique}
    for recipient in sorted(unique)[:remainder]:
        receipt[recipient] += 1

    logger.debug(
        "Split %d among %d recipients (base=%d, remainder=%d)",
        total,
        len(unique),
        base,
        remainder,
    )
    return receipt
