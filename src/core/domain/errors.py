"""Aggregate failures of a split run.

Per-item problems are *data* (`InvalidItem`) and never raised. The errors
below abort the current run: no receipt is produced once one of them is
raised.
"""

from __future__ import annotations


class SplitError(Exception):
    """Base class for failures that stop a split run."""

    kind: str = "SplitError"


class NonPositiveAmountError(SplitError):
    """The purchase total is zero or negative, so there is nothing to split."""

    kind = "NonPositiveAmount"

    def __init__(self, total: int) -> None:
        super().__init__(f"purchase total must be positive, got {total}")
        self.total = total


class NoRecipientsError(SplitError):
    kind = "NoRecipients"

    def __init__(self) -> None:
        super().__init__("at least one recipient is required to split a total")


class NoItemsError(SplitError):
    kind = "NoItems"

    def __init__(self) -> None:
        super().__init__("at least one item is required to compute a purchase")


class PurchaseSourceError(SplitError):
    """A purchase source could not be read or has the wrong shape."""

    kind = "InvalidSource"
