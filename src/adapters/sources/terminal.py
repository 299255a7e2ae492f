"""Interactive purchase input (typer prompts).

Flow:
- How many items, then name / quantity / unit price for each one.
- How many emails, then each email.

Every answer has all of its whitespace removed before use. Unit prices are
typed in major units (`1.25`) and stored in minor units (`125`).
"""

from __future__ import annotations

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Any

import typer

from core.config import AppSettings

_WHITESPACE_RE = re.compile(r"\s")


def _remove_whitespace(value: str) -> str:
    return _WHITESPACE_RE.sub("", value.strip())


def to_minor_units(value: str, scale: int = 100) -> int | str:
    """Convert a major-unit amount (`"1.25"`) into minor units (`125`).

    The fractional part beyond the scale is truncated toward zero. Text that
    is not a number is returned unchanged so that item validation can report
    it as an invalid price.
    """

    try:
        amount = Decimal(value)
    except InvalidOperation:
        return value
    if not amount.is_finite():
        return value
    try:
        return int((amount * scale).to_integral_value(rounding=ROUND_DOWN))
    except ArithmeticError:
        # Exponent out of the decimal context range, e.g. "1e999999".
        return value


class TerminalPurchaseSource:
    """Reads a purchase by asking the user in the terminal."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def _ask_text(self, message: str) -> str:
        return _remove_whitespace(typer.prompt(message, default="", show_default=False))

    def _ask_count(self, message: str) -> int:
        return max(typer.prompt(message, type=int), 0)

    def read_items(self) -> list[dict[str, Any]]:
        count = self._ask_count("How many items do you want to add?")
        items: list[dict[str, Any]] = []
        for position in range(1, count + 1):
            name = self._ask_text(f"  Item #{position} name")
            amount = self._ask_text("  Quantity")
            price = self._ask_text("  Unit price")
            items.append(
                {
                    "name": name,
                    "amount": amount,
                    "price": to_minor_units(price, self._settings.minor_unit_scale),
                }
            )
        return items

    def read_recipients(self) -> list[str]:
        count = self._ask_count("How many emails do you want to include?")
        return [self._ask_text(f"  Email #{position}") for position in range(1, count + 1)]
