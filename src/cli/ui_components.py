"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables and panels can be reused by several commands.
"""

from __future__ import annotations

from decimal import Decimal

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import InvalidItem, Receipt


def print_banner(console: Console, *, scale: int = 100) -> None:
    """Print the welcome banner (skipped in non-interactive runs)."""

    body = Text.assemble(
        ("Fair split to the cent\n", "bold"),
        (f"Prices are typed in units; 1 unit = {scale} minor units.", "dim"),
    )
    console.print(Panel(Align.center(body), title="SPLIT-IT", border_style="cyan", padding=(1, 2)))


def format_major(amount: int, scale: int) -> str:
    """Show minor units in major units, e.g. 1234 -> `12.34` for scale 100."""

    places = len(str(scale)) - 1 if str(scale).strip("0") == "1" else 2
    value = Decimal(amount) / Decimal(scale)
    return f"{value:.{places}f}"


def build_receipt_table(receipt: Receipt, *, total: int, scale: int) -> Table:
    table = Table(title="Receipt")
    table.add_column("Email", style="cyan", no_wrap=True)
    table.add_column("Minor units", style="white", justify="right")
    table.add_column("Amount", style="green", justify="right")
    for recipient, share in receipt.items():
        table.add_row(recipient, str(share), format_major(share, scale))
    table.add_section()
    table.add_row("Total", str(total), format_major(total, scale), style="bold")
    return table


def build_invalid_items_table(invalid_items: list[InvalidItem]) -> Table:
    """Table of records that were not read because of invalid data."""

    table = Table(title="Rejected items", title_style="bold yellow")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Record", style="white")
    table.add_column("Problems", style="red")
    for invalid in invalid_items:
        table.add_row(str(invalid.index + 1), Text(repr(invalid.raw)), invalid.describe())
    return table
