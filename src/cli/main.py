"""SPLIT-IT command line (Typer).

The CLI only collects input and renders output; the split itself runs in
`core.services.split_pipeline`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from adapters.json_exporter import export_receipt_json
from adapters.sources import JsonPurchaseSource, TerminalPurchaseSource
from cli.ui_components import build_invalid_items_table, build_receipt_table, print_banner
from core.config import AppSettings
from core.domain.errors import SplitError
from core.interfaces.source import PurchaseSource
from core.services.split_pipeline import SplitRequest, run_split

app = typer.Typer(no_args_is_help=True, help="Split a purchase fairly among emails, to the cent.")

_console = Console()


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def split(
    from_file: Optional[Path] = typer.Option(
        None,
        "--from-file",
        "-f",
        exists=True,
        dir_okay=False,
        help="Read the purchase from a JSON file instead of prompting.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Also write the receipt to this JSON file.",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Collect items and emails, then print how much each email pays."""

    settings = AppSettings()
    _configure_logging(settings)

    if settings.show_banner and not no_banner and from_file is None:
        print_banner(_console, scale=settings.minor_unit_scale)

    source: PurchaseSource = JsonPurchaseSource(from_file) if from_file else TerminalPurchaseSource(settings)

    try:
        result = run_split(SplitRequest.from_source(source))
    except SplitError as exc:
        _console.print(f"[red]Split failed ({exc.kind}):[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if result.invalid_items:
        _console.print(build_invalid_items_table(result.invalid_items))

    _console.print(build_receipt_table(result.receipt, total=result.total, scale=settings.minor_unit_scale))

    if output is not None:
        path = export_receipt_json(result=result, output_path=output)
        _console.print(f"[green]Saved receipt to:[/green] {path}")


@app.command()
def config() -> None:
    """Show the effective settings (env vars and .env files applied)."""

    settings = AppSettings()

    table = Table(title="SPLIT-IT Settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    for name, value in settings.model_dump().items():
        table.add_row(name, str(value))

    _console.print(table)


def run() -> None:
    app()
