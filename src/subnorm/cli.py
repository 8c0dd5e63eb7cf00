"""Typer-based CLI for inspecting subscription normalization."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .exchanges import SUBSCRIPTION_NORMALIZERS, Exchange, MalformedMessage, get_subscription_normalizer

if TYPE_CHECKING:
    from .replay import ReplayResult
    from .settings import Settings


def _load_settings(config_path: Optional[Path] = None) -> "Settings":
    from .config import load_settings
    return load_settings(config_path)


app = typer.Typer(help="Exchange subscription confirmation normalizer")
console = Console()
logger = logging.getLogger(__name__)


def run_cli(argv: list[str] | None = None) -> None:
    """Run CLI with optional argv parameter."""
    app(argv)


@app.command("exchanges")
def exchanges_list(
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """List exchanges with a subscription normalizer."""
    try:
        settings = _load_settings(config)
    except Exception as e:
        logger.error("Failed to load settings: %s", e, exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Supported Exchanges")
    table.add_column("Exchange", style="cyan")
    table.add_column("Field")
    table.add_column("Marker")
    table.add_column("Enabled")

    for exchange, normalizer in SUBSCRIPTION_NORMALIZERS.items():
        field, marker = normalizer.discriminator
        enabled = "[green]yes[/green]" if settings.is_enabled(exchange) else "[dim]no[/dim]"
        table.add_row(exchange.value, field, marker, enabled)

    console.print(table)


@app.command("normalize")
def normalize(
    exchange: str = typer.Argument(..., help="Exchange the recording came from"),
    path: Path = typer.Argument(..., help="Recording: JSON array (.json) or JSON lines (any other extension)"),
    as_json: bool = typer.Option(False, "--json", help="Print filters as JSON"),
    on_malformed: Optional[str] = typer.Option(
        None, help="What to do with malformed confirmations: raise or skip"
    ),
    config: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Normalize subscription confirmations found in a recording."""
    from .replay import collect_filters, read_messages

    try:
        settings = _load_settings(config)
    except Exception as e:
        logger.error("Failed to load settings: %s", e, exc_info=True)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    logger.debug("settings=%s", settings.summary())

    normalizer = get_subscription_normalizer(exchange)
    if normalizer is None:
        supported = ", ".join(e.value for e in Exchange)
        console.print(f"[red]Error:[/red] Unsupported exchange '{exchange}'. Supported: {supported}")
        raise typer.Exit(1)

    if not settings.is_enabled(normalizer.exchange):
        console.print(f"[red]Error:[/red] Exchange '{normalizer.exchange.value}' is disabled in config")
        raise typer.Exit(1)

    policy = on_malformed or settings.normalization.on_malformed
    if policy not in ("raise", "skip"):
        console.print(f"[red]Error:[/red] Invalid --on-malformed '{policy}'. Must be 'raise' or 'skip'.")
        raise typer.Exit(1)

    try:
        messages = read_messages(path)
    except (OSError, ValueError) as e:
        logger.error("Failed to read %s: %s", path, e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        result = collect_filters(normalizer.exchange, messages, on_malformed=policy)
    except MalformedMessage as e:
        logger.error("Normalization failed: %s", e)
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if as_json or settings.output.format == "json":
        typer.echo(json.dumps(_result_payload(result), indent=2))
        return

    _print_result(result)


def _result_payload(result: "ReplayResult") -> dict:
    return {
        "exchange": result.exchange.value,
        "confirmations": result.confirmations,
        "filters": [f.to_dict() for f in result.filters],
        "malformed": [e.detail for e in result.malformed],
    }


def _print_result(result: "ReplayResult") -> None:
    if not result.filters:
        console.print(f"[yellow]No subscription filters found for {result.exchange.value}[/yellow]")
    else:
        table = Table(title=f"{result.exchange.value} Subscriptions")
        table.add_column("Channel", style="cyan")
        table.add_column("Symbols")
        for f in result.filters:
            symbols = ", ".join(f.symbols) if f.symbols is not None else "[dim]all[/dim]"
            table.add_row(f.channel, symbols)
        console.print(table)

    summary = (
        f"Confirmations: {result.confirmations}\n"
        f"Filters: {len(result.filters)}\n"
        f"Other messages: {result.skipped}"
    )
    if result.malformed:
        summary += f"\n[red]Malformed: {len(result.malformed)}[/red]"
    console.print(Panel.fit(summary, title="Summary"))
