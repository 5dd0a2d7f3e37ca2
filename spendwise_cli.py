"""Mini README: Entry point CLI for the Spendwise service.

This script exposes a Typer CLI that starts the FastAPI application with
configurable host, port and production flags, prints a summary of the demo
ledger, and previews how a voice transcript would be recorded.
"""

from __future__ import annotations

import json

import typer
import uvicorn

from spendwise.configuration import get_settings
from spendwise.finance import LedgerEngine
from spendwise.logging_utils import configure_root_logger
from spendwise.voice import TranscriptError, parse_transcript

cli = typer.Typer(help="Run and inspect the Spendwise personal-finance service.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Spendwise on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port} "
        f"(interactive docs at /docs)"
    )
    uvicorn.run(
        "spendwise.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary() -> None:
    """Print budgets, savings and balance for a freshly configured engine."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    engine = LedgerEngine.from_settings(settings)
    symbol = settings.currency_symbol

    typer.echo(f"Available balance: {symbol}{engine.available_balance():,.2f}")
    typer.echo(f"Round-up savings: {symbol}{engine.round_up_savings:,.2f}")
    typer.echo("Budgets:")
    for budget in engine.list_budgets():
        flag = " (over budget)" if budget.over_budget else ""
        typer.echo(
            f"  {budget.category}: {symbol}{budget.spent:,.2f} / {symbol}{budget.limit:,.2f}{flag}"
        )
    typer.echo("Savings goals:")
    for goal in engine.list_goals():
        typer.echo(
            f"  {goal.name}: {symbol}{goal.current:,.2f} of {symbol}{goal.target:,.2f}"
            f" by {goal.deadline.isoformat()} ({goal.progress:.0%})"
        )


@cli.command("parse-voice")
def parse_voice(transcript: str = typer.Argument(..., help="Spoken sentence to parse.")) -> None:
    """Show the transaction a transcript would produce."""

    try:
        parsed = parse_transcript(transcript)
    except TranscriptError as error:
        typer.echo(f"Could not parse transcript: {error}", err=True)
        raise typer.Exit(code=1) from error
    typer.echo(json.dumps(parsed.as_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
