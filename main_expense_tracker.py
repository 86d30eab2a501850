"""Mini README: Entry point CLI for the PocketLedger expense tracker.

This script exposes a Typer command that opens the interactive menu. It
reads defaults from ``POCKETLEDGER_*`` environment variables, lets operators
override the currency symbol and log level, and hands a freshly created
ledger to the menu session. Nothing is persisted once the session ends.
"""

from __future__ import annotations

from typing import Optional

import typer

from pocketledger.configuration import get_settings
from pocketledger.finance import Ledger
from pocketledger.interface import MenuSession
from pocketledger.logging_utils import configure_root_logger, get_logger

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Track personal income and expenses from an interactive menu.")


@cli.command()
def run(
    currency: Optional[str] = typer.Option(None, help="Symbol prefixed to rendered amounts."),
    log_level: Optional[str] = typer.Option(
        None, help="Logging level, e.g. DEBUG or INFO (logs go to stderr)."
    ),
) -> None:
    """Start an interactive ledger session."""

    settings = get_settings()
    configure_root_logger(log_level or settings.log_level)
    LOGGER.debug("Starting session in %s environment", settings.environment)

    ledger = Ledger(id_length=settings.id_length)
    session = MenuSession(ledger, currency_symbol=currency or settings.currency_symbol)
    session.run()


if __name__ == "__main__":
    cli()
