"""Mini README: Entry point CLI for the personal finance tracker.

This script exposes a Typer CLI with two commands: ``menu`` runs the
interactive console menus against a fresh in-memory ledger, and ``serve``
starts the FastAPI interface under uvicorn. Logging is configured from
``FINANCEMAP_*`` settings before either starts.
"""

from __future__ import annotations

import typer
import uvicorn

from financemap.configuration import get_settings
from financemap.interface import ConsoleMenu
from financemap.ledger import Ledger
from financemap.logging_utils import configure_root_logger

cli = typer.Typer(help="Track credits and debits and report on them by period.")


@cli.command()
def menu(
    demo: bool = typer.Option(False, help="Start with a handful of demo transactions."),
) -> None:
    """Run the interactive console menus."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    ledger = Ledger.with_demo_data() if demo else Ledger()
    ConsoleMenu(ledger, default_period=settings.default_period).run()


@cli.command()
def serve(
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

    # 0.0.0.0 is a bind address, not something a browser can open
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting the finance tracker on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "financemap.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
