"""Mini README: Interactive console menus for Financemap.

Structure:
    * ConsoleMenu - main menu, input sub-menu, manual entry, PDF upload and
      financial map screens driven by prompt/echo callables.

The menu owns no state besides the ledger it was given. Input errors are
printed and the user is returned to the previous menu; nothing typed at the
console can terminate the loop except choosing *Exit*.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

import typer

from ..errors import FinancemapError
from ..importers import REGISTRY, ImportSourceRegistry
from ..ledger import Ledger, TransactionType, parse_entry
from ..logging_utils import get_logger
from ..reporting import Period, ReportGenerator, ReportRenderer, TextSummaryRenderer

LOGGER = get_logger(__name__)

PromptFn = Callable[..., str]
EchoFn = Callable[[str], None]


class ConsoleMenu:
    """Text-mode navigation around a ledger."""

    def __init__(
        self,
        ledger: Ledger,
        *,
        prompt: PromptFn = typer.prompt,
        echo: EchoFn = typer.echo,
        today: Callable[[], date] = date.today,
        default_period: str = Period.MONTHLY.value,
        importers: Optional[ImportSourceRegistry] = None,
        renderer: Optional[ReportRenderer] = None,
    ) -> None:
        self.ledger = ledger
        self._prompt = prompt
        self._echo = echo
        self._today = today
        self._default_period = Period.from_name(default_period).value
        self._importers = importers or REGISTRY
        self._renderer = renderer or TextSummaryRenderer()
        self._generator = ReportGenerator(ledger, today=today)

    def _ask(self, text: str, default: str = "") -> str:
        answer = self._prompt(text, default=default, show_default=bool(default))
        return str(answer).strip()

    def run(self) -> None:
        """Show the main menu until the user exits."""

        while True:
            self._echo("")
            self._echo("Personal Finance Tracker")
            self._echo("1. Financial Map")
            self._echo("2. Input / Insert Transactions")
            self._echo("3. Exit")
            choice = self._ask("Enter your choice")
            if choice == "1":
                self.financial_map()
            elif choice == "2":
                self.input_menu()
            elif choice == "3":
                self._echo("Exiting program. Goodbye!")
                return
            else:
                self._echo("Invalid choice. Please try again.")

    def input_menu(self) -> None:
        """Sub-menu for recording transactions."""

        while True:
            self._echo("")
            self._echo("Input Transactions")
            self._echo("1. Upload PDF")
            self._echo("2. Manual Entry")
            self._echo("3. Back to Main Menu")
            choice = self._ask("Enter your choice")
            if choice == "1":
                self.upload_pdf()
            elif choice == "2":
                self.manual_entry()
            elif choice == "3":
                return
            else:
                self._echo("Invalid choice. Please try again.")

    def manual_entry(self) -> None:
        """Collect one transaction from the user and record it."""

        date_text = self._ask("Date (YYYY-MM-DD)", default=self._today().isoformat())
        description = self._ask("Description")
        amount_text = self._ask("Amount")
        type_text = self._ask("Type (Credit/Debit)", default=TransactionType.CREDIT.value)
        try:
            transaction = parse_entry(date_text, amount_text, type_text, description)
        except FinancemapError as error:
            LOGGER.debug("Rejected manual entry: %s", error)
            self._echo(f"Input Error: {error}")
            return
        self.ledger.append(transaction)
        self._echo("Transaction added successfully!")

    def upload_pdf(self) -> None:
        """Ask for a statement file and hand it to the PDF import source."""

        path = self._ask("PDF file path")
        try:
            source = self._importers.create("pdf", path=path)
            imported = self.ledger.extend(source)
        except FinancemapError as error:
            self._echo(str(error))
            return
        self._echo(f"Imported {len(imported)} transactions.")

    def financial_map(self) -> None:
        """Print the summary for a chosen period around today."""

        names = ", ".join(Period.names())
        period = self._ask(f"Select time period ({names})", default=self._default_period)
        try:
            report = self._generator.generate(period)
        except FinancemapError as error:
            self._echo(str(error))
            return
        self._echo(self._renderer.render(report))
