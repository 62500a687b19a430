"""Mini README: Interactive interfaces (console/web) for Financemap.

Exports the console menu and the FastAPI application factory. Both take a
ledger instance rather than reaching for a shared one.
"""

from .console_menu import ConsoleMenu
from .web_app import create_application

__all__ = ["ConsoleMenu", "create_application"]
