"""Mini README: Bulk transaction import subsystem.

The package is divided into ``base`` for the abstract source interface,
``registry`` for name-based lookup and ``sources`` for the built-in
implementations, which register themselves on import.
"""

from .base import ImportSource
from .registry import REGISTRY, ImportSourceRegistry
from .sources import PdfStatementSource, RecordImportSource

__all__ = [
    "ImportSource",
    "ImportSourceRegistry",
    "PdfStatementSource",
    "REGISTRY",
    "RecordImportSource",
]
