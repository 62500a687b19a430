"""Mini README: Abstract base class for bulk transaction import sources.

Structure:
    * ImportSource - interface implemented by every importer.

Sources are iterable, yielding validated ``Transaction`` objects, so a bulk
import is simply ``ledger.extend(source)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator

from ..ledger import Transaction
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class ImportSource(ABC):
    """Base interface for anything that produces transactions in bulk."""

    source_name: str = "generic"

    @abstractmethod
    def iter_transactions(self) -> Iterable[Transaction]:
        """Yield the transactions this source provides."""

    def __iter__(self) -> Iterator[Transaction]:
        LOGGER.debug("Reading transactions from %s source", self.source_name)
        return iter(self.iter_transactions())

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for UI displays."""

        return {"source": self.source_name}
