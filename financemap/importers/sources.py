"""Mini README: Built-in import sources.

Structure:
    * RecordImportSource - validates mapping records such as parsed JSON rows.
    * PdfStatementSource - bank statement placeholder; parsing is not implemented.

Both register with ``REGISTRY`` on import under ``records`` and ``pdf``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

from ..errors import ImportNotSupported, ValidationError
from ..ledger import Transaction
from ..logging_utils import get_logger
from .base import ImportSource
from .registry import REGISTRY

LOGGER = get_logger(__name__)

NO_FILE_SELECTED = "Please select a PDF file first."


class RecordImportSource(ImportSource):
    """Turn ``{"date", "amount", "type", "description"}`` mappings into transactions."""

    source_name = "records"

    def __init__(self, records: Iterable[Mapping[str, object]] = ()) -> None:
        self._records: List[Mapping[str, object]] = list(records)

    def iter_transactions(self) -> Iterable[Transaction]:
        for index, record in enumerate(self._records):
            missing = [key for key in ("date", "amount") if key not in record]
            if missing:
                raise ValidationError(f"Record {index} is missing {', '.join(missing)}")
            amount = record["amount"]
            transaction_type = record.get("type")
            if transaction_type is None:
                # sign decides when the record does not say
                try:
                    transaction_type = "Credit" if float(amount) > 0 else "Debit"  # type: ignore[arg-type]
                except (TypeError, ValueError, OverflowError) as error:
                    raise ValidationError(f"Record {index} has an unusable amount") from error
            yield Transaction.create(
                record["date"],
                amount,
                transaction_type,
                record.get("description", ""),
            )

    def metadata(self) -> Dict[str, str]:
        return {"source": self.source_name, "records": str(len(self._records))}


class PdfStatementSource(ImportSource):
    """Placeholder for bank statement PDFs; iterating always fails."""

    source_name = "pdf"

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        if path is None or not str(path).strip():
            raise ValidationError(NO_FILE_SELECTED)
        self.path = Path(path)

    def iter_transactions(self) -> Iterable[Transaction]:
        LOGGER.warning("PDF import requested for %s but parsing is not implemented", self.path)
        raise ImportNotSupported(
            f"PDF parsing is not implemented. Unable to process the file: {self.path.name}"
        )

    def metadata(self) -> Dict[str, str]:
        return {"source": self.source_name, "file": self.path.name}


REGISTRY.register(RecordImportSource)
REGISTRY.register(PdfStatementSource)
