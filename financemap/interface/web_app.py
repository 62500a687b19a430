"""Mini README: FastAPI interface for Financemap.

Structure:
    * create_application - application factory wiring routes to a ledger.

The HTTP routes mirror the console screens: manual entry, the PDF upload
placeholder, bulk record import and the financial map report. The ledger is
injected (or created per application) and kept on ``app.state.ledger``.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import Body, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse

from ..configuration import FinancemapSettings, get_settings
from ..errors import FinancemapError, ImportNotSupported
from ..importers import REGISTRY
from ..importers.sources import NO_FILE_SELECTED
from ..ledger import Ledger, TransactionType, parse_entry
from ..logging_utils import get_logger
from ..reporting import Period, Report, ReportGenerator, TextSummaryRenderer

LOGGER = get_logger(__name__)


def create_application(
    ledger: Optional[Ledger] = None,
    settings: Optional[FinancemapSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes bound to ``ledger``."""

    settings = settings or get_settings()
    if ledger is None:
        ledger = Ledger.with_demo_data() if settings.seed_demo_data else Ledger()

    app = FastAPI(title="Personal Finance Tracker", version="0.1.0")
    app.state.ledger = ledger
    generator = ReportGenerator(ledger)
    renderer = TextSummaryRenderer()

    def _build_report(period: Optional[str], reference_date: Optional[date]) -> Report:
        try:
            return generator.generate(period or settings.default_period, reference_date)
        except FinancemapError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

    @app.get("/")
    async def main_menu() -> JSONResponse:
        """Describe the sections reachable from the main menu."""

        return JSONResponse(
            {
                "title": "Personal Finance Tracker",
                "sections": {
                    "financial_map": ["/report", "/report/summary"],
                    "input": ["/transactions", "/import/pdf", "/import/records"],
                },
                "transaction_count": len(ledger),
            }
        )

    @app.get("/periods")
    async def periods() -> JSONResponse:
        """List the recognised reporting periods."""

        return JSONResponse({"periods": Period.names(), "default": settings.default_period})

    @app.get("/transactions")
    async def list_transactions(
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> JSONResponse:
        """Return stored transactions in ascending date order."""

        try:
            transactions = ledger.query(start, end)
        except FinancemapError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"transactions": [transaction.as_dict() for transaction in transactions]})

    @app.post("/transactions")
    async def add_transaction(
        date_text: str = Form(..., alias="date"),
        amount: str = Form(...),
        transaction_type: str = Form(TransactionType.CREDIT.value, alias="type"),
        description: str = Form(""),
    ) -> JSONResponse:
        """Record a manually entered transaction."""

        try:
            transaction = parse_entry(date_text, amount, transaction_type, description)
        except FinancemapError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        ledger.append(transaction)
        return JSONResponse(
            {"message": "Transaction added successfully!", "transaction": transaction.as_dict()},
            status_code=201,
        )

    @app.post("/import/pdf")
    async def import_pdf(statement: Optional[UploadFile] = File(None)) -> JSONResponse:
        """Accept a statement upload; parsing is not implemented yet."""

        if statement is None:
            raise HTTPException(status_code=400, detail=NO_FILE_SELECTED)
        LOGGER.info("Received PDF upload %s", statement.filename)
        try:
            source = REGISTRY.create("pdf", path=statement.filename)
            imported = ledger.extend(source)
        except ImportNotSupported as error:
            raise HTTPException(status_code=501, detail=str(error)) from error
        except FinancemapError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"imported": len(imported)})

    @app.post("/import/records")
    async def import_records(records: List[Dict[str, Any]] = Body(...)) -> JSONResponse:
        """Bulk append transactions from JSON records."""

        try:
            imported = ledger.extend(REGISTRY.create("records", records=records))
        except FinancemapError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse({"imported": len(imported)}, status_code=201)

    @app.get("/report")
    async def report(
        period: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> JSONResponse:
        """Return aggregated totals for the selected period."""

        return JSONResponse(_build_report(period, reference_date).as_dict())

    @app.get("/report/summary", response_class=PlainTextResponse)
    async def report_summary(
        period: Optional[str] = None,
        reference_date: Optional[date] = None,
    ) -> PlainTextResponse:
        """Return the plain-text financial report."""

        return PlainTextResponse(renderer.render(_build_report(period, reference_date)))

    return app
