"""GET /: the search page."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from filing_search.dependencies import get_edgar_client
from filing_search.forms import AVAILABLE_FORMS
from filing_search.ui.cards import build_card
from filing_search.ui.search import run_search
from filing_search.ui.state import (
    CompanyChanged,
    EndDateChanged,
    FormTypeChanged,
    SearchState,
    StartDateChanged,
    reduce,
)

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@router.get("/", response_class=HTMLResponse)
async def search_page(
    request: Request,
    company: str | None = None,
    form_type: str = "all",
    start_date: str = "",
    end_date: str = "",
) -> HTMLResponse:
    """Render the search form; run the search when the form was submitted."""
    state = SearchState()
    for action in (
        CompanyChanged(value=company or ""),
        FormTypeChanged(value=form_type),
        StartDateChanged(value=start_date),
        EndDateChanged(value=end_date),
    ):
        state = reduce(state, action)

    if company is not None:
        client = get_edgar_client()
        state = await run_search(state, client.lookup_company, client.get_recent_filings)

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "forms": AVAILABLE_FORMS,
            "cards": [build_card(filing) for filing in state.filings],
        },
    )
