"""Search workflow: resolve the company, fetch its filings, filter once."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from filing_search.filters import filter_filings
from filing_search.models import (
    CompanyNotFoundError,
    CompanyRecord,
    FilingRecord,
    FilingSearchError,
    InvalidRequestError,
)
from filing_search.ui.state import (
    SearchFailed,
    SearchStarted,
    SearchState,
    SearchSucceeded,
    reduce,
)

logger = logging.getLogger(__name__)

Resolver = Callable[[str], Awaitable[CompanyRecord]]
FilingsFetcher = Callable[[str], Awaitable[list[FilingRecord]]]

GENERIC_ERROR_MESSAGE = "Error fetching company data"


def error_message(exc: FilingSearchError) -> str:
    """User-facing text for a failed search."""
    if isinstance(exc, CompanyNotFoundError):
        return f"{exc.error}. {exc}"
    if isinstance(exc, InvalidRequestError):
        return str(exc)
    return GENERIC_ERROR_MESSAGE


async def run_search(
    state: SearchState,
    resolve: Resolver,
    fetch_filings: FilingsFetcher,
) -> SearchState:
    """Run one user-initiated search and return the resulting state.

    Does nothing while another search is pending or the company field is empty.
    """
    if not state.can_submit:
        return state

    state = reduce(state, SearchStarted())
    try:
        criteria = state.criteria()
        company = await resolve(state.company)
        filings = await fetch_filings(company.padded_identifier)
    except FilingSearchError as exc:
        logger.info("Search for %r failed: %s", state.company, exc)
        return reduce(state, SearchFailed(message=error_message(exc)))

    matching = filter_filings(filings, criteria)
    return reduce(state, SearchSucceeded(company=company, filings=tuple(matching)))
