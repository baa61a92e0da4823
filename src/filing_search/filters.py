"""Date-range and form-type filtering of filing records."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from filing_search.models import FilingRecord, InvalidRequestError, SearchFilterCriteria

ALL_FORMS = "all"


def parse_date_input(text: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` date field; blank means no bound."""
    if text is None or not text.strip():
        return None
    try:
        return date.fromisoformat(text.strip())
    except ValueError as exc:
        raise InvalidRequestError(f"Invalid date: {text!r}") from exc


def matches(filing: FilingRecord, criteria: SearchFilterCriteria) -> bool:
    if criteria.start_date is not None and filing.filing_date < criteria.start_date:
        return False
    if criteria.end_date is not None and filing.filing_date > criteria.end_date:
        return False
    return criteria.form_type == ALL_FORMS or filing.form_type == criteria.form_type


def filter_filings(
    filings: Iterable[FilingRecord], criteria: SearchFilterCriteria
) -> list[FilingRecord]:
    """Return the filings that satisfy every criterion, in their original order."""
    return [filing for filing in filings if matches(filing, criteria)]
