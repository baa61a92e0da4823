"""Display cards for filing records."""

from __future__ import annotations

from pydantic import BaseModel

from filing_search.forms import describe_form
from filing_search.models import FilingRecord
from filing_search.sec.submissions import document_url


class FilingCard(BaseModel):
    title: str
    form_label: str
    filed: str
    summary: str
    url: str


def format_filing_date(filing: FilingRecord) -> str:
    d = filing.filing_date
    return f"{d:%B} {d.day}, {d.year}"


def build_card(filing: FilingRecord) -> FilingCard:
    return FilingCard(
        title=describe_form(filing.form_type),
        form_label=f"Form {filing.form_type}",
        filed=format_filing_date(filing),
        # Text before the first period, e.g. "aapl-20230930" for "aapl-20230930.htm"
        summary=filing.description.split(".")[0],
        url=document_url(filing),
    )
