"""Reshape the submissions payload into filing records and build document links."""

from __future__ import annotations

from datetime import date
from typing import Any

from filing_search.models import FilingRecord, UpstreamError, normalize_identifier

ARCHIVES_BASE_URL = "https://www.sec.gov/Archives/edgar/data"

# Parallel arrays under filings.recent, mapped to FilingRecord fields
_RECENT_COLUMNS = {
    "form": "form_type",
    "filingDate": "filing_date",
    "accessionNumber": "accession_id",
    "primaryDocument": "description",
}


def build_filing_records(payload: Any, identifier: str) -> list[FilingRecord]:
    """Zip the ``filings.recent`` arrays positionally into FilingRecords.

    Upstream order (most recent first) is preserved; nothing is sorted.
    """
    try:
        recent = payload["filings"]["recent"]
        columns = {name: list(recent[name]) for name in _RECENT_COLUMNS}
    except (KeyError, TypeError) as exc:
        raise UpstreamError("Submissions payload is missing filings.recent data") from exc

    lengths = {len(values) for values in columns.values()}
    if len(lengths) > 1:
        raise UpstreamError("Submissions payload has filing arrays of unequal length")

    records = []
    for row in zip(*columns.values()):
        fields = dict(zip(_RECENT_COLUMNS.values(), row))
        try:
            fields["filing_date"] = date.fromisoformat(fields["filing_date"])
            records.append(FilingRecord(company_identifier=identifier, **fields))
        except (TypeError, ValueError) as exc:
            # pydantic.ValidationError is a ValueError
            raise UpstreamError(f"Malformed filing row: {row!r}") from exc
    return records


def document_url(filing: FilingRecord) -> str:
    """Link to the filing's index page in the public EDGAR archive.

    This is the only supported link form; it exists for every filing whatever
    the primary document's format.
    """
    cik = normalize_identifier(filing.company_identifier)
    folder = filing.accession_id.replace("-", "")
    return f"{ARCHIVES_BASE_URL}/{cik}/{folder}/{filing.accession_id}-index.html"
