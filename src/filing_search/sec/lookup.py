"""Company index parsing and first-match resolution."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from filing_search.models import CompanyRecord, UpstreamError


def parse_company_index(payload: Any) -> list[CompanyRecord]:
    """Turn the ``company_tickers.json`` payload into records, keeping listing order.

    The upstream document is an object keyed by row number:
    ``{"0": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."}, ...}``.
    """
    if not isinstance(payload, dict):
        raise UpstreamError("Company index is not a JSON object")

    records = []
    for entry in payload.values():
        try:
            records.append(CompanyRecord(
                identifier=str(entry["cik_str"]),
                display_name=str(entry["title"]),
                ticker=str(entry["ticker"]),
            ))
        except (KeyError, TypeError) as exc:
            raise UpstreamError(f"Malformed company index entry: {entry!r}") from exc
    return records


def resolve_company(query: str, entries: Iterable[CompanyRecord]) -> CompanyRecord | None:
    """Return the first entry whose name contains the query or whose ticker equals it.

    Matching is case-insensitive. No ranking: listing order decides ties.
    """
    needle = query.lower()
    for entry in entries:
        if needle in entry.display_name.lower() or needle == entry.ticker.lower():
            return entry
    return None
