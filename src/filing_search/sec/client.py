"""EdgarClient: async access to the two public SEC JSON documents."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from filing_search.models import (
    CompanyNotFoundError,
    CompanyRecord,
    FilingRecord,
    InvalidRequestError,
    UpstreamError,
    normalize_identifier,
)
from filing_search.sec.lookup import parse_company_index, resolve_company
from filing_search.sec.submissions import build_filing_records

logger = logging.getLogger(__name__)


class EdgarClient:
    """Stateless facade over the SEC company index and submissions API.

    Nothing is cached: every lookup downloads the full company index again.
    """

    def __init__(
        self,
        user_agent: str,
        company_tickers_url: str = "https://www.sec.gov/files/company_tickers.json",
        submissions_url: str = "https://data.sec.gov/submissions/CIK{cik}.json",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._headers = {"User-Agent": user_agent}
        self._company_tickers_url = company_tickers_url
        self._submissions_url = submissions_url
        self._timeout = timeout
        self._transport = transport

    async def _get_json(self, url: str) -> Any:
        """GET a JSON document, converting every failure into UpstreamError."""
        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as exc:
            logger.warning("Upstream request to %s failed: %s", url, exc)
            raise UpstreamError(f"Failed to fetch {url}") from exc
        except ValueError as exc:
            logger.warning("Upstream response from %s is not valid JSON", url)
            raise UpstreamError(f"Invalid JSON from {url}") from exc

    async def get_company_index(self) -> list[CompanyRecord]:
        """Download and parse the full company index, in listing order."""
        payload = await self._get_json(self._company_tickers_url)
        return parse_company_index(payload)

    async def lookup_company(self, query: str) -> CompanyRecord:
        """Resolve a company name or ticker to its index entry."""
        if not query:
            raise InvalidRequestError("Company name is required")

        entries = await self.get_company_index()
        company = resolve_company(query, entries)
        if company is None:
            raise CompanyNotFoundError(
                "Please check the company name or ticker symbol and try again"
            )
        logger.info("Resolved %r to %s (%s)", query, company.ticker, company.identifier)
        return company

    async def get_recent_filings(self, identifier: str) -> list[FilingRecord]:
        """Fetch a company's recent filings, most recent first as returned upstream."""
        cik = normalize_identifier(identifier)
        payload = await self._get_json(self._submissions_url.format(cik=cik))
        filings = build_filing_records(payload, identifier=cik)
        logger.info("Fetched %d recent filings for CIK %s", len(filings), cik)
        return filings
