"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from filing_search.config import Settings
from filing_search.sec.client import EdgarClient

TICKERS_URL = "https://www.sec.gov/files/company_tickers.json"
SUBMISSIONS_PREFIX = "https://data.sec.gov/submissions/"

COMPANY_INDEX = {
    "0": {"cik_str": 789019, "ticker": "MSFT", "title": "MICROSOFT CORP"},
    "1": {"cik_str": 320193, "ticker": "AAPL", "title": "Apple Inc."},
    "2": {"cik_str": 1418121, "ticker": "APLE", "title": "Apple Hospitality REIT, Inc."},
    "3": {"cik_str": 1045810, "ticker": "NVDA", "title": "NVIDIA CORP"},
}

SUBMISSIONS = {
    "cik": "320193",
    "name": "Apple Inc.",
    "filings": {
        "recent": {
            "accessionNumber": [
                "0000320193-24-000123",
                "0000320193-24-000081",
                "0000320193-23-000106",
            ],
            "filingDate": ["2024-11-01", "2024-08-02", "2023-11-03"],
            "form": ["10-K", "10-Q", "10-K"],
            "primaryDocument": [
                "aapl-20240928.htm",
                "aapl-20240629.htm",
                "aapl-20230930.htm",
            ],
        }
    },
}


@pytest.fixture
def settings() -> Settings:
    return Settings(sec_user_agent="Filing Search Tests test@example.com")


@pytest.fixture
def company_index() -> dict:
    return json.loads(json.dumps(COMPANY_INDEX))


@pytest.fixture
def submissions() -> dict:
    return json.loads(json.dumps(SUBMISSIONS))


@pytest.fixture
def sec_transport(company_index, submissions) -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport serving the fixture documents and recording requests."""

    def factory(requests: list[httpx.Request] | None = None, fail: bool = False) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            if fail:
                raise httpx.ConnectError("connection refused", request=request)
            url = str(request.url)
            if url == TICKERS_URL:
                return httpx.Response(200, json=company_index)
            if url == f"{SUBMISSIONS_PREFIX}CIK0000320193.json":
                return httpx.Response(200, json=submissions)
            return httpx.Response(404, json={"error": "not found"})

        return httpx.MockTransport(handler)

    return factory


@pytest.fixture
def edgar_client(settings, sec_transport) -> EdgarClient:
    return EdgarClient(user_agent=settings.sec_user_agent, transport=sec_transport())
