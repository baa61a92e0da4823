"""FastAPI dependency helpers."""

from __future__ import annotations

from functools import lru_cache

from filing_search.config import Settings
from filing_search.sec.client import EdgarClient


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_edgar_client() -> EdgarClient:
    settings = get_settings()
    return EdgarClient(
        user_agent=settings.sec_user_agent,
        company_tickers_url=settings.company_tickers_url,
        submissions_url=settings.submissions_url,
        timeout=settings.request_timeout_seconds,
    )
