"""GET /cik-lookup: resolve a company name or ticker to its CIK."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from filing_search.dependencies import get_edgar_client
from filing_search.models import (
    CompanyLookupResponse,
    CompanyNotFoundError,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.get(
    "/cik-lookup",
    response_model=CompanyLookupResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def cik_lookup(name: str | None = None):
    """Find the first company whose name contains ``name`` or whose ticker equals it."""
    if not name:
        return _error(400, "Company name is required")

    client = get_edgar_client()
    try:
        company = await client.lookup_company(name)
    except CompanyNotFoundError as exc:
        return _error(404, exc.error, str(exc))
    except Exception:
        logger.exception("Company lookup for %r failed", name)
        return _error(500, "Server error", "An unexpected error occurred")

    return CompanyLookupResponse.from_record(company)
