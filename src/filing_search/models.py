"""Pydantic schemas and errors: companies, filings, filter criteria, responses."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

IDENTIFIER_WIDTH = 10


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FilingSearchError(Exception):
    """Base exception for filing search."""

    status_code = 500
    error = "Server error"


class InvalidRequestError(FilingSearchError):
    """Raised when the caller supplied missing or malformed input."""

    status_code = 400
    error = "Invalid request"


class CompanyNotFoundError(FilingSearchError):
    """Raised when no company in the index matches a query."""

    status_code = 404
    error = "Company not found"


class UpstreamError(FilingSearchError):
    """Raised when a public SEC endpoint is unreachable or returns bad data."""

    status_code = 500
    error = "Server error"


class CrossOriginRejectedError(FilingSearchError):
    """Raised when a request comes from an origin outside the allow-list."""

    status_code = 403
    error = "Not allowed by CORS"


def normalize_identifier(value: str | int) -> str:
    """Return the CIK zero-padded to its canonical 10-digit form."""
    text = str(value).strip()
    if not text.isdigit():
        raise InvalidRequestError(f"Invalid company identifier: {value!r}")
    return text.zfill(IDENTIFIER_WIDTH)


# ---------------------------------------------------------------------------
# Domain records
# ---------------------------------------------------------------------------

class CompanyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str
    display_name: str
    ticker: str

    @property
    def padded_identifier(self) -> str:
        return normalize_identifier(self.identifier)


class FilingRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    form_type: str
    filing_date: date
    accession_id: str
    description: str  # primary document file name
    company_identifier: str


class SearchFilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_date: date | None = None
    end_date: date | None = None
    form_type: str = "all"


# ---------------------------------------------------------------------------
# API response schemas
# ---------------------------------------------------------------------------

class CompanyLookupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    identifier: str
    company_name: str = Field(..., alias="companyName")
    ticker: str

    @classmethod
    def from_record(cls, record: CompanyRecord) -> CompanyLookupResponse:
        return cls(
            identifier=record.identifier,
            company_name=record.display_name,
            ticker=record.ticker,
        )


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
