"""Tests for reshaping submissions payloads and building document URLs."""

from __future__ import annotations

from datetime import date

import pytest

from filing_search.models import FilingRecord, UpstreamError
from filing_search.sec.submissions import build_filing_records, document_url


class TestBuildFilingRecords:
    def test_zips_parallel_arrays_in_upstream_order(self, submissions):
        filings = build_filing_records(submissions, identifier="0000320193")
        assert [f.accession_id for f in filings] == [
            "0000320193-24-000123",
            "0000320193-24-000081",
            "0000320193-23-000106",
        ]
        first = filings[0]
        assert first.form_type == "10-K"
        assert first.filing_date == date(2024, 11, 1)
        assert first.description == "aapl-20240928.htm"
        assert first.company_identifier == "0000320193"

    def test_empty_recent_arrays(self):
        payload = {"filings": {"recent": {
            "form": [], "filingDate": [], "accessionNumber": [], "primaryDocument": [],
        }}}
        assert build_filing_records(payload, identifier="0000000001") == []

    def test_missing_recent_section(self):
        with pytest.raises(UpstreamError):
            build_filing_records({"filings": {}}, identifier="0000320193")

    def test_unequal_array_lengths(self, submissions):
        submissions["filings"]["recent"]["form"].pop()
        with pytest.raises(UpstreamError):
            build_filing_records(submissions, identifier="0000320193")

    def test_bad_filing_date(self, submissions):
        submissions["filings"]["recent"]["filingDate"][1] = "08/02/2024"
        with pytest.raises(UpstreamError):
            build_filing_records(submissions, identifier="0000320193")


class TestDocumentUrl:
    def test_index_page_url(self):
        filing = FilingRecord(
            form_type="10-K",
            filing_date=date(2023, 11, 3),
            accession_id="0000320193-23-000106",
            description="aapl-20230930.htm",
            company_identifier="320193",
        )
        assert document_url(filing) == (
            "https://www.sec.gov/Archives/edgar/data/0000320193/"
            "000032019323000106/0000320193-23-000106-index.html"
        )
