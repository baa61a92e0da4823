"""Immutable search page state and the single update function that advances it."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from filing_search.filters import ALL_FORMS, parse_date_input
from filing_search.models import CompanyRecord, FilingRecord, SearchFilterCriteria


class SearchState(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str = ""
    form_type: str = ALL_FORMS
    start_date: str = ""  # raw YYYY-MM-DD input, blank for no bound
    end_date: str = ""
    loading: bool = False
    error: str = ""
    company_record: CompanyRecord | None = None
    filings: tuple[FilingRecord, ...] = ()

    @property
    def can_submit(self) -> bool:
        return not self.loading and self.company != ""

    def criteria(self) -> SearchFilterCriteria:
        """Filter criteria from the current inputs. Raises InvalidRequestError on bad dates."""
        return SearchFilterCriteria(
            start_date=parse_date_input(self.start_date),
            end_date=parse_date_input(self.end_date),
            form_type=self.form_type or ALL_FORMS,
        )


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

class Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class CompanyChanged(Action):
    value: str


class FormTypeChanged(Action):
    value: str


class StartDateChanged(Action):
    value: str


class EndDateChanged(Action):
    value: str


class SearchStarted(Action):
    pass


class SearchSucceeded(Action):
    company: CompanyRecord
    filings: tuple[FilingRecord, ...]


class SearchFailed(Action):
    message: str


def reduce(state: SearchState, action: Action) -> SearchState:
    """Return the state that follows ``action``; ``state`` itself is never modified."""
    if isinstance(action, CompanyChanged):
        return state.model_copy(update={"company": action.value})
    if isinstance(action, FormTypeChanged):
        return state.model_copy(update={"form_type": action.value or ALL_FORMS})
    if isinstance(action, StartDateChanged):
        return state.model_copy(update={"start_date": action.value})
    if isinstance(action, EndDateChanged):
        return state.model_copy(update={"end_date": action.value})
    if isinstance(action, SearchStarted):
        # Prior results are dropped so they never show next to a pending search
        return state.model_copy(update={
            "loading": True,
            "error": "",
            "company_record": None,
            "filings": (),
        })
    if isinstance(action, SearchSucceeded):
        return state.model_copy(update={
            "loading": False,
            "error": "",
            "company_record": action.company,
            "filings": tuple(action.filings),
        })
    if isinstance(action, SearchFailed):
        return state.model_copy(update={
            "loading": False,
            "error": action.message,
            "company_record": None,
            "filings": (),
        })
    raise TypeError(f"Unknown action: {type(action).__name__}")
