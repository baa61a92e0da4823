"""Aggregates all sub-routers."""
from fastapi import APIRouter

from filing_search.api.health import router as health_router
from filing_search.api.lookup import router as lookup_router
from filing_search.api.pages import router as pages_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(lookup_router, tags=["lookup"])
api_router.include_router(pages_router, tags=["pages"])
