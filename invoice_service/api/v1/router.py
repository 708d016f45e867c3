"""Versioned API router registration."""

from fastapi import APIRouter

from .health import router as health_router
from .invoices import router as invoices_router
from .totals import router as totals_router
from .version import router as version_router
from .words import router as words_router


def create_v1_router() -> APIRouter:
    """Create and configure v1 API router"""
    router = APIRouter(prefix="/v1")

    router.include_router(health_router, tags=["health"])
    router.include_router(version_router, tags=["health"])
    router.include_router(totals_router, tags=["totals"])
    router.include_router(words_router, tags=["totals"])
    router.include_router(invoices_router, tags=["invoices"])

    return router
