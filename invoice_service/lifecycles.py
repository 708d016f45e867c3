"""Application lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from .core.config import get_settings
from .core.logging import get_logger
from .repositories.orders import HttpOrderRepository, InMemoryOrderRepository, OrderRepository
from .services.invoice_service import InvoiceService

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("application_startup", env=settings.app_env)

    http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.orders_api_timeout))
    app.state.http_client = http_client

    orders: OrderRepository
    if settings.orders_api_url:
        orders = HttpOrderRepository(settings.orders_api_url, http_client, settings.orders_api_timeout)
    else:
        logger.warning("orders_api_url_unset", repository="in_memory")
        orders = InMemoryOrderRepository()

    app.state.order_repository = orders
    app.state.invoice_service = InvoiceService(
        orders,
        company=settings.company,
        invoice_prefix=settings.invoice_prefix,
        currency_unit=settings.currency_unit,
    )

    try:
        yield
    finally:
        logger.info("application_shutdown")
        await http_client.aclose()
