"""Order store adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

import httpx
from pydantic import ValidationError

from ..core.logging import get_logger
from ..models.order_models import Order
from ..services.errors import OrderServiceError

logger = get_logger(__name__)


class OrderRepository(ABC):
    """Read access to stored orders"""

    @abstractmethod
    async def get_order(self, order_id: int) -> Optional[Order]:
        """Return the order with its line items, or None when it does not exist"""
        raise NotImplementedError()


class InMemoryOrderRepository(OrderRepository):
    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: Dict[int, Order] = {order.id: order for order in orders}

    def add(self, order: Order) -> None:
        self._orders[order.id] = order

    async def get_order(self, order_id: int) -> Optional[Order]:
        return self._orders.get(order_id)


class HttpOrderRepository(OrderRepository):
    """Fetches orders from a remote orders API over HTTP"""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.timeout = timeout

    async def get_order(self, order_id: int) -> Optional[Order]:
        url = f"{self.base_url}/orders/{order_id}"
        try:
            response = await self.http_client.get(url, timeout=self.timeout)
        except httpx.HTTPError as exc:
            logger.error("order_fetch_failed", order_id=order_id, error=str(exc))
            raise OrderServiceError(f"Order service unreachable: {exc}") from exc

        if response.status_code == 404:
            return None

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("order_fetch_failed", order_id=order_id, status_code=response.status_code)
            raise OrderServiceError(
                f"Order service returned {response.status_code}"
            ) from exc

        try:
            return Order.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("order_payload_invalid", order_id=order_id, error=str(exc))
            raise OrderServiceError("Order service returned an invalid payload") from exc
