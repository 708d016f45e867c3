import asyncio

import httpx
import pytest

from invoice_service.repositories.orders import HttpOrderRepository, InMemoryOrderRepository
from invoice_service.services.errors import OrderServiceError

from .conftest import make_order


def _fetch(handler, order_id):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            repository = HttpOrderRepository("http://orders.test/api/", client)
            return await repository.get_order(order_id)

    return asyncio.run(run())


def test_http_repository_parses_order():
    payload = make_order().model_dump(mode="json")
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json=payload)

    order = _fetch(handler, 42)

    assert seen == ["http://orders.test/api/orders/42"]
    assert order.id == 42
    assert len(order.line_items) == 2
    assert order.line_items[0].variation_json == '{"size": "L", "discount": 20}'


def test_http_repository_missing_order():
    assert _fetch(lambda request: httpx.Response(404), 5) is None


def test_http_repository_server_error():
    with pytest.raises(OrderServiceError):
        _fetch(lambda request: httpx.Response(500, text="boom"), 5)


def test_http_repository_invalid_payload():
    with pytest.raises(OrderServiceError):
        _fetch(lambda request: httpx.Response(200, json={"id": "not-a-number"}), 5)


def test_http_repository_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(OrderServiceError):
        _fetch(handler, 5)


def test_in_memory_repository():
    repository = InMemoryOrderRepository([make_order(1)])
    repository.add(make_order(2))

    assert asyncio.run(repository.get_order(1)).id == 1
    assert asyncio.run(repository.get_order(2)).id == 2
    assert asyncio.run(repository.get_order(3)) is None
