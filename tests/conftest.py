from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from invoice_service.core.config import get_settings
from invoice_service.main import create_app
from invoice_service.models.order_models import (
    BillingAddress,
    Customer,
    Order,
    OrderLineItem,
    ShippingDetail,
)


def make_order(order_id: int = 42) -> Order:
    return Order(
        id=order_id,
        order_date=datetime(2026, 10, 1, 10, 30),
        payment_method="UPI",
        order_status="placed",
        payment_status="paid",
        delivery_charge=40,
        discount_amount=10,
        order_notes=None,
        line_items=[
            OrderLineItem(
                product_title="Brass Diya",
                hsn_code="7418",
                tax_rate_percent=18,
                unit_price=100,
                quantity=2,
                variation_json='{"size": "L", "discount": 20}',
            ),
            OrderLineItem(
                product_title="Cotton Runner",
                hsn_code="6302",
                tax_rate_percent=5,
                unit_price=50,
                quantity=1,
                variation_json="{broken",
            ),
        ],
        billing_address=BillingAddress(
            name="Billing Name",
            address="12 MG Road",
            city="Mathura",
            state="Uttar Pradesh",
            country="India",
            pin="281001",
            phone="9999999999",
        ),
        shipping_detail=ShippingDetail(
            courier_name="BlueDart",
            status="shipped",
            tracking_id="BD123",
            tracking_url="https://track.example/BD123",
        ),
        customer=Customer(name="Asha Rao", email="asha@example.com"),
    )


@pytest.fixture()
def order() -> Order:
    return make_order()


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.delenv("ORDERS_API_URL", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
    get_settings.cache_clear()
    app = create_app()
    with TestClient(app) as client:
        client.app.state.order_repository.add(make_order())
        yield client
    get_settings.cache_clear()
