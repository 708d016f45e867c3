"""Order records as returned by the order store."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrderLineItem(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    product_title: Optional[str] = None
    hsn_code: Optional[str] = None
    tax_rate_percent: float = 0.0
    unit_price: float
    quantity: int
    variation_json: Optional[str] = None

    @field_validator("tax_rate_percent", mode="before")
    @classmethod
    def _default_tax(cls, value):
        if value is None:
            return 0.0
        return value


class BillingAddress(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    pin: Optional[str] = None
    phone: Optional[str] = None


class ShippingDetail(BaseModel):
    courier_name: Optional[str] = None
    status: Optional[str] = None
    tracking_id: Optional[str] = None
    tracking_url: Optional[str] = None


class Customer(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None


class Order(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    id: int
    order_date: datetime
    payment_method: Optional[str] = None
    order_status: Optional[str] = None
    payment_status: Optional[str] = None
    delivery_charge: Optional[float] = None
    discount_amount: Optional[float] = None
    order_notes: Optional[str] = None
    line_items: List[OrderLineItem] = Field(default_factory=list)
    billing_address: Optional[BillingAddress] = None
    shipping_detail: Optional[ShippingDetail] = None
    customer: Optional[Customer] = None
