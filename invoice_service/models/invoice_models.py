"""Pydantic models for invoice line items, totals and the assembled view."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Money(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)


class LineItem(_Money):
    """One ordered product as handed to the totals engine.

    ``cost``, ``tax`` and ``amount`` are only present when the item was
    derived earlier; such items are never re-derived.
    """

    rate: float
    quantity: int
    discount: float = 0.0
    tax_rate_percent: float = 0.0
    hsn_code: Optional[str] = None
    description: Optional[str] = None
    serial_number: Optional[int] = None
    cost: Optional[float] = None
    tax: Optional[float] = None
    amount: Optional[float] = None


class InvoiceItem(LineItem):
    serial_number: int
    cost: float
    tax: float
    amount: float


class OrderAdditional(_Money):
    shipping: float = 0.0
    adjustment: float = 0.0
    round_off: float = 0.0


class InvoiceTotals(BaseModel):
    total_quantity: float = 0.0
    total_discount: float = 0.0
    total_cost: float = 0.0
    total_tax: float = 0.0
    total_amount: float = 0.0
    grand_total: float = 0.0
    taxable_value: float = 0.0
    amount_in_words: str = ""


class BankDetails(BaseModel):
    bank_name: Optional[str] = None
    account_no: Optional[str] = None
    ifsc: Optional[str] = None
    customer_id: Optional[str] = None
    branch: Optional[str] = None


class CompanyInfo(BaseModel):
    name: str
    gstin: Optional[str] = None
    gst: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    bank_details: BankDetails = Field(default_factory=BankDetails)
    declaration: Optional[str] = None


class InvoiceMeta(BaseModel):
    number: str
    date: str
    delivery_note: str = "None"
    payment_terms: str = "Direct"
    supplier_ref: str = ""
    dispatched_through: str = ""


class Buyer(BaseModel):
    name: str
    gstin: Optional[str] = None
    address: str = ""
    email: str = ""
    phone: str = ""


class InvoiceStatus(BaseModel):
    payment: Optional[str] = None
    order: Optional[str] = None
    shipping: Optional[str] = None
    tracking_id: Optional[str] = None
    tracking_url: Optional[str] = None


class InvoiceView(BaseModel):
    """Everything a renderer needs to print an invoice."""

    company: CompanyInfo
    invoice: InvoiceMeta
    buyer: Buyer
    terms: str = "Terms of Delivery"
    items: List[InvoiceItem] = Field(default_factory=list)
    totals: InvoiceTotals = Field(default_factory=InvoiceTotals)
    additional: OrderAdditional = Field(default_factory=OrderAdditional)
    grand_total: float = 0.0
    taxable_value: float = 0.0
    total_tax: float = 0.0
    amount_in_words: str = ""
    bank_details: BankDetails = Field(default_factory=BankDetails)
    declaration: Optional[str] = None
    status: Optional[InvoiceStatus] = None


class InvoiceDraft(_Money):
    """Caller supplied data for a draft invoice that has no stored order."""

    customer_name: Optional[str] = None
    gstin: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    payment_method: Optional[str] = None
    terms: Optional[str] = None
    items: List[LineItem] = Field(default_factory=list)
    additional: OrderAdditional = Field(default_factory=OrderAdditional)


class InvoiceUpdate(_Money):
    buyer: Optional[Buyer] = None
    terms: Optional[str] = None
    items: Optional[List[LineItem]] = None
    additional: Optional[OrderAdditional] = None
