"""Invoice assembly from stored orders and caller supplied drafts."""

from __future__ import annotations

import itertools
from datetime import date
from typing import Callable, List, Optional, Sequence

from ..core.logging import get_logger
from ..models.invoice_models import (
    Buyer,
    CompanyInfo,
    InvoiceDraft,
    InvoiceMeta,
    InvoiceStatus,
    InvoiceUpdate,
    InvoiceView,
    LineItem,
    OrderAdditional,
)
from ..models.order_models import BillingAddress, Order
from ..repositories.orders import OrderRepository
from ..utils.ids import format_invoice_date, format_invoice_number
from .errors import InvoiceNotFoundError
from .totals import compute_totals
from .variation import extract_discount

logger = get_logger(__name__)

DEFAULT_TERMS = "Terms of Delivery"


def line_items_from_order(order: Order) -> List[LineItem]:
    return [
        LineItem(
            rate=line.unit_price,
            quantity=line.quantity,
            discount=extract_discount(line.variation_json),
            tax_rate_percent=line.tax_rate_percent,
            hsn_code=line.hsn_code or "",
            description=line.product_title or "Product",
        )
        for line in order.line_items
    ]


def additional_from_order(order: Order) -> OrderAdditional:
    """Order level charges; a stored discount amount becomes a negative adjustment."""
    return OrderAdditional(
        shipping=order.delivery_charge or 0.0,
        adjustment=-order.discount_amount if order.discount_amount else 0.0,
        round_off=0.0,
    )


def format_buyer_address(billing: Optional[BillingAddress]) -> str:
    if billing is None:
        return ""
    return (
        f"{billing.address or ''}, {billing.city or ''}, {billing.state or ''}, "
        f"{billing.country or ''} - {billing.pin or ''}"
    )


def buyer_from_order(order: Order) -> Buyer:
    customer = order.customer
    billing = order.billing_address
    name = (customer and customer.name) or (billing and billing.name) or "Guest Customer"
    return Buyer(
        name=name,
        address=format_buyer_address(billing),
        email=(customer and customer.email) or "",
        phone=(billing and billing.phone) or "",
    )


def apply_totals(
    view: InvoiceView,
    line_items: Sequence[LineItem],
    additional: OrderAdditional,
    currency_unit: str = "Rupees",
) -> InvoiceView:
    """Return a copy of ``view`` with items and every total derived afresh."""
    items, totals = compute_totals(line_items, additional, currency_unit)
    return view.model_copy(
        update={
            "items": items,
            "totals": totals,
            "additional": additional,
            "grand_total": totals.grand_total,
            "taxable_value": totals.taxable_value,
            "total_tax": totals.total_tax,
            "amount_in_words": totals.amount_in_words,
        }
    )


def recompute_invoice(view: InvoiceView, currency_unit: str = "Rupees") -> InvoiceView:
    # Items on an existing view already carry a cost and are kept as is.
    return apply_totals(view, view.items, view.additional, currency_unit)


def build_invoice_view(
    order: Order,
    company: CompanyInfo,
    invoice_number: str,
    invoice_date: str,
    currency_unit: str = "Rupees",
) -> InvoiceView:
    shipping = order.shipping_detail
    view = InvoiceView(
        company=company,
        invoice=InvoiceMeta(
            number=invoice_number,
            date=invoice_date,
            delivery_note=order.order_notes or "None",
            payment_terms=order.payment_method or "Direct",
            supplier_ref=f"Order #{order.id}",
            dispatched_through=(shipping and shipping.courier_name) or "",
        ),
        buyer=buyer_from_order(order),
        terms=order.order_notes or DEFAULT_TERMS,
        bank_details=company.bank_details,
        declaration=company.declaration,
        status=InvoiceStatus(
            payment=order.payment_status,
            order=order.order_status,
            shipping=shipping.status if shipping else None,
            tracking_id=shipping.tracking_id if shipping else None,
            tracking_url=shipping.tracking_url if shipping else None,
        ),
    )
    return apply_totals(view, line_items_from_order(order), additional_from_order(order), currency_unit)


class InvoiceService:
    """Builds invoice views for stored orders and ad-hoc drafts."""

    def __init__(
        self,
        orders: OrderRepository,
        company: CompanyInfo,
        invoice_prefix: str = "KA",
        currency_unit: str = "Rupees",
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.orders = orders
        self.company = company
        self.invoice_prefix = invoice_prefix
        self.currency_unit = currency_unit
        self._clock = clock
        self._draft_sequence = itertools.count(1)

    async def get_invoice(self, order_id: int) -> InvoiceView:
        order = await self.orders.get_order(order_id)
        if order is None:
            logger.warning("invoice_not_found", order_id=order_id)
            raise InvoiceNotFoundError(order_id)

        today = self._clock()
        view = build_invoice_view(
            order,
            self.company,
            invoice_number=format_invoice_number(self.invoice_prefix, order.id, today),
            invoice_date=format_invoice_date(order.order_date.date()),
            currency_unit=self.currency_unit,
        )
        logger.info(
            "invoice_built",
            order_id=order_id,
            items=len(view.items),
            grand_total=view.grand_total,
        )
        return view

    def generate_invoice(self, draft: InvoiceDraft) -> InvoiceView:
        today = self._clock()
        sequence = next(self._draft_sequence)
        view = InvoiceView(
            company=self.company,
            invoice=InvoiceMeta(
                number=format_invoice_number(self.invoice_prefix, sequence, today),
                date=format_invoice_date(today),
                delivery_note=draft.notes or "None",
                payment_terms=draft.payment_method or "Direct",
                supplier_ref="Draft Order",
            ),
            buyer=Buyer(
                name=draft.customer_name or "Draft Customer",
                gstin=draft.gstin,
                address=draft.address or "",
                email=draft.email or "",
                phone=draft.phone or "",
            ),
            terms=draft.terms or DEFAULT_TERMS,
            bank_details=self.company.bank_details,
            declaration=self.company.declaration,
        )
        view = apply_totals(view, draft.items, draft.additional, self.currency_unit)
        logger.info(
            "draft_invoice_generated",
            invoice_number=view.invoice.number,
            items=len(view.items),
            grand_total=view.grand_total,
        )
        return view

    async def update_invoice(self, order_id: int, update: InvoiceUpdate) -> InvoiceView:
        current = await self.get_invoice(order_id)

        changes = {
            "company": self.company,
            "bank_details": self.company.bank_details,
            "declaration": self.company.declaration,
        }
        if update.buyer is not None:
            changes["buyer"] = update.buyer
        if update.terms is not None:
            changes["terms"] = update.terms
        merged = current.model_copy(update=changes)

        if update.items is None and update.additional is None:
            return merged

        items = update.items if update.items is not None else current.items
        additional = update.additional if update.additional is not None else current.additional
        merged = apply_totals(merged, items, additional, self.currency_unit)
        logger.info(
            "invoice_updated",
            order_id=order_id,
            items=len(merged.items),
            grand_total=merged.grand_total,
        )
        return merged
