"""Totals computation helpers."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Iterable, List, Optional

from ..models.invoice_models import InvoiceItem, InvoiceTotals, LineItem, OrderAdditional
from .errors import InvalidAmountError
from .words import amount_in_words

_CENT = Decimal("0.01")
# Wide enough for every finite float to quantize to cents.
_WIDE = Context(prec=400)


def round2(value: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    The float is converted through its shortest repr so that ``1.005`` rounds
    to ``1.01`` the way it reads, not the way it is stored.
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidAmountError(f"cannot round non-finite amount {value!r}")
    return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP, context=_WIDE))


def compute_item(line_item: LineItem, index: int) -> InvoiceItem:
    """Derive cost, tax and amount for one line item at 0-based ``index``.

    Items that already carry a ``cost`` are treated as derived: their figures
    are kept as they are and only a missing serial number is filled in.
    Negative quantities or rates are not rejected and flow through the
    arithmetic unchanged.
    """
    serial_number = line_item.serial_number if line_item.serial_number is not None else index + 1

    if line_item.cost is not None:
        tax = line_item.tax if line_item.tax is not None else 0.0
        amount = line_item.amount if line_item.amount is not None else round2(line_item.cost + tax)
        data = line_item.model_dump()
        data.update(serial_number=serial_number, tax=tax, amount=amount)
        return InvoiceItem.model_validate(data)

    cost = round2(line_item.rate * line_item.quantity - line_item.discount)
    tax = round2(cost * line_item.tax_rate_percent / 100)
    amount = round2(cost + tax)

    data = line_item.model_dump()
    data.update(serial_number=serial_number, cost=cost, tax=tax, amount=amount)
    return InvoiceItem.model_validate(data)


def compute_items(line_items: Iterable[LineItem]) -> List[InvoiceItem]:
    return [compute_item(item, index) for index, item in enumerate(line_items)]


def compute_totals(
    line_items: Iterable[LineItem],
    additional: Optional[OrderAdditional] = None,
    currency_unit: str = "Rupees",
) -> tuple[List[InvoiceItem], InvoiceTotals]:
    """Derive every line item and aggregate the invoice totals.

    Each aggregate is summed from the derived item values and rounded once.
    An empty sequence is valid and produces all-zero totals.
    """
    additional = additional or OrderAdditional()
    items = compute_items(line_items)

    total_quantity = round2(sum(item.quantity for item in items))
    total_discount = round2(sum(item.discount for item in items))
    total_cost = round2(sum(item.cost for item in items))
    total_tax = round2(sum(item.tax for item in items))
    total_amount = round2(sum(item.amount for item in items))

    grand_total = round2(
        total_amount + additional.shipping + additional.adjustment + additional.round_off
    )

    totals = InvoiceTotals(
        total_quantity=total_quantity,
        total_discount=total_discount,
        total_cost=total_cost,
        total_tax=total_tax,
        total_amount=total_amount,
        grand_total=grand_total,
        taxable_value=total_cost,
        amount_in_words=amount_in_words(grand_total, currency_unit),
    )
    return items, totals
