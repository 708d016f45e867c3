"""Totals computation endpoint."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...core.config import Settings, get_settings
from ...models.invoice_models import InvoiceItem, InvoiceTotals, LineItem, OrderAdditional
from ...services.totals import compute_totals

router = APIRouter()


class TotalsRequest(BaseModel):
    items: List[LineItem] = Field(default_factory=list)
    additional: OrderAdditional = Field(default_factory=OrderAdditional)


class TotalsResponse(BaseModel):
    items: List[InvoiceItem]
    totals: InvoiceTotals


@router.post("/compute/totals", response_model=TotalsResponse)
async def compute_invoice_totals(
    payload: TotalsRequest,
    settings: Settings = Depends(get_settings),
) -> TotalsResponse:
    items, totals = compute_totals(payload.items, payload.additional, settings.currency_unit)
    return TotalsResponse(items=items, totals=totals)
