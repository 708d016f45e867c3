"""Invoice retrieval, draft generation and update endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...api.deps import get_invoice_service
from ...api.errors import APIError
from ...models.invoice_models import InvoiceDraft, InvoiceUpdate, InvoiceView
from ...services.errors import InvoiceNotFoundError, OrderServiceError
from ...services.invoice_service import InvoiceService

router = APIRouter()


def _translate(exc: Exception) -> APIError:
    if isinstance(exc, InvoiceNotFoundError):
        return APIError(
            code="INVOICE_NOT_FOUND",
            message=str(exc),
            status_code=status.HTTP_404_NOT_FOUND,
            details={"order_id": exc.order_id},
        )
    return APIError(
        code="ORDER_SERVICE_ERROR",
        message=str(exc),
        status_code=status.HTTP_502_BAD_GATEWAY,
    )


@router.get("/invoices/{order_id}", response_model=InvoiceView)
async def get_invoice(
    order_id: int,
    invoice_service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceView:
    try:
        return await invoice_service.get_invoice(order_id)
    except (InvoiceNotFoundError, OrderServiceError) as exc:
        raise _translate(exc) from exc


@router.post("/invoices", response_model=InvoiceView)
async def generate_invoice(
    draft: InvoiceDraft,
    invoice_service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceView:
    return invoice_service.generate_invoice(draft)


@router.patch("/invoices/{order_id}", response_model=InvoiceView)
async def update_invoice(
    order_id: int,
    update: InvoiceUpdate,
    invoice_service: InvoiceService = Depends(get_invoice_service),
) -> InvoiceView:
    try:
        return await invoice_service.update_invoice(order_id, update)
    except (InvoiceNotFoundError, OrderServiceError) as exc:
        raise _translate(exc) from exc
