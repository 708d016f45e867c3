"""Request-scoped dependencies"""
from fastapi import Request

from ..services.invoice_service import InvoiceService


def get_invoice_service(request: Request) -> InvoiceService:
    """Get invoice service from app state"""
    return request.app.state.invoice_service
