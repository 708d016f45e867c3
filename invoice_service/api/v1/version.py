"""Version metadata endpoint."""

from fastapi import APIRouter, Depends

from ...core.config import Settings, get_settings


router = APIRouter()


@router.get("/version")
async def version(settings: Settings = Depends(get_settings)) -> dict:
    """Return service version and invoice defaults."""

    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "invoice_prefix": settings.invoice_prefix,
        "currency_unit": settings.currency_unit,
    }
