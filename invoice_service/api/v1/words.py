"""Amount in words endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from ...core.config import Settings, get_settings
from ...services.words import amount_in_words, integer_to_words, round_half_up

router = APIRouter()


class AmountInWordsResponse(BaseModel):
    amount: float
    rounded: int
    words: str
    amount_in_words: str


@router.get("/amount-in-words", response_model=AmountInWordsResponse)
async def render_amount_in_words(
    amount: float = Query(..., allow_inf_nan=False),
    settings: Settings = Depends(get_settings),
) -> AmountInWordsResponse:
    rounded = round_half_up(amount)
    return AmountInWordsResponse(
        amount=amount,
        rounded=rounded,
        words=integer_to_words(rounded),
        amount_in_words=amount_in_words(amount, settings.currency_unit),
    )
