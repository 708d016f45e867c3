"""Discount extraction from the JSON variation blob stored on order lines."""

from __future__ import annotations

import json
import math
from typing import Optional

from ..core.logging import get_logger

logger = get_logger(__name__)


def extract_discount(variation_json: Optional[str]) -> float:
    """Return the ``discount`` recorded in a variation payload, or ``0.0``.

    A payload that is not JSON, not an object, or whose discount is not a
    finite number counts as no discount.
    """
    if not variation_json:
        return 0.0

    try:
        data = json.loads(variation_json)
    except (TypeError, json.JSONDecodeError) as exc:
        logger.warning("variation_parse_failed", error=str(exc))
        return 0.0

    if not isinstance(data, dict):
        logger.warning("variation_not_an_object", kind=type(data).__name__)
        return 0.0

    raw = data.get("discount")
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        logger.warning("variation_discount_invalid", discount=raw)
        return 0.0

    try:
        discount = float(raw)
    except (TypeError, ValueError):
        logger.warning("variation_discount_invalid", discount=raw)
        return 0.0

    if not math.isfinite(discount):
        logger.warning("variation_discount_invalid", discount=raw)
        return 0.0
    return discount
