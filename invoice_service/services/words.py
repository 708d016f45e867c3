"""Amount-in-words rendering with Indian numbering (Crore, Lakh, Thousand)."""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Context, Decimal

from .errors import InvalidAmountError

_ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
]
_TEENS = [
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
]
_TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]

_CRORE = 10000000
_LAKH = 100000
_THOUSAND = 1000
_HUNDRED = 100

_WIDE = Context(prec=400)


def _two_digit_words(value: int) -> str:
    if value < 10:
        return _ONES[value]
    if value < 20:
        return _TEENS[value - 10]
    tens = _TENS[value // 10]
    ones = _ONES[value % 10]
    return f"{tens}-{ones}" if ones else tens


def integer_to_words(n: int) -> str:
    """Render an integer in English words using the Indian numbering system.

    >>> integer_to_words(1234)
    'One Thousand Two Hundred and Thirty-Four'
    >>> integer_to_words(10000000)
    'One Crore'
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"integer_to_words expects an int, got {type(n).__name__}")

    if n == 0:
        return "Zero"
    if n < 0:
        return f"Negative {integer_to_words(-n)}"

    parts: list[str] = []
    remaining = n

    # The crore quotient is unbounded, so it is rendered recursively.
    crore, remaining = divmod(remaining, _CRORE)
    if crore:
        parts.append(f"{integer_to_words(crore)} Crore")

    for divider, label in ((_LAKH, "Lakh"), (_THOUSAND, "Thousand")):
        current, remaining = divmod(remaining, divider)
        if current:
            parts.append(f"{_two_digit_words(current)} {label}")

    hundreds, remaining = divmod(remaining, _HUNDRED)
    if hundreds:
        parts.append(f"{_ONES[hundreds]} Hundred")

    if remaining:
        if parts:
            parts.append("and")
        parts.append(_two_digit_words(remaining))

    return " ".join(" ".join(parts).split())


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity (-2.5 -> -2)."""
    if not math.isfinite(value):
        raise InvalidAmountError(f"cannot round non-finite amount {value!r}")
    halved_up = _WIDE.add(Decimal(repr(float(value))), Decimal("0.5"))
    return int(halved_up.quantize(Decimal("1"), rounding=ROUND_FLOOR, context=_WIDE))


def amount_in_words(grand_total: float, currency_unit: str = "Rupees") -> str:
    return f"{currency_unit} {integer_to_words(round_half_up(grand_total))} Only"
