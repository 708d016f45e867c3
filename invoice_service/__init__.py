"""Invoice totals and amount-in-words service."""

from .services.totals import compute_item, compute_totals
from .services.words import amount_in_words, integer_to_words

__all__ = ["amount_in_words", "compute_item", "compute_totals", "integer_to_words"]
