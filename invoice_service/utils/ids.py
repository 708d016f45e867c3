"""Invoice number and date formatting (KA-YYYY-YY/####)."""
from datetime import date


def format_invoice_number(prefix: str, seq: int, today: date) -> str:
    next_year = str(today.year + 1)[-2:]
    return f"{prefix}-{today.year}-{next_year}/{seq:04d}"


def format_invoice_date(value: date) -> str:
    return value.strftime("%d %b %Y")
