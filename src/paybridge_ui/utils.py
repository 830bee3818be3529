"""
Utility functions for invoice formatting and parsing.

Provides helpers for:
- Currency formatting
- Amount parsing from form input
- Date formatting for list views
- Building shareable invoice and receipt URLs
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from urllib.parse import quote


def format_currency(value: Decimal | float, currency: str = "USD") -> str:
    """
    Format a currency amount with two decimals and the currency code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'USD').

    Returns:
        Formatted string like 'USD 1,234.56'.
    """
    return f"{currency} {value:,.2f}"


def parse_amount(text: str | None) -> Decimal | None:
    """
    Parse an amount typed into a form field.

    Accepts plain numbers with an optional thousands separator and an
    optional leading '$'.

    Args:
        text: Raw input text.

    Returns:
        Decimal value, or None when the text is empty or not a finite number.
    """
    if text is None:
        return None
    cleaned = text.strip().lstrip("$").replace(",", "")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse a backend timestamp into a datetime.

    Args:
        date_str: ISO 8601 string (a trailing 'Z' is accepted) or m/d/Y date.

    Returns:
        datetime object if parsing succeeds, None otherwise.
    """
    if date_str:
        date_str = str(date_str).strip()
    if not date_str:
        return None

    if date_str.endswith("Z"):
        date_str = date_str[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        return datetime.strptime(date_str, "%m/%d/%Y")
    except ValueError:
        pass

    return None


def format_date(value: datetime | None) -> str:
    """Format a datetime for display, or the N/A label."""
    if not value:
        return "N/A"
    return value.strftime("%b %d, %Y")


def path_segment(value: str | int) -> str:
    """Percent-encode a value for use as one URL path segment."""
    return quote(str(value), safe="")


def invoice_url(frontend_url: str, invoice_id: str) -> str:
    """Return the shareable payer link for an invoice."""
    return f"{frontend_url.rstrip('/')}/invoice/{path_segment(invoice_id)}"


def receipt_url(api_base_url: str, invoice_id: str) -> str:
    """Return the backend receipt download URL for an invoice."""
    return f"{api_base_url.rstrip('/')}/invoices/{path_segment(invoice_id)}/receipt"
