"""
Invoice domain models and serialization helpers.

This module defines the invoice data structures that mirror the JSON the
PayBridge backend returns, plus the create-invoice draft the admin fills
in. The backend owns every invoice; these are transient read copies.

    Invoice          one invoice as returned by GET /invoices[/{id}]
    InvoiceStatus    UNPAID | PAID
    InvoiceDraft     the admin create form, validated before POST
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping

from benedict import benedict

from paybridge_ui.errors import ValidationError
from paybridge_ui.utils import format_currency, format_date, parse_amount, parse_date

CURRENCY = "USD"


class InvoiceStatus(str, Enum):
    """Payment status reported by the backend."""

    UNPAID = "UNPAID"
    PAID = "PAID"

    @classmethod
    def parse(cls, value: Any) -> "InvoiceStatus":
        """Map a raw status string to a member; anything unknown is UNPAID."""
        try:
            return cls(str(value or "").strip().upper())
        except ValueError:
            return cls.UNPAID


@dataclass(slots=True)
class Invoice:
    """Primary dataclass for invoices."""

    invoice_id: str
    client_name: str
    description: str
    amount: Decimal
    status: InvoiceStatus = InvoiceStatus.UNPAID
    id: int | None = None
    client_email: str | None = None
    client_phone: str | None = None
    wallet_address: str | None = None
    created_at: datetime | None = None

    @property
    def is_paid(self) -> bool:
        return self.status is InvoiceStatus.PAID

    def formatted_amount(self) -> str:
        """Return the amount as a two-decimal USD string."""
        return format_currency(self.amount, CURRENCY)

    def formatted_created_at(self) -> str:
        """Return the creation date formatted for display or the N/A label."""
        return format_date(self.created_at)


@dataclass(slots=True)
class InvoiceDraft:
    """
    The create-invoice form.

    All fields hold the raw text the admin typed. validate() performs the
    presence and positivity checks; the backend remains the final authority.
    """

    client_name: str = ""
    description: str = ""
    amount: str = ""
    wallet_address: str = ""

    def validate(self) -> Decimal:
        """
        Check the draft before it is sent.

        Returns:
            The parsed amount.

        Raises:
            ValidationError: If a field is empty or the amount is not positive.
        """
        if not all(
            value.strip()
            for value in (
                self.client_name,
                self.description,
                self.amount,
                self.wallet_address,
            )
        ):
            raise ValidationError("All fields are required.")
        amount = parse_amount(self.amount)
        if amount is None:
            raise ValidationError("Amount must be a number.")
        if amount <= 0:
            raise ValidationError("Amount must be greater than zero.")
        return amount

    def to_payload(self) -> dict:
        """Validate and return the POST /invoices request body."""
        amount = self.validate()
        return {
            "client_name": self.client_name.strip(),
            "description": self.description.strip(),
            "amount": float(amount),
            "wallet_address": self.wallet_address.strip(),
        }


def _optional_str(value: Any) -> str | None:
    text = str(value).strip() if value is not None else ""
    return text or None


def _decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def parse_invoice(payload: Mapping[str, Any]) -> Invoice:
    """
    Parse a backend invoice object into an Invoice dataclass.

    Uses benedict for safe key access so missing or null values fall back
    to defaults instead of raising KeyError. Keypaths are disabled, so keys
    containing dots are plain keys. Amounts may arrive as strings
    ("12.50") or numbers.

    Args:
        payload: The decoded JSON object.

    Returns:
        Populated Invoice. invoice_id is "" when the payload lacks one;
        callers decide whether that is an error.
    """
    b = benedict(dict(payload), keypath_separator=None)
    return Invoice(
        invoice_id=str(b.get("invoice_id") or ""),
        client_name=str(b.get("client_name") or ""),
        description=str(b.get("description") or ""),
        amount=_decimal(b.get("amount")),
        status=InvoiceStatus.parse(b.get("status")),
        id=_int_or_none(b.get("id")),
        client_email=_optional_str(b.get("client_email")),
        client_phone=_optional_str(b.get("client_phone")),
        wallet_address=_optional_str(b.get("wallet_address")),
        created_at=parse_date(b.get("created_at")),
    )

