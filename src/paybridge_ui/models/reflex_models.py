"""
Reflex-compatible models for the PayBridge UI.

These models extend rx.Base so they can be stored on page states and
rendered with rx.foreach. Display strings are computed server-side.
"""

import reflex as rx

from paybridge_ui.models.invoice import Invoice
from paybridge_ui.utils import invoice_url, receipt_url


class InvoiceModel(rx.Base):
    """Display-ready invoice."""

    id: int = 0
    invoice_id: str = ""
    client_name: str = ""
    description: str = ""
    amount: str = "0.00"
    amount_display: str = ""
    status: str = "UNPAID"
    is_paid: bool = False
    client_email: str = ""
    client_phone: str = ""
    wallet_address: str = ""
    created_display: str = ""
    link: str = ""
    receipt_url: str = ""


def to_invoice_model(
    invoice: Invoice, api_base_url: str, frontend_url: str
) -> InvoiceModel:
    """
    Convert an Invoice into an InvoiceModel.

    Args:
        invoice: Parsed invoice.
        api_base_url: Backend base URL, for the receipt link.
        frontend_url: Public app URL, for the payer link.

    Returns:
        InvoiceModel instance.
    """
    return InvoiceModel(
        id=invoice.id or 0,
        invoice_id=invoice.invoice_id,
        client_name=invoice.client_name,
        description=invoice.description,
        amount=f"{invoice.amount:.2f}",
        amount_display=invoice.formatted_amount(),
        status=invoice.status.value,
        is_paid=invoice.is_paid,
        client_email=invoice.client_email or "",
        client_phone=invoice.client_phone or "",
        wallet_address=invoice.wallet_address or "",
        created_display=invoice.formatted_created_at(),
        link=invoice_url(frontend_url, invoice.invoice_id),
        receipt_url=receipt_url(api_base_url, invoice.invoice_id),
    )
