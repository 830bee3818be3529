"""
Data models and serialization helpers for the PayBridge UI.

This package provides:
- Invoice domain models (Invoice, InvoiceStatus, InvoiceDraft)
- Backend response envelopes and UI preferences
- Reflex view models for rendering

The Reflex view models live in models.reflex_models and are imported
from there directly so the plain models stay usable without a UI.
"""

from paybridge_ui.models.common import (
    DARK_MODE_STORAGE_KEY,
    CreateInvoiceResult,
    LoginResult,
    MutationResult,
    Preferences,
)
from paybridge_ui.models.invoice import (
    CURRENCY,
    Invoice,
    InvoiceDraft,
    InvoiceStatus,
    parse_invoice,
)

__all__ = [
    "CURRENCY",
    "CreateInvoiceResult",
    "DARK_MODE_STORAGE_KEY",
    "Invoice",
    "InvoiceDraft",
    "InvoiceStatus",
    "LoginResult",
    "MutationResult",
    "Preferences",
    "parse_invoice",
]
