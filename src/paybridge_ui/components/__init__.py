"""
Reusable Reflex UI components for the PayBridge UI.

This package provides modular, composable components:
- layout: page shell with the dark-mode toggle, spinner and error panel
- invoice_card: payer invoice summary, completed banner, dashboard rows

All components are pure functions that return Reflex components, which
keeps them easy to compose across pages.
"""

from paybridge_ui.components.invoice_card import (
    invoice_details,
    invoice_row,
    payment_completed,
    status_badge,
)
from paybridge_ui.components.layout import (
    dark_mode_toggle,
    error_panel,
    page_shell,
    spinner,
)

__all__ = [
    "dark_mode_toggle",
    "error_panel",
    "invoice_details",
    "invoice_row",
    "page_shell",
    "payment_completed",
    "spinner",
    "status_badge",
]
