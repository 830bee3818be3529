"""
Pages of the PayBridge UI.

Each module defines one route: its ROUTE constant, its page state (where
it needs one) and the function that builds the page.
"""

from paybridge_ui.pages.dashboard import DashboardState, dashboard_page
from paybridge_ui.pages.invoice import InvoicePageState, invoice_page
from paybridge_ui.pages.landing import landing_page
from paybridge_ui.pages.login import LoginState, login_page
from paybridge_ui.pages.success import SuccessState, success_page

__all__ = [
    "DashboardState",
    "InvoicePageState",
    "LoginState",
    "SuccessState",
    "dashboard_page",
    "invoice_page",
    "landing_page",
    "login_page",
    "success_page",
]
