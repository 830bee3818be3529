"""
Reflex application entry point for the PayBridge UI.

This module initializes the Reflex app and registers every route.
"""

import reflex as rx

from paybridge_ui.lib import logs
from paybridge_ui.pages import dashboard, invoice, landing, login, success
from paybridge_ui.settings import get_settings
from paybridge_ui.state import APP_TITLE

LOG = logs.logger(__file__)

_SETTINGS = get_settings()
LOG.info(
    "Backend: %s (%s), provider: %s",
    _SETTINGS.backend,
    _SETTINGS.api_base_url,
    _SETTINGS.payment_provider,
)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&family=Fira+Code:wght@400;500&display=swap"


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(landing.landing_page, route=landing.ROUTE, title=APP_TITLE)
app.add_page(
    login.login_page,
    route=login.ROUTE,
    title=f"Admin Login | {APP_TITLE}",
)
app.add_page(
    dashboard.dashboard_page,
    route=dashboard.ROUTE,
    title=f"Dashboard | {APP_TITLE}",
    on_load=dashboard.DashboardState.on_load,
)
app.add_page(
    invoice.invoice_page,
    route=invoice.ROUTE,
    title=f"Invoice | {APP_TITLE}",
    on_load=[
        invoice.InvoicePageState.load_invoice,
        invoice.InvoicePageState.check_script,
    ],
)
app.add_page(
    success.success_page,
    route=success.ROUTE,
    title=f"Payment Successful | {APP_TITLE}",
    on_load=success.SuccessState.on_load,
)


def main() -> None:
    """Entrypoint used via `paybridge_ui` once the package is installed."""
    # Note: In production, use `reflex run` instead
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(_SETTINGS.app_port)]
    )


if __name__ == "__main__":
    main()
