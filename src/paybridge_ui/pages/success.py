"""
Payment success page (/success/[invoice_id]).

Reached after the provider widget reported success. The backend status is
fetched for display only; the webhook may not have arrived yet, in which
case the invoice still reads UNPAID and a short note says so.
"""

import reflex as rx

from paybridge_ui.components.layout import page_shell
from paybridge_ui.errors import ApiError
from paybridge_ui.lib import logs
from paybridge_ui.services import get_backend_client

LOG = logs.logger(__file__)

ROUTE = "/success/[invoice_id]"


class SuccessState(rx.State):
    """State for the success page."""

    current_invoice_id: str = ""
    backend_status: str = ""
    amount_display: str = ""
    is_checking: bool = False

    @rx.var
    def confirmed(self) -> bool:
        return self.backend_status == "PAID"

    @rx.event
    async def on_load(self):
        """Look up the invoice status without blocking the page."""
        self.current_invoice_id = self.invoice_id
        self.backend_status = ""
        self.amount_display = ""
        self.is_checking = True
        yield
        try:
            invoice = await get_backend_client().get_invoice(self.current_invoice_id)
        except ApiError as exc:
            LOG.warning(
                "Status lookup for %s failed: %s", self.current_invoice_id, exc
            )
        else:
            self.backend_status = invoice.status.value
            self.amount_display = invoice.formatted_amount()
        finally:
            self.is_checking = False

    @rx.event
    def download_receipt(self):
        """Open the backend receipt for this invoice in a new tab."""
        return rx.redirect(
            get_backend_client().receipt_url(self.current_invoice_id),
            is_external=True,
        )

    @rx.event
    def go_home(self):
        return rx.redirect("/")


def success_page() -> rx.Component:
    """Build the payment success page."""
    return page_shell(
        rx.box(
            rx.icon("circle-check", class_name="success-icon", size=56),
            rx.heading("Payment Successful", size="6", as_="h1"),
            rx.text(
                "Thank you! Your payment for invoice ",
                rx.text.strong(SuccessState.current_invoice_id),
                " has been received.",
                class_name="muted",
            ),
            rx.cond(
                SuccessState.amount_display != "",
                rx.text(SuccessState.amount_display, class_name="amount"),
            ),
            rx.cond(
                SuccessState.is_checking,
                rx.text("Checking invoice status...", class_name="muted small"),
                rx.cond(
                    SuccessState.confirmed,
                    rx.text("Status: PAID", class_name="badge success"),
                    rx.text(
                        "Confirmation from the payment provider may take a few moments.",
                        class_name="muted small",
                    ),
                ),
            ),
            rx.hstack(
                rx.button(
                    rx.icon("download", size=16),
                    "Download Receipt",
                    on_click=SuccessState.download_receipt,
                    class_name="primary-button",
                ),
                rx.button(
                    "Back to Home",
                    on_click=SuccessState.go_home,
                    variant="outline",
                ),
                spacing="3",
                justify="center",
            ),
            class_name="card success-card centered",
        ),
    )
