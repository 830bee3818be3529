"""
Admin dashboard (/admin/dashboard).

Create invoices, copy payer links, delete single invoices and clear the
whole history. Destructive actions ask for confirmation in the browser
before anything is sent.
"""

import asyncio

import reflex as rx

from paybridge_ui.components.invoice_card import invoice_row
from paybridge_ui.components.layout import page_shell, spinner
from paybridge_ui.lib import logs
from paybridge_ui.models.invoice import CURRENCY, InvoiceDraft
from paybridge_ui.models.reflex_models import InvoiceModel, to_invoice_model
from paybridge_ui.services.dashboard import (
    CLEAR_PROMPT,
    DELETE_PROMPT,
    InvoiceDashboard,
    can_clear,
    confirm_script,
)
from paybridge_ui.settings import get_settings
from paybridge_ui.state import AdminSessionState

LOG = logs.logger(__file__)

ROUTE = "/admin/dashboard"
COPIED_RESET_SECONDS = 2.0


class DashboardState(rx.State):
    """State for the admin dashboard."""

    invoices: list[InvoiceModel] = []
    is_loading: bool = True
    error: str = ""

    client_name: str = ""
    description: str = ""
    amount: str = ""
    wallet_address: str = ""
    is_creating: bool = False
    form_error: str = ""
    new_invoice_link: str = ""

    copied_link: str = ""
    pending_delete_id: int = 0

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and not self.error and len(self.invoices) == 0

    @rx.var
    def clear_enabled(self) -> bool:
        return can_clear(len(self.invoices), self.is_loading)

    @rx.var
    def result_summary(self) -> str:
        """Summary line above the invoice list."""
        count = len(self.invoices)
        noun = "invoice" if count == 1 else "invoices"
        paid = len([invoice for invoice in self.invoices if invoice.is_paid])
        return f"{count} {noun} ({paid} paid)"

    @rx.event
    def set_client_name(self, value: str):
        self.client_name = value

    @rx.event
    def set_description(self, value: str):
        self.description = value

    @rx.event
    def set_amount(self, value: str):
        self.amount = value

    @rx.event
    def set_wallet_address(self, value: str):
        self.wallet_address = value

    @rx.event
    async def on_load(self):
        """Fetch the invoice list when the page opens."""
        self.is_loading = True
        self.error = ""
        yield
        dashboard = await self._dashboard()
        await dashboard.refresh()
        self._apply(dashboard)

    @rx.event
    async def create_invoice(self):
        """Validate the form and create an invoice."""
        self.is_creating = True
        self.form_error = ""
        self.new_invoice_link = ""
        yield
        dashboard = await self._dashboard()
        dashboard.draft = InvoiceDraft(
            client_name=self.client_name,
            description=self.description,
            amount=self.amount,
            wallet_address=self.wallet_address,
        )
        try:
            if await dashboard.create():
                LOG.info("Created invoice: %s", dashboard.new_invoice_link)
                self.client_name = ""
                self.description = ""
                self.amount = ""
                self.wallet_address = ""
                self._apply(dashboard)
            self.form_error = dashboard.form_error
            self.new_invoice_link = dashboard.new_invoice_link
        finally:
            self.is_creating = False

    @rx.event
    def request_delete(self, row_id: int):
        """Ask the admin to confirm deleting one invoice."""
        self.pending_delete_id = row_id
        return rx.call_script(
            confirm_script(DELETE_PROMPT),
            callback=DashboardState.on_delete_confirmed,
        )

    @rx.event
    async def on_delete_confirmed(self, confirmed: bool):
        row_id = self.pending_delete_id
        self.pending_delete_id = 0
        if not confirmed or not row_id:
            return
        dashboard = await self._dashboard()
        if await dashboard.delete(row_id):
            LOG.info("Deleted invoice row %s", row_id)
            self._apply(dashboard)
            return
        return rx.window_alert(dashboard.alert)

    @rx.event
    def request_clear(self):
        """Ask the admin to confirm clearing all history."""
        return rx.call_script(
            confirm_script(CLEAR_PROMPT),
            callback=DashboardState.on_clear_confirmed,
        )

    @rx.event
    async def on_clear_confirmed(self, confirmed: bool):
        if not confirmed:
            return
        dashboard = await self._dashboard()
        if await dashboard.clear():
            LOG.info("Cleared invoice history")
            self._apply(dashboard)
            return
        return rx.window_alert(dashboard.alert)

    @rx.event
    def copy_link(self, link: str):
        """Copy a payer link and flag it as copied for a moment."""
        self.copied_link = link
        return [rx.set_clipboard(link), DashboardState.reset_copied(link)]

    @rx.event(background=True)
    async def reset_copied(self, link: str):
        await asyncio.sleep(COPIED_RESET_SECONDS)
        async with self:
            if self.copied_link == link:
                self.copied_link = ""

    async def _dashboard(self) -> InvoiceDashboard:
        session = await self.get_state(AdminSessionState)
        return InvoiceDashboard(client=session._backend_client())

    def _apply(self, dashboard: InvoiceDashboard) -> None:
        """Copy the dashboard's list and status into frontend vars."""
        settings = get_settings()
        self.invoices = [
            to_invoice_model(invoice, settings.api_base_url, settings.frontend_url)
            for invoice in dashboard.invoices
        ]
        self.error = dashboard.error
        self.is_loading = dashboard.is_loading


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(rx.text(label, class_name="label"), control, class_name="form-field")


def create_form() -> rx.Component:
    """Build the create-invoice form."""
    return rx.box(
        rx.heading("Create Invoice", size="4", as_="h2"),
        _field(
            "Client Name",
            rx.input(
                value=DashboardState.client_name,
                on_change=DashboardState.set_client_name,
                placeholder="Acme Corp",
            ),
        ),
        _field(
            "Description",
            rx.text_area(
                value=DashboardState.description,
                on_change=DashboardState.set_description,
                placeholder="Services rendered",
            ),
        ),
        _field(
            f"Amount ({CURRENCY})",
            rx.input(
                value=DashboardState.amount,
                on_change=DashboardState.set_amount,
                placeholder="0.00",
                input_mode="decimal",
            ),
        ),
        _field(
            "Wallet Address",
            rx.input(
                value=DashboardState.wallet_address,
                on_change=DashboardState.set_wallet_address,
                placeholder="0x...",
            ),
        ),
        rx.cond(
            DashboardState.form_error != "",
            rx.text(DashboardState.form_error, class_name="form-error"),
        ),
        rx.button(
            rx.cond(DashboardState.is_creating, "Creating...", "Create Invoice"),
            on_click=DashboardState.create_invoice,
            disabled=DashboardState.is_creating,
            class_name="primary-button",
            width="100%",
        ),
        rx.cond(
            DashboardState.new_invoice_link != "",
            rx.box(
                rx.text("Invoice created. Share this link:", class_name="label"),
                rx.hstack(
                    rx.link(
                        DashboardState.new_invoice_link,
                        href=DashboardState.new_invoice_link,
                        is_external=True,
                        class_name="mono",
                    ),
                    rx.button(
                        rx.icon("copy", size=16),
                        on_click=DashboardState.copy_link(DashboardState.new_invoice_link),
                        variant="soft",
                    ),
                    spacing="2",
                    align="center",
                ),
                class_name="notice success",
            ),
        ),
        class_name="card form-card",
    )


def invoice_table() -> rx.Component:
    """Build the invoice list with its clear-all action."""
    return rx.box(
        rx.hstack(
            rx.heading("Invoices", size="4", as_="h2"),
            rx.text(DashboardState.result_summary, class_name="muted"),
            rx.spacer(),
            rx.button(
                rx.icon("trash", size=16),
                "Clear History",
                on_click=DashboardState.request_clear,
                disabled=~DashboardState.clear_enabled,
                color_scheme="red",
                variant="outline",
            ),
            align="center",
            width="100%",
        ),
        rx.cond(
            DashboardState.is_loading,
            spinner("Loading invoices..."),
            rx.cond(
                DashboardState.error != "",
                rx.text(DashboardState.error, class_name="form-error"),
                rx.cond(
                    DashboardState.is_empty,
                    rx.text("No invoices yet.", class_name="muted empty-state"),
                    rx.table.root(
                        rx.table.header(
                            rx.table.row(
                                rx.table.column_header_cell("Invoice"),
                                rx.table.column_header_cell("Client"),
                                rx.table.column_header_cell("Amount"),
                                rx.table.column_header_cell("Status"),
                                rx.table.column_header_cell("Created"),
                                rx.table.column_header_cell("Actions"),
                            )
                        ),
                        rx.table.body(
                            rx.foreach(
                                DashboardState.invoices,
                                lambda invoice: invoice_row(
                                    invoice,
                                    DashboardState.copied_link,
                                    DashboardState.copy_link,
                                    DashboardState.request_delete,
                                ),
                            )
                        ),
                        width="100%",
                    ),
                ),
            ),
        ),
        class_name="card list-card",
    )


def dashboard_page() -> rx.Component:
    """Build the admin dashboard."""
    return page_shell(
        rx.box(
            rx.heading("Invoice Dashboard", size="6", as_="h1"),
            rx.text("Create and manage payment links", class_name="muted"),
            class_name="page-header",
        ),
        rx.box(create_form(), invoice_table(), class_name="dashboard-grid"),
        width="wide",
    )
