"""
Invoice display components.

invoice_details() renders the payer-facing summary of one invoice;
invoice_row() renders one line of the admin dashboard list. Both take
InvoiceModel vars so they work inside rx.foreach and rx.cond.
"""

import reflex as rx

from paybridge_ui.models.reflex_models import InvoiceModel


def status_badge(status, is_paid) -> rx.Component:
    """Build the PAID / UNPAID badge."""
    return rx.text(
        status,
        class_name=rx.cond(is_paid, "badge success", "badge warning"),
    )


def _info_block(label: str, *values: rx.Component, class_name: str = "") -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        *values,
        class_name=f"info-block {class_name}".strip(),
    )


def invoice_details(invoice: InvoiceModel) -> rx.Component:
    """
    Build the payer-facing invoice summary.

    Args:
        invoice: InvoiceModel var.

    Returns:
        Invoice ID, client contact, description, amount and status.
    """
    return rx.box(
        _info_block(
            "Invoice ID",
            rx.text(invoice.invoice_id, class_name="value mono"),
        ),
        _info_block(
            "Client",
            rx.text(invoice.client_name, class_name="value emphasize"),
            rx.cond(
                invoice.client_email != "",
                rx.text(invoice.client_email, class_name="muted"),
            ),
            rx.cond(
                invoice.client_phone != "",
                rx.text(invoice.client_phone, class_name="muted"),
            ),
        ),
        _info_block(
            "Description",
            rx.text(invoice.description, class_name="value"),
        ),
        _info_block(
            "Total Amount",
            rx.text(invoice.amount_display, class_name="amount"),
            class_name="amount-block",
        ),
        rx.box(
            rx.text("Payment Status", class_name="label"),
            status_badge(invoice.status, invoice.is_paid),
            class_name="status-row",
        ),
        class_name="invoice-details",
    )


def payment_completed() -> rx.Component:
    """Build the indicator shown instead of the pay control for PAID invoices."""
    return rx.box(
        rx.icon("circle-check", size=24),
        rx.text("Payment Completed", class_name="emphasize"),
        class_name="completed-banner",
    )


def invoice_row(
    invoice: InvoiceModel,
    copied_link,
    on_copy,
    on_delete,
) -> rx.Component:
    """
    Build one dashboard list row.

    Args:
        invoice: InvoiceModel var from rx.foreach.
        copied_link: State var holding the link copied most recently.
        on_copy: Handler called with the invoice link.
        on_delete: Handler called with the numeric row id.

    Returns:
        Row with id, client, amount, status, date and actions.
    """
    return rx.table.row(
        rx.table.cell(rx.text(invoice.invoice_id, class_name="mono")),
        rx.table.cell(invoice.client_name),
        rx.table.cell(invoice.amount_display),
        rx.table.cell(status_badge(invoice.status, invoice.is_paid)),
        rx.table.cell(invoice.created_display),
        rx.table.cell(
            rx.hstack(
                rx.button(
                    rx.cond(
                        copied_link == invoice.link,
                        rx.icon("check", size=16),
                        rx.icon("copy", size=16),
                    ),
                    on_click=on_copy(invoice.link),
                    variant="soft",
                    title="Copy invoice link",
                ),
                rx.cond(
                    invoice.is_paid,
                    rx.link(
                        rx.button(rx.icon("download", size=16), variant="soft"),
                        href=invoice.receipt_url,
                        is_external=True,
                        title="Download receipt",
                    ),
                ),
                rx.button(
                    rx.icon("trash-2", size=16),
                    on_click=on_delete(invoice.id),
                    color_scheme="red",
                    variant="soft",
                    title="Delete invoice",
                ),
                spacing="2",
            )
        ),
    )
