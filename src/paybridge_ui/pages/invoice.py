"""
Payer invoice page (/invoice/[invoice_id]).

On load the page fetches the invoice and the provider public key, and in
parallel polls the browser for the provider's checkout script. The Pay
button launches the widget; its result drives PaymentFlow.
"""

import asyncio

import reflex as rx

from paybridge_ui.components.invoice_card import invoice_details, payment_completed
from paybridge_ui.components.layout import error_panel, page_shell, spinner
from paybridge_ui.errors import ScriptTimeoutError
from paybridge_ui.lib import logs
from paybridge_ui.models.reflex_models import InvoiceModel, to_invoice_model
from paybridge_ui.payments import CheckoutResult, PaymentOutcome, get_payment_provider
from paybridge_ui.payments.flow import (
    NOT_READY_MESSAGE,
    PaymentFlow,
    PaymentPhase,
    load_payment_context,
)
from paybridge_ui.payments.readiness import (
    ReadinessCheck,
    parse_readiness_answer,
    tagged_readiness_check,
)
from paybridge_ui.services import get_backend_client
from paybridge_ui.settings import get_settings
from paybridge_ui.utils import path_segment

LOG = logs.logger(__file__)

ROUTE = "/invoice/[invoice_id]"


class InvoicePageState(rx.State):
    """
    State for the payer invoice page.

    The PaymentFlow and ReadinessCheck live in backend-only vars; the
    frontend vars below mirror them after every change.
    """

    phase: str = PaymentPhase.LOADING.value
    invoice: InvoiceModel = InvoiceModel()
    error: str = ""
    provider_name: str = ""

    _flow: PaymentFlow | None = None
    _readiness: ReadinessCheck | None = None

    @rx.var
    def is_loading(self) -> bool:
        return self.phase == PaymentPhase.LOADING.value

    @rx.var
    def has_error(self) -> bool:
        return self.phase == PaymentPhase.ERROR.value

    @rx.var
    def is_processing(self) -> bool:
        return self.phase == PaymentPhase.PROCESSING.value

    @rx.event(background=True)
    async def load_invoice(self):
        """
        Start the flow for the invoice in the URL and fetch its data.

        Requests run outside the state lock so script checks are not held
        up. PaymentFlow.apply drops the result if the payer navigated to
        another invoice in the meantime.
        """
        settings = get_settings()
        provider = get_payment_provider()
        async with self:
            invoice_id = self.invoice_id
            self._flow = PaymentFlow(invoice_id=invoice_id)
            self._readiness = ReadinessCheck(
                invoice_id=invoice_id,
                interval=settings.script_poll_interval,
                max_attempts=settings.script_max_attempts,
            )
            self.provider_name = provider.display_name
            self.invoice = InvoiceModel()
            self._sync()

        LOG.info("Loading invoice %s", invoice_id)
        context = await load_payment_context(get_backend_client(), provider, invoice_id)

        async with self:
            if self._flow is None or not self._flow.apply(context):
                LOG.info("Discarding stale load for invoice %s", invoice_id)
                return
            if self._flow.invoice is not None:
                self.invoice = to_invoice_model(
                    self._flow.invoice, settings.api_base_url, settings.frontend_url
                )
            self._sync()

    @rx.event
    def check_script(self):
        """Start checking for the provider script for the invoice in the URL."""
        return self._check_script(self.invoice_id)

    @rx.event
    def check_script_again(self, invoice_id: str):
        return self._check_script(invoice_id)

    @rx.event
    def on_script_check(self, answer: dict):
        """Record one readiness answer and schedule the next check if needed."""
        invoice_id, ready = parse_readiness_answer(answer)
        if self._readiness is None or self._flow is None:
            # load_invoice has not created the flow yet
            return InvoicePageState.check_script_later(invoice_id)
        if not self._readiness.accepts(invoice_id):
            LOG.debug("Dropping script check for previous invoice %s", invoice_id)
            return
        try:
            done = self._readiness.record(ready)
        except ScriptTimeoutError as exc:
            LOG.error("Timed out waiting for the payment script: %s", exc)
            self._flow.script_failed(str(exc))
            self._sync()
            return
        if done:
            LOG.info("Payment script is ready.")
            self._flow.script_loaded()
            self._sync()
            return
        return InvoicePageState.check_script_later(invoice_id)

    @rx.event(background=True)
    async def check_script_later(self, invoice_id: str):
        """Wait one poll interval, then check again."""
        await asyncio.sleep(get_settings().script_poll_interval)
        return InvoicePageState.check_script_again(invoice_id)

    @rx.event
    def pay(self):
        """Launch the checkout widget if the flow is ready."""
        if self._flow is None:
            return rx.window_alert(NOT_READY_MESSAGE)
        provider = get_payment_provider()
        options = self._flow.begin(provider)
        self._sync()
        if options is None:
            if self._flow.message:
                return rx.window_alert(self._flow.message)
            return
        LOG.info("Launching %s checkout for %s", provider.name, self._flow.invoice_id)
        return rx.call_script(
            provider.launch_script(options),
            callback=InvoicePageState.on_checkout_result,
        )

    @rx.event
    def on_checkout_result(self, result: dict):
        """Apply the widget's report: navigate on success, reset otherwise."""
        if self._flow is None:
            return
        outcome = self._flow.resolve(
            get_payment_provider(), CheckoutResult.from_js(result)
        )
        self._sync()
        if outcome is PaymentOutcome.SUCCESS:
            return rx.redirect(f"/success/{path_segment(self._flow.invoice_id)}")
        if outcome is PaymentOutcome.FAILED:
            return rx.window_alert(self._flow.message)

    @rx.event
    def go_home(self):
        return rx.redirect("/")

    def _check_script(self, invoice_id: str):
        provider = get_payment_provider()
        return rx.call_script(
            tagged_readiness_check(provider.readiness_expression(), invoice_id),
            callback=InvoicePageState.on_script_check,
        )

    def _sync(self) -> None:
        """Mirror the flow into frontend vars."""
        flow = self._flow
        if flow is None:
            return
        self.phase = flow.phase.value
        self.error = flow.error


def _pay_button() -> rx.Component:
    return rx.button(
        rx.cond(
            InvoicePageState.is_processing,
            rx.hstack(rx.spinner(size="2"), rx.text("Processing..."), spacing="2"),
            rx.hstack(rx.icon("credit-card", size=18), rx.text("Proceed To Checkout"), spacing="2"),
        ),
        on_click=InvoicePageState.pay,
        disabled=InvoicePageState.is_processing,
        class_name="primary-button pay-button",
        width="100%",
    )


def _secure_notice() -> rx.Component:
    return rx.box(
        rx.icon("lock", size=18),
        rx.box(
            rx.text("Secure Payment", class_name="emphasize"),
            rx.text(
                "Your payment is processed securely via ",
                InvoicePageState.provider_name,
                ". Your card information is encrypted and never stored on our servers.",
                class_name="muted small",
            ),
        ),
        class_name="notice",
    )


def _ready_view() -> rx.Component:
    return rx.box(
        rx.box(
            rx.icon("file-text", class_name="title-icon", size=32),
            rx.heading("Invoice Details", size="6", as_="h1"),
            rx.text("Review and complete payment", class_name="muted"),
            class_name="card-header centered",
        ),
        invoice_details(InvoicePageState.invoice),
        rx.cond(InvoicePageState.invoice.is_paid, payment_completed(), _pay_button()),
        _secure_notice(),
        class_name="card invoice-card",
    )


def invoice_page() -> rx.Component:
    """Build the payer invoice page."""
    provider = get_payment_provider()
    return page_shell(
        rx.script(src=provider.script_url),
        rx.cond(
            InvoicePageState.is_loading,
            spinner("Loading payment details..."),
            rx.cond(
                InvoicePageState.has_error,
                error_panel(
                    "Error Loading",
                    InvoicePageState.error,
                    InvoicePageState.go_home,
                ),
                _ready_view(),
            ),
        ),
        rx.text(
            f"Powered by {provider.display_name}",
            class_name="muted small footer",
        ),
    )
