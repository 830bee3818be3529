"""
Client-side payment flow for one invoice.

    loading --> error
       |
       v
     ready --pay--> processing --success--> succeeded (navigate to success page)
       ^                |
       +--fail/close----+

The flow only tracks what the payer's browser knows. It trusts the
provider's callback; the backend's webhook remains the authoritative
record of payment, and nothing here confirms completion with the backend.
The processing phase is a UI latch, not a concurrency guard.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum

from paybridge_ui.errors import ApiError, LoadError
from paybridge_ui.lib import logs
from paybridge_ui.models.invoice import Invoice
from paybridge_ui.payments.base import CheckoutResult, PaymentOutcome, PaymentProvider
from paybridge_ui.services.api_client import BackendClient

LOG = logs.logger(__file__)

INVOICE_NOT_FOUND = "Invoice not found"
CONFIG_ERROR = "Payment configuration error"
LOAD_FAILED = "Unable to load invoice or payment configuration."
NOT_READY_MESSAGE = "Payment service is not ready. Please refresh the page and try again."
PAYMENT_FAILED_MESSAGE = "Payment was not successful. Please try again."


class PaymentPhase(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"


async def fetch_payment_context(
    client: BackendClient, provider: PaymentProvider, invoice_id: str
) -> tuple[Invoice, str]:
    """
    Fetch an invoice and the provider public key concurrently.

    Both must succeed.

    Raises:
        LoadError: If either request fails for any reason, the invoice
            payload has no identifier, or the config payload has no key.
    """
    invoice_result, key_result = await asyncio.gather(
        client.get_invoice(invoice_id),
        client.get_provider_key(provider.config_path, provider.key_field),
        return_exceptions=True,
    )

    for result in (invoice_result, key_result):
        if isinstance(result, BaseException) and not isinstance(result, Exception):
            raise result
    if isinstance(invoice_result, ApiError):
        LOG.warning("Invoice %s failed to load: %s", invoice_id, invoice_result)
        if invoice_result.not_found:
            raise LoadError(INVOICE_NOT_FOUND) from invoice_result
        raise LoadError(LOAD_FAILED) from invoice_result
    if isinstance(invoice_result, Exception):
        LOG.error(
            "Invoice %s failed to load", invoice_id, exc_info=invoice_result
        )
        raise LoadError(LOAD_FAILED) from invoice_result
    if isinstance(key_result, ApiError):
        LOG.warning("%s key failed to load: %s", provider.display_name, key_result)
        raise LoadError(CONFIG_ERROR) from key_result
    if isinstance(key_result, Exception):
        LOG.error(
            "%s key failed to load", provider.display_name, exc_info=key_result
        )
        raise LoadError(LOAD_FAILED) from key_result

    if not invoice_result.invoice_id:
        raise LoadError(INVOICE_NOT_FOUND)
    if not key_result:
        raise LoadError(CONFIG_ERROR)
    return invoice_result, key_result


@dataclass
class PaymentContext:
    """
    Outcome of loading the invoice page's data.

    Exactly one of (invoice and public_key) or error is set.
    """

    invoice_id: str
    invoice: Invoice | None = None
    public_key: str = ""
    error: str = ""


async def load_payment_context(
    client: BackendClient, provider: PaymentProvider, invoice_id: str
) -> PaymentContext:
    """Fetch the payment context; load failures are returned, not raised."""
    try:
        invoice, public_key = await fetch_payment_context(client, provider, invoice_id)
    except LoadError as exc:
        return PaymentContext(invoice_id=invoice_id, error=str(exc))
    return PaymentContext(invoice_id=invoice_id, invoice=invoice, public_key=public_key)


@dataclass
class PaymentFlow:
    """
    State machine behind the invoice page.

    Attributes:
        invoice_id: The invoice this flow belongs to.
        phase: Current phase.
        invoice: Loaded invoice, once available.
        public_key: Provider public key, once available.
        script_ready: True once the provider script is usable.
        error: Full-page error message in the error phase.
        message: Transient message for the payer (alerts, failures).
    """

    invoice_id: str
    phase: PaymentPhase = PaymentPhase.LOADING
    invoice: Invoice | None = None
    public_key: str = ""
    script_ready: bool = False
    error: str = ""
    message: str = ""

    @property
    def can_pay(self) -> bool:
        """True when the pay control should be shown and enabled."""
        return (
            self.phase is PaymentPhase.READY
            and self.invoice is not None
            and not self.invoice.is_paid
        )

    def apply(self, context: PaymentContext) -> bool:
        """
        Apply a loaded payment context.

        Returns:
            False when the context belongs to another invoice and was
            ignored, True otherwise.
        """
        if context.invoice_id != self.invoice_id:
            return False
        if context.error or context.invoice is None:
            self.fail(context.error)
        else:
            self.loaded(context.invoice, context.public_key)
        return True

    def loaded(self, invoice: Invoice, public_key: str) -> None:
        """Apply a fetched invoice and key."""
        self.invoice = invoice
        self.public_key = public_key
        self._advance()

    def script_loaded(self) -> None:
        """Record that the provider script is available."""
        self.script_ready = True
        self._advance()

    def script_failed(self, message: str) -> None:
        """Record that the provider script never became available."""
        if self.phase is PaymentPhase.LOADING:
            self.fail(message)

    def fail(self, message: str) -> None:
        self.phase = PaymentPhase.ERROR
        self.error = message or LOAD_FAILED

    def begin(self, provider: PaymentProvider) -> dict | None:
        """
        Start a payment attempt.

        Returns:
            Checkout options for the widget, or None when payment cannot
            start. When the flow is not ready, message is set to the
            not-ready alert instead of raising.
        """
        self.message = ""
        if self.invoice is not None and self.invoice.is_paid:
            return None
        if (
            self.phase is not PaymentPhase.READY
            or self.invoice is None
            or not self.public_key
            or not self.script_ready
        ):
            self.message = NOT_READY_MESSAGE
            return None
        self.phase = PaymentPhase.PROCESSING
        return provider.checkout_options(self.invoice, self.public_key)

    def resolve(
        self, provider: PaymentProvider, result: CheckoutResult
    ) -> PaymentOutcome:
        """Apply what the widget reported and return its classification."""
        outcome = provider.outcome(result)
        LOG.info(
            "Checkout for %s ended: %s (%s %s)",
            self.invoice_id,
            outcome.value,
            result.kind,
            result.status,
        )
        if outcome is PaymentOutcome.SUCCESS:
            self.phase = PaymentPhase.SUCCEEDED
            self.message = ""
        elif outcome is PaymentOutcome.FAILED:
            self.phase = PaymentPhase.READY
            self.message = PAYMENT_FAILED_MESSAGE
        else:
            self.phase = PaymentPhase.READY
        return outcome

    def _advance(self) -> None:
        if self.phase is not PaymentPhase.LOADING or self.invoice is None:
            return
        if self.public_key and (self.script_ready or self.invoice.is_paid):
            self.phase = PaymentPhase.READY
