import anyio
import httpx
import pytest

from conftest import make_client
from paybridge_ui.errors import LoadError
from paybridge_ui.payments import CheckoutResult, PaymentOutcome
from paybridge_ui.payments.flow import (
    CONFIG_ERROR,
    INVOICE_NOT_FOUND,
    LOAD_FAILED,
    NOT_READY_MESSAGE,
    PAYMENT_FAILED_MESSAGE,
    PaymentContext,
    PaymentFlow,
    PaymentPhase,
    fetch_payment_context,
    load_payment_context,
)
from paybridge_ui.payments.flutterwave import FlutterwaveProvider

UNPAID_ID = "INV-7F3A9C21"
PAID_ID = "INV-2B6D04E8"


@pytest.fixture
def provider(settings):
    return FlutterwaveProvider(settings)


def _load(flow: PaymentFlow, client, provider) -> bool:
    context = anyio.run(load_payment_context, client, provider, flow.invoice_id)
    return flow.apply(context)


def _ready_flow(demo_client, provider) -> PaymentFlow:
    flow = PaymentFlow(invoice_id=UNPAID_ID)
    _load(flow, demo_client, provider)
    flow.script_loaded()
    return flow


def test_fetch_payment_context(demo_client, provider):
    invoice, key = anyio.run(fetch_payment_context, demo_client, provider, UNPAID_ID)

    assert invoice.invoice_id == UNPAID_ID
    assert key == "FLWPUBK_TEST-demo-key-X"


def test_unknown_invoice_is_not_found(demo_client, provider):
    with pytest.raises(LoadError, match=INVOICE_NOT_FOUND):
        anyio.run(fetch_payment_context, demo_client, provider, "INV-MISSING")


def test_missing_key_is_config_error(provider):
    def handler(request):
        if request.url.path.endswith("/config/flutterwave-key"):
            return httpx.Response(200, json={})
        return httpx.Response(200, json={"invoice_id": UNPAID_ID, "amount": "10"})

    with pytest.raises(LoadError, match=CONFIG_ERROR):
        anyio.run(fetch_payment_context, make_client(handler), provider, UNPAID_ID)


def test_key_request_failure_is_config_error(provider):
    def handler(request):
        if request.url.path.endswith("/config/flutterwave-key"):
            return httpx.Response(500)
        return httpx.Response(200, json={"invoice_id": UNPAID_ID, "amount": "10"})

    with pytest.raises(LoadError, match=CONFIG_ERROR):
        anyio.run(fetch_payment_context, make_client(handler), provider, UNPAID_ID)


def test_invoice_server_error_is_generic(provider):
    def handler(request):
        if request.url.path.endswith("/config/flutterwave-key"):
            return httpx.Response(200, json={"publicKey": "k"})
        return httpx.Response(500)

    with pytest.raises(LoadError, match=LOAD_FAILED):
        anyio.run(fetch_payment_context, make_client(handler), provider, UNPAID_ID)


def test_payload_without_id_is_not_found(provider):
    def handler(request):
        if request.url.path.endswith("/config/flutterwave-key"):
            return httpx.Response(200, json={"publicKey": "k"})
        return httpx.Response(200, json={"client_name": "Acme"})

    with pytest.raises(LoadError, match=INVOICE_NOT_FOUND):
        anyio.run(fetch_payment_context, make_client(handler), provider, UNPAID_ID)


def test_unpaid_invoice_waits_for_script(demo_client, provider):
    flow = PaymentFlow(invoice_id=UNPAID_ID)

    _load(flow, demo_client, provider)
    assert flow.phase is PaymentPhase.LOADING

    flow.script_loaded()
    assert flow.phase is PaymentPhase.READY
    assert flow.can_pay


def test_paid_invoice_is_ready_without_script(demo_client, provider):
    flow = PaymentFlow(invoice_id=PAID_ID)

    _load(flow, demo_client, provider)

    assert flow.phase is PaymentPhase.READY
    assert not flow.can_pay
    assert flow.begin(provider) is None
    assert flow.message == ""


def test_load_failure_shows_error(demo_client, provider):
    flow = PaymentFlow(invoice_id="INV-MISSING")

    _load(flow, demo_client, provider)

    assert flow.phase is PaymentPhase.ERROR
    assert flow.error == INVOICE_NOT_FOUND


def test_script_timeout_fails_only_while_loading(demo_client, provider):
    waiting = PaymentFlow(invoice_id=UNPAID_ID)
    _load(waiting, demo_client, provider)
    waiting.script_failed("Payment script failed to load. Please refresh.")
    assert waiting.phase is PaymentPhase.ERROR

    paid = PaymentFlow(invoice_id=PAID_ID)
    _load(paid, demo_client, provider)
    paid.script_failed("Payment script failed to load. Please refresh.")
    assert paid.phase is PaymentPhase.READY


def test_pay_before_ready_alerts(provider):
    flow = PaymentFlow(invoice_id=UNPAID_ID)

    assert flow.begin(provider) is None
    assert flow.message == NOT_READY_MESSAGE
    assert flow.phase is PaymentPhase.LOADING


def test_begin_moves_to_processing(demo_client, provider):
    flow = _ready_flow(demo_client, provider)

    options = flow.begin(provider)

    assert options["tx_ref"] == UNPAID_ID
    assert options["public_key"] == "FLWPUBK_TEST-demo-key-X"
    assert flow.phase is PaymentPhase.PROCESSING


def test_successful_payment(demo_client, provider):
    flow = _ready_flow(demo_client, provider)
    flow.begin(provider)

    outcome = flow.resolve(provider, CheckoutResult("callback", "successful"))

    assert outcome is PaymentOutcome.SUCCESS
    assert flow.phase is PaymentPhase.SUCCEEDED


def test_failed_payment_returns_to_ready(demo_client, provider):
    flow = _ready_flow(demo_client, provider)
    flow.begin(provider)

    outcome = flow.resolve(provider, CheckoutResult("callback", "failed"))

    assert outcome is PaymentOutcome.FAILED
    assert flow.phase is PaymentPhase.READY
    assert flow.message == PAYMENT_FAILED_MESSAGE


def test_closed_modal_returns_to_ready_silently(demo_client, provider):
    flow = _ready_flow(demo_client, provider)
    flow.begin(provider)

    outcome = flow.resolve(provider, CheckoutResult("close"))

    assert outcome is PaymentOutcome.CLOSED
    assert flow.phase is PaymentPhase.READY
    assert flow.message == ""
    assert flow.can_pay


def test_loaded_after_script(demo_client, provider):
    invoice, key = anyio.run(fetch_payment_context, demo_client, provider, UNPAID_ID)
    flow = PaymentFlow(invoice_id=UNPAID_ID)

    flow.script_loaded()
    assert flow.phase is PaymentPhase.LOADING
    flow.loaded(invoice, key)

    assert flow.phase is PaymentPhase.READY


class _BrokenClient:
    """Backend client whose invoice request fails with an unexpected error."""

    async def get_invoice(self, invoice_id):
        raise RuntimeError("connection pool exhausted")

    async def get_provider_key(self, path, field):
        return "k"


def test_unexpected_error_is_a_load_failure(provider):
    with pytest.raises(LoadError, match=LOAD_FAILED):
        anyio.run(fetch_payment_context, _BrokenClient(), provider, UNPAID_ID)


def test_unexpected_error_shows_error_page(provider):
    flow = PaymentFlow(invoice_id=UNPAID_ID)

    assert _load(flow, _BrokenClient(), provider)
    assert flow.phase is PaymentPhase.ERROR
    assert flow.error == LOAD_FAILED


def test_dotted_keys_in_invoice_payload_load(provider):
    def handler(request):
        if request.url.path.endswith("/config/flutterwave-key"):
            return httpx.Response(200, json={"publicKey": "k"})
        return httpx.Response(
            200, json={"invoice_id": UNPAID_ID, "amount": "10", "meta.source": "api"}
        )

    invoice, key = anyio.run(
        fetch_payment_context, make_client(handler), provider, UNPAID_ID
    )

    assert invoice.invoice_id == UNPAID_ID
    assert key == "k"


def test_context_for_another_invoice_is_ignored(demo_client, provider):
    flow = PaymentFlow(invoice_id=UNPAID_ID)
    stale = anyio.run(load_payment_context, demo_client, provider, PAID_ID)

    assert not flow.apply(stale)
    assert flow.phase is PaymentPhase.LOADING
    assert flow.invoice is None


def test_failed_context_carries_message(demo_client, provider):
    context = anyio.run(load_payment_context, demo_client, provider, "INV-MISSING")

    assert context == PaymentContext(invoice_id="INV-MISSING", error=INVOICE_NOT_FOUND)
