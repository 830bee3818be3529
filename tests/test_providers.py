import json
from decimal import Decimal

import pytest

from paybridge_ui.models.invoice import Invoice
from paybridge_ui.payments import CheckoutResult, PaymentOutcome, get_payment_provider
from paybridge_ui.payments.flutterwave import FlutterwaveProvider
from paybridge_ui.payments.transak import (
    ORDER_CANCELLED,
    ORDER_FAILED,
    ORDER_SUCCESSFUL,
    SETTLE_HOOK,
    SUBSCRIBED_FLAG,
    TransakProvider,
)
from paybridge_ui.settings import Settings


@pytest.fixture
def invoice():
    return Invoice(
        invoice_id="INV-1",
        client_name="Acme",
        description="Design work",
        amount=Decimal("125.50"),
        wallet_address="0xabc",
    )


def test_flutterwave_options(settings, invoice):
    options = FlutterwaveProvider(settings).checkout_options(invoice, " FLWPUBK-1 ")

    assert options["public_key"] == "FLWPUBK-1"
    assert options["tx_ref"] == "INV-1"
    assert options["amount"] == 125.5
    assert options["currency"] == "USD"
    assert options["customer"]["email"] == "payments@paybridge.app"
    assert options["customer"]["phone_number"] == "+1-555-000-0000"
    assert options["customer"]["name"] == "Acme"
    assert options["customizations"]["logo"] == "http://app.test/logo-paybridge.png"


def test_flutterwave_uses_client_contact(settings, invoice):
    invoice.client_email = "ap@acme.example"
    invoice.client_phone = "+44 20 0000 0000"

    customer = FlutterwaveProvider(settings).checkout_options(invoice, "k")["customer"]

    assert customer["email"] == "ap@acme.example"
    assert customer["phone_number"] == "+44 20 0000 0000"


@pytest.mark.parametrize(
    "result,expected",
    [
        (CheckoutResult("callback", "successful"), PaymentOutcome.SUCCESS),
        (CheckoutResult("callback", "completed"), PaymentOutcome.SUCCESS),
        (CheckoutResult("callback", "failed"), PaymentOutcome.FAILED),
        (CheckoutResult("close"), PaymentOutcome.CLOSED),
        (CheckoutResult("error", "TypeError"), PaymentOutcome.FAILED),
    ],
)
def test_flutterwave_outcomes(settings, result, expected):
    assert FlutterwaveProvider(settings).outcome(result) is expected


def test_transak_options(settings, invoice):
    options = TransakProvider(settings).checkout_options(invoice, "api-key")

    assert options["apiKey"] == "api-key"
    assert options["environment"] == "STAGING"
    assert options["partnerOrderId"] == "INV-1"
    assert options["fiatAmount"] == 125.5
    assert options["walletAddress"] == "0xabc"
    assert options["disableWalletAddressForm"] is True
    assert "email" not in options


@pytest.mark.parametrize(
    "status,expected",
    [
        (ORDER_SUCCESSFUL, PaymentOutcome.SUCCESS),
        (ORDER_FAILED, PaymentOutcome.FAILED),
        (ORDER_CANCELLED, PaymentOutcome.FAILED),
    ],
)
def test_transak_outcomes(settings, status, expected):
    provider = TransakProvider(settings)

    assert provider.outcome(CheckoutResult("callback", status)) is expected
    assert provider.outcome(CheckoutResult("close")) is PaymentOutcome.CLOSED


def test_launch_script_embeds_options(settings, invoice):
    provider = FlutterwaveProvider(settings)
    options = provider.checkout_options(invoice, "FLWPUBK-1")

    script = provider.launch_script(options)

    assert script.startswith("new Promise(")
    assert json.dumps(options) in script
    assert "window.FlutterwaveCheckout(" in script


def test_transak_launch_script_subscribes_to_events(settings, invoice):
    provider = TransakProvider(settings)

    script = provider.launch_script(provider.checkout_options(invoice, "k"))

    assert f"Transak.EVENTS.{ORDER_SUCCESSFUL}" in script
    assert "transak.init()" in script


def test_transak_subscribes_once_per_page(settings, invoice):
    provider = TransakProvider(settings)

    script = provider.launch_script(provider.checkout_options(invoice, "k"))

    assert f"if (!window.{SUBSCRIBED_FLAG})" in script
    assert f"window.{SETTLE_HOOK} = settle;" in script
    assert script.count("Transak.on(") == 4
    assert script.index(f"window.{SETTLE_HOOK} = settle;") < script.index(
        f"if (!window.{SUBSCRIBED_FLAG})"
    )


def test_readiness_expression_checks_global(settings):
    assert FlutterwaveProvider(settings).readiness_expression() == (
        "typeof window.FlutterwaveCheckout === 'function'"
    )


def test_script_url_override():
    provider = TransakProvider(Settings(provider_script_url="http://cdn.test/transak.js"))

    assert provider.script_url == "http://cdn.test/transak.js"
    assert FlutterwaveProvider(Settings()).script_url == "https://checkout.flutterwave.com/v3.js"


@pytest.mark.parametrize(
    "raw,kind,status",
    [
        ({"kind": "callback", "status": "successful", "data": {"tx_ref": "INV-1"}}, "callback", "successful"),
        ({"kind": "close"}, "close", ""),
        (None, "error", ""),
        ("oops", "error", ""),
    ],
)
def test_checkout_result_from_js(raw, kind, status):
    result = CheckoutResult.from_js(raw)

    assert result.kind == kind
    assert result.status == status


def test_unknown_provider_is_rejected():
    with pytest.raises(ValueError, match="Unknown payment provider: stripe"):
        get_payment_provider("stripe")
