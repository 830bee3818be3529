"""
Flutterwave inline checkout adapter.

The page loads Flutterwave's inline script, which installs a global
FlutterwaveCheckout(options) function. The modal reports through a
`callback(response)` whose response.status is "successful" or
"completed" on success, and through `onclose()` when dismissed.
"""

from paybridge_ui.models.invoice import CURRENCY, Invoice
from paybridge_ui.payments.base import CheckoutResult, PaymentOutcome, PaymentProvider

_SUCCESS_STATUSES = {"successful", "completed"}

# Flutterwave requires customer contact fields
_FALLBACK_EMAIL = "payments@paybridge.app"
_FALLBACK_PHONE = "+1-555-000-0000"

_LAUNCH_TEMPLATE = """new Promise((resolve) => {
  const options = %(options)s;
  let settled = false;
  let modal = null;
  const settle = (value) => {
    if (!settled) {
      settled = true;
      resolve(value);
    }
  };
  try {
    modal = window.FlutterwaveCheckout({
      ...options,
      callback: (response) => {
        settle({
          kind: "callback",
          status: String((response && response.status) || ""),
          data: {
            tx_ref: response && response.tx_ref,
            transaction_id: response && response.transaction_id,
          },
        });
        if (modal && typeof modal.close === "function") {
          modal.close();
        }
      },
      onclose: () => settle({ kind: "close" }),
    });
  } catch (err) {
    settle({ kind: "error", status: String(err) });
  }
})"""


class FlutterwaveProvider(PaymentProvider):
    """Adapter for the Flutterwave inline checkout."""

    name = "flutterwave"
    display_name = "Flutterwave"
    config_path = "/config/flutterwave-key"
    key_field = "publicKey"
    default_script_url = "https://checkout.flutterwave.com/v3.js"
    global_name = "FlutterwaveCheckout"
    website = "https://flutterwave.com"

    def checkout_options(self, invoice: Invoice, public_key: str) -> dict:
        frontend_url = self.settings.frontend_url
        return {
            "public_key": public_key.strip(),
            "tx_ref": invoice.invoice_id,
            "amount": float(invoice.amount),
            "currency": CURRENCY,
            "payment_options": "card,googlepay,applepay",
            "customer": {
                "email": invoice.client_email or _FALLBACK_EMAIL,
                "phone_number": invoice.client_phone or _FALLBACK_PHONE,
                "name": invoice.client_name,
            },
            "customizations": {
                "title": "PayBridge Invoice",
                "description": invoice.description,
                "logo": f"{frontend_url}/logo-paybridge.png",
            },
        }

    def launch_script(self, options: dict) -> str:
        return _LAUNCH_TEMPLATE % {"options": self._embed(options)}

    def outcome(self, result: CheckoutResult) -> PaymentOutcome:
        if result.kind == "close":
            return PaymentOutcome.CLOSED
        if result.kind == "callback" and result.status.lower() in _SUCCESS_STATUSES:
            return PaymentOutcome.SUCCESS
        return PaymentOutcome.FAILED
