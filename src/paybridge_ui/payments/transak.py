"""
Transak widget adapter.

The Transak SDK bundle exposes a global Transak class. A widget is
created from a config object, opened with init(), and reports through
static event subscriptions (Transak.on(Transak.EVENTS.X, handler)) that
live as long as the page.

Funds settle to the invoice's payout wallet, so the wallet address is
passed in and the widget's wallet form is disabled.
"""

from paybridge_ui.models.invoice import CURRENCY, Invoice
from paybridge_ui.payments.base import CheckoutResult, PaymentOutcome, PaymentProvider

ORDER_SUCCESSFUL = "TRANSAK_ORDER_SUCCESSFUL"
ORDER_FAILED = "TRANSAK_ORDER_FAILED"
ORDER_CANCELLED = "TRANSAK_ORDER_CANCELLED"
WIDGET_CLOSE = "TRANSAK_WIDGET_CLOSE"

# Transak.on subscriptions are static and never removed, so they are made
# once per page and forward to the settle function of the latest launch.
SUBSCRIBED_FLAG = "__paybridgeTransakSubscribed"
SETTLE_HOOK = "__paybridgeTransakSettle"

_LAUNCH_TEMPLATE = """new Promise((resolve) => {
  const options = %(options)s;
  const Transak = window.Transak;
  let settled = false;
  let transak = null;
  const settle = (value) => {
    if (!settled) {
      settled = true;
      resolve(value);
    }
    if (transak && typeof transak.close === "function" && value.kind === "callback") {
      transak.close();
    }
  };
  window.%(settle)s = settle;
  try {
    if (!window.%(subscribed)s) {
      const dispatch = (value) => {
        if (typeof window.%(settle)s === "function") {
          window.%(settle)s(value);
        }
      };
      const report = (name) => (data) => dispatch({
        kind: "callback",
        status: name,
        data: { order_id: data && data.status && data.status.id },
      });
      Transak.on(Transak.EVENTS.%(success)s, report("%(success)s"));
      Transak.on(Transak.EVENTS.%(failed)s, report("%(failed)s"));
      Transak.on(Transak.EVENTS.%(cancelled)s, report("%(cancelled)s"));
      Transak.on(Transak.EVENTS.%(close)s, () => dispatch({ kind: "close" }));
      window.%(subscribed)s = true;
    }
    transak = new Transak(options);
    transak.init();
  } catch (err) {
    settle({ kind: "error", status: String(err) });
  }
})"""


class TransakProvider(PaymentProvider):
    """Adapter for the Transak on-ramp widget."""

    name = "transak"
    display_name = "Transak"
    config_path = "/config/transak-key"
    key_field = "apiKey"
    default_script_url = (
        "https://cdn.jsdelivr.net/npm/@transak/transak-sdk@latest/dist/umd/index.js"
    )
    global_name = "Transak"
    website = "https://transak.com"

    def checkout_options(self, invoice: Invoice, public_key: str) -> dict:
        options = {
            "apiKey": public_key.strip(),
            "environment": self.settings.transak_environment,
            "referrer": self.settings.frontend_url,
            "partnerOrderId": invoice.invoice_id,
            "fiatCurrency": CURRENCY,
            "fiatAmount": float(invoice.amount),
            "productsAvailed": "BUY",
        }
        if invoice.wallet_address:
            options["walletAddress"] = invoice.wallet_address
            options["disableWalletAddressForm"] = True
        if invoice.client_email:
            options["email"] = invoice.client_email
        return options

    def launch_script(self, options: dict) -> str:
        return _LAUNCH_TEMPLATE % {
            "options": self._embed(options),
            "success": ORDER_SUCCESSFUL,
            "failed": ORDER_FAILED,
            "cancelled": ORDER_CANCELLED,
            "close": WIDGET_CLOSE,
            "settle": SETTLE_HOOK,
            "subscribed": SUBSCRIBED_FLAG,
        }

    def outcome(self, result: CheckoutResult) -> PaymentOutcome:
        if result.kind == "close":
            return PaymentOutcome.CLOSED
        if result.kind == "callback" and result.status == ORDER_SUCCESSFUL:
            return PaymentOutcome.SUCCESS
        return PaymentOutcome.FAILED
