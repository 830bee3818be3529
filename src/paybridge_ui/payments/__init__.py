"""
Payment provider factory for the PayBridge UI.

This module provides get_payment_provider(), which returns the adapter
for the configured checkout widget.

Available providers:
- flutterwave: Flutterwave inline checkout (card, Google Pay, Apple Pay)
- transak: Transak on-ramp widget paying out to the invoice wallet

Configure via the PAYBRIDGE_PAYMENT_PROVIDER environment variable.
"""

from functools import cache
from typing import Dict, Type

from paybridge_ui.lib import logs
from paybridge_ui.payments.base import CheckoutResult, PaymentOutcome, PaymentProvider
from paybridge_ui.payments.flutterwave import FlutterwaveProvider
from paybridge_ui.payments.transak import TransakProvider
from paybridge_ui.settings import get_settings

LOG = logs.logger(__file__)

_PROVIDER_REGISTRY: Dict[str, Type[PaymentProvider]] = {
    "flutterwave": FlutterwaveProvider,
    "transak": TransakProvider,
}


@cache
def get_payment_provider(kind: str | None = None) -> PaymentProvider:
    """Return the configured payment provider adapter."""
    settings = get_settings()
    resolved_kind = (kind or settings.payment_provider).lower()
    LOG.info("get_payment_provider - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        provider_class = _PROVIDER_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown payment provider: {resolved_kind}"
        raise ValueError(msg) from exc
    return provider_class(settings)


__all__ = [
    "CheckoutResult",
    "PaymentOutcome",
    "PaymentProvider",
    "get_payment_provider",
]
