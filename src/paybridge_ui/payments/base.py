"""
Abstract base class defining the payment provider contract.

A provider adapter knows four things about its checkout widget:

- where the backend serves its public key (config_path, key_field)
- which script to load and which global it exposes (script_url, global_name)
- how to build the widget's option object for an invoice
- how to launch the widget and classify what it reports back

Widgets run in the browser. launch_script() returns a JavaScript
expression that evaluates to a Promise; the page sends it with
rx.call_script and the resolved value comes back to the page state as a
dict, which CheckoutResult.from_js() normalizes.

Implementations:
- FlutterwaveProvider: inline FlutterwaveCheckout modal
- TransakProvider: Transak SDK widget
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from paybridge_ui.lib import objects
from paybridge_ui.models.invoice import Invoice
from paybridge_ui.settings import Settings


class PaymentOutcome(str, Enum):
    """How a checkout attempt ended, from the browser's point of view."""

    SUCCESS = "success"
    FAILED = "failed"
    CLOSED = "closed"


@dataclass(frozen=True)
class CheckoutResult:
    """
    Value a launch script resolves with.

    Attributes:
        kind: "callback" for a provider status report, "close" when the
            modal was dismissed, "error" when the widget failed to open.
        status: Provider status or event name for "callback".
        data: Extra provider fields, kept for logging.
    """

    kind: str
    status: str = ""
    data: dict = field(default_factory=dict)

    @classmethod
    def from_js(cls, raw: Any) -> "CheckoutResult":
        """Normalize whatever the browser sent back."""
        if not isinstance(raw, dict):
            return cls(kind="error")
        data = raw.get("data")
        return cls(
            kind=str(raw.get("kind") or "error"),
            status=str(raw.get("status") or ""),
            data=data if isinstance(data, dict) else {},
        )


class PaymentProvider(ABC):
    """
    Abstract base class for payment widget adapters.

    Class attributes describe the provider; subclasses implement option
    building, launching and result classification.
    """

    name: str = ""
    display_name: str = ""
    config_path: str = ""
    key_field: str = ""
    default_script_url: str = ""
    global_name: str = ""
    website: str = ""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def script_url(self) -> str:
        """Script that installs the provider global; overridable via settings."""
        return self.settings.provider_script_url or self.default_script_url

    def readiness_expression(self) -> str:
        """JavaScript expression that is true once the provider global exists."""
        return f"typeof window.{self.global_name} === 'function'"

    @abstractmethod
    def checkout_options(self, invoice: Invoice, public_key: str) -> dict:
        """
        Build the widget configuration for an invoice.

        Args:
            invoice: The invoice being paid.
            public_key: Provider public key from the backend.

        Returns:
            JSON-serializable option dict (callbacks are added in JS).
        """

    @abstractmethod
    def launch_script(self, options: dict) -> str:
        """Return a JavaScript Promise expression that opens the widget."""

    @abstractmethod
    def outcome(self, result: CheckoutResult) -> PaymentOutcome:
        """Classify a checkout result."""

    @staticmethod
    def _embed(options: dict) -> str:
        """Serialize options for inclusion in a script."""
        return objects.to_json(options)
