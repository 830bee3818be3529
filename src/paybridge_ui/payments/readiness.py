"""
Bounded readiness check for third-party checkout scripts.

Provider scripts load asynchronously in the browser. The invoice page
polls for the provider global at a fixed interval and records each
answer here; the check gives up with ScriptTimeoutError once the attempt
ceiling is passed. Every page that needs a provider script uses this one
check instead of its own loop.

Checks are tagged with the invoice they were sent for, so answers from a
chain started for a previous invoice are dropped instead of counted.
"""

from dataclasses import dataclass
from typing import Any

from paybridge_ui.errors import ScriptTimeoutError
from paybridge_ui.lib import objects

SCRIPT_TIMEOUT_MESSAGE = "Payment script failed to load. Please refresh."


def tagged_readiness_check(expression: str, invoice_id: str) -> str:
    """
    Wrap a readiness expression so its answer names the invoice.

    Returns:
        JavaScript evaluating to {invoice_id, ready}.
    """
    return f"({{invoice_id: {objects.to_json(invoice_id)}, ready: Boolean({expression})}})"


def parse_readiness_answer(raw: Any) -> tuple[str, bool]:
    """Read a tagged readiness answer as (invoice_id, ready)."""
    if not isinstance(raw, dict):
        return "", False
    return str(raw.get("invoice_id") or ""), raw.get("ready") is True


@dataclass
class ReadinessCheck:
    """
    Counts readiness checks of a provider script for one invoice.

    Attributes:
        invoice_id: Invoice whose page is waiting for the script.
        interval: Seconds to wait between checks.
        max_attempts: Failed checks tolerated before timing out.
        attempts: Failed checks so far.
        ready: True once a check succeeded.
    """

    invoice_id: str = ""
    interval: float = 0.5
    max_attempts: int = 20
    attempts: int = 0
    ready: bool = False

    def accepts(self, invoice_id: str) -> bool:
        """True when an answer tagged with invoice_id belongs to this check."""
        return invoice_id == self.invoice_id

    def record(self, ready: bool) -> bool:
        """
        Record one check result.

        Args:
            ready: Whether the provider global was available.

        Returns:
            True when the script is ready, False when another check
            should be scheduled after `interval` seconds.

        Raises:
            ScriptTimeoutError: When the attempt ceiling is exceeded.
        """
        if ready:
            self.ready = True
            return True
        self.attempts += 1
        if self.attempts > self.max_attempts:
            raise ScriptTimeoutError(SCRIPT_TIMEOUT_MESSAGE)
        return False
