"""
Exception hierarchy for the PayBridge UI.

Service and payment code raises these; page states catch them at the
event-handler boundary and turn them into user-facing messages.
"""


class PayBridgeError(Exception):
    """Base class for all PayBridge UI errors."""


class ApiError(PayBridgeError):
    """
    A backend request failed.

    Raised for transport failures (status_code is None) and for non-2xx
    responses. message holds the backend's own message when it sent one.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class LoadError(PayBridgeError):
    """The invoice page could not load its invoice or payment configuration."""


class ScriptTimeoutError(LoadError):
    """The payment provider script did not become available in time."""


class ValidationError(PayBridgeError):
    """A form failed client-side validation; the message is shown inline."""
