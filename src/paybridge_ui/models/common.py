"""
Common models shared across pages.

This module defines:

- Backend response envelopes for create, delete and login calls
- The dark-mode preference and its local-storage encoding

All envelopes include from_dict methods so services never hand raw JSON
to page states.
"""

import json
from dataclasses import dataclass, field, replace
from typing import Any

# Local-storage key for the dark-mode flag
DARK_MODE_STORAGE_KEY = "darkMode"


@dataclass
class MutationResult:
    """
    Result of a DELETE call.

    Attributes:
        success: Whether the backend reports success.
        message: Backend message, present on failure.
    """

    success: bool = False
    message: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "MutationResult":
        """Deserialize from a backend response body."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            success=bool(data.get("success", False)),
            message=str(data.get("message") or ""),
        )


@dataclass
class CreateInvoiceResult(MutationResult):
    """
    Result of POST /invoices.

    Attributes:
        link: Shareable payer link for the new invoice.
    """

    link: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> "CreateInvoiceResult":
        base = MutationResult.from_dict(data)
        link = str(data.get("link") or "") if isinstance(data, dict) else ""
        return cls(success=base.success, message=base.message, link=link)


@dataclass
class LoginResult(MutationResult):
    """
    Result of POST /auth/login.

    Attributes:
        cookies: Cookies the backend set on the login response.
    """

    cookies: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(
        cls, data: dict | None, cookies: dict[str, str] | None = None
    ) -> "LoginResult":
        base = MutationResult.from_dict(data)
        return cls(
            success=base.success, message=base.message, cookies=dict(cookies or {})
        )


@dataclass(frozen=True)
class Preferences:
    """
    UI preferences persisted in the browser.

    The encoded form is the JSON text stored under DARK_MODE_STORAGE_KEY.
    """

    dark_mode: bool = False

    def toggled(self) -> "Preferences":
        """Return a copy with dark mode flipped."""
        return replace(self, dark_mode=not self.dark_mode)

    def encode(self) -> str:
        """Return the local-storage value."""
        return json.dumps(self.dark_mode)

    @classmethod
    def decode(cls, raw: Any) -> "Preferences":
        """
        Read preferences from a stored value.

        Missing, corrupt or non-boolean values give the default (light mode).
        """
        if not raw:
            return cls()
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            return cls()
        return cls(dark_mode=value is True)
