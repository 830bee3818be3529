"""
In-memory implementation of the PayBridge REST backend.

This backend is useful for:
- Local development without the real backend running
- Testing pages and services against realistic responses
- Demonstrating the application end to end

It is served through an httpx.MockTransport, so BackendClient talks to it
exactly as it talks to the network. Paths are matched on their tail, which
keeps it independent of the configured base path (/api by default).
"""

import copy
import json
import re
import uuid
from datetime import datetime, timezone
from threading import Lock
from typing import Sequence

import httpx

from paybridge_ui.data.demo_invoices import DEMO_INVOICES
from paybridge_ui.lib import logs
from paybridge_ui.utils import invoice_url, parse_amount

LOG = logs.logger(__file__)

_INVOICE_PATH = re.compile(r"/invoices/(?P<ref>[^/]+)(?P<receipt>/receipt)?$")
_SESSION_COOKIE = "paybridge_session"


class DemoBackend:
    """
    In-memory PayBridge backend.

    Attributes:
        frontend_url: Base URL used to build the links returned on create.
        username: Accepted admin username.
        password: Accepted admin password.
        flutterwave_key: Public key served by /config/flutterwave-key.
        transak_key: API key served by /config/transak-key.
    """

    def __init__(
        self,
        invoices: Sequence[dict] | None = None,
        frontend_url: str = "http://localhost:3000",
        username: str = "admin",
        password: str = "admin",
        flutterwave_key: str = "FLWPUBK_TEST-demo-key-X",
        transak_key: str = "demo-transak-api-key",
    ) -> None:
        """
        Initialize with invoice data.

        Args:
            invoices: Seed invoices, or None to use DEMO_INVOICES.
        """
        source = DEMO_INVOICES if invoices is None else invoices
        self._invoices: list[dict] = [copy.deepcopy(inv) for inv in source]
        self._next_id = max((inv.get("id") or 0 for inv in self._invoices), default=0) + 1
        self._lock = Lock()
        self.frontend_url = frontend_url
        self.username = username
        self.password = password
        self.flutterwave_key = flutterwave_key
        self.transak_key = transak_key

    @property
    def transport(self) -> httpx.MockTransport:
        """Return an httpx transport that serves this backend."""
        return httpx.MockTransport(self.handle)

    @property
    def invoices(self) -> list[dict]:
        """Return a copy of the stored invoices, newest first."""
        with self._lock:
            return [copy.deepcopy(inv) for inv in reversed(self._invoices)]

    def mark_paid(self, invoice_id: str) -> None:
        """Flip an invoice to PAID, standing in for the payment webhook."""
        with self._lock:
            for invoice in self._invoices:
                if invoice["invoice_id"] == invoice_id:
                    invoice["status"] = "PAID"

    def handle(self, request: httpx.Request) -> httpx.Response:
        """Dispatch one request."""
        path = request.url.path.rstrip("/")
        method = request.method
        LOG.debug("Demo backend: %s %s", method, path)

        if path.endswith("/auth/login") and method == "POST":
            return self._login(request)
        if path.endswith("/config/flutterwave-key") and method == "GET":
            return httpx.Response(200, json={"publicKey": self.flutterwave_key})
        if path.endswith("/config/transak-key") and method == "GET":
            return httpx.Response(200, json={"apiKey": self.transak_key})
        if path.endswith("/invoices"):
            if method == "GET":
                return httpx.Response(200, json=self.invoices)
            if method == "POST":
                return self._create(request)
            if method == "DELETE":
                with self._lock:
                    self._invoices.clear()
                return httpx.Response(200, json={"success": True})

        match = _INVOICE_PATH.search(path)
        if match:
            ref = match.group("ref")
            if match.group("receipt") and method == "GET":
                return self._receipt(ref)
            if method == "GET":
                invoice = self._find(invoice_id=ref)
                if invoice is None:
                    return httpx.Response(404, json={"message": "Invoice not found"})
                return httpx.Response(200, json=invoice)
            if method == "DELETE":
                return self._delete(ref)

        return httpx.Response(404, json={"message": f"No route for {method} {path}"})

    def _find(self, invoice_id: str) -> dict | None:
        with self._lock:
            for invoice in self._invoices:
                if invoice["invoice_id"] == invoice_id:
                    return copy.deepcopy(invoice)
        return None

    def _login(self, request: httpx.Request) -> httpx.Response:
        body = _json_body(request)
        if body.get("username") == self.username and body.get("password") == self.password:
            return httpx.Response(
                200,
                json={"success": True},
                headers={"set-cookie": f"{_SESSION_COOKIE}={uuid.uuid4().hex}; Path=/"},
            )
        return httpx.Response(
            401, json={"success": False, "message": "Invalid username or password."}
        )

    def _create(self, request: httpx.Request) -> httpx.Response:
        body = _json_body(request)
        amount = parse_amount(str(body.get("amount", "")))
        required = ("client_name", "description", "wallet_address")
        if any(not str(body.get(key) or "").strip() for key in required):
            return httpx.Response(
                400, json={"success": False, "message": "Missing required fields."}
            )
        if amount is None or amount <= 0:
            return httpx.Response(
                400, json={"success": False, "message": "Amount must be positive."}
            )

        invoice_id = f"INV-{uuid.uuid4().hex[:8].upper()}"
        with self._lock:
            self._invoices.append(
                {
                    "id": self._next_id,
                    "invoice_id": invoice_id,
                    "client_name": body["client_name"],
                    "description": body["description"],
                    "amount": f"{amount:.2f}",
                    "status": "UNPAID",
                    "client_email": None,
                    "client_phone": None,
                    "wallet_address": body["wallet_address"],
                    "created_at": datetime.now(timezone.utc).isoformat(),
                }
            )
            self._next_id += 1
        return httpx.Response(
            201,
            json={"success": True, "link": invoice_url(self.frontend_url, invoice_id)},
        )

    def _delete(self, ref: str) -> httpx.Response:
        try:
            row_id = int(ref)
        except ValueError:
            return httpx.Response(
                400, json={"success": False, "message": "Invalid invoice id."}
            )
        with self._lock:
            remaining = [inv for inv in self._invoices if inv.get("id") != row_id]
            if len(remaining) == len(self._invoices):
                return httpx.Response(
                    404, json={"success": False, "message": "Invoice not found."}
                )
            self._invoices[:] = remaining
        return httpx.Response(200, json={"success": True})

    def _receipt(self, invoice_id: str) -> httpx.Response:
        invoice = self._find(invoice_id=invoice_id)
        if invoice is None or invoice.get("status") != "PAID":
            return httpx.Response(404, json={"message": "Receipt not available"})
        text = (
            f"PayBridge receipt\n"
            f"Invoice: {invoice['invoice_id']}\n"
            f"Client: {invoice['client_name']}\n"
            f"Amount: {invoice['amount']} USD\n"
        )
        return httpx.Response(200, text=text)


def _json_body(request: httpx.Request) -> dict:
    try:
        body = json.loads(request.content or b"{}")
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
