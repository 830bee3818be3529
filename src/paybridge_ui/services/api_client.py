"""
HTTP client for the PayBridge REST backend.

Every page talks to the backend through BackendClient. Each call opens a
short-lived httpx.AsyncClient, so one BackendClient can be shared by all
Reflex sessions and event loops. Pass a transport to route requests
somewhere other than the network (the demo backend and the tests do).

Error mapping:
- Transport failures raise ApiError with status_code None.
- Invoice payloads that cannot be parsed raise ApiError.
- Non-2xx responses raise ApiError carrying the backend's message, except
  for the {success, message} envelope calls (create, delete, clear, login)
  where a JSON error body is returned as an unsuccessful result so the
  message can be shown verbatim.
"""

from typing import Any

import httpx

from paybridge_ui.errors import ApiError
from paybridge_ui.lib import logs, objects
from paybridge_ui.lib.caches import DiskCache
from paybridge_ui.models.common import CreateInvoiceResult, LoginResult, MutationResult
from paybridge_ui.models.invoice import Invoice, InvoiceDraft, parse_invoice
from paybridge_ui.utils import path_segment, receipt_url

LOG = logs.logger(__file__)


def _error_message(response: httpx.Response) -> str:
    """Extract the backend's message from an error response, if any."""
    try:
        body = response.json()
    except ValueError:
        return ""
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or "")
    return ""


def _parse(payload: dict) -> Invoice:
    try:
        return parse_invoice(payload)
    except (TypeError, ValueError) as exc:
        LOG.warning("Unreadable invoice payload: %s", exc)
        raise ApiError("Backend returned an unreadable invoice.") from exc


class BackendClient:
    """
    Async client for the PayBridge backend.

    Attributes:
        base_url: Backend base URL, e.g. http://localhost:4000/api.
        timeout: Request timeout in seconds.
        cookies: Cookies sent with every request (the admin session).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
        cache: DiskCache | None = None,
        cache_ttl: int = 0,
        cookies: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Backend base URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport replacing the network.
            cache: Optional disk cache for provider configuration.
            cache_ttl: Seconds a cached provider key stays valid; 0 disables.
            cookies: Cookies to send with every request.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cookies = dict(cookies or {})
        self._transport = transport
        self._cache = cache
        self._cache_ttl = cache_ttl

    def with_cookies(self, cookies: dict[str, str] | None) -> "BackendClient":
        """Return a client that shares this configuration but sends cookies."""
        return BackendClient(
            self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            cache=self._cache,
            cache_ttl=self._cache_ttl,
            cookies=cookies,
        )

    def receipt_url(self, invoice_id: str) -> str:
        """Return the receipt URL the browser opens in a new tab."""
        return receipt_url(self.base_url, invoice_id)

    async def get_invoice(self, invoice_id: str) -> Invoice:
        """
        Fetch one invoice.

        Raises:
            ApiError: On transport failure or a non-2xx response (404 when
                the backend does not know the id).
        """
        body = await self._get_json(f"/invoices/{path_segment(invoice_id)}")
        return _parse(body if isinstance(body, dict) else {})

    async def list_invoices(self) -> list[Invoice]:
        """Fetch every invoice."""
        body = await self._get_json("/invoices")
        if not isinstance(body, list):
            raise ApiError("Unexpected invoice list response.")
        return [_parse(item) for item in body if isinstance(item, dict)]

    async def create_invoice(self, draft: InvoiceDraft) -> CreateInvoiceResult:
        """
        Create an invoice from a validated draft.

        Raises:
            ValidationError: If the draft is incomplete. No request is sent.
            ApiError: On transport failure or an error without a JSON body.
        """
        payload = draft.to_payload()
        LOG.info("Creating invoice for client: %s", payload["client_name"])
        body = await self._envelope("POST", "/invoices", payload)
        return CreateInvoiceResult.from_dict(body)

    async def delete_invoice(self, row_id: int) -> MutationResult:
        """Delete one invoice by its numeric row id."""
        body = await self._envelope("DELETE", f"/invoices/{path_segment(row_id)}")
        return MutationResult.from_dict(body)

    async def clear_invoices(self) -> MutationResult:
        """Delete every invoice."""
        body = await self._envelope("DELETE", "/invoices")
        return MutationResult.from_dict(body)

    async def login(self, username: str, password: str) -> LoginResult:
        """Submit admin credentials; cookies the backend sets are returned."""
        response = await self._send(
            "POST", "/auth/login", {"username": username, "password": password}
        )
        body = self._envelope_body(response)
        return LoginResult.from_dict(body, cookies=dict(response.cookies))

    async def get_provider_key(self, config_path: str, key_field: str) -> str:
        """
        Fetch a payment provider's public key.

        Results are cached on disk for cache_ttl seconds when a cache is
        configured. Empty keys are never cached.

        Args:
            config_path: Backend path such as /config/flutterwave-key.
            key_field: JSON field holding the key (publicKey, apiKey).

        Returns:
            The key, or "" when the payload does not contain one.
        """
        cache_key = objects.hash([self.base_url, config_path, key_field]).hexdigest()
        if self._cache is not None and self._cache_ttl > 0:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return cached.value

        body = await self._get_json(config_path)
        key = str(body.get(key_field) or "").strip() if isinstance(body, dict) else ""
        if key and self._cache is not None and self._cache_ttl > 0:
            self._cache.set(cache_key, key, expire=self._cache_ttl)
        return key

    async def _send(
        self, method: str, path: str, payload: Any | None = None
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                cookies=self.cookies,
            ) as client:
                return await client.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            LOG.warning("Backend request failed: %s %s (%s)", method, path, exc)
            raise ApiError(f"Backend unreachable: {exc}") from exc

    async def _get_json(self, path: str) -> Any:
        response = await self._send("GET", path)
        if response.is_error:
            message = _error_message(response) or (
                f"Request failed with status {response.status_code}."
            )
            LOG.warning("GET %s returned %s", path, response.status_code)
            raise ApiError(message, status_code=response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError("Backend returned invalid JSON.", response.status_code) from exc

    async def _envelope(
        self, method: str, path: str, payload: Any | None = None
    ) -> dict:
        response = await self._send(method, path, payload)
        return self._envelope_body(response)

    @staticmethod
    def _envelope_body(response: httpx.Response) -> dict:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            if response.is_error:
                body["success"] = False
            return body
        if response.is_error:
            raise ApiError(
                f"Request failed with status {response.status_code}.",
                status_code=response.status_code,
            )
        return {"success": True}
