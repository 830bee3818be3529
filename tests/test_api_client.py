import anyio
import httpx
import pytest

from conftest import API_BASE_URL, make_client
from paybridge_ui.errors import ApiError, ValidationError
from paybridge_ui.lib.caches import DiskCache
from paybridge_ui.models.invoice import InvoiceDraft


def test_get_invoice_parses_payload():
    def handler(request):
        assert request.url.path == "/api/invoices/INV-1"
        return httpx.Response(
            200, json={"invoice_id": "INV-1", "client_name": "Acme", "amount": "9.99"}
        )

    invoice = anyio.run(make_client(handler).get_invoice, "INV-1")

    assert invoice.invoice_id == "INV-1"
    assert invoice.formatted_amount() == "USD 9.99"


def test_get_invoice_not_found_is_flagged():
    client = make_client(lambda request: httpx.Response(404, json={"message": "Invoice not found"}))

    with pytest.raises(ApiError) as excinfo:
        anyio.run(client.get_invoice, "INV-404")

    assert excinfo.value.not_found
    assert excinfo.value.message == "Invoice not found"


def test_error_without_message_reports_status():
    client = make_client(lambda request: httpx.Response(502, text="bad gateway"))

    with pytest.raises(ApiError, match="Request failed with status 502."):
        anyio.run(client.list_invoices)


def test_transport_error_becomes_api_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ApiError, match="Backend unreachable"):
        anyio.run(make_client(handler).list_invoices)


def test_list_invoices_requires_a_list():
    client = make_client(lambda request: httpx.Response(200, json={"items": []}))

    with pytest.raises(ApiError, match="Unexpected invoice list response."):
        anyio.run(client.list_invoices)


def test_create_invoice_validates_before_sending():
    def handler(request):
        raise AssertionError("no request expected for an invalid draft")

    with pytest.raises(ValidationError):
        anyio.run(make_client(handler).create_invoice, InvoiceDraft(client_name="Acme"))


def test_create_invoice_failure_message_is_verbatim():
    client = make_client(
        lambda request: httpx.Response(
            422, json={"success": True, "message": "Wallet address is invalid"}
        )
    )
    draft = InvoiceDraft("Acme", "Work", "10", "0xabc")

    result = anyio.run(client.create_invoice, draft)

    assert not result.success
    assert result.message == "Wallet address is invalid"


def test_delete_with_empty_body_succeeds():
    def handler(request):
        assert request.method == "DELETE"
        assert request.url.path == "/api/invoices/3"
        return httpx.Response(204)

    result = anyio.run(make_client(handler).delete_invoice, 3)

    assert result.success


def test_login_returns_backend_cookies():
    def handler(request):
        return httpx.Response(
            200,
            json={"success": True},
            headers={"set-cookie": "session=abc123; Path=/"},
        )

    result = anyio.run(make_client(handler).login, "admin", "admin")

    assert result.success
    assert result.cookies == {"session": "abc123"}


def test_with_cookies_sends_session():
    seen = []

    def handler(request):
        seen.append(request.headers.get("cookie"))
        return httpx.Response(200, json=[])

    client = make_client(handler).with_cookies({"session": "abc123"})
    anyio.run(client.list_invoices)

    assert seen == ["session=abc123"]


def test_provider_key_is_cached(tmp_path):
    calls = []

    def handler(request):
        calls.append(request.url.path)
        return httpx.Response(200, json={"publicKey": "FLWPUBK-1"})

    cache = DiskCache(tmp_path / "cache")
    client = make_client(handler, cache=cache, cache_ttl=60)
    try:
        first = anyio.run(client.get_provider_key, "/config/flutterwave-key", "publicKey")
        second = anyio.run(client.get_provider_key, "/config/flutterwave-key", "publicKey")
    finally:
        cache.close()

    assert first == second == "FLWPUBK-1"
    assert calls == ["/api/config/flutterwave-key"]


def test_empty_provider_key_is_not_cached(tmp_path):
    calls = []

    def handler(request):
        calls.append(request.url.path)
        return httpx.Response(200, json={"publicKey": ""})

    cache = DiskCache(tmp_path / "cache")
    client = make_client(handler, cache=cache, cache_ttl=60)
    try:
        for _ in range(2):
            assert anyio.run(client.get_provider_key, "/config/flutterwave-key", "publicKey") == ""
    finally:
        cache.close()

    assert len(calls) == 2


def test_receipt_url():
    assert make_client(lambda request: None).receipt_url("INV-1") == (
        f"{API_BASE_URL}/invoices/INV-1/receipt"
    )


def test_invoice_id_is_a_single_path_segment():
    seen = []

    def handler(request):
        seen.append(request.url)
        return httpx.Response(200, json={"invoice_id": "INV-1", "amount": "1"})

    client = make_client(handler)
    anyio.run(client.get_invoice, "INV-1?x=1#y")
    anyio.run(client.get_invoice, "../config/flutterwave-key")

    assert seen[0].raw_path == b"/api/invoices/INV-1%3Fx%3D1%23y"
    assert seen[0].query == b""
    assert seen[1].raw_path == b"/api/invoices/..%2Fconfig%2Fflutterwave-key"


def test_unreadable_invoice_becomes_api_error(monkeypatch):
    def explode(payload):
        raise ValueError("bad amount")

    monkeypatch.setattr("paybridge_ui.services.api_client.parse_invoice", explode)
    client = make_client(
        lambda request: httpx.Response(200, json={"invoice_id": "INV-1"})
    )

    with pytest.raises(ApiError, match="unreadable invoice"):
        anyio.run(client.get_invoice, "INV-1")


def test_receipt_url_encodes_invoice_id():
    assert make_client(lambda request: None).receipt_url("a/b") == (
        f"{API_BASE_URL}/invoices/a%2Fb/receipt"
    )
