import anyio
import httpx

from conftest import make_client
from paybridge_ui.services.auth import (
    INVALID_CREDENTIALS,
    LOGIN_FAILED,
    MISSING_CREDENTIALS,
    authenticate,
)


def test_missing_credentials_send_nothing():
    def handler(request):
        raise AssertionError("no request expected")

    result = anyio.run(authenticate, make_client(handler), "  ", "secret")

    assert not result.success
    assert result.message == MISSING_CREDENTIALS


def test_successful_login_keeps_cookies(demo_client):
    result = anyio.run(authenticate, demo_client, "admin", "admin")

    assert result.success
    assert result.cookies


def test_backend_message_is_verbatim(demo_client):
    result = anyio.run(authenticate, demo_client, "admin", "nope")

    assert result.message == "Invalid username or password."


def test_rejection_without_message_uses_default():
    client = make_client(lambda request: httpx.Response(401, json={"success": False}))

    result = anyio.run(authenticate, client, "admin", "nope")

    assert result.message == INVALID_CREDENTIALS


def test_transport_failure_never_raises():
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    result = anyio.run(authenticate, make_client(handler), "admin", "admin")

    assert not result.success
    assert result.message == LOGIN_FAILED


def test_error_without_json_body_never_raises():
    client = make_client(lambda request: httpx.Response(500, text="oops"))

    result = anyio.run(authenticate, client, "admin", "admin")

    assert result.message == LOGIN_FAILED
