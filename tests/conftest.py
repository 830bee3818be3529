import httpx
import pytest

from paybridge_ui.services.api_client import BackendClient
from paybridge_ui.services.demo_backend import DemoBackend
from paybridge_ui.settings import Settings

API_BASE_URL = "http://backend.test/api"
FRONTEND_URL = "http://app.test"


@pytest.fixture
def settings():
    return Settings(
        api_base_url=API_BASE_URL,
        frontend_url=FRONTEND_URL,
        config_cache_ttl=0,
    )


@pytest.fixture
def demo_backend():
    return DemoBackend(frontend_url=FRONTEND_URL)


@pytest.fixture
def demo_client(demo_backend):
    return BackendClient(API_BASE_URL, transport=demo_backend.transport)


def make_client(handler, **kwargs) -> BackendClient:
    """Build a client whose requests are answered by handler(request)."""
    return BackendClient(API_BASE_URL, transport=httpx.MockTransport(handler), **kwargs)
