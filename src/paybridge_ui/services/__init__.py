"""
Service factory for the PayBridge UI.

This module provides get_backend_client(), which returns the shared
BackendClient for the configured backend kind.

Available backends:
- live: the real PayBridge REST backend at PAYBRIDGE_API_BASE_URL
- demo: the in-memory DemoBackend served through an httpx transport

The client is cached at the module level, so the same instance (and, in
demo mode, the same in-memory data) is reused across all sessions.
Configure via the PAYBRIDGE_BACKEND environment variable.
"""

from functools import cache
from typing import Callable, Dict

import httpx

from paybridge_ui.lib import logs, paths
from paybridge_ui.lib.caches import DiskCache
from paybridge_ui.services.api_client import BackendClient
from paybridge_ui.services.demo_backend import DemoBackend
from paybridge_ui.settings import Settings, get_settings

LOG = logs.logger(__file__)

_TRANSPORT_REGISTRY: Dict[
    str, Callable[[Settings], httpx.AsyncBaseTransport | None]
] = {
    "live": lambda settings: None,
    "demo": lambda settings: DemoBackend(frontend_url=settings.frontend_url).transport,
}


@cache
def get_backend_client(kind: str | None = None) -> BackendClient:
    """Return the configured backend client."""
    settings = get_settings()
    resolved_kind = (kind or settings.backend).lower()
    LOG.info("get_backend_client - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _TRANSPORT_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown backend kind: {resolved_kind}"
        raise ValueError(msg) from exc

    config_cache = None
    if settings.config_cache_ttl > 0:
        config_cache = DiskCache(paths.cache_dir("provider_config"))
    return BackendClient(
        settings.api_base_url,
        timeout=settings.http_timeout,
        transport=factory(settings),
        cache=config_cache,
        cache_ttl=settings.config_cache_ttl,
    )


__all__ = ["BackendClient", "DemoBackend", "get_backend_client"]
