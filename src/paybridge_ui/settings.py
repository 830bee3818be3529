"""
Runtime configuration for the PayBridge UI.

All settings come from environment variables and are read once into a
frozen Settings instance. Call get_settings() to obtain the shared copy;
tests build their own Settings directly.
"""

import functools
import os
from dataclasses import dataclass
from typing import Callable, TypeVar

from paybridge_ui.lib import logs

LOG = logs.logger(__file__)

_T = TypeVar("_T", int, float)


def _env_number(key: str, default: _T, convert: Callable[[str], _T]) -> _T:
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return convert(raw)
    except ValueError:
        LOG.warning("Ignoring invalid %s=%r; using %s", key, raw, default)
        return default


def _env_float(key: str, default: float) -> float:
    return _env_number(key, default, float)


def _env_int(key: str, default: int) -> int:
    return _env_number(key, default, int)


@dataclass(frozen=True)
class Settings:
    """
    Application settings.

    Attributes:
        api_base_url: Base URL of the PayBridge REST backend.
        frontend_url: Public URL of this app, used for logos and links.
        payment_provider: Registered payment provider kind.
        provider_script_url: Override for the provider checkout script URL.
        backend: "live" for the real backend, "demo" for the in-memory one.
        http_timeout: Timeout in seconds for backend requests.
        config_cache_ttl: Seconds a provider public key stays cached (0 disables).
        script_poll_interval: Seconds between provider script checks.
        script_max_attempts: Check ceiling before giving up.
        transak_environment: Transak widget environment.
        app_port: Port the Reflex server listens on.
    """

    api_base_url: str = "http://localhost:4000/api"
    frontend_url: str = "http://localhost:3000"
    payment_provider: str = "flutterwave"
    provider_script_url: str = ""
    backend: str = "live"
    http_timeout: float = 15.0
    config_cache_ttl: int = 300
    script_poll_interval: float = 0.5
    script_max_attempts: int = 20
    transak_environment: str = "STAGING"
    app_port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        """Build Settings from the current process environment."""
        defaults = cls()
        return cls(
            api_base_url=os.getenv(
                "PAYBRIDGE_API_BASE_URL", defaults.api_base_url
            ).rstrip("/"),
            frontend_url=os.getenv(
                "PAYBRIDGE_FRONTEND_URL", defaults.frontend_url
            ).rstrip("/"),
            payment_provider=os.getenv(
                "PAYBRIDGE_PAYMENT_PROVIDER", defaults.payment_provider
            ).lower(),
            provider_script_url=os.getenv("PAYBRIDGE_PROVIDER_SCRIPT_URL", ""),
            backend=os.getenv("PAYBRIDGE_BACKEND", defaults.backend).lower(),
            http_timeout=_env_float("PAYBRIDGE_HTTP_TIMEOUT", defaults.http_timeout),
            config_cache_ttl=_env_int(
                "PAYBRIDGE_CONFIG_CACHE_TTL", defaults.config_cache_ttl
            ),
            script_poll_interval=_env_float(
                "PAYBRIDGE_SCRIPT_POLL_INTERVAL", defaults.script_poll_interval
            ),
            script_max_attempts=_env_int(
                "PAYBRIDGE_SCRIPT_MAX_ATTEMPTS", defaults.script_max_attempts
            ),
            transak_environment=os.getenv(
                "PAYBRIDGE_TRANSAK_ENVIRONMENT", defaults.transak_environment
            ).upper(),
            app_port=_env_int("APP_PORT", defaults.app_port),
        )


@functools.cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded from the environment once."""
    return Settings.from_env()
