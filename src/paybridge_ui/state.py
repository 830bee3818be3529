"""
Application-level Reflex state for the PayBridge UI.

This module holds the state shared by every page:

- PreferencesState: the dark-mode preference, loaded from and saved to
  browser local storage in one place
- AdminSessionState: cookies the backend set when the admin logged in

Page-specific states live next to their pages in paybridge_ui.pages.
"""

import reflex as rx

from paybridge_ui.lib import logs
from paybridge_ui.models.common import DARK_MODE_STORAGE_KEY, Preferences
from paybridge_ui.services import BackendClient, get_backend_client

LOG = logs.logger(__file__)

APP_TITLE = "PayBridge"
APP_SUBTITLE = "Your Borderless Payment Solution"


class PreferencesState(rx.State):
    """
    UI preferences persisted in the browser.

    stored_preferences is bound to the darkMode local-storage key and holds
    its JSON text; Preferences decodes and encodes it.
    """

    stored_preferences: str = rx.LocalStorage(
        "false", name=DARK_MODE_STORAGE_KEY, sync=True
    )

    @rx.var
    def dark_mode(self) -> bool:
        """Whether dark mode is on."""
        return Preferences.decode(self.stored_preferences).dark_mode

    @rx.event
    def toggle_dark_mode(self):
        """Flip dark mode and persist the new value."""
        preferences = Preferences.decode(self.stored_preferences).toggled()
        self.stored_preferences = preferences.encode()


class AdminSessionState(rx.State):
    """
    The admin's backend session.

    Reflex performs backend calls from the server, so cookies the backend
    sets on login are kept here (server-side only) and forwarded on
    dashboard requests.
    """

    _session_cookies: dict[str, str] = {}

    def _set_session(self, cookies: dict[str, str]) -> None:
        """Remember the cookies from a successful login."""
        self._session_cookies = dict(cookies)
        LOG.info("Admin session started with %s cookie(s)", len(cookies))

    def _backend_client(self) -> BackendClient:
        """Return a backend client carrying the admin session."""
        return get_backend_client().with_cookies(self._session_cookies)
