"""Admin login page (/admin/login)."""

import reflex as rx

from paybridge_ui.components.layout import page_shell
from paybridge_ui.lib import logs
from paybridge_ui.services import get_backend_client
from paybridge_ui.services.auth import authenticate
from paybridge_ui.state import AdminSessionState

LOG = logs.logger(__file__)

ROUTE = "/admin/login"
DASHBOARD_ROUTE = "/admin/dashboard"


class LoginState(rx.State):
    """State for the admin login form."""

    username: str = ""
    password: str = ""
    show_password: bool = False
    is_loading: bool = False
    error: str = ""

    @rx.event
    def set_username(self, value: str):
        self.username = value

    @rx.event
    def set_password(self, value: str):
        self.password = value

    @rx.event
    def toggle_show_password(self):
        self.show_password = not self.show_password

    @rx.event
    async def handle_login(self, form_data: dict):
        """
        Submit the credentials and open the dashboard on success.

        The inputs are controlled, so form_data only duplicates the state.
        """
        self.is_loading = True
        self.error = ""
        yield
        try:
            result = await authenticate(
                get_backend_client(), self.username, self.password
            )
        finally:
            self.is_loading = False
        if not result.success:
            self.error = result.message
            return
        session = await self.get_state(AdminSessionState)
        session._set_session(result.cookies)
        self.password = ""
        yield rx.redirect(DASHBOARD_ROUTE)


def login_page() -> rx.Component:
    """Build the admin login form."""
    return page_shell(
        rx.box(
            rx.box(
                rx.icon("shield-check", class_name="title-icon", size=32),
                rx.heading("Admin Login", size="6", as_="h1"),
                rx.text("Sign in to manage invoices", class_name="muted"),
                class_name="card-header centered",
            ),
            rx.form(
                rx.box(
                    rx.text("Username", class_name="label"),
                    rx.input(
                        value=LoginState.username,
                        on_change=LoginState.set_username,
                        placeholder="Username",
                        auto_complete="username",
                    ),
                    class_name="form-field",
                ),
                rx.box(
                    rx.text("Password", class_name="label"),
                    rx.hstack(
                        rx.input(
                            value=LoginState.password,
                            on_change=LoginState.set_password,
                            type=rx.cond(LoginState.show_password, "text", "password"),
                            placeholder="Password",
                            auto_complete="current-password",
                            width="100%",
                        ),
                        rx.button(
                            rx.cond(
                                LoginState.show_password,
                                rx.icon("eye-off", size=16),
                                rx.icon("eye", size=16),
                            ),
                            type="button",
                            on_click=LoginState.toggle_show_password,
                            variant="soft",
                            aria_label="Show password",
                        ),
                        spacing="2",
                        width="100%",
                    ),
                    class_name="form-field",
                ),
                rx.cond(
                    LoginState.error != "",
                    rx.text(LoginState.error, class_name="form-error"),
                ),
                rx.button(
                    rx.cond(LoginState.is_loading, "Signing in...", "Sign In"),
                    type="submit",
                    disabled=LoginState.is_loading,
                    class_name="primary-button",
                    width="100%",
                ),
                on_submit=LoginState.handle_login,
            ),
            class_name="card login-card",
        ),
    )
