"""Landing page (/)."""

import reflex as rx

from paybridge_ui.components.layout import page_shell
from paybridge_ui.payments import get_payment_provider
from paybridge_ui.state import APP_SUBTITLE, APP_TITLE

ROUTE = "/"

FEATURES = [
    ("zap", "Instant Links", "Create an invoice and share its payment link in seconds."),
    ("globe", "Pay From Anywhere", "Clients pay by card or wallet from any country."),
    ("shield-check", "Secure Checkout", "Payments run through a trusted provider."),
]


def feature_card(icon: str, title: str, body: str) -> rx.Component:
    return rx.box(
        rx.icon(icon, size=28, class_name="title-icon"),
        rx.heading(title, size="4", as_="h3"),
        rx.text(body, class_name="muted"),
        class_name="card feature-card",
    )


def landing_page() -> rx.Component:
    """Build the landing page."""
    provider = get_payment_provider()
    return page_shell(
        rx.box(
            rx.heading(APP_TITLE, size="9", as_="h1"),
            rx.text(APP_SUBTITLE, class_name="muted hero-subtitle"),
            rx.hstack(
                rx.link(
                    rx.button("Start Generating Invoices →", class_name="primary-button"),
                    href="/admin/login",
                ),
                rx.link(
                    rx.button("Learn More", variant="outline"),
                    href=provider.website,
                    is_external=True,
                ),
                spacing="3",
                justify="center",
            ),
            class_name="hero centered",
        ),
        rx.box(
            *[feature_card(icon, title, body) for icon, title, body in FEATURES],
            class_name="feature-grid",
        ),
        width="wide",
    )
