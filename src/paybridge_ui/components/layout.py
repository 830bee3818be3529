"""
Layout helpers shared by every page.

page_shell() wraps page content with the theme class taken from
PreferencesState and the floating dark-mode toggle.
"""

import reflex as rx

from paybridge_ui.state import PreferencesState


def dark_mode_toggle() -> rx.Component:
    """Build the fixed-position dark-mode toggle button."""
    return rx.button(
        rx.cond(
            PreferencesState.dark_mode,
            rx.icon("sun", size=20),
            rx.icon("moon", size=20),
        ),
        on_click=PreferencesState.toggle_dark_mode,
        class_name="theme-toggle",
        aria_label="Toggle dark mode",
    )


def page_shell(*children: rx.Component, width: str = "narrow") -> rx.Component:
    """
    Wrap page content in the application shell.

    Args:
        *children: Page content.
        width: "narrow" for single cards, "wide" for the dashboard.

    Returns:
        The shell component.
    """
    return rx.box(
        dark_mode_toggle(),
        rx.box(*children, class_name=f"app-container {width}"),
        class_name=rx.cond(
            PreferencesState.dark_mode, "app-shell theme-dark", "app-shell"
        ),
    )


def spinner(label: str) -> rx.Component:
    """Build a centered loading indicator with a caption."""
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text(label, class_name="muted"),
        class_name="card loading-state",
    )


def error_panel(title: str, message, on_home) -> rx.Component:
    """Build a full-page error state with a home-navigation action."""
    return rx.box(
        rx.icon("circle-alert", class_name="error-icon", size=48),
        rx.heading(title, size="5", as_="h2"),
        rx.text(message, class_name="muted"),
        rx.button("Go to Home", on_click=on_home, class_name="primary-button"),
        class_name="card error-state",
    )
