"""Reflex configuration for the PayBridge UI application."""

import reflex as rx

config = rx.Config(
    app_name="paybridge_ui",
    # Use the src directory structure
    app_module_import="paybridge_ui.app",
)
