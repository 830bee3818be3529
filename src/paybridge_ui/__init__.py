"""
PayBridge UI: a Reflex front end for creating and paying invoices.

Admins sign in, create invoices and share their payment links; payers open
a link and pay through a hosted checkout widget (Flutterwave or Transak).
All data lives in the PayBridge REST backend.

Subpackages:
- components: Reusable Reflex UI components
- pages: One module per route, with its page state
- models: Data models and serialization
- payments: Provider adapters and the payer-side payment flow
- services: Backend client, dashboard and login operations, demo backend
- data: Static demo fixtures
- lib: Logging, caching and serialization helpers

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
