"""
Static demo data for the PayBridge UI.

This package contains fixture data used by the in-memory demo backend
for development, testing, and demonstrations without a running backend.

Modules:
- demo_invoices: Invoice payloads in the backend's JSON shape
"""
