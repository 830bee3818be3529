"""Seed invoices for the in-memory demo backend, in backend JSON shape."""

DEMO_INVOICES: list[dict] = [
    {
        "id": 1,
        "invoice_id": "INV-7F3A9C21",
        "client_name": "Northwind Studio",
        "description": "Brand identity design, phase 1",
        "amount": "1250.00",
        "status": "UNPAID",
        "client_email": "billing@northwind.example",
        "client_phone": "+1-555-010-2000",
        "wallet_address": "0x8ba1f109551bD432803012645Ac136ddd64DBA72",
        "created_at": "2025-03-04T09:15:00Z",
    },
    {
        "id": 2,
        "invoice_id": "INV-2B6D04E8",
        "client_name": "Lumen Analytics",
        "description": "Dashboard development retainer (March)",
        "amount": "3400.50",
        "status": "PAID",
        "client_email": "ap@lumen.example",
        "client_phone": None,
        "wallet_address": "GTBank 0123456789",
        "created_at": "2025-03-01T14:40:00Z",
    },
    {
        "id": 3,
        "invoice_id": "INV-C91E55B0",
        "client_name": "Harbor & Pine",
        "description": "Copywriting for product launch",
        "amount": "480",
        "status": "UNPAID",
        "client_email": None,
        "client_phone": None,
        "wallet_address": "0x71C7656EC7ab88b098defB751B7401B5f6d8976F",
        "created_at": "2025-02-26T11:05:00Z",
    },
]
