from datetime import datetime
from decimal import Decimal

import pytest

from paybridge_ui import utils


def test_format_currency():
    assert utils.format_currency(Decimal("1234.5")) == "USD 1,234.50"
    assert utils.format_currency(3, "EUR") == "EUR 3.00"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("12.50", Decimal("12.50")),
        (" $1,000 ", Decimal("1000")),
        ("", None),
        (None, None),
        ("abc", None),
        ("NaN", None),
        ("Infinity", None),
    ],
)
def test_parse_amount(text, expected):
    assert utils.parse_amount(text) == expected


def test_parse_date_formats():
    assert utils.parse_date("2025-03-04T09:15:00Z").year == 2025
    assert utils.parse_date("03/04/2025") == datetime(2025, 3, 4)
    assert utils.parse_date("yesterday") is None
    assert utils.parse_date(None) is None


def test_links():
    assert utils.invoice_url("http://app.test/", "INV-1") == "http://app.test/invoice/INV-1"
    assert (
        utils.receipt_url("http://backend.test/api", "INV-1")
        == "http://backend.test/api/invoices/INV-1/receipt"
    )


def test_links_encode_invoice_ids():
    assert utils.path_segment("INV 1/2?#") == "INV%201%2F2%3F%23"
    assert utils.path_segment(42) == "42"
    assert utils.invoice_url("http://app.test", "a/b") == "http://app.test/invoice/a%2Fb"
