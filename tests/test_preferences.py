import pytest

from paybridge_ui.models.common import (
    CreateInvoiceResult,
    LoginResult,
    MutationResult,
    Preferences,
)


def test_toggle_round_trip():
    stored = Preferences().encode()

    dark = Preferences.decode(stored).toggled()
    restored = Preferences.decode(dark.encode())

    assert stored == "false"
    assert dark.encode() == "true"
    assert restored.dark_mode
    assert not restored.toggled().dark_mode


@pytest.mark.parametrize("raw", [None, "", "{not json", "1", '"true"', "null"])
def test_missing_or_corrupt_value_is_light(raw):
    assert Preferences.decode(raw) == Preferences(dark_mode=False)


def test_result_envelopes():
    assert MutationResult.from_dict(None) == MutationResult(success=False, message="")
    assert CreateInvoiceResult.from_dict({"success": True, "link": "x"}).link == "x"
    login = LoginResult.from_dict({"success": True}, cookies={"s": "1"})
    assert login.cookies == {"s": "1"}
