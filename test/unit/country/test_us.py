"""
Test US SSN, ITIN & EIN
"""

import pytest

from tin_validator import TIN, InvalidLength, InvalidSyntax
from tin_validator.country.us import UnitedStates

TEST_VALID = [
    ("078-05-1120", "SSN"),
    ("001234567", "SSN"),
    ("900-70-1234", "ITIN"),
    ("912885678", "ITIN"),
    # not an SSN (dummy area), but a valid EIN prefix
    ("123456789", "EIN"),
]

TEST_INVALID = [
    ("000000000", InvalidSyntax),
    ("666123456", InvalidSyntax),
    ("123004567", InvalidSyntax),
    ("456780000", InvalidSyntax),
    ("070000000", InvalidSyntax),
    # ITIN group 12 is not assigned
    ("900123456", InvalidSyntax),
    ("12345678901", InvalidLength),
]


@pytest.mark.parametrize("tin, code", TEST_VALID)
def test10_identify(tin, code):
    assert TIN.from_country("US", tin).identify_tin_type().code == code


@pytest.mark.parametrize("tin", [t[0] for t in TEST_VALID if t[1] != "EIN"])
def test20_valid(tin):
    assert TIN.from_country("US", tin).check()


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test30_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("US", tin).check()


def test40_ein_strict():
    """
    The hyphen survives in strict mode, and selects the EIN check
    """
    assert TIN.from_slug("US12-3456789").check(strict=True)
    with pytest.raises(InvalidSyntax):
        TIN.from_slug("US07-1234567").check(strict=True)
    # the same digits without hyphen are an SSN with a dummy area
    with pytest.raises(InvalidSyntax):
        TIN.from_slug("US123456789").check(strict=True)


def test50_identify_ein():
    h = UnitedStates()
    assert h.identify_tin_type("12-3456789").code == "EIN"
    assert h.identify_tin_type("12345") is None


def test60_format():
    h = UnitedStates()
    assert h.format_input("078051120") == "078-05-1120"
    assert h.format_input("12345") == "12-345"
    assert h.format_input("123456789") == "12-3456789"
    assert h.format_input("0780") == "078-0"
