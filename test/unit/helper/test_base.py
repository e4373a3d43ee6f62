from datetime import date

import pytest

from tin_validator import TinType
from tin_validator.helper.exception import (
    InvalidLength,
    InvalidPattern,
    InvalidDate,
    InvalidSyntax,
)

import tin_validator.helper.base as mod


class ToyHandler(mod.BaseTinHandler):
    """
    Four digits, the first one must be odd, and they must add up to 10
    """

    COUNTRYCODE = "XX"
    LENGTH = 4
    PATTERN = r"^\d{4}$"

    def has_valid_date(self, tin):
        return tin[0] in "13579"

    def has_valid_rule(self, tin):
        return sum(int(c) for c in tin) == 10


class MultiLength(mod.BaseTinHandler):
    COUNTRYCODE = "XY"
    LENGTH = (6, 8)
    PATTERN = r"^[A-Z]{2}\d+$"
    MASK = "AA-9999-99"
    TIN_TYPES = (TinType("T1", "Type one"), TinType("T2", "Type two", "Second type"))


def test10_base():
    """
    Create a base object
    """
    h = ToyHandler()
    assert h.validate("1234")
    assert h.supports("xx")
    assert not h.supports("XY")
    assert repr(h) == "<ToyHandler:XX>"


def test20_stages():
    """
    Check each pipeline stage raises its own exception
    """
    h = ToyHandler()
    with pytest.raises(InvalidLength):
        h.validate("12345")
    with pytest.raises(InvalidPattern):
        h.validate("12a4")
    with pytest.raises(InvalidDate):
        h.validate("2233")
    with pytest.raises(InvalidSyntax):
        h.validate("1111")


def test21_stage_order():
    """
    The first failing stage wins
    """
    h = ToyHandler()
    # too long and also not digits
    with pytest.raises(InvalidLength) as e:
        h.validate("abcde")
    assert e.value.tin == "abcde"


@pytest.mark.parametrize(
    "value, exp",
    [
        ("ab12", "AB12"),
        ("12.34", "1234"),
        ("12 3/4", "1234"),
        ("12-3+4", "12-3+4"),
        ("ñ_1", "Ñ1"),
    ],
)
def test22_normalize_tin(value, exp):
    """
    Handler normalization keeps letters, digits, hyphens and plus signs
    """
    assert ToyHandler().normalize_tin(value) == exp


def test23_separators():
    """
    Separators other than hyphen and plus do not reach the stages
    """
    h = ToyHandler()
    assert h.validate("1.2 3/4")
    with pytest.raises(InvalidLength):
        h.validate("12-34")


def test30_types():
    """
    Check the default and declared TIN types
    """
    got = ToyHandler().get_tin_types()
    exp = {
        1: TinType(
            "TIN",
            "Tax Identification Number",
            "Standard tax identification number for XX",
        )
    }
    assert got == exp

    got = MultiLength().get_tin_types()
    assert list(got) == [1, 2]
    assert got[2].code == "T2"


def test31_identify():
    """
    The default identification uses length & pattern only
    """
    h = MultiLength()
    assert h.identify_tin_type("ab-1234") == TinType("T1", "Type one")
    assert h.identify_tin_type("ab-12345") is None
    assert h.identify_tin_type("1234") is None


def test40_mask():
    """
    Default masks and placeholders
    """
    h = ToyHandler()
    assert h.get_input_mask() == "9999"
    assert h.get_placeholder() == "1111"

    h = MultiLength()
    assert h.get_input_mask() == "AA-9999-99"
    assert h.get_placeholder() == "AA-1111-11"


def test41_format():
    """
    Format partial and complete inputs
    """
    h = MultiLength()
    assert h.format_input("ab123456") == "AB-1234-56"
    assert h.format_input("ab 12") == "AB-12"
    assert h.format_input("a1") == "A"
    assert h.format_input("") == ""


TEST_MASK = [
    ("12345678Z", "99999999A", "12345678Z"),
    ("12345678z", "99999999a", "12345678z"),
    ("123456", "999.999", "123.456"),
    ("1234", "999.999", "123.4"),
    ("123", "999.999", "123"),
    ("12A4", "9999", "12"),
]


def test50_apply_mask():
    for value, mask, exp in TEST_MASK:
        assert mod.apply_mask(value, mask) == exp


def test51_group():
    assert mod.group("12345678901", (2, 8, 1), "--") == "12-34567890-1"
    assert mod.group("12345", (2, 8, 1), "--") == "12-345"
    assert mod.group("", (2, 8, 1), "--") == ""


def test60_match():
    assert mod.match_length("1234", 4)
    assert mod.match_length("1234", (3, 4))
    assert not mod.match_length("1234", (5, 6))
    assert mod.match_pattern("ab12", r"^[A-Z]{2}\d{2}$")
    # patterns without anchors are searched
    assert mod.match_pattern("xx1234xx", r"\d{4}")


def test70_clock():
    """
    The injected clock drives the current year
    """
    assert ToyHandler(today=lambda: date(2001, 5, 5)).current_year() == 2001
    assert ToyHandler().current_year() == date.today().year
