"""
Test German IdNr & StNr
"""

import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidSyntax

TEST_VALID = [
    ("26954371827", "IdNr"),
    ("26 954 371 827", "IdNr"),
    ("86095742719", "IdNr"),
    ("48036952129", "IdNr"),
    ("1181081508155", "StNr"),
]

TEST_INVALID = [
    ("12345678901", InvalidSyntax),
    ("06954371827", InvalidPattern),
    ("2695437182", InvalidLength),
]


@pytest.mark.parametrize("tin, code", TEST_VALID)
def test10_valid(tin, code):
    obj = TIN.from_country("DE", tin)
    assert obj.check()
    assert obj.identify_tin_type().code == code


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("DE", tin).check()
    assert TIN.from_country("DE", tin).identify_tin_type() is None


def test30_format():
    tin = TIN.from_slug("DE")
    assert tin.format_input("26954371827") == "26 954 371 827"
    assert tin.format_input("2695") == "26 95"
    # the StNr has no grouping
    assert tin.format_input("1181081508155") == "1181081508155"
    assert tin.format_input("1181 0815 08155") == "1181081508155"
