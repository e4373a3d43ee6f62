"""
Test Czech birth numbers
"""

from datetime import date

import pytest

from tin_validator import TIN, InvalidLength, InvalidDate, InvalidSyntax


def today():
    return date(2024, 6, 1)


TEST_VALID = [
    "7103192745",
    "710319/2745",
    # female
    "7153192740",
    # old 9-digit number
    "530101123",
    # issued after 2004, month + 20
    "0421011239",
]

TEST_INVALID = [
    ("7103192746", InvalidSyntax),
    # 9-digit numbers stop in 1953
    ("540101123", InvalidSyntax),
    ("7113192745", InvalidDate),
    ("71031927", InvalidLength),
]


@pytest.mark.parametrize("tin", TEST_VALID)
def test10_valid(tin):
    assert TIN.from_country("CZ", tin, today=today).check()


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("CZ", tin, today=today).check()


def test30_clock():
    """
    The +20 month offset is only admissible for years already reached
    """
    tin = TIN.from_country("CZ", "0421011239", today=lambda: date(2003, 1, 1))
    with pytest.raises(InvalidDate):
        tin.check()
