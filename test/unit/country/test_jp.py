"""
Test Japanese My Number & Corporate Number
"""

import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidSyntax

TEST_VALID = [("123456789018", "MYNUMBER"), ("1234567890127", "CORPORATE")]

TEST_INVALID = [
    ("123456789011", InvalidSyntax),
    ("111111111111", InvalidSyntax),
    ("0123456789012", InvalidSyntax),
    ("12345678901", InvalidLength),
    ("ABCDEFGHIJKL", InvalidPattern),
]


@pytest.mark.parametrize("tin, code", TEST_VALID)
def test10_valid(tin, code):
    obj = TIN.from_country("JP", tin)
    assert obj.check()
    assert obj.identify_tin_type().code == code


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("JP", tin).check()


@pytest.mark.parametrize(
    "value, exp",
    [
        ("1234 5678 9018", "123456789018"),
        ("1234567890127", "1234567890127"),
        ("1-2345-6789-0127", "1234567890127"),
    ],
)
def test30_format(value, exp):
    """
    Both numbers are shown as plain digits
    """
    assert TIN.from_slug("JP").format_input(value) == exp
