"""
Test Chinese Citizen ID & USCC
"""

from datetime import date

import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidDate, InvalidSyntax


def today():
    return date(2024, 6, 1)


TEST_VALID = [
    ("11010519491231002X", "ID"),
    ("11010519491231002x", "ID"),
    ("91350100M000100Y43", "USCC"),
]

TEST_INVALID = [
    ("110105194912310021", InvalidSyntax),
    # unknown province
    ("99010519491231002X", InvalidSyntax),
    ("110105194913310021", InvalidDate),
    # born in the future
    ("110105203001010012", InvalidDate),
    ("11010519491231002", InvalidLength),
    ("ABCDEFGHIJKLMNOPQR", InvalidPattern),
]


@pytest.mark.parametrize("tin, code", TEST_VALID)
def test10_valid(tin, code):
    obj = TIN.from_country("CN", tin, today=today)
    assert obj.check()
    assert obj.identify_tin_type().code == code


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("CN", tin, today=today).check()


def test30_clock():
    """
    The upper bound for birth years follows the injected clock
    """
    tin = TIN.from_country("CN", "110105201001010012", today=lambda: date(2005, 1, 1))
    with pytest.raises(InvalidDate):
        tin.check()


@pytest.mark.parametrize(
    "value, exp",
    [
        ("11010519491231002x", "11010519491231002X"),
        ("110105 19491231 002X", "11010519491231002X"),
        ("91350100M000100Y43", "91350100M000100Y43"),
        ("91350100-m000100y43", "91350100M000100Y43"),
    ],
)
def test40_format(value, exp):
    """
    Letters are kept in both schemes
    """
    assert TIN.from_slug("CN").format_input(value) == exp
