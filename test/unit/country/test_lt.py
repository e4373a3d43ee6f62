import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidDate, InvalidSyntax

TEST_INVALID = [
    ("33309240065", InvalidSyntax),
    ("33313240064", InvalidDate),
    # 3 means the 1900s, and 1900 was not a leap year
    ("30002290000", InvalidDate),
    ("3330924006", InvalidLength),
    ("73309240064", InvalidPattern),
]


def test10_valid():
    """
    The first weight table yields 10, so the second one is used
    """
    assert TIN.from_country("LT", "33309240064").check()


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("LT", tin).check()
