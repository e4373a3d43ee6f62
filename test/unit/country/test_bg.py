import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidDate, InvalidSyntax

TEST_INVALID = [
    ("7523169264", InvalidSyntax),
    # February 30th
    ("7502309263", InvalidDate),
    ("752316926", InvalidLength),
    ("75231692AB", InvalidPattern),
]


def test10_valid():
    """
    A month above 20 means a birth in the 1800s
    """
    assert TIN.from_country("BG", "7523169263").check()


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("BG", tin).check()
