import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidSyntax

TEST_VALID = ["300123456789015", "310000000000015", "399999999999999"]

TEST_INVALID = [
    ("300123456789014", InvalidSyntax),
    ("333333333333333", InvalidSyntax),
    ("30012345678901", InvalidLength),
    ("200123456789015", InvalidPattern),
]


@pytest.mark.parametrize("tin", TEST_VALID)
def test10_valid(tin):
    assert TIN.from_country("SA", tin).check()


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("SA", tin).check()
