import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidSyntax


@pytest.mark.parametrize("tin", ["1234567897", "0001339050"])
def test10_valid(tin):
    assert TIN.from_country("ZA", tin).check()


@pytest.mark.parametrize(
    "tin, exc",
    [
        ("0123456788", InvalidSyntax),
        ("0000000000", InvalidSyntax),
        ("012345678", InvalidLength),
        ("4123456789", InvalidPattern),
        ("ABCDEFGHIJ", InvalidPattern),
    ],
)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("ZA", tin).check()
