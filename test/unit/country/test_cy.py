import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidSyntax


def test10_valid():
    assert TIN.from_country("CY", "12345678F").check()
    assert TIN.from_country("CY", "12345678f").check()


@pytest.mark.parametrize(
    "tin, exc",
    [
        ("12345678L", InvalidSyntax),
        ("1234567F", InvalidLength),
        ("123456789", InvalidPattern),
    ],
)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("CY", tin).check()
