import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidSyntax


def test10_valid():
    assert TIN.from_country("SI", "15012557").check()


@pytest.mark.parametrize(
    "tin, exc",
    [
        ("15012558", InvalidSyntax),
        ("150125571", InvalidLength),
        ("05012557", InvalidPattern),
    ],
)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("SI", tin).check()
