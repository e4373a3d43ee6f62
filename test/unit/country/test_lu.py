import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidDate, InvalidSyntax


def test10_valid():
    assert TIN.from_country("LU", "1893120105732").check()


@pytest.mark.parametrize(
    "tin, exc",
    [
        ("1893120105733", InvalidSyntax),
        ("1893022905732", InvalidDate),
        ("18931201057321", InvalidLength),
        ("wwwwwwwwwwwww", InvalidPattern),
    ],
)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("LU", tin).check()
