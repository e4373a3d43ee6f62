import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidDate, InvalidSyntax

TEST_INVALID = [
    ("0101111114", InvalidSyntax),
    ("3119999999", InvalidDate),
    ("9101111113", InvalidPattern),
    ("01011111132", InvalidLength),
]


@pytest.mark.parametrize("tin", ["0101111113", "010111-1113"])
def test10_valid(tin):
    assert TIN.from_country("DK", tin).check()


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("DK", tin).check()


def test30_format():
    assert TIN.from_slug("DK").format_input("0101111113") == "010111-1113"
