import pytest
from stdnum.nl import bsn

from tin_validator import TIN, InvalidLength, InvalidPattern, InvalidSyntax


def test10_valid():
    assert TIN.from_country("NL", "174559434").check()
    assert TIN.from_country("NL", "174-559-434").check()


@pytest.mark.parametrize(
    "tin, exc",
    [
        ("174559435", InvalidSyntax),
        ("1745", InvalidLength),
        ("wwwwwwwww", InvalidPattern),
    ],
)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("NL", tin).check()


def test30_format():
    assert TIN.from_slug("NL").format_input("174559434") == "174-559-434"


@pytest.mark.parametrize("tin", ["174559434", "174559435", "111222333", "123456782", "100000009"])
def test40_agrees_with_stdnum(tin):
    assert TIN.from_country("NL", tin).is_valid() == bsn.is_valid(tin)
