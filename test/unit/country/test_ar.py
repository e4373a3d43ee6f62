"""
Test Argentinian CUIT
"""

import pytest

from tin_validator import TIN, InvalidLength, InvalidSyntax

TEST_VALID = ["20-12345678-6", "20123456786", "30712345671"]

TEST_INVALID = [
    ("20123456780", InvalidSyntax),
    # unknown type prefix
    ("19123456786", InvalidSyntax),
    # the computed check digit would be 10
    ("20123456760", InvalidSyntax),
    ("20123456761", InvalidSyntax),
    ("2012345678", InvalidLength),
    ("AB-CDEFGHIJ-K", InvalidLength),
]


@pytest.mark.parametrize("tin", TEST_VALID)
def test10_valid(tin):
    assert TIN.from_country("AR", tin).check()


@pytest.mark.parametrize("tin, exc", TEST_INVALID)
def test20_invalid(tin, exc):
    with pytest.raises(exc):
        TIN.from_country("AR", tin).check()


def test30_format():
    tin = TIN.from_slug("AR")
    assert tin.format_input("20123456786") == "20-12345678-6"
    assert tin.format_input("2012") == "20-12"
    assert tin.get_input_mask() == "99-99999999-9"
