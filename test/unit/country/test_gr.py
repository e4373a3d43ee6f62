import pytest

from tin_validator import TIN, InvalidLength, InvalidPattern


def test10_valid():
    assert TIN.from_country("GR", "123456789").check()


def test20_invalid():
    with pytest.raises(InvalidLength):
        TIN.from_country("GR", "12345678").check()
    with pytest.raises(InvalidPattern):
        TIN.from_country("GR", "12345678A").check()


def test30_types():
    types = TIN.get_tin_types_for_country("GR")
    assert list(types) == [1]
    assert types[1].code == "AFM"
