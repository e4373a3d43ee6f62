import tin_validator.helper.checksum as mod


def test10_digit_at():
    """
    Digits by position, 0 for missing positions
    """
    assert mod.digit_at("12345", 0) == 1
    assert mod.digit_at("12345", 4) == 5
    assert mod.digit_at("12345", 9) == 0
    assert mod.digit_at("12A45", 2) == 0


def test20_digits_sum():
    assert mod.digits_sum(0) == 0
    assert mod.digits_sum(18) == 9
    assert mod.digits_sum(1234) == 10


def test30_alphabet_position():
    assert mod.alphabet_position("A") == 1
    assert mod.alphabet_position("z") == 26
    assert mod.alphabet_position("W") == 23


def test40_last_digit():
    assert mod.last_digit(61) == 1
    assert mod.last_digit(100) == 0


def test50_weighted_sum():
    """
    Weighted sums, from the start of the string or from an offset
    """
    assert mod.weighted_sum("123", (1, 1, 1)) == 6
    assert mod.weighted_sum("123", (3, 2, 1)) == 10
    assert mod.weighted_sum("0123", (1, 10), start=2) == 32
    assert mod.weighted_sum("12", (1, 1, 1, 1)) == 3


def test60_all_same():
    assert mod.all_same("1111111111")
    assert mod.all_same("")
    assert not mod.all_same("1111111112")


def test70_is_date():
    """
    Real calendar dates, leap years included
    """
    assert mod.is_date(2000, 2, 29)
    assert not mod.is_date(1900, 2, 29)
    assert not mod.is_date(2021, 4, 31)
    assert not mod.is_date(2021, 13, 1)
    assert not mod.is_date(2021, 1, 0)
