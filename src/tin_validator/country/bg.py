"""
Bulgarian Unique Civil Number (Edinen Grazhdanski Nomer)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum, is_date

_WEIGHTS = (2, 4, 8, 5, 10, 9, 7, 3, 6)


class Bulgaria(BaseTinHandler):
    COUNTRYCODE = "BG"
    LENGTH = 10
    PATTERN = r"\d{10}"
    MASK = "9999999999"
    PLACEHOLDER = "7523169263"
    TIN_TYPES = (
        TinType(
            "EGN",
            "Bulgarian EGN",
            "Bulgarian Unique Civil Number (Edinen Grazhdanski Nomer)",
        ),
    )

    def has_valid_date(self, tin: str) -> bool:
        """
        The month carries the century: +20 for the 1800s, +40 for the 2000s
        """
        year, month, day = int(tin[0:2]), int(tin[2:4]), int(tin[4:6])
        if 21 <= month <= 32:
            return is_date(1800 + year, month - 20, day)
        if 41 <= month <= 52:
            return is_date(2000 + year, month - 40, day)
        return is_date(1900 + year, month, day)

    def has_valid_rule(self, tin: str) -> bool:
        rem = weighted_sum(tin, _WEIGHTS) % 11
        return digit_at(tin, 9) == (0 if rem == 10 else rem)


TIN_HANDLERS = [Bulgaria]
