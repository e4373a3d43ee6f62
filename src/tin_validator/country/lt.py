"""
Lithuanian Personal Code (Asmens kodas)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum, is_date

_WEIGHTS_1 = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
_WEIGHTS_2 = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

# The first digit encodes gender and century
_CENTURY = {"1": 1800, "2": 1800, "3": 1900, "4": 1900, "5": 2000, "6": 2000}


class Lithuania(BaseTinHandler):
    COUNTRYCODE = "LT"
    LENGTH = 11
    PATTERN = r"[1-6]\d{2}[0-1]\d[0-3]\d{5}"
    MASK = "99999999999"
    PLACEHOLDER = "33309240064"
    TIN_TYPES = (
        TinType("AK", "Lithuanian AK", "Lithuanian Personal Code (Asmens kodas)"),
    )

    def has_valid_date(self, tin: str) -> bool:
        year, month, day = int(tin[1:3]), int(tin[3:5]), int(tin[5:7])
        return is_date(_CENTURY[tin[0]] + year, month, day)

    def has_valid_rule(self, tin: str) -> bool:
        check = digit_at(tin, 10)
        rem = weighted_sum(tin, _WEIGHTS_1) % 11
        if rem != 10:
            return check == rem
        rem = weighted_sum(tin, _WEIGHTS_2) % 11
        return check == (0 if rem == 10 else rem)


TIN_HANDLERS = [Lithuania]
