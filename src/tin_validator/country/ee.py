"""
Estonian Personal Identification Code (Isikukood)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum, is_date

_WEIGHTS_1 = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
_WEIGHTS_2 = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


class Estonia(BaseTinHandler):
    COUNTRYCODE = "EE"
    LENGTH = 11
    PATTERN = r"[1-6]\d{2}[0-1]\d[0-3]\d{5}"
    MASK = "99999999999"
    PLACEHOLDER = "37605030299"
    TIN_TYPES = (
        TinType("IK", "Estonian IK", "Estonian Personal Identification Code (Isikukood)"),
    )

    def has_valid_date(self, tin: str) -> bool:
        year, month, day = int(tin[1:3]), int(tin[3:5]), int(tin[5:7])
        return is_date(1900 + year, month, day) or is_date(2000 + year, month, day)

    def has_valid_rule(self, tin: str) -> bool:
        """
        Mod 11 with a second weight table when the first one yields 10
        """
        if not 0 < int(tin[7:10]) < 711:
            return False
        check = digit_at(tin, 10)
        rem = weighted_sum(tin, _WEIGHTS_1) % 11
        if rem < 10:
            return rem == check
        rem = weighted_sum(tin, _WEIGHTS_2) % 11
        return check == (0 if rem == 10 else rem)


TIN_HANDLERS = [Estonia]
