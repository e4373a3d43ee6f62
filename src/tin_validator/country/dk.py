"""
Danish Central Person Register Number (CPR-nummer)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum, is_date

_WEIGHTS = (4, 3, 2, 7, 6, 5, 4, 3, 2)

# Years in which numbers for people born on January 1st were issued
# without a valid check digit
_NO_CHECK_YEARS = frozenset(
    [60, 64, 65, 66, 69, 70, 74, 80, 82, 84, 85, 86, 87, 88, 89, 90, 91, 92]
)


class Denmark(BaseTinHandler):
    COUNTRYCODE = "DK"
    LENGTH = 10
    PATTERN = r"[0-3]\d[0-1]\d{3}\d{4}"
    MASK = "999999-9999"
    PLACEHOLDER = "2110625629"
    TIN_TYPES = (
        TinType("CPR", "Danish CPR", "Danish Central Person Register Number (CPR-nummer)"),
    )

    def has_valid_date(self, tin: str) -> bool:
        day, month, year = int(tin[0:2]), int(tin[2:4]), int(tin[4:6])
        return is_date(1900 + year, month, day) or is_date(2000 + year, month, day)

    def has_valid_rule(self, tin: str) -> bool:
        day, month, year = int(tin[0:2]), int(tin[2:4]), int(tin[4:6])
        serial = int(tin[6:10])
        if 37 <= year <= 57 and 5000 <= serial <= 8999:
            return False
        if day == 1 and month == 1 and year in _NO_CHECK_YEARS:
            return True
        rem = weighted_sum(tin, _WEIGHTS) % 11
        if rem == 1:
            return False
        return digit_at(tin, 9) == (0 if rem == 0 else 11 - rem)


TIN_HANDLERS = [Denmark]
