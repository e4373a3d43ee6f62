"""
Cyprus Tax Identification Number
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at

# Recoding of the digits in odd positions
_RECODE = {0: 1, 1: 0, 2: 5, 3: 7, 4: 9, 5: 13, 6: 15, 7: 17, 8: 19, 9: 21}


class Cyprus(BaseTinHandler):
    COUNTRYCODE = "CY"
    LENGTH = 9
    PATTERN = r"\d{8}[a-zA-Z]"
    MASK = "99999999A"
    PLACEHOLDER = "12345678L"
    TIN_TYPES = (TinType("TIN", "Cypriot TIN", "Cyprus Tax Identification Number"),)

    def has_valid_rule(self, tin: str) -> bool:
        even = sum(digit_at(tin, i) for i in (1, 3, 5, 7))
        odd = sum(_RECODE[digit_at(tin, i)] for i in (0, 2, 4, 6))
        return tin[8] == chr(ord("A") + (even + odd) % 26)


TIN_HANDLERS = [Cyprus]
