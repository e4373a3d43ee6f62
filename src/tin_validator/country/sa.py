"""
Saudi Arabian VAT registration number
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import all_same, digit_at, weighted_sum

# The first digit gets the highest weight
_WEIGHTS = tuple(range(15, 1, -1))


class SaudiArabia(BaseTinHandler):
    COUNTRYCODE = "SA"
    LENGTH = 15
    PATTERN = r"^3\d{14}$"
    MASK = "999999999999999"
    PLACEHOLDER = "300123456789123"
    TIN_TYPES = (TinType("VAT", "Saudi VAT Number", "Saudi Arabia VAT Registration Number"),)

    def has_valid_rule(self, tin: str) -> bool:
        if tin[0] != "3" or all_same(tin):
            return False
        check = 11 - weighted_sum(tin, _WEIGHTS) % 11
        return {10: 0, 11: 1}.get(check, check) == digit_at(tin, 14)


TIN_HANDLERS = [SaudiArabia]
