"""
Slovenian tax number (Davčna številka)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum


class Slovenia(BaseTinHandler):
    COUNTRYCODE = "SI"
    LENGTH = 8
    PATTERN = r"^[1-9]\d{7}$"
    MASK = "99999999"
    PLACEHOLDER = "15012557"
    TIN_TYPES = (TinType("DAVCNA", "Davčna številka", "Slovenian tax number"),)

    def has_valid_rule(self, tin: str) -> bool:
        check = 11 - weighted_sum(tin, range(8, 1, -1)) % 11
        if check == 11:
            return False
        return check % 10 == digit_at(tin, 7)


TIN_HANDLERS = [Slovenia]
