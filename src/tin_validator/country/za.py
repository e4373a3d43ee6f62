"""
South African Income Tax Reference Number
"""

from stdnum import luhn

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import all_same


class SouthAfrica(BaseTinHandler):
    COUNTRYCODE = "ZA"
    LENGTH = 10
    PATTERN = r"^[0-39]\d{9}$"
    MASK = "9999999999"
    PLACEHOLDER = "0123456789"
    TIN_TYPES = (
        TinType("ITR", "South African ITR", "South African Income Tax Reference Number"),
    )

    def has_valid_rule(self, tin: str) -> bool:
        if tin[0] not in "01239" or all_same(tin):
            return False
        return luhn.is_valid(tin)


TIN_HANDLERS = [SouthAfrica]
