"""
Nigerian Tax Identification Number
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import all_same


class Nigeria(BaseTinHandler):
    COUNTRYCODE = "NG"
    LENGTH = 10
    PATTERN = r"^\d{10}$"
    MASK = "9999999999"
    PLACEHOLDER = "1234567890"
    TIN_TYPES = (TinType("TIN", "Nigerian TIN", "Nigerian Tax Identification Number"),)

    def has_valid_rule(self, tin: str) -> bool:
        return not all_same(tin) and tin[0] != "0"


TIN_HANDLERS = [Nigeria]
