"""
Malta Tax Identification Number
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler


class Malta(BaseTinHandler):
    COUNTRYCODE = "MT"
    LENGTH = 8
    PATTERN = r"\d{7}[MGAPLHBZ]"
    MASK = "9999999A"
    PLACEHOLDER = "12345678"
    TIN_TYPES = (TinType("TIN", "Maltese TIN", "Malta Tax Identification Number"),)

    def has_valid_rule(self, tin: str) -> bool:
        # the pattern is case-insensitive, the suffix letter is not
        return tin[7] in "MGAPLHBZ"


TIN_HANDLERS = [Malta]
