"""
Hungarian Tax Identification Number (Adóazonosító jel)
"""

from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum


class Hungary(BaseTinHandler):
    COUNTRYCODE = "HU"
    LENGTH = 10
    PATTERN = r"8\d{9}"
    MASK = "9999999999"
    PLACEHOLDER = "8071592153"

    def has_valid_rule(self, tin: str) -> bool:
        return weighted_sum(tin, range(1, 10)) % 11 == digit_at(tin, 9)


TIN_HANDLERS = [Hungary]
