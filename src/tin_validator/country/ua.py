"""
Ukrainian individual taxpayer number (RNOKPP)

The check digit is the last digit of the sum of the first nine digits
weighted 1 to 9. This is a simplification of the official scheme and may
accept or reject numbers the tax office would not.
"""

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum
from tin_validator.helper.normalizer import digits_only


def ua_checksum(tin: str) -> bool:
    return weighted_sum(tin, range(1, 10)) % 10 == digit_at(tin, 9)


class Ukraine(BaseTinHandler):
    COUNTRYCODE = "UA"
    LENGTH = 10
    PATTERN = r"^\d{10}$"
    MASK = "9999999999"
    PLACEHOLDER = "1234567890"
    TIN_TYPES = (
        TinType(
            "INDIVIDUAL_TAX_NUMBER",
            "Individual Tax Number",
            "Individual taxpayer identification number",
        ),
    )

    def normalize_tin(self, tin: str) -> str:
        return digits_only(tin)

    def has_valid_rule(self, tin: str) -> bool:
        return tin != "0" * 10 and ua_checksum(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = self.normalize_tin(tin)
        if self.has_valid_length(ntin) and self.has_valid_pattern(ntin) and self.has_valid_rule(ntin):
            return self.get_tin_types()[1]
        return None


TIN_HANDLERS = [Ukraine]
