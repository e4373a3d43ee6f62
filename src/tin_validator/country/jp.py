"""
Japanese My Number (individuals) and Corporate Number
"""

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import all_same, digit_at
from tin_validator.helper.normalizer import digits_only, normalize


def is_valid_my_number(number: str) -> bool:
    """
    12 digits; the weights fold at position 6 (2..7, then 2..6 again)
    """
    if all_same(number):
        return False
    total = 0
    for i in range(11):
        p = 11 - i
        total += digit_at(number, i) * (p + 1 if p <= 6 else p - 5)
    rem = total % 11
    return digit_at(number, 11) == (0 if rem <= 1 else 11 - rem)


def is_valid_corporate_number(number: str) -> bool:
    """
    13 digits; the check digit comes first in the official layout but is
    stored here at the end. Alternating weights 1/2 from the right, mod 9
    """
    if number[0] == "0" or all_same(number):
        return False
    total = sum(digit_at(number, 11 - i) * (1 if i % 2 == 0 else 2) for i in range(12))
    return digit_at(number, 12) == 9 - total % 9


class Japan(BaseTinHandler):
    COUNTRYCODE = "JP"
    LENGTH = (12, 13)
    PATTERN = r"^\d{12,13}$"
    MASK = "999999999999"
    PLACEHOLDER = "123456789012"
    TIN_TYPES = (
        TinType("MYNUMBER", "My Number", "Individual identification number"),
        TinType("CORPORATE", "Corporate Number", "Corporate identification number"),
    )

    def has_valid_rule(self, tin: str) -> bool:
        if len(tin) == 12:
            return is_valid_my_number(tin)
        return is_valid_corporate_number(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = self.normalize_tin(normalize(tin))
        types = self.get_tin_types()
        if len(ntin) == 12 and is_valid_my_number(ntin):
            return types[1]
        if len(ntin) == 13 and is_valid_corporate_number(ntin):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        return digits_only(value)


TIN_HANDLERS = [Japan]
