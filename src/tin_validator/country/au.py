"""
Australian Tax File Number (TFN) and Australian Business Number (ABN)
"""

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.checksum import weighted_sum
from tin_validator.helper.normalizer import normalize, digits_only

_TFN_WEIGHTS = (10, 7, 8, 4, 6, 3, 5, 1)
_ABN_WEIGHTS = (10, 1, 3, 5, 7, 9, 11, 13, 15, 17, 19)

# Values that pass the shape checks but are never issued
_INVALID_TFN = frozenset(
    [str(d) * 8 for d in range(10)]
    + [str(d) * 9 for d in range(10)]
    + ["12345678", "87654321", "123456789", "987654321"]
)


def is_valid_tfn(tfn: str) -> bool:
    """
    8-digit TFNs carry a mod 11 weighted check. 9-digit ones cannot be
    verified offline, so only the blacklist applies
    """
    if not tfn.strip("0") or tfn in _INVALID_TFN:
        return False
    if len(tfn) == 8:
        return weighted_sum(tfn, _TFN_WEIGHTS) % 11 == 0
    return True


def is_valid_abn(abn: str) -> bool:
    """
    Subtract 1 from the leading digit, then the weighted sum must be a
    multiple of 89
    """
    if not abn.strip("0"):
        return False
    digits = [int(c) for c in abn]
    digits[0] -= 1
    return sum(d * w for d, w in zip(digits, _ABN_WEIGHTS)) % 89 == 0


class Australia(BaseTinHandler):
    COUNTRYCODE = "AU"
    LENGTH = 11
    PATTERN = r"^(\d{8,9}|\d{2}\s?\d{3}\s?\d{3}\s?\d{3})$"
    MASK = "99 999 999 999"
    PLACEHOLDER = "53 004 085 616"
    TIN_TYPES = (
        TinType(
            "TFN",
            "Tax File Number",
            "Tax File Number for individuals and organizations",
        ),
        TinType(
            "ABN",
            "Australian Business Number",
            "Australian Business Number for business entities",
        ),
    )

    def has_valid_length(self, tin: str) -> bool:
        return 8 <= len(digits_only(tin)) <= 11

    def has_valid_rule(self, tin: str) -> bool:
        number = digits_only(tin)
        if len(number) in (8, 9):
            return is_valid_tfn(number)
        if len(number) == 11:
            return is_valid_abn(number)
        return False

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        number = digits_only(normalize(tin))
        types = self.get_tin_types()
        if len(number) in (8, 9) and is_valid_tfn(number):
            return types[1]
        if len(number) == 11 and is_valid_abn(number):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        number = digits_only(value)
        if len(number) >= 10:
            return group(number, (2, 3, 3, 3), "   ")
        return number


TIN_HANDLERS = [Australia]
