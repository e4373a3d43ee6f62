"""
United States taxpayer identification numbers:
  * SSN, Social Security Number
  * ITIN, Individual Taxpayer Identification Number
  * EIN, Employer Identification Number
"""

import regex

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.normalizer import digits_only, normalize

_EIN = regex.compile(r"^\d{2}-?\d{7}$")
_SSN = regex.compile(r"^\d{3}-?\d{2}-?\d{4}$")

# Campus prefixes assigned by the IRS to EINs
EIN_PREFIXES = frozenset(
    [1, 2, 3, 4, 5, 6, 10, 11, 12, 13, 14, 15, 16]
    + list(range(20, 28))
    + list(range(30, 49))
    + list(range(50, 69))
    + list(range(71, 78))
    + list(range(80, 89))
    + [90, 91, 92, 93, 94, 95, 98, 99]
)

# Admissible values of the ITIN group (fourth and fifth digits)
ITIN_GROUPS = ((50, 65), (70, 88), (90, 92), (94, 99))

# SSN areas that look like placeholders
DUMMY_AREAS = ("123", "456", "789")


def is_valid_ein(tin: str) -> bool:
    return int(tin[:2]) in EIN_PREFIXES


def is_valid_itin(tin: str) -> bool:
    if tin[0] != "9":
        return False
    middle = int(tin[3:5])
    return any(lo <= middle <= hi for lo, hi in ITIN_GROUPS)


def is_valid_ssn_or_itin(tin: str) -> bool:
    area, grp, serial = tin[:3], tin[3:5], tin[5:9]
    if area == "000" or grp == "00" or serial == "0000":
        return False
    if int(area) >= 900:
        return is_valid_itin(tin)
    return area != "666" and area not in DUMMY_AREAS


class UnitedStates(BaseTinHandler):
    COUNTRYCODE = "US"
    LENGTH = 9
    PATTERN = r"^(\d{3}-?\d{2}-?\d{4}|\d{2}-?\d{7})$"
    MASK = "999-99-9999"
    PLACEHOLDER = "123-45-6789"
    TIN_TYPES = (
        TinType(
            "SSN",
            "Social Security Number",
            "Social Security Number for US citizens and permanent residents",
        ),
        TinType(
            "ITIN",
            "Individual Taxpayer Identification Number",
            "Tax identification number for individuals who are not eligible for SSN",
        ),
        TinType(
            "EIN",
            "Employer Identification Number",
            "Federal tax identification number for businesses",
        ),
    )

    def has_valid_length(self, tin: str) -> bool:
        return len(digits_only(tin)) == self.LENGTH

    def has_valid_rule(self, tin: str) -> bool:
        """
        A bare 9-digit number is checked as an SSN or ITIN; only the
        hyphenated 2-7 layout is checked as an EIN
        """
        if _SSN.match(tin):
            return is_valid_ssn_or_itin(digits_only(tin))
        return is_valid_ein(digits_only(tin))

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        digits = digits_only(normalize(tin))
        if len(digits) != 9:
            return None
        types = self.get_tin_types()
        if "-" in tin and _EIN.match(tin.strip()) and is_valid_ein(digits):
            return types[3]
        if digits[0] == "9" and is_valid_itin(digits):
            return types[2]
        if is_valid_ssn_or_itin(digits):
            return types[1]
        if is_valid_ein(digits):
            return types[3]
        return None

    def format_input(self, value: str) -> str:
        """
        Numbers starting with an EIN prefix are laid out as 2-7, the rest as
        3-2-4
        """
        digits = digits_only(value)
        if 2 <= len(digits) <= 9 and is_valid_ein(digits):
            return group(digits, (2, 7), "-")
        return group(digits, (3, 2, 4), "--")


TIN_HANDLERS = [UnitedStates]
