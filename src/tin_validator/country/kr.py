"""
South Korean Resident Registration Number (RRN) and Business Registration
Number (BRN)
"""

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.checksum import digit_at, is_date, weighted_sum
from tin_validator.helper.normalizer import digits_only, normalize

_RRN_WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3, 4, 5)
_BRN_WEIGHTS = (1, 3, 7, 1, 3, 7, 1, 3, 5)

# The seventh RRN digit encodes gender, citizenship and birth century
CENTURY = {
    "1": 1900,
    "2": 1900,
    "3": 2000,
    "4": 2000,
    "5": 1900,
    "6": 1900,
    "7": 2000,
    "8": 2000,
    "9": 1800,
    "0": 1800,
}


def rrn_birth_year(rrn: str) -> Optional[int]:
    century = CENTURY.get(rrn[6])
    return None if century is None else century + int(rrn[:2])


def is_valid_rrn_checksum(rrn: str) -> bool:
    return (11 - weighted_sum(rrn, _RRN_WEIGHTS) % 11) % 10 == digit_at(rrn, 12)


def is_valid_brn(brn: str) -> bool:
    total = weighted_sum(brn, _BRN_WEIGHTS) + digit_at(brn, 8) * 5 // 10
    return (10 - total % 10) % 10 == digit_at(brn, 9)


class SouthKorea(BaseTinHandler):
    COUNTRYCODE = "KR"
    LENGTH = (10, 13)
    PATTERN = r"^(\d{6}-?\d{7}|\d{3}-?\d{2}-?\d{5})$"
    MASK = "999999-9999999"
    PLACEHOLDER = "900101-1234567"
    TIN_TYPES = (
        TinType(
            "RRN",
            "Resident Registration Number",
            "Korean resident registration number for individuals",
        ),
        TinType(
            "BRN",
            "Business Registration Number",
            "Korean business registration number for companies",
        ),
    )

    def has_valid_length(self, tin: str) -> bool:
        return len(digits_only(tin)) in self.LENGTH

    def is_valid_birth_date(self, rrn: str) -> bool:
        """
        The birth date must exist and must not lie in a future year
        """
        year = rrn_birth_year(rrn)
        if year is None or year > self.current_year():
            return False
        return is_date(year, int(rrn[2:4]), int(rrn[4:6]))

    def has_valid_date(self, tin: str) -> bool:
        ntin = digits_only(tin)
        return len(ntin) != 13 or self.is_valid_birth_date(ntin)

    def has_valid_rule(self, tin: str) -> bool:
        ntin = digits_only(tin)
        if len(ntin) == 13:
            return is_valid_rrn_checksum(ntin)
        return is_valid_brn(ntin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = digits_only(normalize(tin))
        types = self.get_tin_types()
        if (
            len(ntin) == 13
            and self.is_valid_birth_date(ntin)
            and is_valid_rrn_checksum(ntin)
        ):
            return types[1]
        if len(ntin) == 10 and is_valid_brn(ntin):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        """
        Any input longer than the birth date part is laid out as an RRN
        """
        ntin = digits_only(value)
        if 6 < len(ntin) <= 13:
            return group(ntin, (6, 7), "-")
        return ntin


TIN_HANDLERS = [SouthKorea]
