"""
Chinese Citizen ID Number and Unified Social Credit Code (USCC)
"""

import regex

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import weighted_sum, is_date
from tin_validator.helper.normalizer import normalize

_PERSONAL = regex.compile(r"^\d{17}[\dX]$")
_BUSINESS = regex.compile(r"^[0-9A-HJ-NPQRTUWXY]{2}\d{6}[0-9A-HJ-NPQRTUWXY]{10}$")

_PROVINCES = frozenset(
    [11, 12, 13, 14, 15, 21, 22, 23]
    + [31, 32, 33, 34, 35, 36, 37, 41, 42, 43, 44, 45, 46]
    + [50, 51, 52, 53, 54, 61, 62, 63, 64, 65]
)

_ID_WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)
_ID_CHECK = "10X98765432"

# USCC alphabet: digits plus uppercase letters except I, O, S, V, Z
_USCC_CHARS = "0123456789ABCDEFGHJKLMNPQRTUWXY"
_USCC_WEIGHTS = (1, 3, 9, 27, 19, 26, 16, 17, 20, 29, 25, 13, 8, 24, 10, 30, 28)


def is_valid_uscc(code: str) -> bool:
    """
    Weighted mod 31 check character over the USCC alphabet
    """
    if any(c not in _USCC_CHARS for c in code):
        return False
    total = sum(_USCC_CHARS.index(c) * w for c, w in zip(code, _USCC_WEIGHTS))
    return code[17] == _USCC_CHARS[(31 - total % 31) % 31]


class China(BaseTinHandler):
    COUNTRYCODE = "CN"
    LENGTH = 18
    PATTERN = (
        r"^(\d{17}[\dX]|[0-9A-HJ-NPQRTUWXY]{2}\d{6}[0-9A-HJ-NPQRTUWXY]{10})$"
    )
    MASK = "999999999999999999"
    PLACEHOLDER = "11010519491231002X"
    TIN_TYPES = (
        TinType("ID", "Citizen ID Number", "Chinese citizen identification number"),
        TinType("USCC", "Unified Social Credit Code", "Business entity identification code"),
    )

    def has_valid_birth_date(self, tin: str) -> bool:
        """
        YYYYMMDD at offset 6, between 1900 and the current year
        """
        year, month, day = int(tin[6:10]), int(tin[10:12]), int(tin[12:14])
        if not 1900 <= year <= self.current_year():
            return False
        return is_date(year, month, day)

    def is_valid_personal_id(self, tin: str) -> bool:
        if int(tin[:2]) not in _PROVINCES or not self.has_valid_birth_date(tin):
            return False
        return tin[17] == _ID_CHECK[weighted_sum(tin, _ID_WEIGHTS) % 11]

    def has_valid_date(self, tin: str) -> bool:
        if _PERSONAL.match(tin):
            return self.has_valid_birth_date(tin)
        return True

    def has_valid_rule(self, tin: str) -> bool:
        if _PERSONAL.match(tin):
            return self.is_valid_personal_id(tin)
        if _BUSINESS.match(tin):
            return is_valid_uscc(tin)
        return False

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = self.normalize_tin(normalize(tin))
        types = self.get_tin_types()
        if _PERSONAL.match(ntin) and self.is_valid_personal_id(ntin):
            return types[1]
        if _BUSINESS.match(ntin) and is_valid_uscc(ntin):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        """
        Both schemes are written without separators. Citizen IDs can end in
        X and USCCs carry letters anywhere, so no digit mask applies
        """
        return normalize(value)


TIN_HANDLERS = [China]
