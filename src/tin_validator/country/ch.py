"""
Swiss social security number (AVS/AHV, 13 digits starting with 756) and
business identification number (UID, CHE plus 9 digits)
"""

import regex

from typing import Optional

from stdnum.ch import ssn, uid

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.normalizer import digits_only, normalize

_AVS = regex.compile(r"^756\.?\d{4}\.?\d{4}\.?\d{2}$")
_UID = regex.compile(r"^CHE-?\d{3}\.?\d{3}\.?\d{3}$", flags=regex.I)
_NOT_ALNUM = regex.compile(r"[^0-9A-Z]")


def is_avs(tin: str) -> bool:
    return tin.startswith("756")


def is_uid(tin: str) -> bool:
    return tin.upper().startswith("CHE")


class Switzerland(BaseTinHandler):
    COUNTRYCODE = "CH"
    LENGTH = 13
    PATTERN = f"{_AVS.pattern}|{_UID.pattern}"
    MASK = "756.9999.9999.99"
    PLACEHOLDER = "756.1234.5678.97"
    TIN_TYPES = (
        TinType("AVS/AHV", "AVS/AHV Number", "Swiss social security number for individuals"),
        TinType(
            "UID",
            "Unternehmens-Identifikationsnummer",
            "Swiss business identification number",
        ),
    )

    def has_valid_length(self, tin: str) -> bool:
        """
        Separators do not count: AVS numbers have 13 digits, UIDs have 9
        digits after the CHE prefix
        """
        if is_avs(tin):
            return len(digits_only(tin)) == 13
        if is_uid(tin):
            return len(digits_only(tin)) == 9
        return False

    def has_valid_pattern(self, tin: str) -> bool:
        return bool(_AVS.match(tin) or _UID.match(tin))

    def has_valid_rule(self, tin: str) -> bool:
        if is_avs(tin):
            return ssn.is_valid(tin)
        return uid.is_valid(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = normalize(tin)
        types = self.get_tin_types()
        if is_avs(ntin) and ssn.is_valid(ntin):
            return types[1]
        if is_uid(ntin) and uid.is_valid(ntin):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        ntin = _NOT_ALNUM.sub("", value.upper())
        if is_avs(ntin) and len(ntin) <= 13:
            return group(ntin, (3, 4, 4, 2), "...")
        if is_uid(ntin) and len(ntin) <= 12:
            digits = ntin[3:]
            return "CHE-" + group(digits, (3, 3, 3), "..") if digits else "CHE"
        return ntin


TIN_HANDLERS = [Switzerland]
