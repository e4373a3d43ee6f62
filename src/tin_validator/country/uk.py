"""
United Kingdom tax identifiers:
  * Unique Taxpayer Reference (UTR), 10 digits
  * National Insurance Number (NINO), two letters, six digits and an
    optional suffix letter
"""

import regex

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import apply_mask
from tin_validator.helper.normalizer import normalize

_UTR = regex.compile(r"\d{10}")
_NINO = regex.compile(
    r"[A-CEGHJ-PR-TW-Z][A-CEGHJ-NPR-TW-Z]\d{6}[ABCD ]", flags=regex.I
)

# Prefixes never allocated to a NINO
EXCLUDED_PREFIXES = ("GB", "NK", "TN", "ZZ")

# A NINO without its suffix letter is padded to this width
WIDTH = 9


def pad(tin: str) -> str:
    return tin.ljust(WIDTH)


def is_nino(tin: str) -> bool:
    return bool(_NINO.search(tin)) and tin[:2].upper() not in EXCLUDED_PREFIXES


class UnitedKingdom(BaseTinHandler):
    COUNTRYCODE = "UK"
    LENGTH = (9, 10)
    PATTERN = f"{_UTR.pattern}|{_NINO.pattern}"
    MASK = "AA999999A"
    PLACEHOLDER = "AB123456C"
    TIN_TYPES = (
        TinType("UTR", "Unique Taxpayer Reference", "UK self assessment taxpayer reference"),
        TinType("NINO", "National Insurance Number", "UK national insurance number"),
    )

    def has_valid_length(self, tin: str) -> bool:
        return super().has_valid_length(pad(tin))

    def has_valid_pattern(self, tin: str) -> bool:
        tin = pad(tin)
        if len(tin) == 10:
            return bool(_UTR.search(tin))
        return is_nino(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = pad(normalize(tin))
        types = self.get_tin_types()
        if len(ntin) == 10 and _UTR.search(ntin):
            return types[1]
        if len(ntin) == WIDTH and is_nino(ntin):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        """
        UTRs are plain digits, NINOs follow the mask
        """
        ntin = normalize(value)
        if ntin.isdigit():
            return ntin
        return apply_mask(ntin, self.MASK)


TIN_HANDLERS = [UnitedKingdom]
