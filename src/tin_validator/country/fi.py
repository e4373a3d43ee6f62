"""
Finnish Personal Identity Code (Henkilötunnus)

The century sign between the birth date and the individual number is
usually lost when normalizing, so the 10-character form is checked against
every possible century. When the sign is kept (a letter, or '+' / '-' with
strict parsing) it selects the century
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.checksum import is_date
from tin_validator.helper.normalizer import normalize

_CHECK_CHARS = "0123456789ABCDEFHJKLMNPRSTUVWXY"

_CENTURY = {"+": 1800, "-": 1900, "A": 2000}
_CENTURY.update((c, 1900) for c in "YXWVU")
_CENTURY.update((c, 2000) for c in "BCDEF")


class Finland(BaseTinHandler):
    COUNTRYCODE = "FI"
    LENGTH = (10, 11)
    PATTERN = (
        r"^([0-3]\d[0-1]\d{6}[0-9A-Z]|[0-3]\d[0-1]\d{3}[-+A-FU-Y]\d{3}[0-9A-Z])$"
    )
    MASK = "999999-999A"
    PLACEHOLDER = "131052-308T"
    TIN_TYPES = (
        TinType("HETU", "Finnish HETU", "Finnish Personal Identity Code (Henkilötunnus)"),
    )

    def has_valid_date(self, tin: str) -> bool:
        day, month, year = int(tin[0:2]), int(tin[2:4]), int(tin[4:6])
        if len(tin) == 11:
            return is_date(_CENTURY[tin[6]] + year, month, day)
        return any(is_date(c + year, month, day) for c in (1800, 1900, 2000))

    def has_valid_rule(self, tin: str) -> bool:
        """
        The nine digits (birth date and individual number) mod 31, mapped
        through a table that skips G, I, O, Q and Z
        """
        number = tin[:6] + tin[-4:-1]
        return tin[-1] == _CHECK_CHARS[int(number) % 31]

    def format_input(self, value: str) -> str:
        """
        A century letter stays in place. Without one, a hyphen goes after the
        birth date
        """
        ntin = normalize(value)
        if ntin[6:7].isalpha():
            return ntin
        return group(ntin, (6, len(ntin)), "-")


TIN_HANDLERS = [Finland]
