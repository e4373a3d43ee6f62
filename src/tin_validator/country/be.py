"""
Belgian National Register Number (Numéro de Registre National)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import is_date


# Which centuries the embedded birth date is valid for
DATE_NONE, DATE_1900, DATE_2000, DATE_ANY = 0, 1, 2, 3


def date_type(tin: str) -> int:
    """
    Classify the YYMMDD birth date: valid in the 1900s, in the 2000s, in
    both, or in none. A zero day or month (unknown birth date) counts as both
    """
    year, month, day = int(tin[0:2]), int(tin[2:4]), int(tin[4:6])
    y1 = is_date(1900 + year, month, day)
    y2 = is_date(2000 + year, month, day)
    if day == 0 or month == 0 or (y1 and y2):
        return DATE_ANY
    if y1:
        return DATE_1900
    if y2:
        return DATE_2000
    return DATE_NONE


def _mod97_check(number: str, check: str) -> bool:
    return 97 - int(number) % 97 == int(check)


class Belgium(BaseTinHandler):
    COUNTRYCODE = "BE"
    LENGTH = 11
    PATTERN = r"\d{2}[0-1]\d[0-3]\d{6}"
    MASK = "99.99.99-999.99"
    PLACEHOLDER = "85.07.30-033.61"
    TIN_TYPES = (
        TinType(
            "TIN",
            "Belgian TIN",
            "Belgian Tax Identification Number (Numéro de Registre National)",
        ),
    )

    def has_valid_date(self, tin: str) -> bool:
        return date_type(tin) != DATE_NONE

    def has_valid_rule(self, tin: str) -> bool:
        """
        People born from 2000 on get a '2' prepended to the number before
        computing the mod 97 check
        """
        dtype = date_type(tin)
        if dtype in (DATE_1900, DATE_ANY) and _mod97_check(tin[:9], tin[9:]):
            return True
        return dtype >= DATE_2000 and _mod97_check("2" + tin[:9], tin[9:])


TIN_HANDLERS = [Belgium]
