"""
Czech Birth Number (Rodné číslo)
"""

import regex

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler

_FIELDS = regex.compile(
    r"^(?P<year>\d{2})(?P<month>\d{2})(?P<day>\d{2})(?P<slash>/)?"
    r"(?P<sequence>\d{3})(?P<modulo>\d)?$"
)

# Month offsets: women add 50, numbers issued after 2004 may add 20
MONTH_FEMALE = 50
MONTH_AFTER_2004 = 20


class CzechRepublic(BaseTinHandler):
    COUNTRYCODE = "CZ"
    LENGTH = (9, 10)
    PATTERN = _FIELDS.pattern
    MASK = "999999/9999"
    PLACEHOLDER = "855230/3174"
    TIN_TYPES = (TinType("RC", "Czech RC", "Czech Birth Number (Rodné číslo)"),)

    def has_valid_date(self, tin: str) -> bool:
        f = _FIELDS.match(tin)
        year, month, day = int(f["year"]), int(f["month"]), int(f["day"])
        months = set(range(1, 13)) | set(range(1 + MONTH_FEMALE, 13 + MONTH_FEMALE))
        if f["modulo"] and 4 <= year <= self.current_year() % 100:
            months |= set(range(1 + MONTH_AFTER_2004, 13 + MONTH_AFTER_2004))
            months |= set(
                range(1 + MONTH_FEMALE + MONTH_AFTER_2004, 13 + MONTH_FEMALE + MONTH_AFTER_2004)
            )
        return month in months and 1 <= day <= 31

    def has_valid_rule(self, tin: str) -> bool:
        """
        Numbers issued since 1954 have ten digits and are divisible by 11
        (a remainder of 10 is written as 0)
        """
        f = _FIELDS.match(tin)
        if not f["modulo"]:
            return int(f["year"]) <= 53 and int(f["sequence"]) >= 1
        number = int(f["year"] + f["month"] + f["day"] + f["sequence"])
        return int(f["modulo"]) == number % 11 % 10


TIN_HANDLERS = [CzechRepublic]
