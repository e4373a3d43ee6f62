"""
Latvian Personal Code (Personas kods)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import is_date


class Latvia(BaseTinHandler):
    COUNTRYCODE = "LV"
    LENGTH = 11
    PATTERN = r"[0-3]\d[0-1]\d{3}\d{5}"
    MASK = "999999-99999"
    PLACEHOLDER = "161175-19997"
    TIN_TYPES = (TinType("PK", "Latvian PK", "Latvian Personal Code (Personas kods)"),)

    def has_valid_date(self, tin: str) -> bool:
        """
        Codes issued since 2017 start with 32 and carry no birth date.
        Otherwise DDMMYY must be a real date both in the 1900s and the 2000s
        """
        if tin.startswith("32"):
            return True
        day, month, year = int(tin[0:2]), int(tin[2:4]), int(tin[4:6])
        return is_date(1900 + year, month, day) and is_date(2000 + year, month, day)


TIN_HANDLERS = [Latvia]
