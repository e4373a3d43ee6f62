"""
Croatian Personal Identification Number (Osobni identifikacijski broj)
"""

from stdnum.hr import oib

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler


class Croatia(BaseTinHandler):
    COUNTRYCODE = "HR"
    LENGTH = 11
    PATTERN = r"\d{11}"
    MASK = "99999999999"
    PLACEHOLDER = "94577403194"
    TIN_TYPES = (
        TinType(
            "OIB",
            "Croatian OIB",
            "Croatian Personal Identification Number (Osobni identifikacijski broj)",
        ),
    )

    def has_valid_rule(self, tin: str) -> bool:
        """
        ISO 7064, MOD 11,10 check digit
        """
        return oib.is_valid(tin)


TIN_HANDLERS = [Croatia]
