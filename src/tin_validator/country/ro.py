"""
Romanian Personal Numerical Code (Codul Numeric Personal)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import is_date


class Romania(BaseTinHandler):
    COUNTRYCODE = "RO"
    LENGTH = 13
    PATTERN = r"[1-8]\d{2}[0-1]\d[0-3]\d{6}"
    MASK = "9999999999999"
    PLACEHOLDER = "1630615123457"
    TIN_TYPES = (
        TinType(
            "CNP",
            "Romanian CNP",
            "Romanian Personal Numerical Code (Codul Numeric Personal)",
        ),
    )

    def has_valid_date(self, tin: str) -> bool:
        year, month, day = int(tin[1:3]), int(tin[3:5]), int(tin[5:7])
        return is_date(1900 + year, month, day) and is_date(2000 + year, month, day)

    def has_valid_rule(self, tin: str) -> bool:
        """
        County codes go up to 47, plus 51 and 52 for the Bucharest sectors
        added later
        """
        county = int(tin[7:9])
        return tin[0] != "0" and (county <= 47 or county in (51, 52))


TIN_HANDLERS = [Romania]
