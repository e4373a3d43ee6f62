"""
Dutch Burgerservicenummer (BSN)
"""

from stdnum.nl import bsn

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler


class Netherlands(BaseTinHandler):
    COUNTRYCODE = "NL"
    LENGTH = 9
    PATTERN = r"\d{9}"
    MASK = "999-999-999"
    PLACEHOLDER = "123456782"
    TIN_TYPES = (
        TinType(
            "BSN",
            "Dutch BSN",
            "Dutch Burgerservicenummer (BSN) - Citizen Service Number",
        ),
    )

    def has_valid_rule(self, tin: str) -> bool:
        return bsn.is_valid(tin)


TIN_HANDLERS = [Netherlands]
