"""
Portuguese Tax Identification Number (Número de Identificação Fiscal)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum


class Portugal(BaseTinHandler):
    COUNTRYCODE = "PT"
    LENGTH = 9
    PATTERN = r"\d{9}"
    MASK = "999999999"
    PLACEHOLDER = "123456789"
    TIN_TYPES = (
        TinType(
            "NIF",
            "Portuguese NIF",
            "Portuguese Tax Identification Number (Número de Identificação Fiscal)",
        ),
    )

    def has_valid_rule(self, tin: str) -> bool:
        """
        Mod 11 with weights 9..2. A computed digit of 10 or 11 requires a
        trailing 0
        """
        check = 11 - weighted_sum(tin, range(9, 1, -1)) % 11
        return digit_at(tin, 8) == (check if check <= 9 else 0)


TIN_HANDLERS = [Portugal]
