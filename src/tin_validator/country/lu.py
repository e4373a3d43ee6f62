"""
Luxembourg national identification number (matricule)
"""

from stdnum import luhn, verhoeff

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import is_date


class Luxembourg(BaseTinHandler):
    COUNTRYCODE = "LU"
    LENGTH = 13
    PATTERN = r"^(1[89]|20)\d{2}(0[1-9]|1[0-2])(0[1-9]|[12]\d|3[01])\d{5}$"
    MASK = "9999999999999"
    PLACEHOLDER = "1893120105732"
    TIN_TYPES = (TinType("MATRICULE", "Matricule", "Luxembourg national identification number"),)

    def has_valid_date(self, tin: str) -> bool:
        return is_date(int(tin[:4]), int(tin[4:6]), int(tin[6:8]))

    def has_valid_rule(self, tin: str) -> bool:
        """
        Digit 12 is a Luhn check over the first eleven digits, digit 13 a
        Verhoeff check over the same eleven digits
        """
        return luhn.is_valid(tin[:12]) and verhoeff.is_valid(tin[:11] + tin[12])


TIN_HANDLERS = [Luxembourg]
