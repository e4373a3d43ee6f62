"""
Italian Codice Fiscale for natural persons (16 characters)
"""

from stdnum.it import codicefiscale

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import is_date
from tin_validator.helper.normalizer import normalize

# Letters used for the birth month, January to December
MONTHS = "ABCDEHLMPRST"

# Letters that replace digits in homocode-disambiguated numbers
OMOCODIA = str.maketrans("LMNPQRSTUV", "0123456789")


class Italy(BaseTinHandler):
    COUNTRYCODE = "IT"
    LENGTH = 16
    PATTERN = r"^[A-Z]{6}[LMNP-V\d]{2}[A-Z][LMNP-V\d]{2}[A-Z][LMNP-V\d]{3}[A-Z]$"
    MASK = "AAAAAA99A99A999A"
    PLACEHOLDER = "DMLPRY77D15H501F"
    TIN_TYPES = (TinType("CF", "Codice Fiscale", "Italian fiscal code for natural persons"),)

    def has_valid_date(self, tin: str) -> bool:
        """
        Women add 40 to their birth day. The year has no century, so a
        29th of February is always accepted
        """
        month = MONTHS.find(tin[8]) + 1
        day = int(tin[9:11].translate(OMOCODIA))
        if day > 40:
            day -= 40
        return month > 0 and is_date(2000, month, day)

    def has_valid_rule(self, tin: str) -> bool:
        return codicefiscale.calc_check_digit(tin[:15]) == tin[15]

    def format_input(self, value: str) -> str:
        """
        Homocode letters can stand in for any digit, so the value is only
        normalized
        """
        return normalize(value)


TIN_HANDLERS = [Italy]
