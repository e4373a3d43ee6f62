"""
Slovak Birth Number (Rodné číslo)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at


class Slovakia(BaseTinHandler):
    COUNTRYCODE = "SK"
    LENGTH = 10
    PATTERN = r"([1-9]\d[234789]\d{7})|(\d{2}[0156]\d[0-3]\d{4,5})"
    MASK = "9999999999"
    PLACEHOLDER = "7103192745"
    TIN_TYPES = (TinType("RC", "Slovak RC", "Slovak Birth Number (Rodné číslo)"),)

    def has_valid_length(self, tin: str) -> bool:
        """
        Numbers issued before 1954 have only nine digits
        """
        if super().has_valid_length(tin):
            return True
        return len(tin) == self.LENGTH - 1 and tin[:2].isdigit() and int(tin[:2]) < 54

    def has_valid_rule(self, tin: str) -> bool:
        if not tin.isdigit():
            return False
        if len(tin) != 10:
            return True
        if int(tin) % 11 == 0:
            return True
        return digit_at(tin, 9) == int(tin[:9]) % 11 % 10


TIN_HANDLERS = [Slovakia]
