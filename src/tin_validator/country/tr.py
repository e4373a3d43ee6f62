"""
Turkish identification numbers:
  * T.C. Kimlik No (TCKN), 11 digits, for citizens
  * Vergi Kimlik No (VKN), 10 digits, for businesses
"""

from typing import Optional

from stdnum.tr import tckimlik

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at
from tin_validator.helper.normalizer import normalize


def is_valid_vkn(vkn: str) -> bool:
    if vkn == "0" * 10:
        return False
    total = 0
    for i in range(1, 10):
        v = (digit_at(vkn, i - 1) + i) % 10
        v = v * 2 ** i % 9
        total += v or 9
    return (10 - total % 10) % 10 == digit_at(vkn, 9)


class Turkey(BaseTinHandler):
    COUNTRYCODE = "TR"
    LENGTH = (10, 11)
    PATTERN = r"^\d{10,11}$"
    MASK = "99999999999"
    PLACEHOLDER = "12345678901"
    TIN_TYPES = (
        TinType("TCKN", "T.C. Kimlik No", "Turkish national identification number"),
        TinType("VKN", "Vergi Kimlik No", "Turkish tax identification number for businesses"),
    )

    def has_valid_rule(self, tin: str) -> bool:
        if len(tin) == 11:
            return tckimlik.is_valid(tin)
        return is_valid_vkn(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = normalize(tin)
        if not ntin.isdigit():
            return None
        types = self.get_tin_types()
        if len(ntin) == 11 and tckimlik.is_valid(ntin):
            return types[1]
        if len(ntin) == 10 and is_valid_vkn(ntin):
            return types[2]
        return None


TIN_HANDLERS = [Turkey]
