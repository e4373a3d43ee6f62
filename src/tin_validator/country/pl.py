"""
Polish NIP (10 digits) and PESEL (11 digits)
"""

from stdnum.pl import nip

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum, is_date

_PESEL_WEIGHTS = (1, 3, 7, 9, 1, 3, 7, 9, 1, 3)

# PESEL month offsets and the century each one stands for
_MONTH_OFFSETS = ((0, 1900), (20, 2000), (40, 2100), (60, 2200), (80, 1800))


def pesel_birth_date_ok(tin: str) -> bool:
    year, month, day = int(tin[0:2]), int(tin[2:4]), int(tin[4:6])
    for offset, century in _MONTH_OFFSETS:
        if offset + 1 <= month <= offset + 12:
            return is_date(century + year, month - offset, day)
    return False


class Poland(BaseTinHandler):
    COUNTRYCODE = "PL"
    LENGTH = (10, 11)
    PATTERN = r"^(\d{10}|\d{11})$"
    MASK = "99999999999"
    PLACEHOLDER = "85071803874"
    TIN_TYPES = (
        TinType(
            "PESEL",
            "Polish PESEL",
            "Polish National Identity Number "
            "(Powszechny Elektroniczny System Ewidencji Ludności)",
        ),
    )

    def has_valid_date(self, tin: str) -> bool:
        return len(tin) == 10 or pesel_birth_date_ok(tin)

    def has_valid_rule(self, tin: str) -> bool:
        if len(tin) == 10:
            return nip.is_valid(tin)
        # a weighted sum ending in 0 never validates
        return 10 - weighted_sum(tin, _PESEL_WEIGHTS) % 10 == digit_at(tin, 10)


TIN_HANDLERS = [Poland]
