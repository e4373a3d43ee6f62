"""
Russian taxpayer identification number (INN), for individuals (12 digits)
and for companies (10 digits)
"""

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, weighted_sum
from tin_validator.helper.normalizer import normalize

_PERSONAL_WEIGHTS_1 = (7, 2, 4, 10, 3, 5, 9, 4, 6, 8)
_PERSONAL_WEIGHTS_2 = (3,) + _PERSONAL_WEIGHTS_1
_COMPANY_WEIGHTS = _PERSONAL_WEIGHTS_1[1:]


def _check_digit(inn: str, weights) -> int:
    return weighted_sum(inn, weights) % 11 % 10


def _region_ok(inn: str) -> bool:
    return 1 <= int(inn[:2]) <= 99


def is_valid_personal_inn(inn: str) -> bool:
    if not _region_ok(inn) or _check_digit(inn, _PERSONAL_WEIGHTS_1) != digit_at(inn, 10):
        return False
    return _check_digit(inn, _PERSONAL_WEIGHTS_2) == digit_at(inn, 11)


def is_valid_company_inn(inn: str) -> bool:
    return _region_ok(inn) and _check_digit(inn, _COMPANY_WEIGHTS) == digit_at(inn, 9)


class Russia(BaseTinHandler):
    COUNTRYCODE = "RU"
    LENGTH = (10, 12)
    PATTERN = r"^\d{10}$|^\d{12}$"
    MASK = "999999999999"
    PLACEHOLDER = "123456789012"
    TIN_TYPES = (
        TinType(
            "INN_PERSONAL",
            "Individual INN",
            "Individual taxpayer identification number",
        ),
        TinType("INN_COMPANY", "Company INN", "Company taxpayer identification number"),
    )

    def has_valid_rule(self, tin: str) -> bool:
        if len(tin) == 12:
            return is_valid_personal_inn(tin)
        return is_valid_company_inn(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = self.normalize_tin(normalize(tin))
        types = self.get_tin_types()
        if len(ntin) == 12 and is_valid_personal_inn(ntin):
            return types[1]
        if len(ntin) == 10 and is_valid_company_inn(ntin):
            return types[2]
        return None


TIN_HANDLERS = [Russia]
