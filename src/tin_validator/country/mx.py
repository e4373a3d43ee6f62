"""
Mexican Registro Federal de Contribuyentes (RFC), for individuals (13
characters) and for businesses (12 characters)
"""

import regex

from typing import Optional

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.normalizer import normalize

_PERSONAL = regex.compile(r"^[A-Z]{4}\d{6}[A-Z0-9]{3}$")
_BUSINESS = regex.compile(r"^[A-Z]{3}\d{6}[A-Z0-9]{3}$")
_HOMOCLAVE = regex.compile(r"^[A-Z0-9]{3}$")
_NOT_ALNUM = regex.compile(r"[^A-Z0-9]")

# February always admits the 29th (only two year digits are available)
_DAYS_IN_MONTH = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_valid_date(yymmdd: str) -> bool:
    month, day = int(yymmdd[2:4]), int(yymmdd[4:6])
    return 1 <= month <= 12 and 1 <= day <= _DAYS_IN_MONTH[month - 1]


def is_valid_rfc(rfc: str) -> bool:
    """
    Check the layout of an RFC: name letters, YYMMDD date, homoclave
    """
    if len(rfc) == 13:
        layout, offset = _PERSONAL, 4
    elif len(rfc) == 12:
        layout, offset = _BUSINESS, 3
    else:
        return False
    if not layout.match(rfc) or not _is_valid_date(rfc[offset : offset + 6]):
        return False
    return bool(_HOMOCLAVE.match(rfc[offset + 6 :]))


class Mexico(BaseTinHandler):
    COUNTRYCODE = "MX"
    LENGTH = (12, 13)
    PATTERN = r"^([A-Z]{4}\d{6}[A-Z0-9]{3}|[A-Z]{3}\d{6}[A-Z0-9]{3})$"
    MASK = "AAAA999999XXX"
    PLACEHOLDER = "GODE561231GR8"
    TIN_TYPES = (
        TinType(
            "RFC_PERSONAL",
            "RFC Personal",
            "Registro Federal de Contribuyentes for individuals",
        ),
        TinType(
            "RFC_BUSINESS",
            "RFC Empresarial",
            "Registro Federal de Contribuyentes for businesses",
        ),
    )

    def normalize_tin(self, tin: str) -> str:
        return _NOT_ALNUM.sub("", tin.upper())

    def has_valid_date(self, tin: str) -> bool:
        offset = 4 if len(tin) == 13 else 3
        return _is_valid_date(tin[offset : offset + 6])

    def has_valid_rule(self, tin: str) -> bool:
        return is_valid_rfc(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = self.normalize_tin(normalize(tin))
        if not is_valid_rfc(ntin):
            return None
        return self.get_tin_types()[1 if len(ntin) == 13 else 2]

    def format_input(self, value: str) -> str:
        return self.normalize_tin(value)


TIN_HANDLERS = [Mexico]
