"""
Canadian Social Insurance Number (SIN) and Business Number (BN)
"""

import regex

from typing import Optional

from stdnum import luhn

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.normalizer import normalize

_NOT_ALNUM = regex.compile(r"[^0-9A-Z]")
_SIN = regex.compile(r"^\d{9}$")
_BN_EXTENDED = regex.compile(r"^\d{9}[A-Z]{2}\d{4}$")


def is_valid_sin(sin: str) -> bool:
    """
    SINs starting with 0, 8 or 9 are never issued; the rest carry a Luhn
    check digit
    """
    return sin[0] not in "089" and luhn.is_valid(sin)


def is_valid_bn(bn: str) -> bool:
    """
    The 9-digit business registration root (it carries no check digit)
    """
    return bool(_SIN.match(bn)) and bn != "000000000"


class Canada(BaseTinHandler):
    COUNTRYCODE = "CA"
    LENGTH = (9, 15)
    PATTERN = r"^(\d{3}-?\d{3}-?\d{3}|\d{9}([A-Z]{2}\d{4})?)$"
    MASK = "999-999-999"
    PLACEHOLDER = "123-456-789"
    TIN_TYPES = (
        TinType("SIN", "Social Insurance Number", "Social Insurance Number for individuals"),
        TinType(
            "BN",
            "Business Number",
            "Business Number for corporations and businesses",
        ),
    )

    def normalize_tin(self, tin: str) -> str:
        return _NOT_ALNUM.sub("", tin.upper())

    def has_valid_length(self, tin: str) -> bool:
        return bool(_SIN.match(tin) or _BN_EXTENDED.match(tin))

    def has_valid_rule(self, tin: str) -> bool:
        """
        A bare 9-digit number is tried as a SIN first, then as a BN
        """
        if _SIN.match(tin):
            return is_valid_sin(tin) or is_valid_bn(tin)
        if _BN_EXTENDED.match(tin):
            return is_valid_bn(tin[:9])
        return False

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = self.normalize_tin(normalize(tin))
        types = self.get_tin_types()
        if _SIN.match(ntin):
            if is_valid_sin(ntin):
                return types[1]
            if is_valid_bn(ntin):
                return types[2]
        if _BN_EXTENDED.match(ntin) and is_valid_bn(ntin[:9]):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        ntin = self.normalize_tin(value)
        if _BN_EXTENDED.match(ntin):
            return ntin[:9] + " " + ntin[9:]
        if ntin.isdigit() and len(ntin) <= 9:
            return group(ntin, (3, 3, 3), "--")
        return ntin


TIN_HANDLERS = [Canada]
