"""
Spanish tax identifiers:
  * DNI, for Spanish natural persons
  * NIE, for foreigners
  * CIF, for legal entities
"""

import regex

from typing import Optional

from stdnum.es import dni, nie

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digits_sum
from tin_validator.helper.normalizer import normalize

# Control letters for DNI/NIE and for CIF
CONTROL_DNI = "TRWAGMYFPDXBNJZSQVHLCKE"
CONTROL_CIF = "JABCDEFGHI"

# NIE prefixes
NIE = "XYZ"

_DNI = regex.compile(rf"^([XYZ\d]\d{{7}})([{CONTROL_DNI}])$", flags=regex.I)
_CIF = regex.compile(rf"^([ABCDEFGHJKLMNPQRSUVW])(\d{{7}})([{CONTROL_CIF}\d])$", flags=regex.I)


def cif_check(digits: str) -> int:
    """
    Compute the numeric control value for the seven CIF digits. Digits at
    even positions are doubled, and the digits of each product are added
    """
    total = sum(digits_sum(int(d) * (2 - pos % 2)) for pos, d in enumerate(digits))
    return (10 - total % 10) % 10


def is_valid_dni(tin: str) -> bool:
    """
    DNI and NIE share the mod 23 control letter
    """
    if not _DNI.match(tin):
        return False
    if tin[0].upper() in NIE:
        return nie.is_valid(tin)
    return dni.is_valid(tin)


def is_valid_cif(tin: str) -> bool:
    """
    The CIF control character can be a digit or a letter
    """
    m = _CIF.match(tin)
    if not m:
        return False
    check, control = cif_check(m.group(2)), m.group(3).upper()
    if control.isdigit():
        return int(control) == check
    return control == CONTROL_CIF[check]


class Spain(BaseTinHandler):
    COUNTRYCODE = "ES"
    LENGTH = 9
    PATTERN = f"{_DNI.pattern}|{_CIF.pattern}"
    MASK = "99999999A"
    PLACEHOLDER = "12345678Z"
    TIN_TYPES = (
        TinType("DNI", "Documento Nacional de Identidad", "Spanish Natural Persons ID"),
        TinType("NIE", "Número de Identidad de Extranjero", "Foreigners Identification Number"),
        TinType(
            "CIF",
            "Código de Identificación Fiscal",
            "Tax Identification Code for Legal Entities",
        ),
    )

    def normalize_tin(self, tin: str) -> str:
        """
        Short DNIs are left-padded with zeros
        """
        return super().normalize_tin(tin).rjust(self.LENGTH, "0")

    def has_valid_rule(self, tin: str) -> bool:
        return is_valid_dni(tin) or is_valid_cif(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = self.normalize_tin(normalize(tin))
        types = self.get_tin_types()
        if _DNI.match(ntin):
            return types[2] if ntin[0] in NIE else types[1]
        if _CIF.match(ntin):
            return types[3]
        return None

    def format_input(self, value: str) -> str:
        return normalize(value)


TIN_HANDLERS = [Spain]
