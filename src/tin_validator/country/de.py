"""
German tax identifiers:
  * Steuerliche Identifikationsnummer (IdNr), 11 digits, for persons
  * Steuernummer (StNr), in its 13-digit nationwide form
"""

from typing import Optional

from stdnum.de import idnr, stnr

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import apply_mask
from tin_validator.helper.normalizer import digits_only, normalize


class Germany(BaseTinHandler):
    COUNTRYCODE = "DE"
    LENGTH = (11, 13)
    PATTERN = r"^[1-9]\d{10}$|^\d{13}$"
    MASK = "99 999 999 999"
    PLACEHOLDER = "26 954 371 827"
    TIN_TYPES = (
        TinType("IdNr", "Steuerliche Identifikationsnummer", "German personal tax ID"),
        TinType("StNr", "Steuernummer", "German tax number"),
    )

    def has_valid_rule(self, tin: str) -> bool:
        if len(tin) == 11:
            return idnr.is_valid(tin)
        return stnr.is_valid(tin)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        ntin = normalize(tin)
        types = self.get_tin_types()
        if len(ntin) == 11 and idnr.is_valid(ntin):
            return types[1]
        if len(ntin) == 13 and stnr.is_valid(ntin):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        """
        The IdNr is grouped by the mask. The 13-digit StNr has no common
        grouping and is kept as it is
        """
        number = digits_only(value)
        if len(number) > 11:
            return number
        return apply_mask(number, self.MASK)


TIN_HANDLERS = [Germany]
