"""
Indonesian Tax Registration Number (Nomor Pokok Wajib Pajak), both in its
15-digit legacy layout and in the 16-digit one
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.normalizer import digits_only


class Indonesia(BaseTinHandler):
    COUNTRYCODE = "ID"
    LENGTH = (15, 16)
    PATTERN = r"^\d{2}\.?\d{3}\.?\d{3}\.?\d{1}-?\d{3}\.?\d{3}$|^\d{16}$"
    MASK = "99.999.999.9-999.999"
    PLACEHOLDER = "01.234.567.8-901.234"
    TIN_TYPES = (
        TinType(
            "NPWP",
            "Indonesian NPWP",
            "Indonesian Tax Registration Number (Nomor Pokok Wajib Pajak)",
        ),
    )

    def has_valid_length(self, tin: str) -> bool:
        return len(digits_only(tin)) in self.LENGTH

    def has_valid_rule(self, tin: str) -> bool:
        """
        No checksum: reject all zeros and the unassigned tax office 00
        """
        number = digits_only(tin)
        return bool(number.strip("0")) and number[:2] != "00"

    def format_input(self, value: str) -> str:
        return group(digits_only(value), (2, 3, 3, 1, 3, 4), "...-.")


TIN_HANDLERS = [Indonesia]
