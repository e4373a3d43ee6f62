"""
Irish Personal Public Service Number
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import match_pattern
from tin_validator.helper.checksum import alphabet_position, weighted_sum

_PATTERN_9 = r"\d{7}[a-wA-W]([a-iA-I]|W)"
_PATTERN_8 = r"\d{7}[a-wA-W]"


def _letter_value(char: str) -> int:
    return 0 if char == "W" else alphabet_position(char)


class Ireland(BaseTinHandler):
    COUNTRYCODE = "IE"
    LENGTH = (8, 9)
    PATTERN = _PATTERN_9
    MASK = "9999999AA"
    PLACEHOLDER = "1234567FA"
    TIN_TYPES = (TinType("PPS", "Irish PPS", "Irish Personal Public Service Number"),)

    def has_valid_pattern(self, tin: str) -> bool:
        return match_pattern(tin, _PATTERN_9 if len(tin) == 9 else _PATTERN_8)

    def has_valid_rule(self, tin: str) -> bool:
        """
        Weights 8..2 over the digits, plus 9 times the value of the optional
        second letter, mod 23 gives the position of the check letter (W for 0)
        """
        extra = _letter_value(tin[8]) if len(tin) == 9 else 0
        rem = (9 * extra + weighted_sum(tin, range(8, 1, -1))) % 23
        if rem:
            return alphabet_position(tin[7]) == rem
        return tin[7] == "W"


TIN_HANDLERS = [Ireland]
