"""
Austrian Tax Identification Number (Steuernummer)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.checksum import digit_at, digits_sum, last_digit


class Austria(BaseTinHandler):
    COUNTRYCODE = "AT"
    LENGTH = 9
    PATTERN = r"\d{9}"
    MASK = "999999999"
    PLACEHOLDER = "12 310170"
    TIN_TYPES = (
        TinType(
            "TIN",
            "Austrian TIN",
            "Austrian Tax Identification Number (Steuernummer)",
        ),
    )

    def has_valid_rule(self, tin: str) -> bool:
        """
        Odd positions added as they are, even positions doubled and reduced
        to their digit sum; the check digit completes the total to 100
        """
        total = sum(digit_at(tin, i) for i in (0, 2, 4, 6))
        total += sum(digits_sum(2 * digit_at(tin, i)) for i in (1, 3, 5, 7))
        return digit_at(tin, 8) == last_digit(100 - total)


TIN_HANDLERS = [Austria]
