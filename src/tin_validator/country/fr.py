"""
French Tax Identification Number (Numéro fiscal de référence)
"""

from tin_validator.helper import BaseTinHandler


class France(BaseTinHandler):
    COUNTRYCODE = "FR"
    LENGTH = 13
    PATTERN = r"[0-3]\d{12}"
    MASK = "9 99 99 99 999 999"
    PLACEHOLDER = "1 23 45 67 890 123"

    def has_valid_rule(self, tin: str) -> bool:
        """
        The first ten digits mod 511 must match the trailing digits; the
        width of the check field depends on the size of the remainder
        """
        rem = int(tin[:10]) % 511
        if rem < 10:
            check = tin[12:]
        elif rem < 100:
            check = tin[11:]
        else:
            check = tin[10:]
        return rem == int(check)


TIN_HANDLERS = [France]
