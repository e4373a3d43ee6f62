"""
Greek Tax Registration Number (Arithmos Forologikou Mitroou)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler


class Greece(BaseTinHandler):
    COUNTRYCODE = "GR"
    LENGTH = 9
    PATTERN = r"\d{9}"
    MASK = "999999999"
    PLACEHOLDER = "123456789"
    TIN_TYPES = (
        TinType(
            "AFM",
            "Greek AFM",
            "Greek Tax Registration Number (Arithmos Forologikou Mitroou)",
        ),
    )


TIN_HANDLERS = [Greece]
