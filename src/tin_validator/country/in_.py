"""
Indian Permanent Account Number (PAN)
"""

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler

# The fourth character encodes the kind of holder
HOLDER_TYPES = {
    "A": "Association of Persons (AOP)",
    "B": "Body of Individuals (BOI)",
    "C": "Company",
    "F": "Firm/Limited Liability Partnership",
    "G": "Government Agency",
    "H": "Hindu Undivided Family (HUF)",
    "L": "Local Authority",
    "J": "Artificial Juridical Person",
    "P": "Individual",
    "T": "Trust",
}


class India(BaseTinHandler):
    COUNTRYCODE = "IN"
    LENGTH = 10
    PATTERN = r"^[A-Z]{5}\d{4}[A-Z]$"
    MASK = "AAAAA9999A"
    PLACEHOLDER = "AFZPK7190K"
    TIN_TYPES = (
        TinType(
            "PAN",
            "Permanent Account Number",
            "Indian permanent account number for tax purposes",
        ),
    )

    def has_valid_rule(self, tin: str) -> bool:
        return tin[3] in HOLDER_TYPES and "A" <= tin[2] <= "Z"


TIN_HANDLERS = [India]
