"""
Define the base class for country TIN handlers
"""

from datetime import date
from functools import lru_cache

import regex

from typing import Callable, Dict, Iterable, Optional, Tuple, Union

from ..tintype import TinType
from .normalizer import normalize
from .exception import InvalidLength, InvalidPattern, InvalidDate, InvalidSyntax

TYPE_LENGTH = Union[int, Tuple[int, ...]]

# Characters dropped by the handler normalization. Hyphen and plus survive,
# since some schemes give them a meaning
_DROPPED = regex.compile(r"[^\p{L}\p{N}+-]+")


@lru_cache(maxsize=None)
def _compile(pattern: str):
    return regex.compile(pattern, flags=regex.I | regex.VERSION0)


def match_length(tin: str, length: TYPE_LENGTH) -> bool:
    """
    Check the length of a TIN against one admissible length, or a set of them
    """
    if isinstance(length, int):
        return len(tin) == length
    return len(tin) in length


def match_pattern(tin: str, pattern: str) -> bool:
    """
    Search for a pattern in a TIN, ignoring case. The pattern is not anchored
    unless it contains its own anchors
    """
    return _compile(pattern).search(tin) is not None


class BaseTinHandler:
    """
    Base class for a country TIN handler.

    Subclasses declare the country constants and override the pipeline stages
    they need. Validation runs four stages in a fixed order (length, pattern,
    date, rule) and the first one that fails raises its own exception.
    """

    COUNTRYCODE: str = None
    LENGTH: TYPE_LENGTH = None
    PATTERN: str = None
    MASK: str = None
    PLACEHOLDER: str = None
    TIN_TYPES: Tuple[TinType, ...] = ()

    def __init__(self, today: Callable[[], date] = None):
        self.today = today or date.today

    @classmethod
    def supports(cls, country: str) -> bool:
        return country.upper() == cls.COUNTRYCODE

    # ----------------------------------------------------------------------

    def normalize_tin(self, tin: str) -> str:
        """
        Keep letters, digits, hyphens and plus signs, and uppercase the
        result. On a generically normalized TIN this only uppercases; on a
        strictly parsed one it drops the other separators
        """
        return _DROPPED.sub("", tin).upper()

    def validate(self, tin: str) -> bool:
        """
        Run the validation pipeline. Return True or raise the exception for
        the first failing stage
        """
        ntin = self.normalize_tin(tin)
        if not self.has_valid_length(ntin):
            raise InvalidLength(tin)
        if not self.has_valid_pattern(ntin):
            raise InvalidPattern(tin)
        if not self.has_valid_date(ntin):
            raise InvalidDate(tin)
        if not self.has_valid_rule(ntin):
            raise InvalidSyntax(tin)
        return True

    def has_valid_length(self, tin: str) -> bool:
        return match_length(tin, self.LENGTH)

    def has_valid_pattern(self, tin: str) -> bool:
        return match_pattern(tin, self.PATTERN)

    def has_valid_date(self, tin: str) -> bool:
        """
        Countries whose TINs embed no date accept any value
        """
        return True

    def has_valid_rule(self, tin: str) -> bool:
        """
        Countries without a checksum accept any well-formed value
        """
        return True

    # ----------------------------------------------------------------------

    def current_year(self) -> int:
        return self.today().year

    def get_tin_types(self) -> Dict[int, TinType]:
        """
        Return the TIN schemes known for the country, indexed from 1
        """
        types = self.TIN_TYPES or (
            TinType(
                "TIN",
                "Tax Identification Number",
                f"Standard tax identification number for {self.COUNTRYCODE}",
            ),
        )
        return {n: t for n, t in enumerate(types, start=1)}

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        """
        Find out which of the country TIN schemes a value belongs to
        """
        ntin = self.normalize_tin(normalize(tin))
        if self.has_valid_length(ntin) and self.has_valid_pattern(ntin):
            return self.get_tin_types()[1]
        return None

    # ----------------------------------------------------------------------

    def get_input_mask(self) -> str:
        if self.MASK:
            return self.MASK
        length = self.LENGTH if isinstance(self.LENGTH, int) else max(self.LENGTH)
        return "9" * length

    def get_placeholder(self) -> str:
        return self.PLACEHOLDER or self.get_input_mask().replace("9", "1")

    def format_input(self, value: str) -> str:
        """
        Lay out a (possibly partial) input over the country input mask
        """
        return apply_mask(self.normalize_tin(normalize(value)), self.get_input_mask())

    def __repr__(self) -> str:
        return f"<{self.__class__.__qualname__}:{self.COUNTRYCODE}>"


def apply_mask(value: str, mask: str) -> str:
    """
    Walk a mask over a value: '9' takes a digit, 'A' takes a letter and
    uppercases it, 'a' takes a letter and lowercases it, any other mask
    character is copied as a literal. Stop at the first mismatch
    """
    result = []
    pos = 0
    for m in mask:
        if pos >= len(value):
            break
        c = value[pos]
        if m == "9":
            if not c.isdigit():
                break
            result.append(c)
            pos += 1
        elif m in "Aa":
            if not c.isalpha():
                break
            result.append(c.upper() if m == "A" else c.lower())
            pos += 1
        else:
            result.append(m)
    return "".join(result)


def group(value: str, sizes: Iterable[int], separators: Iterable[str]) -> str:
    """
    Cut a string into consecutive groups of the given sizes and join them
    with the given separators, stopping when the string runs out
    """
    out = []
    pos = 0
    seps = [""] + list(separators)
    for size, sep in zip(sizes, seps):
        if pos >= len(value):
            break
        out.append(sep + value[pos : pos + size])
        pos += size
    return "".join(out)
