VERSION = "0.5.0"

from .tintype import TinType
from .tin import TIN
from .helper.exception import (
    TinException,
    EmptySlug,
    InvalidCountry,
    InvalidLength,
    InvalidPattern,
    InvalidDate,
    InvalidSyntax,
)
