"""
The TIN value object: a country code plus a TIN body, stored as a single
slug and parsed again on every operation
"""

import logging
from datetime import date

from typing import Callable, Dict, List, Optional

from .tintype import TinType
from .helper.base import BaseTinHandler
from .helper.normalizer import normalize
from .helper.exception import TinException, EmptySlug
from .helper import handlerdict

logger = logging.getLogger(__name__)


class TIN:
    """
    A Tax Identification Number for a given country.

    Build it with one of the factories:
      * TIN.from_country("ES", "12345678-Z")
      * TIN.from_slug("ES12345678Z")
    """

    __slots__ = "_slug", "_today"

    def __init__(self, slug: str, today: Callable[[], date] = None):
        self._slug = slug
        self._today = today

    @classmethod
    def from_country(
        cls, country: str, tin: str, today: Callable[[], date] = None
    ) -> "TIN":
        return cls(country.strip().upper() + normalize(tin), today=today)

    @classmethod
    def from_slug(cls, slug: str, today: Callable[[], date] = None) -> "TIN":
        return cls(slug, today=today)

    # ----------------------------------------------------------------------

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def country(self) -> str:
        return self._parse(False)[0]

    @property
    def tin(self) -> str:
        return self._parse(False)[1]

    def _parse(self, strict: bool):
        """
        Split the slug into country code and TIN body
        """
        if not self._slug:
            raise EmptySlug()
        country, tin = self._slug[:2], self._slug[2:]
        return country.upper(), tin if strict else normalize(tin)

    def _handler(self, country: str) -> BaseTinHandler:
        kwargs = {"today": self._today} if self._today else {}
        return handlerdict.get_handler(country, **kwargs)

    # ----------------------------------------------------------------------

    def check(self, strict: bool = False) -> bool:
        """
        Validate the TIN. Return True, or raise the exception describing why
        it is not valid
        """
        country, tin = self._parse(strict)
        return self._handler(country).validate(tin)

    def is_valid(self, strict: bool = False) -> bool:
        """
        Validate the TIN, returning False instead of raising
        """
        try:
            return self.check(strict)
        except TinException as e:
            logger.debug("invalid TIN %s: %s", self._slug, e)
            return False

    def identify_tin_type(self) -> Optional[TinType]:
        country, tin = self._parse(False)
        return self._handler(country).identify_tin_type(tin)

    def get_tin_types(self) -> Dict[int, TinType]:
        return self._handler(self._parse(False)[0]).get_tin_types()

    def get_input_mask(self) -> str:
        return self._handler(self._parse(False)[0]).get_input_mask()

    def get_placeholder(self) -> str:
        return self._handler(self._parse(False)[0]).get_placeholder()

    def format_input(self, value: str) -> str:
        return self._handler(self._parse(False)[0]).format_input(value)

    # ----------------------------------------------------------------------

    @staticmethod
    def is_country_supported(country: str) -> bool:
        return handlerdict.is_country_supported(country)

    @staticmethod
    def get_supported_countries() -> List[str]:
        return handlerdict.country_list()

    @staticmethod
    def get_mask_for_country(country: str) -> Dict[str, str]:
        """
        Return the input mask and placeholder for a country
        """
        handler = handlerdict.get_handler(country)
        return {
            "mask": handler.get_input_mask(),
            "placeholder": handler.get_placeholder(),
            "country": country,
        }

    @staticmethod
    def get_tin_types_for_country(country: str) -> Dict[int, TinType]:
        return handlerdict.get_handler(country).get_tin_types()

    # ----------------------------------------------------------------------

    def __str__(self) -> str:
        return self._slug

    def __repr__(self) -> str:
        return f"<TIN {self._slug}>"

    def __eq__(self, other):
        if not isinstance(other, TIN):
            return NotImplemented
        return self._slug == other._slug

    def __hash__(self):
        return hash(self._slug)
