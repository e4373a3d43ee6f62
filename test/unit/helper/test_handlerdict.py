from types import MappingProxyType

import pytest

from tin_validator.helper.base import BaseTinHandler
from tin_validator.helper.exception import InvalidCountry, InvArgException
from tin_validator.country.es import Spain
from tin_validator.country.uk import UnitedKingdom

import tin_validator.helper.handlerdict as mod


ALL_COUNTRIES = """
AR AT AU BE BG BR CA CH CN CY CZ DE DK EE ES FI FR GR HR HU ID IE IN IT JP
KR LT LU LV MT MX NG NL PL PT RO RU SA SI SK TR UA UK US ZA
""".split()


def test10_handlerdict():
    """
    Check the contents of the handler dict
    """
    handlers = mod.get_handlerdict()
    assert list(handlers) == ALL_COUNTRIES
    for code, handler in handlers.items():
        assert issubclass(handler, BaseTinHandler)
        assert handler.COUNTRYCODE == code


def test11_readonly():
    """
    The dict is built once and cannot be modified
    """
    handlers = mod.get_handlerdict()
    assert isinstance(handlers, MappingProxyType)
    assert mod.get_handlerdict() is handlers
    with pytest.raises(TypeError):
        handlers["XX"] = Spain


def test20_module_list():
    """
    Modules in the country package
    """
    modules = mod.module_list()
    assert len(modules) == len(ALL_COUNTRIES)
    assert "in_" in modules
    assert "__init__" not in modules


def test30_get_handler():
    """
    Find handlers by country code, including aliases
    """
    assert mod.get_handler_class("es") is Spain
    assert mod.get_handler_class(" ES ") is Spain
    assert mod.get_handler_class("GB") is UnitedKingdom
    assert isinstance(mod.get_handler("uk"), UnitedKingdom)
    with pytest.raises(InvalidCountry) as e:
        mod.get_handler("ZZ")
    assert e.value.country == "ZZ"


def test31_supported():
    assert mod.is_country_supported("es")
    assert mod.is_country_supported("gb")
    assert not mod.is_country_supported("ZZ")
    assert mod.country_list() == ALL_COUNTRIES


class NoPattern(BaseTinHandler):
    COUNTRYCODE = "XX"
    LENGTH = 5


class BadCode(BaseTinHandler):
    COUNTRYCODE = "xxx"
    LENGTH = 5
    PATTERN = r"\d{5}"


class Good(BaseTinHandler):
    COUNTRYCODE = "XX"
    LENGTH = 5
    PATTERN = r"\d{5}"


def test40_subdict():
    """
    Check the function parsing a TIN_HANDLERS list
    """
    subdict = mod.build_subdict([Good], "toy")
    assert subdict == {"XX": Good}


@pytest.mark.parametrize("handlers", [Good, [NoPattern], [BadCode], [str], ["XX"]])
def test41_subdict_error(handlers):
    """
    Malformed handler declarations are rejected
    """
    with pytest.raises(InvArgException):
        mod.build_subdict(handlers, "toy")
