"""
Traverse the country folder and gather all implemented TIN handlers into
a read-only dictionary, keyed by country code

Each country module declares the handlers it implements in a TIN_HANDLERS
list. The dictionary is built once, on first use, and never modified
afterwards.
"""

import importlib
import logging
from pathlib import Path
from types import MappingProxyType, ModuleType

from typing import Dict, List, Mapping, Type, Any

from .base import BaseTinHandler
from .exception import InvArgException, InvalidCountry

logger = logging.getLogger(__name__)

# Name of the list that holds the handlers at each module
_LISTNAME = "TIN_HANDLERS"

# Country codes accepted as synonyms of a registered one
ALIASES = MappingProxyType({"GB": "UK"})

# The structure holding all loaded handlers
_HANDLERS = None

# Locate the country folder
_COUNTRY = Path(__file__).parents[1] / "country"
_COUNTRY_PKG = "tin_validator.country"


# --------------------------------------------------------------------------


class InvTinHandler(InvArgException):
    def __init__(self, msg, module=None):
        super().__init__("handler declaration error [module={}]: {}", module, msg)


def _is_handler_class(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, BaseTinHandler)


def handler_check(handler: Any, module: str = None):
    """
    Check the constants declared by a handler class
    """
    if not _is_handler_class(handler):
        raise InvTinHandler(f"not a TIN handler class: {handler!r}", module)
    code = handler.COUNTRYCODE
    if not isinstance(code, str) or len(code) != 2 or not code.isupper():
        raise InvTinHandler(f"invalid country code {code!r} in {handler.__name__}", module)
    if handler.LENGTH is None:
        raise InvTinHandler(f"no length defined in {handler.__name__}", module)
    if handler.PATTERN is None:
        raise InvTinHandler(f"no pattern defined in {handler.__name__}", module)


def build_subdict(handler_list: List, module: str = None) -> Dict[str, Type]:
    """
    Given a list of handler classes, build the code-keyed dict for them
    """
    if not isinstance(handler_list, (list, tuple)):
        raise InvTinHandler("invalid handler list: not a list/tuple", module)
    subdict = {}
    for handler in handler_list:
        handler_check(handler, module)
        subdict[handler.COUNTRYCODE] = handler
    return subdict


def _gather_module(pkg: str, name: str) -> Dict[str, Type]:
    """
    Import a country module and load the handlers it declares
    """
    mod: ModuleType = importlib.import_module("." + name, pkg)
    handler_list = getattr(mod, _LISTNAME, None)
    if not handler_list:
        logger.debug("no TIN handlers in %s.%s", pkg, name)
        return {}
    return build_subdict(handler_list, mod.__name__)


def module_list() -> List[str]:
    """
    Return the names of all the country modules
    """
    return sorted(
        m.stem
        for m in _COUNTRY.iterdir()
        if m.suffix == ".py" and m.stem != "__init__"
    )


def _gather_all_handlers() -> Mapping[str, Type[BaseTinHandler]]:
    """
    Build the dictionary of all handlers
    """
    handlers = {}
    for name in module_list():
        for code, handler in _gather_module(_COUNTRY_PKG, name).items():
            if code in handlers:
                raise InvTinHandler(
                    f"duplicated country code {code} ({handlers[code].__name__})",
                    name,
                )
            handlers[code] = handler
    logger.debug("registered %d TIN handlers: %s", len(handlers), " ".join(handlers))
    return MappingProxyType(dict(sorted(handlers.items())))


def get_handlerdict() -> Mapping[str, Type[BaseTinHandler]]:
    """
    Return the read-only dict holding all implemented handlers
    """
    global _HANDLERS
    if _HANDLERS is None:
        _HANDLERS = _gather_all_handlers()
    return _HANDLERS


# --------------------------------------------------------------------------


def resolve_country(country: str) -> str:
    """
    Uppercase a country code and map it through the alias table
    """
    code = country.strip().upper()
    return ALIASES.get(code, code)


def country_list() -> List[str]:
    """
    Return all supported country codes
    """
    return list(get_handlerdict())


def is_country_supported(country: str) -> bool:
    return resolve_country(country) in get_handlerdict()


def get_handler_class(country: str) -> Type[BaseTinHandler]:
    """
    Find the handler class for a country code, or raise InvalidCountry
    """
    try:
        return get_handlerdict()[resolve_country(country)]
    except KeyError:
        raise InvalidCountry(country) from None


def get_handler(country: str, **kwargs) -> BaseTinHandler:
    """
    Build a fresh handler for a country code
    """
    return get_handler_class(country)(**kwargs)
