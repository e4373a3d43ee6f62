"""
Command-line script to show information about the supported countries,
and to try out single TINs
"""

import sys
import logging
import argparse

from typing import List, TextIO

from tin_validator import VERSION
from tin_validator.tin import TIN
from tin_validator.helper.exception import TinException


def print_countries(out: TextIO):
    print(". Supported countries:", file=out)
    for country in TIN.get_supported_countries():
        types = TIN.get_tin_types_for_country(country).values()
        print(f"  {country}:", " ".join(t.code for t in types), file=out)


def print_country(country: str, out: TextIO):
    info = TIN.get_mask_for_country(country)
    print(f"\n {country}", file=out)
    print(f"     mask: {info['mask']}", file=out)
    print(f"     placeholder: {info['placeholder']}", file=out)
    for n, t in TIN.get_tin_types_for_country(country).items():
        desc = f" - {t.description}" if t.description else ""
        print(f"     type {n}: {t.code} ({t.name}){desc}", file=out)


def print_validation(country: str, tin: str, strict: bool, out: TextIO):
    obj = TIN.from_slug(country.upper() + tin) if strict else TIN.from_country(country, tin)
    try:
        obj.check(strict)
        print(f"{obj}: valid", file=out)
    except TinException as e:
        print(f"{obj}: not valid ({e.__class__.__name__}: {e})", file=out)
        return
    tintype = obj.identify_tin_type()
    if tintype:
        print(f"  type: {tintype.code} ({tintype.name})", file=out)


def process(
    list_countries: bool = False,
    country: List[str] = None,
    validate: List[str] = None,
    format: List[str] = None,
    strict: bool = False,
    **kwargs,
):
    """
    Process the request: show the selected information
    """
    out = sys.stdout
    if list_countries:
        print_countries(out)
    elif country:
        for c in country:
            print_country(c, out)
    elif validate:
        print_validation(*validate, strict, out)
    elif format:
        c, value = format
        print(TIN.from_country(c, "").format_input(value), file=out)


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Show information about supported TIN countries (version {VERSION})"
    )

    g1 = parser.add_argument_group("Request")
    g11 = g1.add_mutually_exclusive_group(required=True)
    g11.add_argument(
        "--list-countries", action="store_true", help="list all supported countries"
    )
    g11.add_argument(
        "--country",
        metavar="CC",
        nargs="+",
        help="show mask, placeholder and TIN types for countries",
    )
    g11.add_argument(
        "--validate", nargs=2, metavar=("CC", "TIN"), help="validate a single TIN"
    )
    g11.add_argument(
        "--format", nargs=2, metavar=("CC", "TIN"), help="format an input value"
    )

    g3 = parser.add_argument_group("Other")
    g3.add_argument(
        "--strict", action="store_true", help="do not normalize the TIN before validating"
    )
    g3.add_argument("--debug", action="store_true", help="debug mode")

    return parser.parse_args(args)


def main(args: List[str] = None):
    if args is None:
        args = sys.argv[1:]
    args = parse_args(args)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    try:
        process(**vars(args))
    except TinException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
