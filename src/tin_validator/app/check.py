"""
Command-line script to validate the TINs in a text file
"""

import sys
import logging
import argparse

from typing import List

from tin_validator import VERSION
from tin_validator.api import process_file


def parse_args(args: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=f"Validate a file of TINs, one per line (version {VERSION})"
    )

    g0 = parser.add_argument_group("Input/output paths")
    g0.add_argument("infile", help="source file ('-' for stdin)")
    g0.add_argument("outfile", help="destination NDJSON file ('-' for stdout)")

    g1 = parser.add_argument_group("Processing")
    g1.add_argument(
        "--country",
        metavar="CC",
        help="default country; if given, each line holds only the TIN",
    )
    g1.add_argument(
        "--strict", action="store_true", help="do not normalize the TINs"
    )

    g3 = parser.add_argument_group("Other")
    g3.add_argument("--show-stats", action="store_true", help="show statistics")
    g3.add_argument("--debug", action="store_true", help="debug mode")

    return parser.parse_args(args)


def main(args: List[str] = None):
    if args is None:
        args = sys.argv[1:]
    args = parse_args(args)
    args = vars(args)
    logging.basicConfig(level=logging.DEBUG if args.pop("debug") else logging.WARNING)
    process_file(args.pop("infile"), args.pop("outfile"), **args)


if __name__ == "__main__":
    main()
