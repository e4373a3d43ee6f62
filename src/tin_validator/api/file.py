"""
File-based API: validate all the TINs contained in a text file
"""

import sys
import json
import gzip
import bz2
import lzma
from collections import Counter

import regex

from typing import Dict, TextIO, Tuple

from tin_validator.tin import TIN
from tin_validator.helper.exception import TinException
from tin_validator.helper.json import CustomJSONEncoder

# A country code followed by a separator, then the TIN
_LINE = regex.compile(r"^([A-Za-z]{2})[\s,;:|]+(.+)$")


def openfile(name: str, mode: str) -> TextIO:
    """
    Open files, raw text or compressed (gzip, bzip2 or xz)
    """
    name = str(name)
    if name == "-":
        return sys.stdout if mode.startswith("w") else sys.stdin
    elif name.endswith(".gz"):
        return gzip.open(name, mode, encoding="utf-8")
    elif name.endswith(".bz2"):
        return bz2.open(name, mode, encoding="utf-8")
    elif name.endswith(".xz"):
        return lzma.open(name, mode, encoding="utf-8")
    else:
        return open(name, mode, encoding="utf-8")


def split_line(line: str, country: str = None) -> Tuple[str, str]:
    """
    Separate a line into country code and TIN. If a default country is
    given, the whole line is the TIN
    """
    if country:
        return country, line
    m = _LINE.match(line)
    if m:
        return m.group(1), m.group(2)
    return line[:2], line[2:]


def build_tin(country: str, tin: str, strict: bool = False) -> TIN:
    if strict:
        return TIN.from_slug(country.strip().upper() + tin)
    return TIN.from_country(country, tin)


def validate_line(country: str, tin: str, strict: bool = False) -> Dict:
    """
    Validate one TIN and return the result record
    """
    obj = build_tin(country, tin, strict)
    result = {"country": obj.country, "tin": obj.tin}
    try:
        result["valid"] = obj.check(strict)
        result["type"] = obj.identify_tin_type()
    except TinException as e:
        result["valid"] = False
        result["error"] = e.__class__.__name__
    return result


def write(result: Dict, out: TextIO):
    """
    Write a result record as an NDJSON line
    """
    json.dump(result, out, ensure_ascii=False, cls=CustomJSONEncoder)
    print(file=out)


# ----------------------------------------------------------------------


def process_file(
    infile: str,
    outfile: str,
    country: str = None,
    strict: bool = False,
    show_stats: bool = False,
) -> Dict:
    """
    Validate a text file containing one TIN per line
      :param infile: source file (raw text or compressed, "-" for stdin)
      :param outfile: destination NDJSON file ("-" for stdout)
      :param country: default country, when the lines contain only the TIN
      :param strict: use the TINs as they are, without normalization
      :param show_stats: print statistics to stderr when done
    """
    stats = Counter()
    print(". Reading from:", infile, file=sys.stderr)
    print(". Writing to:", outfile, file=sys.stderr)
    with openfile(infile, "rt") as fin:
        with openfile(outfile, "wt") as fout:
            for n, line in enumerate(fin):
                line = line.strip()
                if not line:
                    continue
                result = {"line": n + 1}
                result.update(validate_line(*split_line(line, country), strict))
                write(result, fout)
                stats["lines"] += 1
                stats["valid" if result["valid"] else "invalid"] += 1
                if "error" in result:
                    stats[result["error"]] += 1

    if show_stats:
        print("\n. Statistics:", file=sys.stderr)
        for k, v in stats.items():
            print(f"  {k:20} :  {v:5}", file=sys.stderr)

    return stats
