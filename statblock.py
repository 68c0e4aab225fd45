#!/usr/bin/env python3
"""
statblock.py  ––  print a Roll20 5e monster as terminal text
------------------------------------------------------------
Usage:
    statblock [-v] [--json] [--timeout SECONDS] [Roll20 URL or Monster Name]
    statblock --html saved_page.html
    echo "adult red dragon" | statblock

The name may be several words; with no name on the command line it is read
from STDIN.
"""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
from typing import Optional, Sequence, TextIO

from monster import MonsterRecord, format_statblock
from roll20 import DEFAULT_TIMEOUT, StatblockError, load_monster, parse_monster

logger = logging.getLogger(__name__)

USAGE = (
    "usage: statblock [Roll20 URL or Monster Name]\n"
    "alternatively the URL/Name can be passed from STDIN"
)
NOT_FOUND = "unknown monster"


# ---------- cli --------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statblock",
        description="Print a Roll20 D&D 5e monster as a plain-text stat block.",
    )
    parser.add_argument("target", nargs="*",
                        help="monster name or full Roll20 compendium URL")
    parser.add_argument("--html", type=pathlib.Path, metavar="FILE",
                        help="read a saved compendium page instead of fetching")
    parser.add_argument("--json", action="store_true",
                        help="print the record as JSON")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                        help="request timeout in seconds (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log progress to stderr")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def read_target(words: Sequence[str], stdin: TextIO) -> str:
    target = " ".join(words)
    if not target:
        target = stdin.read().strip()
    return target


def get_record(args: argparse.Namespace, stdin: TextIO) -> MonsterRecord:
    if args.html:
        logger.info("reading %s", args.html)
        return parse_monster(args.html.read_text(encoding="utf-8"))

    target = read_target(args.target, stdin)
    if not target:
        sys.exit(USAGE)

    try:
        return load_monster(target, timeout=args.timeout)
    except StatblockError as e:
        logger.error("%s", e)
        return MonsterRecord()


def render(record: MonsterRecord, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(record.to_dict(), indent=2, ensure_ascii=False)
    return format_statblock(record)


# ---------- main -------------------------------------------------------------
def main(argv: Optional[Sequence[str]] = None, stdin: TextIO = sys.stdin) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    record = get_record(args, stdin)
    if not record.name:
        sys.exit(NOT_FOUND)

    print(render(record, args.json))


if __name__ == "__main__":
    main()
