"""Command-line entry point for maxo.

    maxo --version            print the version string
    maxo go rocks             print "og skcor"
    maxo --items go rocks     print the item stream, one item per line

Running with no text prints a usage hint and exits 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace

from maxo.config import ScanConfig, get_scan_config
from maxo.errors import ScanError
from maxo.items import ItemKind
from maxo.lexer import scan
from maxo.transform import transform

VERSION_STRING = "MAXOv0.0.1"
USAGE_HINT = "type -h or --help for help on usage"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maxo",
        description="Scan text into words and whitespace and reverse every word.",
    )
    parser.add_argument("text", nargs="*", help="text to scan (joined with single spaces)")
    parser.add_argument("--version", action="store_true", help="View the version of maxo lang")
    parser.add_argument("--items", action="store_true", help="print scanned items instead of the transform")
    parser.add_argument("--buffer-size", type=int, metavar="N", help="item stream capacity")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _print_items(source: str, config: ScanConfig) -> int:
    with scan(source, config=config) as handle:
        for item in handle:
            print(f"{item.kind.name}\t{item.position}\t{item.value!r}")
            if item.kind is ItemKind.ERROR:
                return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(VERSION_STRING)
        return 0

    if not args.text:
        print(USAGE_HINT, file=sys.stderr)
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(threadName)s %(name)s: %(message)s")

    config = get_scan_config()
    if args.buffer_size is not None:
        try:
            config = replace(config, buffer_size=args.buffer_size)
        except ValueError as exc:
            parser.error(str(exc))

    source = " ".join(args.text)
    if args.items:
        return _print_items(source, config)

    try:
        print(transform(source, config=config))
    except ScanError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
