"""Dump the token stream of command files.

Usage:
    cmdlang [-v] [--legacy] [--continuation CHAR] FILE [FILE ...]

Use ``-`` to read standard input. Every token is printed on one line,
see Token.describe().
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from cmdlang import __version__
from cmdlang.config import ScanConfig
from cmdlang.errors import ConfigError
from cmdlang.lexer import Scanner
from cmdlang.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdlang",
        description="Print the tokens of cmdlang source files.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="source file, or - for stdin")
    parser.add_argument(
        "--continuation",
        default=",",
        metavar="CHAR",
        help="line continuation character (default: %(default)s)",
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="end whitespace runs at comments instead of scanning them in place",
    )
    parser.add_argument("--encoding", default="utf-8", help="source encoding")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def dump_tokens(scanner: Scanner, out: TextIO) -> int:
    """Write every token through EOF. Returns the number of tokens."""
    count = 0
    for token in scanner.tokenize():
        out.write(token.describe() + "\n")
        count += 1
    return count


def _dump_file(path: str, config: ScanConfig, out: TextIO) -> None:
    if path == "-":
        scanner = Scanner(sys.stdin, source_file="<stdin>", config=config)
    else:
        with open(path, "rb") as f:
            scanner = Scanner(f, source_file=path, config=config)
    count = dump_tokens(scanner, out)
    logger.debug("%s: %d tokens", path, count)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ScanConfig(
            continuation_char=args.continuation,
            comments_in_whitespace=not args.legacy,
            encoding=args.encoding,
        )
    except ConfigError as e:
        print(f"cmdlang: {e}", file=sys.stderr)
        return 2

    out = sys.stdout
    failed = False
    for path in args.files:
        out.write(f">>> ---------------- {path}\n")
        try:
            _dump_file(path, config, out)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            print(f"ERR: {e}", file=sys.stderr)
            failed = True
        out.write("<<< ---------------- \n")

    return 1 if failed else 0
