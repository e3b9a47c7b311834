from __future__ import annotations

import argparse
import sys
from typing import TextIO

from . import __version__
from .api import run
from .config import DEFAULT_DELIMITER, CutConfig
from .errors import CutError
from .log import resolve_level, setup_logging


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cutpy", description="Select bytes, characters or fields from each line")
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr")
    ap.add_argument(
        "-d",
        "--delim",
        "--delimiter",
        dest="delimiter",
        metavar="DELIMITER",
        default=DEFAULT_DELIMITER,
        help="Field delimiter (a single byte, default TAB)",
    )
    group = ap.add_mutually_exclusive_group(required=True)
    group.add_argument("-f", "--fields", metavar="FIELDS", help="Selected fields")
    group.add_argument("-b", "--bytes", metavar="BYTES", help="Selected bytes")
    group.add_argument("-c", "--chars", metavar="CHARS", help="Selected chars")
    ap.add_argument("files", nargs="*", metavar="FILE", help="Input file(s), '-' for stdin")
    return ap


def main(argv: list[str] | None = None, *, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    args = _build_parser().parse_args(argv)
    err = stderr if stderr is not None else sys.stderr
    setup_logging(resolve_level(args.verbose))

    try:
        config = CutConfig.from_args(
            fields=args.fields,
            bytes_=args.bytes,
            chars=args.chars,
            delimiter=args.delimiter,
            files=args.files,
        )
    except CutError as e:
        print(e, file=err)
        return 1

    return run(config, stdout=stdout, stderr=err).exit_code
