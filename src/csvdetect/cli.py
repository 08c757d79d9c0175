"""Command-line interface for csvdetect."""

from __future__ import annotations

import argparse
import csv
import io
import logging
import sys
from pathlib import Path

import csvdetect
from csvdetect._utils import delimiter_name
from csvdetect.pipeline import Dialect

_HEADER_VERDICTS = {True: "yes", False: "no", None: "unknown"}


def _read_rows(text: str, dialect: Dialect) -> list[list[str]]:
    """Tokenize *text* with the standard library reader using *dialect*."""
    reader = csv.reader(
        io.StringIO(text, newline=""),
        delimiter=dialect.field_delimiter,
        quotechar=dialect.escape_character,
        doublequote=True,
    )
    return list(reader)


def _report(name: str, text: str, args: argparse.Namespace) -> None:
    # The first candidate is never skipped, so there is always a result
    best = csvdetect.detect_all(text)[0]
    dialect, score = best.dialect, best.score

    if args.minimal:
        line = delimiter_name(dialect.field_delimiter)
    else:
        line = f"{name}: delimiter {delimiter_name(dialect.field_delimiter)} with score {score}"

    if args.header:
        try:
            rows = _read_rows(text, dialect)
        except csv.Error as e:
            verdict = f"unreadable ({e})"
        else:
            verdict = _HEADER_VERDICTS[
                csvdetect.is_header_present(csvdetect.classify_rows(rows))
            ]
        line = f"{line} {verdict}" if args.minimal else f"{line}, header: {verdict}"

    print(line)


def main(argv: list[str] | None = None) -> None:
    """Run the ``csvdetect`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Detect the dialect of delimiter-separated files."
    )
    parser.add_argument("files", nargs="*", help="Files to detect the dialect of")
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the delimiter name"
    )
    parser.add_argument(
        "--header", action="store_true", help="Also report whether a header row is present"
    )
    parser.add_argument(
        "--encoding", default="utf-8-sig", help="Text encoding of the input (default: utf-8-sig)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log candidate scores to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"csvdetect {csvdetect.__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                text = Path(filepath).read_bytes().decode(args.encoding)
            except (OSError, UnicodeDecodeError, LookupError) as e:
                print(f"csvdetect: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            _report(filepath, text, args)
    else:
        try:
            text = sys.stdin.buffer.read().decode(args.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            print(f"csvdetect: stdin: {e}", file=sys.stderr)
            sys.exit(1)
        _report("stdin", text, args)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
