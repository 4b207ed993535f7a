# diffindent/cli.py
"""
Command-line wrapper around `format_markdown`.

    diffindent < README.md > README.out.md
    diffindent --policy changed -i docs/*.md
    diffindent --check docs/*.md
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import POLICIES, SCANNERS, FormatConfig
from .core import format_markdown
from .errors import DiffIndentError

EXIT_OK = 0
EXIT_WOULD_CHANGE = 1
EXIT_ERROR = 2

log = logging.getLogger("diffindent")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diffindent",
        description="Align the contents of ```diff blocks in Markdown with their fence indentation.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Markdown files to format. Reads stdin and writes stdout when omitted.",
    )
    parser.add_argument(
        "--policy",
        choices=POLICIES,
        default=None,
        help="baseline: shift the whole body; changed: move only -/+ markers (default: baseline).",
    )
    parser.add_argument("--scanner", choices=SCANNERS, default=None, help="Block scanner to use (default: lines).")
    parser.add_argument("--max-indent", type=int, default=None, help="Largest fence indent accepted.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-i", "--in-place", action="store_true", help="Rewrite the given files.")
    mode.add_argument(
        "--check",
        action="store_true",
        help="Write nothing; exit 1 if any input would be reformatted.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr.")
    return parser


def _read(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.in_place and not args.files:
        parser.error("--in-place needs at least one file")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    try:
        config = FormatConfig.from_options(policy=args.policy, scanner=args.scanner, max_indent=args.max_indent)

        if not args.files:
            source = sys.stdin.read()
            result = format_markdown(source, config, log=args.verbose)
            if args.check:
                return EXIT_WOULD_CHANGE if result != source else EXIT_OK
            sys.stdout.write(result)
            return EXIT_OK

        would_change: List[str] = []
        for path in args.files:
            source = _read(path)
            result = format_markdown(source, config, log=args.verbose)
            if args.check:
                if result != source:
                    would_change.append(path)
            elif args.in_place:
                if result != source:
                    _write(path, result)
                    log.info(f"reformatted {path}")
            else:
                sys.stdout.write(result)
    except (DiffIndentError, OSError, UnicodeDecodeError) as e:
        print(f"diffindent: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    for path in would_change:
        print(f"would reformat {path}", file=sys.stderr)
    return EXIT_WOULD_CHANGE if would_change else EXIT_OK
