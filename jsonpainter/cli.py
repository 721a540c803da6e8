"""
Command-line interface: highlight a JSON or JavaScript literal from a file or
standard input.

Exit codes follow the usual pattern: 0 on success, 1 on any configuration,
read or parse error (the message goes to stderr).
"""

import argparse
import sys
from typing import List, Optional, Union

from jsonpainter import __version__
from jsonpainter.backends import OUTPUT_MODES
from jsonpainter.errors import ConfigurationError, ParseError
from jsonpainter.main import Highlighter
from jsonpainter.palettes import PALETTES, VARIANTS
from jsonpainter.parser import DEFAULT_MAX_DEPTH
from jsonpainter.tokenizer import tokenize


def max_width(value: str) -> Union[int, bool]:
    """Accept a column count or "false"; line folding is not performed either way."""
    if value == "false":
        return False
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f'Invalid max-width value: {value}. Expected a number or "false".'
        ) from None


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jsonpainter",
        description="Syntax highlighter for JSON and JavaScript literal values",
    )
    ap.add_argument("file", nargs="?", help="file to highlight (reads stdin when omitted)")
    ap.add_argument("-p", "--palette", default="default",
                    help=f"color palette, one of: {', '.join(PALETTES)}")
    ap.add_argument("-t", "--theme", default="light", metavar="VARIANT",
                    help=f"palette variant: {' or '.join(VARIANTS)}")
    ap.add_argument("-o", "--output-mode", default="ansi",
                    help=f"output format, one of: {', '.join(OUTPUT_MODES)}")
    ap.add_argument("-w", "--max-width", type=max_width, metavar="WIDTH",
                    help="accepted for compatibility; output is never folded")
    ap.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                    help="maximum container nesting")
    ap.add_argument("--tokens", action="store_true", help="dump the token stream and exit")
    ap.add_argument("--debug", action="store_true", help="trace each stage to stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def read_input(path: Optional[str]) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def run(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]

    Returns:
        int: 0 on success, 1 on failure
    """
    args = build_arg_parser().parse_args(argv)

    # Configuration is validated before any input is read
    try:
        highlighter = Highlighter(
            palette=args.palette,
            variant=args.theme,
            output_mode=args.output_mode,
            max_depth=args.max_depth,
            debug=args.debug,
        )
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        text = read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    try:
        if args.tokens:
            for token in tokenize(text):
                print(token)
            return 0
        print(highlighter.highlight(text))
    except ParseError as exc:
        print(f"Error highlighting input: {exc}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
