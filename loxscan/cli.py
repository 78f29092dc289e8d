"""Command line tool: scan a Lox source file and print its tokens."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .lexer import Token, scan_source

logger = logging.getLogger(__name__)

# Exit codes used by the Lox drivers (sysexits.h)
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66


def format_token(token: Token) -> str:
    """Render one token as a tab-separated line: kind, lexeme, literal, line."""
    literal = "null" if token.literal is None else repr(token.literal)
    return f"{token.kind.name}\t{token.lexeme!r}\t{literal}\tline {token.line}"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="loxscan", description="Scan a Lox source file and print its tokens"
    )
    parser.add_argument("path", type=Path, help="Path to a Lox source file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--fail-on-error", action="store_true",
                        help=f"Exit with status {EXIT_DATA_ERROR} if any lexical error was reported")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        text = args.path.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Could not read %s: %s", args.path, e)
        print(f"error: cannot read {args.path}: {e.strerror or e}", file=sys.stderr)
        return EXIT_NO_INPUT

    result = scan_source(text, filename=str(args.path))

    for token in result.tokens:
        print(format_token(token))
    for error in result.errors:
        print(error, file=sys.stderr)

    if args.fail_on_error and result.has_errors():
        return EXIT_DATA_ERROR
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
