#!/usr/bin/env python3
"""
loxscan command line driver
===========================

Reads one line of source text and prints its tokens, one per line.

Usage:
    echo 'var x = 1;' | loxscan [options]
    loxscan [options] SOURCE

Options:
    --json          Print each token as a JSON object
    --fix-braces    Scan '}' as RIGHT_BRACE
    --fix-bang      Scan a lone '!' as BANG
    --fractional    Accept fractional number literals
"""

import argparse
import json
import sys
from typing import List, Optional, TextIO

from .lexer import Lexer, LexerOptions, LexerError, Token


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxscan",
        description="Tokenize one line of source text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    echo 'print "hi";' | loxscan          # Read the line from stdin
    loxscan 'a != b'                     # Pass the source directly
    loxscan --json --fix-braces '{ }'    # JSON output, distinct braces
        """
    )

    parser.add_argument('source', nargs='?',
                        help='Source text (default: read one line from stdin)')

    # Output options
    parser.add_argument('--json', action='store_true',
                        help='Print each token as a JSON object')

    # Dialect options
    parser.add_argument('--fix-braces', action='store_true',
                        help="Scan '}' as RIGHT_BRACE instead of LEFT_BRACE")
    parser.add_argument('--fix-bang', action='store_true',
                        help="Scan a lone '!' as BANG instead of EQUAL")
    parser.add_argument('--fractional', action='store_true',
                        help='Decode fractional number literals as floats')

    return parser


def format_token(token: Token, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(token.to_dict())
    return str(token)


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """Run the driver; returns the process exit status."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)

    if args.source is not None:
        source = args.source
        filename = "<argv>"
    else:
        source = stdin.readline()
        filename = "<stdin>"

    options = LexerOptions(
        distinct_right_brace=args.fix_braces,
        distinct_bang=args.fix_bang,
        fractional_numbers=args.fractional,
    )

    try:
        tokens = Lexer(source, filename, options).scan_tokens()
    except LexerError as e:
        print(str(e), end="", file=stderr)
        return 1

    for token in tokens:
        print(format_token(token, args.json), file=stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())
