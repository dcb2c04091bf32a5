"""
Command line front end for the Lox expression evaluator.

Evaluates an expression given with -e, read from a file, or typed at an
interactive prompt. Exit codes follow the sysexits convention Lox uses:
64 usage error, 65 syntax error, 70 runtime error.

Author: xwest
"""

import argparse
import logging
import sys
from typing import List, Optional

from .session import Session, recursion_limit
from .reporting import stderr_reporter
from .parser import AstPrinter, RpnPrinter


EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxexpr",
        description="Evaluate Lox expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxexpr -e "(1 + 2) * (4 - 3)"     # prints 3
    loxexpr --ast -e "1, 2 ? 3 : 4"     # prints (, 1.0 (?: 2.0 3.0 4.0))
    loxexpr expression.lox              # evaluate a file
    loxexpr                             # interactive prompt
        """
    )

    parser.add_argument('file', nargs='?',
                        help='File holding one expression')
    parser.add_argument('-e', '--expression',
                        help='Expression to evaluate')

    # Output options
    output = parser.add_mutually_exclusive_group()
    output.add_argument('--ast', action='store_true',
                        help='Print the syntax tree instead of evaluating')
    output.add_argument('--rpn', action='store_true',
                        help='Print the expression in reverse Polish notation')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log lexer and parser activity to stderr')
    return parser


def run_source(source: str, session: Session, mode: str = "eval") -> int:
    """Run one source string and print its result. Returns an exit code."""
    if mode == "eval":
        result = session.evaluate(source)
        if not result.parse.ok:
            return EX_DATAERR
        if result.runtime_error is not None:
            return EX_SOFTWARE
        print(result.display())
        return 0

    parsed = session.parse(source)
    if not parsed.ok:
        return EX_DATAERR
    printer = AstPrinter() if mode == "ast" else RpnPrinter()
    with recursion_limit():
        text = printer.print(parsed.expression)
    print(text)
    return 0


def run_prompt(session: Session, mode: str = "eval") -> int:
    """Read-evaluate-print loop. Errors on one line never end the loop."""
    while True:
        try:
            line = input("> ")
        except EOFError:
            print()
            return 0
        if not line.strip():
            continue
        run_source(line, session, mode)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the loxexpr command"""
    args = _build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    mode = "ast" if args.ast else "rpn" if args.rpn else "eval"

    if args.file and args.expression is not None:
        print("Usage: loxexpr [-e EXPRESSION | FILE]", file=sys.stderr)
        return EX_USAGE

    if args.expression is not None:
        return run_source(args.expression, Session(stderr_reporter()), mode)

    if args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except OSError as e:
            print(f"Cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return EX_USAGE
        logger.debug("Read %d characters from %s", len(source), args.file)
        return run_source(source, Session(stderr_reporter(), filename=args.file), mode)

    try:
        return run_prompt(Session(stderr_reporter(), filename="<stdin>"), mode)
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())
