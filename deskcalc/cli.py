import argparse
import io
import sys
from typing import Optional

from deskcalc.evaluator import DEFAULT_MAX_DEPTH, check_max_depth
from deskcalc.session import Session
from deskcalc.utils import format_number
from deskcalc.value import Success

MAX_EXIT_CODE = 255


def _max_depth(arg: str) -> int:
    try:
        return check_max_depth(int(arg))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def interactive(session: Session) -> None:
    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return

        for result in session.evaluate(code):
            if isinstance(result, Success):
                print(format_number(result.value))


def main(argv: Optional[list[str]] = None) -> int:
    """Runs the calculator over a file or stdin, returns the number of reported errors"""
    parser = argparse.ArgumentParser(prog="deskcalc", description="Evaluate arithmetic expressions line by line")
    parser.add_argument("file", nargs="?", help="file to evaluate (if empty, reads stdin)")
    parser.add_argument(
        "--max-depth",
        type=_max_depth,
        default=DEFAULT_MAX_DEPTH,
        help=f"maximum nesting of parentheses and unary minus (default: {DEFAULT_MAX_DEPTH})",
    )
    args = parser.parse_args(argv)

    session = Session(max_depth=args.max_depth)
    # undecodable bytes become U+FFFD and are reported as bad tokens
    if args.file is not None:
        try:
            with open(args.file, "r", encoding="utf-8", errors="replace") as source:
                session.calculate(source)
        except OSError as e:
            parser.error(f"{args.file!r} could not be opened: {e.strerror}")
    else:
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        if sys.stdin.isatty():
            interactive(session)
        else:
            session.calculate(sys.stdin)

    return min(session.error_count, MAX_EXIT_CODE)
