# string_calculator/__main__.py

import argparse
import logging
import sys

from .calculator import add
from .errors import CalculatorError, NumberFormatError


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="string-calculator",
        description="Sum a delimited sequence of numbers.",
    )
    parser.add_argument(
        "numbers",
        nargs="?",
        help="Sequence to sum, e.g. '1,2,3' or '//;\\n1;2'. Read from stdin if omitted.",
    )
    parser.add_argument(
        "-e", "--escapes",
        action="store_true",
        help="Read a literal \\n in NUMBERS as a newline.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if args.numbers is None:
        numbers = sys.stdin.read()
        # Drop the one newline a shell pipe appends, it would read as a dangling delimiter
        if numbers.endswith('\n'):
            numbers = numbers[:-1]
    else:
        numbers = args.numbers

    if args.escapes:
        numbers = numbers.replace('\\n', '\n')

    try:
        total = add(numbers)
    except CalculatorError as e:
        print(e, file=sys.stderr)
        return 1
    except NumberFormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(total)
    return 0


if __name__ == '__main__':
    sys.exit(main())
