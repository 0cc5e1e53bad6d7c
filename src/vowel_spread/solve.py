import argparse
import sys
from pathlib import Path

from vowel_spread.executor import read_test_cases, write_lines
from vowel_spread.utils import InputFailure, panic


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Spread n characters evenly across the vowels a, e, i, o, u."
    )
    parser.add_argument(
        "--input",
        type=str,
        help="Read test cases from this file (stdin by default)."
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Write results to this file (stdout by default)."
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print per-case vowel counts to stderr."
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        if args.input:
            with Path(args.input).open(encoding="utf-8") as instream:
                test_cases = read_test_cases(instream.read())
        else:
            test_cases = read_test_cases(sys.stdin.read())
    except InputFailure as e:
        panic(f"invalid input: {e}")

    if args.output:
        with Path(args.output).open("w", encoding="utf-8") as outstream:
            write_lines(test_cases, outstream, debug=args.debug)
    else:
        write_lines(test_cases, sys.stdout, debug=args.debug)


if __name__ == "__main__":
    main()
