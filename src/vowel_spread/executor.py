import sys
from typing import List, Iterable, Iterator, TextIO

from vowel_spread.distribution import TestCase, distribute, render
from vowel_spread.utils import InputFailure


def _parse_int(token: str, what: str) -> int:
    # plain ASCII digits only
    if token.startswith("-") and token[1:].isascii() and token[1:].isdigit():
        raise InputFailure(f"{what} is negative: {token}")
    if not (token.isascii() and token.isdigit()):
        raise InputFailure(f"{what} is not an integer: '{token}'")
    return int(token)


def read_test_cases(text: str) -> List[TestCase]:
    """The first token is the number of test cases T, followed by T
    values of n. Anything after the T-th value is ignored."""
    tokens = text.split()
    if len(tokens) == 0:
        raise InputFailure("missing number of test cases")
    num_cases = _parse_int(tokens[0], "number of test cases")
    values = tokens[1:num_cases + 1]
    if len(values) < num_cases:
        raise InputFailure(f"expected {num_cases} test cases, got {len(values)}")
    return [TestCase(_parse_int(token, f"test case {i + 1}"))
            for i, token in enumerate(values)]


def solve(test_cases: Iterable[TestCase], debug=False) -> Iterator[str]:
    for test_case in test_cases:
        counts = distribute(test_case.n)
        if debug:
            print(f"n={test_case.n}: {counts.pretty_print()}", file=sys.stderr, flush=True)
        yield render(counts)


def write_lines(test_cases: Iterable[TestCase], outstream: TextIO, debug=False):
    for line in solve(test_cases, debug=debug):
        outstream.write(line + "\n")
    outstream.flush()


def run(instream: TextIO, outstream: TextIO, debug=False):
    write_lines(read_test_cases(instream.read()), outstream, debug=debug)
