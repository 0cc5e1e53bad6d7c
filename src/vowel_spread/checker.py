from dataclasses import dataclass
from itertools import groupby
from typing import TypeAlias

from vowel_spread.config import VOWELS
from vowel_spread.distribution import distribute


@dataclass
class Pass:
    pass


@dataclass
class Fail:
    reason: str


CheckOutcome: TypeAlias = Pass | Fail


def check_line(n: int, line: str) -> CheckOutcome:
    """Verify that `line` is the even vowel spread of n. Failure
    reasons are reported in the order: length, alphabet, order, counts."""
    if len(line) != n:
        return Fail(f"length {len(line)} differs from {n}")

    for c in line:
        if c not in VOWELS:
            return Fail(f"unexpected character '{c}'")

    positions = [VOWELS.index(c) for c in line]
    if positions != sorted(positions):
        return Fail("vowels are out of order")

    actual = [0] * len(VOWELS)
    for vowel, run in groupby(line):
        actual[VOWELS.index(vowel)] = len(list(run))
    expected = distribute(n)
    if actual != expected.counts:
        return Fail(f"counts {actual} differ from {expected.counts}")

    return Pass()
