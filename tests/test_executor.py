from io import StringIO

from vowel_spread.distribution import TestCase
from vowel_spread.executor import read_test_cases, solve, run
from vowel_spread.utils import InputFailure

import pytest


def run_on(text):
    out = StringIO()
    run(StringIO(text), out)
    return out.getvalue()


def test_two_cases():
    assert run_on("2\n5\n7\n") == "aeiou\naaeeiou\n"

def test_zero_gives_empty_line():
    assert run_on("1\n0\n") == "\n"

def test_no_cases():
    assert run_on("0\n") == ""

def test_tokens_on_one_line():
    assert run_on("3 1 2 3") == "a\nae\naei\n"

def test_order_matches_input():
    assert run_on("3\n7\n0\n5\n") == "aaeeiou\n\naeiou\n"

def test_trailing_tokens_ignored():
    assert read_test_cases("1 4 9 9") == [TestCase(4)]

def test_solve_is_lazy():
    lines = solve([TestCase(1), TestCase(2)])
    assert next(lines) == "a"
    assert next(lines) == "ae"

def test_debug_prints_counts(capsys):
    list(solve([TestCase(7)], debug=True))
    assert "a=2, e=2, i=1, o=1, u=1" in capsys.readouterr().err

@pytest.mark.parametrize("text", [
    "",
    "   \n",
    "two 5 7",
    "2 5",
    "1 x",
    "-1",
    "1 -3",
    "1 +5",
    "1 1_000",
    "1 \u0663",
    "-",
])
def test_malformed_input(text):
    with pytest.raises(InputFailure):
        read_test_cases(text)
