from vowel_spread.distribution import TestCase, VowelCounts, distribute, render, spread

import pytest


def test_distribute_exact_multiple():
    assert distribute(5).counts == [1, 1, 1, 1, 1]

def test_distribute_extra_goes_to_leading_vowels():
    assert distribute(7).counts == [2, 2, 1, 1, 1]

def test_distribute_zero():
    assert distribute(0).counts == [0, 0, 0, 0, 0]

def test_distribute_less_than_five():
    assert distribute(3).counts == [1, 1, 1, 0, 0]

@pytest.mark.parametrize("n", [0, 1, 4, 5, 6, 9, 10, 23, 99, 1000])
def test_distribute_sums_to_n(n):
    assert distribute(n).total() == n

@pytest.mark.parametrize("n", [0, 1, 4, 5, 6, 9, 10, 23, 99, 1000])
def test_distribute_positions(n):
    counts = distribute(n)
    for i in range(5):
        if i < n % 5:
            assert counts[i] == n // 5 + 1
        else:
            assert counts[i] == n // 5

def test_distribute_rejects_negative():
    with pytest.raises(ValueError):
        distribute(-1)

def test_distribute_rejects_non_integer():
    with pytest.raises(TypeError):
        distribute(2.5)
    with pytest.raises(TypeError):
        distribute(True)

def test_render_scenarios():
    assert render(distribute(5)) == "aeiou"
    assert render(distribute(7)) == "aaeeiou"
    assert render(distribute(0)) == ""

def test_render_custom_alphabet():
    assert render(VowelCounts([2, 0, 1, 0, 1]), "AEIOU") == "AAIU"

def test_render_rejects_mismatched_alphabet():
    with pytest.raises(ValueError):
        render(distribute(5), "aei")

@pytest.mark.parametrize("n", [0, 3, 12, 57])
def test_spread_length(n):
    assert len(spread(n)) == n

def test_test_case_hash_is_stable():
    assert TestCase(7).hash_id() == TestCase(7).hash_id()
    assert TestCase(7).hash_id() != TestCase(8).hash_id()

def test_pretty_print():
    assert distribute(7).pretty_print() == "a=2, e=2, i=1, o=1, u=1"
