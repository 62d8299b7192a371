"""Tests for vigshuffle/shuffle.py."""
import pytest

from vigshuffle import shuffle, unshuffle


def test_shuffle_odd_length():
    assert shuffle([10, 20, 30, 40, 50]) == [50, 30, 10, 40, 20]


def test_unshuffle_odd_length():
    assert unshuffle([50, 30, 10, 40, 20]) == [10, 20, 30, 40, 50]


def test_shuffle_even_length():
    assert shuffle([1, 2, 3, 4]) == [3, 1, 4, 2]
    assert unshuffle([3, 1, 4, 2]) == [1, 2, 3, 4]


@pytest.mark.parametrize("n", range(0, 12))
def test_unshuffle_inverts_shuffle(n):
    seq = list(range(100, 100 + n))
    out = shuffle(seq)
    assert len(out) == n
    assert sorted(out) == seq
    assert unshuffle(out) == seq


def test_shuffle_single_and_empty():
    assert shuffle([]) == []
    assert unshuffle([]) == []
    assert shuffle([7]) == [7]
    assert unshuffle([7]) == [7]


def test_shuffle_string_input():
    assert "".join(shuffle("abcde")) == "ecadb"
    assert "".join(unshuffle("ecadb")) == "abcde"
