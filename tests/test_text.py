from itertools import combinations

import pytest

from judgebox.text import (
    COIN_SEQUENCES,
    coin_sequence_counts,
    decode_to_and_fro,
    largest_after_removal,
    min_dna_mutations,
    min_rotation,
    splits_into_even_palindromes,
    string_distance,
)


@pytest.mark.parametrize(
    "number,k",
    [("1234", 2), ("4321", 1), ("1924", 2), ("777", 1), ("10200", 1), ("987654", 3), ("31415926", 4)],
)
def test_largest_after_removal_matches_best_subsequence(number, k):
    result = largest_after_removal(number, k)
    best = max("".join(c) for c in combinations(number, len(number) - k))
    assert result == best
    assert len(result) == len(number) - k


def test_largest_after_removal_edges():
    assert largest_after_removal("5821", 0) == "5821"
    assert largest_after_removal("5821", 4) == ""


def test_largest_after_removal_rejects_too_many():
    with pytest.raises(ValueError):
        largest_after_removal("12", 3)


@pytest.mark.parametrize("s", ["baca", "aaaa", "abab", "zyx", "helloworld", "cabcab", "a"])
def test_min_rotation_is_least_and_earliest(s):
    index = min_rotation(s)
    rotation = s[index:] + s[:index]
    rotations = [s[i:] + s[:i] for i in range(len(s))]
    assert all(rotation <= other for other in rotations)
    assert all(rotations[i] != rotation for i in range(index))


def test_min_rotation_empty_raises():
    with pytest.raises(ValueError):
        min_rotation("")


def test_min_dna_mutations_all_a():
    assert min_dna_mutations("AAAA") == 0
    assert min_dna_mutations("") == 0


@pytest.mark.parametrize("seq", ["ABAB", "BBBB", "BAAB", "ABBBA", "BABABA"])
def test_min_dna_mutations_bounds(seq):
    result = min_dna_mutations(seq)
    assert 0 <= result <= seq.count("B")
    assert result <= seq.count("A") + 1


@pytest.mark.parametrize("tosses", ["TTTHHHTHTH", "HHHHHHH", "THTHTTHH"])
def test_coin_counts_total(tosses):
    assert sum(coin_sequence_counts(tosses)) == len(tosses) - 2


def test_coin_counts_mirror():
    tosses = "TTHTHHHTTT"
    mirrored = tosses.translate(str.maketrans("TH", "HT"))
    assert coin_sequence_counts(mirrored) == coin_sequence_counts(tosses)[::-1]
    assert len(COIN_SEQUENCES) == len(coin_sequence_counts(tosses))


@pytest.mark.parametrize("word", ["a", "ab", "abc", "xyzzy"])
def test_even_palindrome_concatenations(word):
    s = word + word[::-1]
    assert splits_into_even_palindromes(s) is True
    assert splits_into_even_palindromes(s + s) is True


def test_even_palindromes_odd_and_empty():
    assert splits_into_even_palindromes("") is True
    assert splits_into_even_palindromes("abbaa") is False


def test_decode_to_and_fro_examples():
    assert decode_to_and_fro(5, "toioynnkpheleaigshareconhtomesnlewx") == "theresnoplacelikehomeonasnowynightx"
    assert decode_to_and_fro(3, "ttyohhieneesiaabss") == "thisistheeasyoneab"


def test_decode_single_column_is_identity():
    assert decode_to_and_fro(1, "message") == "message"


def test_string_distance_basics():
    assert string_distance("abc", "abc") == 0
    assert string_distance("abc", "") == 3
    assert string_distance("ab", "ba") == 1


@pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("abcdef", "badcfe"), ("flaw", "lawn")])
def test_string_distance_symmetric_and_bounded(a, b):
    assert string_distance(a, b) == string_distance(b, a)
    assert string_distance(a, b) <= max(len(a), len(b))


def test_string_distance_band_limit():
    with pytest.raises(ValueError):
        string_distance("a" * 150, "a")