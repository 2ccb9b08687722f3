"""Tests for string similarity measures."""

import pytest

from ingres_bot.utils.similarity import (
    combined_similarity,
    jaccard_char_similarity,
    length_ratio_similarity,
    levenshtein_similarity,
)


def test_levenshtein_similarity_empty_strings():
    assert levenshtein_similarity("", "") == 1.0
    assert levenshtein_similarity("abc", "") == 0.0
    assert levenshtein_similarity("", "abc") == 0.0


def test_levenshtein_similarity_single_substitution():
    assert levenshtein_similarity("panjab", "punjab") == pytest.approx(5 / 6)


def test_levenshtein_similarity_classic_pair():
    assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)


def test_jaccard_char_similarity():
    assert jaccard_char_similarity("abc", "abd") == pytest.approx(0.5)
    assert jaccard_char_similarity("", "") == 0.0


def test_length_ratio_similarity():
    assert length_ratio_similarity("ab", "abcd") == pytest.approx(0.5)
    assert length_ratio_similarity("", "") == 1.0


def test_combined_similarity_identical():
    assert combined_similarity("groundwater", "groundwater") == pytest.approx(1.0)


def test_combined_similarity_is_weighted_blend():
    a, b = "recharge", "rechrge"
    expected = (
        0.6 * levenshtein_similarity(a, b)
        + 0.3 * jaccard_char_similarity(a, b)
        + 0.1 * length_ratio_similarity(a, b)
    )
    assert combined_similarity(a, b) == pytest.approx(expected)


def test_combined_similarity_is_symmetric():
    assert combined_similarity("compare", "comapre") == pytest.approx(combined_similarity("comapre", "compare"))
