"""Tests for query normalization and tokenization."""

from ingres_bot.utils.text_processing import (
    STOP_WORDS,
    is_stop_word,
    normalize_query,
    normalize_text,
    tokenize,
)


def test_tokenize_drops_stop_words_and_punctuation():
    assert tokenize("show me the punjab data!") == ("show", "me", "punjab", "data")


def test_tokenize_drops_single_characters():
    assert tokenize("a b groundwater x") == ("groundwater",)


def test_tokenize_keeps_hyphenated_words():
    assert tokenize("show over-exploited regions") == ("show", "over-exploited", "regions")


def test_tokenize_splits_on_all_delimiters():
    assert tokenize('rain;monsoon:"drought"(arid)') == ("rain", "monsoon", "drought", "arid")


def test_tokenize_empty():
    assert tokenize("") == ()


def test_normalize_query_lowercases():
    query = normalize_query("Which areas are CRITICAL?")
    assert query.lowered == "which areas are critical?"
    assert query.tokens == ("which", "areas", "critical")
    assert not query.is_empty


def test_normalize_query_none_and_empty():
    assert normalize_query(None).is_empty
    assert normalize_query("").tokens == ()


def test_normalize_query_only_stop_words():
    query = normalize_query("is the")
    assert query.tokens == ()
    assert not query.is_empty


def test_normalize_query_is_deterministic():
    assert normalize_query("Compare Punjab and Haryana") == normalize_query("Compare Punjab and Haryana")


def test_normalize_text_collapses_whitespace():
    assert normalize_text("  show \t me\n data  ") == "show me data"
    assert normalize_text("   ") == ""


def test_stop_words():
    assert is_stop_word("the")
    assert not is_stop_word("punjab")
    assert "shall" in STOP_WORDS
