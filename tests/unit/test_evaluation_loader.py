"""Tests for the evaluation dataset loader."""

from pathlib import Path

import pytest

from evaluation.config import EvalConfig
from evaluation.loader import load_queries, sample_queries
from ingres_bot.config.constants import Intent


@pytest.fixture
def queries():
    return load_queries(EvalConfig().data_path)


def test_load_bundled_queries(queries):
    assert len(queries) == 24
    assert all(isinstance(q.expected_intent, Intent) for q in queries)
    assert queries[0].question == "Hello"
    assert queries[0].expected_intent is Intent.GREETING
    assert queries[0].category == "conversation"


def test_missing_dataset(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_queries(tmp_path / "missing.csv")


def test_blank_questions_are_skipped(tmp_path):
    path = tmp_path / "queries.csv"
    path.write_text("question,expected_intent,category\nHello,greeting,conversation\n,help,meta\n", encoding="utf-8")
    loaded = load_queries(path)
    assert [q.question for q in loaded] == ["Hello"]


def test_unknown_label_raises(tmp_path):
    path = Path(tmp_path) / "queries.csv"
    path.write_text("question,expected_intent,category\nHello,salutation,conversation\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_queries(path)


def test_sample_is_stratified(queries):
    sampled = sample_queries(queries, n=5)
    assert len(sampled) == 5
    assert len({q.category for q in sampled}) > 1


def test_sample_larger_than_dataset(queries):
    assert sample_queries(queries, n=100) == queries


def test_sample_takes_one_per_category_first(queries):
    categories = list(dict.fromkeys(q.category for q in queries))
    sampled = sample_queries(queries, n=len(categories))
    assert [q.category for q in sampled] == categories
