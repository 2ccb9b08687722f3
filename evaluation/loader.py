"""Dataset loader for evaluation queries."""

import csv
import logging
from collections import deque
from dataclasses import dataclass
from pathlib import Path

from ingres_bot.config.constants import Intent

logger = logging.getLogger(__name__)


@dataclass
class Query:
    """A single labeled evaluation query."""

    id: int
    question: str
    expected_intent: Intent
    category: str


def load_queries(path: Path) -> list[Query]:
    """Load queries from CSV file. Rows with an unknown intent label raise ValueError."""
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    queries = []

    with open(path, encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)

        for idx, row in enumerate(reader):
            question = row.get("question", "").strip()
            if not question:
                continue
            queries.append(
                Query(
                    id=idx,
                    question=question,
                    expected_intent=Intent(row.get("expected_intent", "").strip().lower()),
                    category=row.get("category", "").strip().lower(),
                )
            )

    logger.info(f"Loaded {len(queries)} queries from {path}")
    return queries


def sample_queries(queries: list[Query], n: int = 10) -> list[Query]:
    """Take n queries round-robin across categories so each category is represented."""
    if n >= len(queries):
        return queries

    by_category: dict[str, deque[Query]] = {}
    for q in queries:
        by_category.setdefault(q.category, deque()).append(q)

    sampled: list[Query] = []
    while len(sampled) < n:
        for pending in by_category.values():
            if pending and len(sampled) < n:
                sampled.append(pending.popleft())
    return sampled
