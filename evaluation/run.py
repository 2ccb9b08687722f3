"""Main evaluation script - generates JSON results."""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from evaluation.config import EvalConfig
from evaluation.loader import Query, load_queries, sample_queries
from ingres_bot.config.settings import Settings
from ingres_bot.orchestrator.engine import QueryEngine

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def evaluate_query(engine: QueryEngine, query: Query, session_id: str | None) -> dict[str, Any]:
    """Evaluate a single query."""
    result = engine.process_query(query.question, session_id)
    return {
        "id": query.id,
        "question": query.question,
        "category": query.category,
        "expected_intent": query.expected_intent.value,
        "predicted_intent": result.intent.value,
        "confidence": round(result.confidence, 4),
        "correct": result.intent is query.expected_intent,
        "location": result.location,
        "requires_clarification": result.requires_clarification,
        "processing_time_ms": round(result.processing_time_ms, 3),
    }


def run_evaluation(config: EvalConfig, sample_size: int | None = None) -> dict[str, Any]:
    """Run evaluation and return results."""
    queries = load_queries(config.data_path)

    if sample_size:
        queries = sample_queries(queries, n=sample_size)
        logger.info(f"Sampled {len(queries)} queries")

    # Caching would hide repeated questions from the classifier
    engine = QueryEngine(Settings(cache_enabled=False))
    results = [evaluate_query(engine, query, config.session_id) for query in queries]

    correct = sum(1 for r in results if r["correct"])
    accuracy = correct / len(results) if results else 0.0
    logger.info(f"Accuracy: {correct}/{len(results)} ({accuracy:.1%})")

    return {
        "metadata": {
            "timestamp": datetime.now().isoformat(),
            "total_queries": len(results),
            "correct": correct,
            "accuracy": round(accuracy, 4),
            "dataset": config.data_path.name,
        },
        "results": results,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Run intent classification evaluation")
    parser.add_argument("--sample", type=int, help="Number of queries to sample")
    parser.add_argument("--output", type=str, help="Output JSON path")
    parser.add_argument("--anonymous", action="store_true", help="Run without a session context")
    args = parser.parse_args()

    config = EvalConfig(session_id=None if args.anonymous else "evaluation")
    output = run_evaluation(config, sample_size=args.sample)

    output_path = Path(args.output) if args.output else config.output_path
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=str)

    logger.info(f"Results saved to {output_path}")


if __name__ == "__main__":
    main()
