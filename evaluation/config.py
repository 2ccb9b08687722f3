"""Evaluation configuration."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass
class EvalConfig:
    """Configuration for evaluation runs."""

    # Paths
    data_path: Path = Path(__file__).parent / "data" / "queries.csv"
    results_dir: Path = Path(__file__).parent / "results"

    # Session used for every query; None runs each query anonymously
    session_id: str | None = "evaluation"

    # Run identification
    run_id: str = field(default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S"))

    @property
    def output_path(self) -> Path:
        """Path for results JSON."""
        return self.results_dir / f"{self.run_id}_results.json"
