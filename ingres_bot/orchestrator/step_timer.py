"""Context manager for timing and logging engine steps."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ingres_bot.config.constants import EngineStep, EngineStepDescription
from ingres_bot.infrastructure.logging.logger import StructuredLogger

logger = logging.getLogger(__name__)


class StepContext:
    """Mutable context for a timed engine step."""

    def __init__(self) -> None:
        self.result: dict[str, Any] | None = None
        self.elapsed_ms: float = 0.0

    def set_result(self, **result: Any) -> None:
        self.result = result


def log_engine_step(step: EngineStep) -> None:
    description = EngineStepDescription.__members__.get(step.name)
    if description is not None:
        logger.debug(f"[{step.value}] {description.value}")


@contextmanager
def timed_step(step: EngineStep, structured: StructuredLogger) -> Iterator[StepContext]:
    """Time an engine step and log its result."""
    log_engine_step(step)
    ctx = StepContext()
    start = time.perf_counter()
    yield ctx
    ctx.elapsed_ms = (time.perf_counter() - start) * 1000
    if ctx.result is not None:
        structured.log_step(step.value, ctx.result, duration_ms=ctx.elapsed_ms)
