"""Engine exception hierarchy."""

from ingres_bot.config.constants import EngineStep


class EngineError(Exception):
    """Base class for query engine failures."""


class InvalidInputError(EngineError):
    """Query text is missing, empty or whitespace only."""


class ResourceExhaustionError(EngineError):
    """Memory ran out while processing a query."""

    def __init__(self, step: EngineStep | None = None):
        self.step = step
        where = f" during {step.value}" if step is not None else ""
        super().__init__(f"out of memory{where} while processing query")
