"""Query engine: the single entry point from transport to query understanding."""

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager, nullcontext

from ingres_bot.config.constants import (
    CLARIFICATION_PROMPT,
    INVALID_INPUT_PROMPT,
    EngineStep,
    Intent,
    QueryStatus,
)
from ingres_bot.config.settings import Settings
from ingres_bot.infrastructure.cache.bounded_cache import ResponseCache
from ingres_bot.infrastructure.counters import RequestCounter
from ingres_bot.infrastructure.logging.logger import StructuredLogger
from ingres_bot.orchestrator.context import ConversationContext, ConversationStore
from ingres_bot.orchestrator.errors import InvalidInputError, ResourceExhaustionError
from ingres_bot.orchestrator.state import QueryResult
from ingres_bot.orchestrator.step_timer import StepContext, timed_step
from ingres_bot.services.intent.classifier import PatternScorer
from ingres_bot.services.location.extractor import LocationExtractor
from ingres_bot.utils.text_processing import normalize_query, normalize_text

logger = logging.getLogger(__name__)


def _build_cache(settings: Settings) -> ResponseCache[QueryResult] | None:
    """Build the response cache, or return None when caching is turned off."""
    if not settings.cache_enabled:
        logger.warning("Response cache disabled by configuration, queries will not be cached")
        return None
    return ResponseCache(
        max_size=settings.cache_max_size,
        ttl_seconds=settings.cache_ttl_seconds,
    )


class QueryEngine:
    """Turns raw user queries into classified, location-tagged results."""

    def __init__(
        self,
        settings: Settings,
        scorer: PatternScorer | None = None,
        extractor: LocationExtractor | None = None,
        cache: ResponseCache[QueryResult] | None = None,
        contexts: ConversationStore | None = None,
        counter: RequestCounter | None = None,
        timer: Callable[[], float] = time.perf_counter,
    ):
        """Initialize the engine. Collaborators not given are built from settings."""
        self.settings = settings
        self.scorer = scorer if scorer is not None else PatternScorer()
        self.extractor = extractor if extractor is not None else LocationExtractor()
        self.cache = cache if cache is not None else _build_cache(settings)
        self.contexts = (
            contexts if contexts is not None
            else ConversationStore(history_size=settings.history_size)
        )
        self.counter = counter if counter is not None else RequestCounter()
        self.structured = StructuredLogger(__name__)
        self._timer = timer

    def process_query(self, raw_input: str | None, session_id: str | None = None) -> QueryResult:
        """
        Process one user query.

        Args:
            raw_input: User's query text
            session_id: Conversation id; anonymous calls get a throwaway context
                and bypass the cache

        Returns:
            QueryResult with status completed, rejected or failed
        """
        start = self._timer()
        with self.counter.track():
            try:
                result = self._process(raw_input, session_id)
            except InvalidInputError as e:
                logger.info(f"{EngineStep.REJECTED.value}: {e}")
                result = self._rejected_result(raw_input, session_id)
            except (ResourceExhaustionError, MemoryError) as e:
                error = e if isinstance(e, ResourceExhaustionError) else ResourceExhaustionError()
                self.structured.log_error(
                    error.step.value if error.step is not None else "process_query",
                    e.__cause__ or e,
                    {"session_id": session_id, "raw_input": raw_input},
                )
                result = self._failed_result(raw_input, session_id, error)
            result.processing_time_ms = (self._timer() - start) * 1000
        return result

    @contextmanager
    def _step(self, step: EngineStep) -> Iterator[StepContext]:
        """Timed step whose MemoryError is reported with the step name."""
        with timed_step(step, self.structured) as ctx:
            try:
                yield ctx
            except MemoryError as e:
                raise ResourceExhaustionError(step) from e

    def _process(self, raw_input: str | None, session_id: str | None) -> QueryResult:
        if raw_input is None or not normalize_text(raw_input):
            raise InvalidInputError("query is empty")

        cache_key = None
        if session_id and self.cache is not None:
            cache_key = f"{session_id}_{raw_input}"
            with self._step(EngineStep.CACHE_CHECK) as step:
                cached = self.cache.get(cache_key)
                step.set_result(session_id=session_id, hit=cached is not None)
            if cached is not None:
                cached.from_cache = True
                return cached

        lock = self.contexts.session_guard(session_id) if session_id else nullcontext()
        with lock:
            if session_id:
                context = self.contexts.get_or_create(session_id)
            else:
                context = ConversationContext.create(history_size=self.settings.history_size)

            with self._step(EngineStep.NORMALIZE):
                query = normalize_query(raw_input)

            with self._step(EngineStep.CLASSIFY) as step:
                scored = self.scorer.classify_query(query, context)
                step.set_result(intent=scored.intent.value, confidence=round(scored.confidence, 4))

            with self._step(EngineStep.EXTRACT_LOCATION) as step:
                match = self.extractor.extract(raw_input)
                step.set_result(state=match.state, district=match.district)

            requires_clarification = scored.confidence < self.settings.clarification_threshold
            result = QueryResult(
                raw_input=raw_input,
                session_id=session_id,
                intent=scored.intent,
                confidence=scored.confidence,
                location=match.primary or context.last_location,
                state=match.state or None,
                district=match.district or None,
                block=match.block or None,
                locations_found=[name for name in (match.state, match.district) if name],
                requires_clarification=requires_clarification,
                clarification_text=CLARIFICATION_PROMPT if requires_clarification else None,
            )

            with self._step(EngineStep.CONTEXT_UPDATE):
                context.update(
                    raw_input,
                    scored.intent,
                    location=match.primary,
                    state=result.state,
                    district=result.district,
                )
                context.mark_clarification(raw_input if requires_clarification else None)

        if cache_key is not None and scored.confidence > self.settings.cache_write_threshold:
            with self._step(EngineStep.CACHE_WRITE) as step:
                self.cache.put(cache_key, result.clone())
                step.set_result(key=cache_key)

        logger.info(
            f"{EngineStep.COMPLETED.value}: intent={result.intent.value} "
            f"confidence={result.confidence:.3f} location={result.location}"
        )
        return result

    @staticmethod
    def _rejected_result(raw_input: str | None, session_id: str | None) -> QueryResult:
        return QueryResult(
            raw_input=raw_input,
            session_id=session_id,
            intent=Intent.ERROR,
            confidence=0.0,
            requires_clarification=True,
            clarification_text=INVALID_INPUT_PROMPT,
            status=QueryStatus.REJECTED,
        )

    @staticmethod
    def _failed_result(
        raw_input: str | None,
        session_id: str | None,
        error: Exception,
    ) -> QueryResult:
        return QueryResult(
            raw_input=raw_input,
            session_id=session_id,
            intent=Intent.ERROR,
            confidence=0.0,
            status=QueryStatus.FAILED,
            error=str(error),
        )
