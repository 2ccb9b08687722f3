"""Intent classifier service.

Scores a query against every entry of the static pattern table using
substring, synonym, fuzzy and bigram signals, plus an optional bonus drawn
from the session's conversation context.
"""

import logging

from ingres_bot.config.constants import FUZZY_KEYWORD_THRESHOLD, MIN_INTENT_CONFIDENCE, Intent
from ingres_bot.config.intent_patterns import INTENT_PATTERNS, is_related_intent
from ingres_bot.orchestrator.context import ConversationContext
from ingres_bot.services.intent.models import IntentPattern, ScoredResult
from ingres_bot.utils.similarity import combined_similarity
from ingres_bot.utils.text_processing import NormalizedQuery, normalize_query

logger = logging.getLogger(__name__)

EXACT_KEYWORD_WEIGHT = 1.2
SYNONYM_WEIGHT = 0.9
FUZZY_WEIGHT = 0.7
BIGRAM_WEIGHT = 0.8
CONTEXT_KEYWORD_BONUS = 0.6
RELATED_INTENT_BONUS = 0.4
REQUIRE_ALL_PENALTY = 0.6
EXACT_PRIORITY_BOOST = 1.2
EXACT_AND_FUZZY_BOOST = 1.1


def _coverage_ratio(pattern: IntentPattern, lowered: str) -> float:
    """Share of the input covered by keyword occurrences, clamped to [0, 1]."""
    if not lowered:
        return 0.0
    covered = sum(lowered.count(keyword) * len(keyword) for keyword in pattern.keywords)
    return min(1.0, covered / len(lowered))


class PatternScorer:
    """Classifies free-text queries into one of the known intents."""

    def __init__(self, patterns: tuple[IntentPattern, ...] = INTENT_PATTERNS):
        self.patterns = patterns

    def score_pattern(
        self,
        pattern: IntentPattern,
        query: NormalizedQuery,
        context: ConversationContext | None = None,
    ) -> float:
        """
        Compute the normalized score of one pattern for a query.

        Args:
            pattern: Pattern to score
            query: Lowercased query and its tokens
            context: Optional session context for the context bonus

        Returns:
            Non-negative normalized score
        """
        lowered, tokens = query.lowered, query.tokens
        score = 0.0
        exact_matches = 0
        fuzzy_matches = 0

        for keyword in pattern.keywords:
            if keyword in lowered:
                exact_matches += 1
                score += EXACT_KEYWORD_WEIGHT

        for synonym in pattern.synonyms:
            if synonym in lowered:
                score += SYNONYM_WEIGHT

        for keyword in pattern.keywords:
            for token in tokens:
                similarity = combined_similarity(keyword, token)
                if similarity > FUZZY_KEYWORD_THRESHOLD:
                    fuzzy_matches += 1
                    score += similarity * FUZZY_WEIGHT

        for first, second in zip(tokens, tokens[1:]):
            bigram = f"{first} {second}"
            for keyword in pattern.keywords:
                if keyword in bigram:
                    score += BIGRAM_WEIGHT

        if pattern.context_dependent and context is not None:
            last_location = context.last_location or ""
            if any(
                (last_location and keyword in last_location) or keyword in lowered
                for keyword in pattern.context_keywords
            ):
                score += CONTEXT_KEYWORD_BONUS
            if context.last_intent is not Intent.UNKNOWN and is_related_intent(
                context.last_intent, pattern.intent
            ):
                score += RELATED_INTENT_BONUS

        score *= 0.8 + 0.2 * _coverage_ratio(pattern, lowered)

        if pattern.require_all and exact_matches < len(pattern.keywords):
            score *= REQUIRE_ALL_PENALTY

        priority_multiplier = pattern.priority / 10.0
        if exact_matches > 0:
            priority_multiplier *= EXACT_PRIORITY_BOOST
        score *= priority_multiplier

        normalized = score / (pattern.term_count + 1.0)
        if exact_matches > 0 and fuzzy_matches > 0:
            normalized *= EXACT_AND_FUZZY_BOOST
        return normalized

    def classify(
        self,
        raw_input: str | None,
        context: ConversationContext | None = None,
    ) -> ScoredResult:
        """
        Classify a query's intent.

        Args:
            raw_input: User's query text
            context: Optional session context

        Returns:
            ScoredResult with the winning intent, or Unknown carrying the
            best raw score when no pattern clears its gate
        """
        if not raw_input:
            return ScoredResult(intent=Intent.ERROR, confidence=0.0)
        return self.classify_query(normalize_query(raw_input), context)

    def classify_query(
        self,
        query: NormalizedQuery,
        context: ConversationContext | None = None,
    ) -> ScoredResult:
        """Classify an already normalized query."""
        if query.is_empty:
            return ScoredResult(intent=Intent.ERROR, confidence=0.0)

        best_score = 0.0
        best_index: int | None = None
        best_raw = 0.0
        for index, pattern in enumerate(self.patterns):
            score = self.score_pattern(pattern, query, context)
            best_raw = max(best_raw, score)
            if score >= pattern.min_confidence and score > best_score:
                best_score = score
                best_index = index

        if best_index is not None and best_score > MIN_INTENT_CONFIDENCE:
            intent = self.patterns[best_index].intent
            logger.debug(f"Classified '{query.lowered}' as {intent.value} ({best_score:.3f})")
            return ScoredResult(intent=intent, confidence=best_score, pattern_index=best_index)

        logger.debug(f"No pattern matched '{query.lowered}' (best raw score {best_raw:.3f})")
        return ScoredResult(intent=Intent.UNKNOWN, confidence=best_raw)
