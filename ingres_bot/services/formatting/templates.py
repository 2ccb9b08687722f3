"""Templated answers keyed by intent and location."""

import logging
from collections.abc import Callable
from typing import NamedTuple

from ingres_bot.config.constants import Intent
from ingres_bot.config.message import (
    LOCATION_PROMPT_MESSAGE,
    NO_DATA_TEMPLATE,
    POLICY_GENERAL_MESSAGE,
    POLICY_LOCATION_TEMPLATE,
    STATIC_MESSAGES,
    UNKNOWN_MESSAGE,
)
from ingres_bot.services.dataset.models import AssessmentCategory, GroundwaterRecord
from ingres_bot.services.dataset.repository import GroundwaterRepository

logger = logging.getLogger(__name__)

_LOCATION_INTENTS = frozenset({
    Intent.QUERY_LOCATION,
    Intent.QUERY_STATE,
    Intent.QUERY_DISTRICT,
    Intent.QUERY_BLOCK,
    Intent.EXTRACTION_STAGE,
    Intent.RECHARGE_DATA,
})

_CATEGORY_INTENTS: dict[Intent, AssessmentCategory] = {
    Intent.OVER_EXPLOITED_AREAS: AssessmentCategory.OVER_EXPLOITED,
    Intent.SEMI_CRITICAL_AREAS: AssessmentCategory.SEMI_CRITICAL,
    Intent.SAFE_AREAS: AssessmentCategory.SAFE,
}


def _group_by_state(records: list[GroundwaterRecord]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = {}
    for record in records:
        districts = grouped.setdefault(record.state, [])
        if record.district not in districts:
            districts.append(record.district)
    return grouped


def _format_record(record: GroundwaterRecord) -> str:
    return (
        f"* {record.district} / {record.block}: {record.category.value}, "
        f"stage of extraction {record.stage_of_extraction:.1f}%, "
        f"recharge {record.annual_recharge:.1f}, extraction {record.annual_extraction:.1f}"
    )


class RenderedAnswer(NamedTuple):
    text: str
    has_data: bool = False


class ResponseRenderer:
    """Builds the text answer for a classified query."""

    def __init__(self, repository: GroundwaterRepository | None = None):
        self.repository = repository if repository is not None else GroundwaterRepository()
        self._handlers: dict[Intent, Callable[[str | None], RenderedAnswer]] = {
            Intent.CRITICAL_AREAS: self._render_critical_areas,
            Intent.LIST_STATES: self._render_states,
            Intent.POLICY_SUGGESTION: self._render_policy,
            Intent.HISTORICAL_TREND: self._render_trend,
        }

    def render(self, intent: Intent, location: str | None = None, details: str | None = None) -> str:
        """Render the answer text only."""
        return self.answer(intent, location, details).text

    def answer(
        self,
        intent: Intent,
        location: str | None = None,
        details: str | None = None,
    ) -> RenderedAnswer:
        """
        Render the answer.

        Args:
            intent: Classified intent
            location: Primary location name, any case
            details: Original query text, used for logging only

        Returns:
            RenderedAnswer; has_data is set when the text comes from assessment records
        """
        logger.debug(f"Rendering {intent.value} for location={location} query={details!r}")
        if intent in _LOCATION_INTENTS:
            return self._render_location(location)
        if intent in _CATEGORY_INTENTS:
            return self._render_category(_CATEGORY_INTENTS[intent])
        handler = self._handlers.get(intent)
        if handler is not None:
            return handler(location)
        return RenderedAnswer(STATIC_MESSAGES.get(intent, UNKNOWN_MESSAGE))

    def _records_for(self, location: str, year: int | None = None) -> list[GroundwaterRecord]:
        return (
            self.repository.lookup(state=location, year=year)
            or self.repository.lookup(district=location, year=year)
        )

    def _render_location(self, location: str | None) -> RenderedAnswer:
        if not location:
            return RenderedAnswer(LOCATION_PROMPT_MESSAGE)
        year = self.repository.latest_year()
        records = self._records_for(location, year)
        if not records:
            return RenderedAnswer(NO_DATA_TEMPLATE.format(location=location.title()))
        lines = [f"[DATA] Groundwater assessment for {location.title()} ({year}):"]
        lines.extend(_format_record(record) for record in records)
        stressed = sum(1 for record in records if record.is_stressed)
        lines.append(f"\n{stressed} of {len(records)} assessment units are critical or over-exploited.")
        return RenderedAnswer("\n".join(lines), has_data=True)

    def _render_critical_areas(self, location: str | None) -> RenderedAnswer:
        year = self.repository.latest_year()
        lines = [f"[ALERT] CRITICAL GROUNDWATER AREAS ({year} assessment):"]
        for category in (AssessmentCategory.OVER_EXPLOITED, AssessmentCategory.CRITICAL):
            grouped = _group_by_state(self.repository.by_category(category, year))
            lines.append(f"\n[{category.value.upper()}]:")
            lines.extend(f"* {state}: {', '.join(districts)}" for state, districts in grouped.items())
        lines.append("\nNOTE: These areas need immediate water conservation measures!")
        return RenderedAnswer("\n".join(lines), has_data=True)

    def _render_category(self, category: AssessmentCategory) -> RenderedAnswer:
        year = self.repository.latest_year()
        grouped = _group_by_state(self.repository.by_category(category, year))
        lines = [f"[{category.value.upper()}] AREAS ({year} assessment):"]
        lines.extend(f"* {state}: {', '.join(districts)}" for state, districts in grouped.items())
        return RenderedAnswer("\n".join(lines), has_data=bool(grouped))

    def _render_states(self, location: str | None) -> RenderedAnswer:
        states = self.repository.states()
        text = f"Assessment data is available for {len(states)} states:\n" + ", ".join(states)
        return RenderedAnswer(text, has_data=bool(states))

    def _render_policy(self, location: str | None) -> RenderedAnswer:
        if not location:
            return RenderedAnswer(POLICY_GENERAL_MESSAGE)
        return RenderedAnswer(POLICY_LOCATION_TEMPLATE.format(location=location.upper()))

    def _render_trend(self, location: str | None) -> RenderedAnswer:
        if not location:
            return RenderedAnswer(STATIC_MESSAGES[Intent.HISTORICAL_TREND])
        records = sorted(self._records_for(location), key=lambda r: (r.block, r.assessment_year))
        history: dict[str, list[GroundwaterRecord]] = {}
        for record in records:
            history.setdefault(record.block, []).append(record)
        multi_year = {block: rows for block, rows in history.items() if len(rows) > 1}
        if not multi_year:
            return RenderedAnswer(STATIC_MESSAGES[Intent.HISTORICAL_TREND])
        lines = [f"[TREND] Stage of extraction over time for {location.title()}:"]
        for block, rows in multi_year.items():
            series = ", ".join(f"{r.assessment_year}: {r.stage_of_extraction:.1f}%" for r in rows)
            lines.append(f"* {block}: {series}")
        return RenderedAnswer("\n".join(lines), has_data=True)
