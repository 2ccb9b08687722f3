"""Read-only lookups over the groundwater assessment table."""

import logging
from collections.abc import Iterable

from ingres_bot.services.dataset.models import AssessmentCategory, GroundwaterRecord
from ingres_bot.services.dataset.sample_data import SAMPLE_RECORDS

logger = logging.getLogger(__name__)


def _matches(value: str, wanted: str | None) -> bool:
    return wanted is None or value.casefold() == wanted.casefold()


class GroundwaterRepository:
    """Case-insensitive filters over an in-memory record table. Table order is preserved."""

    def __init__(self, records: Iterable[GroundwaterRecord] = SAMPLE_RECORDS):
        self._records: tuple[GroundwaterRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def lookup(
        self,
        state: str | None = None,
        district: str | None = None,
        block: str | None = None,
        year: int | None = None,
    ) -> list[GroundwaterRecord]:
        """
        Find records matching every given filter.

        Args:
            state: State name, any case
            district: District name, any case
            block: Block name, any case
            year: Assessment year

        Returns:
            Matching records in table order
        """
        results = [
            record
            for record in self._records
            if _matches(record.state, state)
            and _matches(record.district, district)
            and _matches(record.block, block)
            and (year is None or record.assessment_year == year)
        ]
        logger.debug(
            f"lookup state={state} district={district} block={block} year={year}: "
            f"{len(results)} records"
        )
        return results

    def by_category(
        self,
        category: AssessmentCategory | str,
        year: int | None = None,
    ) -> list[GroundwaterRecord]:
        wanted = AssessmentCategory(category)
        return [
            record
            for record in self._records
            if record.category is wanted and (year is None or record.assessment_year == year)
        ]

    def stressed_units(self, year: int | None = None) -> list[GroundwaterRecord]:
        """Critical and over-exploited units."""
        return [
            record
            for record in self._records
            if record.is_stressed and (year is None or record.assessment_year == year)
        ]

    def states(self) -> list[str]:
        """Distinct state names in first-seen order."""
        return list(dict.fromkeys(record.state for record in self._records))

    def latest_year(self) -> int:
        return max((record.assessment_year for record in self._records), default=0)
