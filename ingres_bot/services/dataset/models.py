"""Groundwater assessment data models."""

from dataclasses import dataclass
from enum import Enum


class AssessmentCategory(str, Enum):
    """CGWB categorization of an assessment unit."""

    SAFE = "Safe"
    SEMI_CRITICAL = "Semi-Critical"
    CRITICAL = "Critical"
    OVER_EXPLOITED = "Over-Exploited"


@dataclass(frozen=True)
class GroundwaterRecord:
    """One assessment unit for one assessment year."""

    state: str
    district: str
    block: str
    category: AssessmentCategory
    stage_of_extraction: float  # percent
    annual_recharge: float  # MCM
    annual_extraction: float  # MCM
    assessment_year: int

    @property
    def is_stressed(self) -> bool:
        return self.category in (AssessmentCategory.CRITICAL, AssessmentCategory.OVER_EXPLOITED)
