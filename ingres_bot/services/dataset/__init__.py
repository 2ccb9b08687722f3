"""Groundwater assessment dataset."""

from ingres_bot.services.dataset.models import AssessmentCategory, GroundwaterRecord
from ingres_bot.services.dataset.repository import GroundwaterRepository

__all__ = [
    "AssessmentCategory",
    "GroundwaterRecord",
    "GroundwaterRepository",
]
