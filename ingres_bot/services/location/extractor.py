"""Location extraction from free-text queries."""

import logging
from dataclasses import dataclass

from ingres_bot.config.constants import FUZZY_LOCATION_THRESHOLD
from ingres_bot.config.gazetteer import CITIES, STATES
from ingres_bot.utils.similarity import levenshtein_similarity
from ingres_bot.utils.text_processing import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationMatch:
    """Place names found in a query. Empty strings mean not found."""

    state: str = ""
    district: str = ""
    block: str = ""

    @property
    def found(self) -> bool:
        return bool(self.state or self.district or self.block)

    @property
    def primary(self) -> str | None:
        """State if present, otherwise district."""
        return self.state or self.district or None


class LocationExtractor:
    """Finds Indian state and city names in a query."""

    def __init__(
        self,
        states: tuple[str, ...] = STATES,
        cities: tuple[str, ...] = CITIES,
    ):
        self.states = states
        self.cities = cities

    def extract(self, text: str | None) -> LocationMatch:
        """
        Extract a state and district from text.

        Exact substring matches are tried first; each gazetteer returns its
        first entry (in gazetteer order) found in the text. When neither
        produced a match, each token is compared against the state names
        and the first state with similarity above the fuzzy threshold wins.

        Args:
            text: Query text, any case

        Returns:
            LocationMatch with the state and district that were found
        """
        if not text:
            return LocationMatch()

        lowered = text.lower()
        state = next((name for name in self.states if name in lowered), "")
        district = next((name for name in self.cities if name in lowered), "")

        if not state and not district:
            state = self._fuzzy_state(lowered)

        match = LocationMatch(state=state, district=district)
        if match.found:
            logger.debug(f"Extracted location state='{state}' district='{district}'")
        return match

    def _fuzzy_state(self, lowered: str) -> str:
        for token in tokenize(lowered):
            for name in self.states:
                if levenshtein_similarity(token, name) > FUZZY_LOCATION_THRESHOLD:
                    return name
        return ""
