"""
Constants, enums, and static values.
"""

from enum import Enum


class Intent(str, Enum):
    """Intent labels produced by the pattern scorer."""

    # Conversation
    GREETING = "greeting"
    GOODBYE = "goodbye"
    THANKS = "thanks"
    HELP = "help"
    CAPABILITIES = "capabilities"
    STATUS = "status"
    SMALL_TALK = "small_talk"
    FEEDBACK = "feedback"

    # Location queries
    QUERY_LOCATION = "query_location"
    QUERY_STATE = "query_state"
    QUERY_DISTRICT = "query_district"
    QUERY_BLOCK = "query_block"
    QUERY_CATEGORY = "query_category"
    LIST_STATES = "list_states"
    LIST_DISTRICTS = "list_districts"
    NEARBY_AREAS = "nearby_areas"

    # Assessment categories
    CRITICAL_AREAS = "critical_areas"
    OVER_EXPLOITED_AREAS = "over_exploited_areas"
    SEMI_CRITICAL_AREAS = "semi_critical_areas"
    SAFE_AREAS = "safe_areas"
    SALINE_AREAS = "saline_areas"
    BEST_PERFORMING = "best_performing"
    WORST_PERFORMING = "worst_performing"
    RANKING = "ranking"

    # Assessment metrics
    EXTRACTION_STAGE = "extraction_stage"
    RECHARGE_DATA = "recharge_data"
    AVAILABILITY_DATA = "availability_data"
    DRAFT_DATA = "draft_data"
    WATER_LEVEL = "water_level"
    WATER_QUALITY = "water_quality"
    CONTAMINATION = "contamination"
    ARSENIC = "arsenic"
    FLUORIDE = "fluoride"
    NITRATE = "nitrate"
    SALINITY = "salinity"

    # Analysis
    COMPARE_LOCATIONS = "compare_locations"
    COMPARISON_REQUEST = "comparison_request"
    HISTORICAL_TREND = "historical_trend"
    FUTURE_PROJECTION = "future_projection"
    SEASONAL_VARIATION = "seasonal_variation"
    STATISTICS_SUMMARY = "statistics_summary"
    DATA_EXPORT = "data_export"
    VISUALIZATION = "visualization"

    # Environment
    RAINFALL_CORRELATION = "rainfall_correlation"
    CLIMATE_IMPACT = "climate_impact"
    DROUGHT_RISK = "drought_risk"
    FLOOD_IMPACT = "flood_impact"
    MONSOON_ANALYSIS = "monsoon_analysis"

    # Sectors
    AGRICULTURE_IMPACT = "agriculture_impact"
    INDUSTRIAL_IMPACT = "industrial_impact"
    URBAN_IMPACT = "urban_impact"
    DRINKING_WATER = "drinking_water"
    IRRIGATION_ADVICE = "irrigation_advice"
    CROP_RECOMMENDATION = "crop_recommendation"

    # Policy and management
    POLICY_SUGGESTION = "policy_suggestion"
    CONSERVATION_METHODS = "conservation_methods"
    RAINWATER_HARVESTING = "rainwater_harvesting"
    ARTIFICIAL_RECHARGE = "artificial_recharge"
    REGULATION_INFO = "regulation_info"
    GOVERNMENT_SCHEMES = "government_schemes"
    COMMUNITY_PARTICIPATION = "community_participation"
    SUCCESS_STORIES = "success_stories"

    # Knowledge
    TECHNICAL_EXPLANATION = "technical_explanation"
    DEFINITION = "definition"
    METHODOLOGY = "methodology"
    DATA_SOURCE = "data_source"
    ASSESSMENT_YEAR = "assessment_year"

    # Crisis and impact
    WATER_CRISIS = "water_crisis"
    ECONOMIC_IMPACT = "economic_impact"
    SOCIAL_IMPACT = "social_impact"
    HEALTH_IMPACT = "health_impact"

    # Dialogue control
    FOLLOW_UP_QUESTION = "follow_up_question"
    CLARIFICATION = "clarification"
    CONFIRMATION = "confirmation"
    NEGATION = "negation"
    REPEAT_REQUEST = "repeat_request"

    # Fallbacks
    UNKNOWN = "unknown"
    ERROR = "error"


class QueryStatus(str, Enum):
    """Terminal state of a processed query."""

    COMPLETED = "completed"
    REJECTED = "rejected"
    FAILED = "failed"


class EngineStep(str, Enum):
    """Engine processing steps."""

    RECEIVED = "received"
    CACHE_CHECK = "cache_check"
    NORMALIZE = "normalize"
    CLASSIFY = "classify"
    EXTRACT_LOCATION = "extract_location"
    CONTEXT_UPDATE = "context_update"
    CACHE_WRITE = "cache_write"
    COMPLETED = "completed"
    REJECTED = "rejected"


class EngineStepDescription(str, Enum):
    """Engine step descriptions."""

    CACHE_CHECK = "Look up a cached answer for this session and query"
    NORMALIZE = "Lowercase and tokenize the user's question"
    CLASSIFY = "Score the question against the intent pattern table"
    EXTRACT_LOCATION = "Find the state, district or block mentioned in the question"
    CONTEXT_UPDATE = "Record the turn in the session's conversation context"
    CACHE_WRITE = "Store a confident answer in the response cache"


# Global floor applied to the winning pattern's score.
MIN_INTENT_CONFIDENCE = 0.35

# Fuzzy thresholds.
FUZZY_KEYWORD_THRESHOLD = 0.75
FUZZY_LOCATION_THRESHOLD = 0.8

CLARIFICATION_PROMPT = (
    "I'm not entirely sure I understood your query correctly. "
    "Could you please rephrase or provide more specific details?"
)
INVALID_INPUT_PROMPT = "Please provide a valid query."
