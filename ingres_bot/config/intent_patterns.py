"""Static intent pattern table.

Patterns are evaluated in table order and the first pattern wins a tie, so
the order of entries is significant. Several patterns may map to the same
intent; each carries its own minimum-confidence gate.
"""

from ingres_bot.config.constants import Intent
from ingres_bot.services.intent.models import IntentPattern

_MAJOR_STATES = ("punjab", "haryana", "gujarat", "maharashtra", "rajasthan", "karnataka", "tamil nadu")

INTENT_PATTERNS: tuple[IntentPattern, ...] = (
    # Conversation
    IntentPattern(
        intent=Intent.GREETING,
        keywords=("hello", "hi there"),
        synonyms=("hey there",),
        priority=15,
        min_confidence=0.8,
        examples=("Hello", "Hi there"),
    ),
    IntentPattern(
        intent=Intent.GREETING,
        keywords=("namaste", "greetings"),
        synonyms=("vanakkam",),
        priority=15,
        min_confidence=0.8,
        examples=("Namaste",),
    ),
    IntentPattern(
        intent=Intent.GREETING,
        keywords=("good morning", "good evening"),
        synonyms=("good afternoon",),
        priority=15,
        min_confidence=0.8,
        examples=("Good morning",),
    ),
    IntentPattern(
        intent=Intent.GOODBYE,
        keywords=("bye", "goodbye"),
        synonyms=("see you",),
        priority=15,
        min_confidence=0.8,
        examples=("Bye", "Goodbye"),
    ),
    IntentPattern(
        intent=Intent.THANKS,
        keywords=("thanks", "thank you"),
        synonyms=("grateful", "appreciate"),
        priority=14,
    ),
    IntentPattern(
        intent=Intent.HELP,
        keywords=("help", "guide"),
        synonyms=("assistance", "instructions"),
        priority=14,
        examples=("Help me",),
    ),
    IntentPattern(
        intent=Intent.CAPABILITIES,
        keywords=("what can you do", "capabilities", "features"),
        synonyms=("abilities",),
        priority=13,
    ),
    IntentPattern(
        intent=Intent.STATUS,
        keywords=("status", "online", "uptime"),
        synonyms=("health check",),
        priority=9,
        min_confidence=0.7,
    ),
    # Location queries
    IntentPattern(
        intent=Intent.QUERY_LOCATION,
        keywords=("show", "data", "groundwater"),
        synonyms=("display", "information", "details", "stats"),
        context_keywords=_MAJOR_STATES,
        priority=12,
        min_confidence=0.5,
        context_dependent=True,
        examples=("Show me Punjab data", "Groundwater in Maharashtra", "Data for Gujarat"),
    ),
    IntentPattern(
        intent=Intent.QUERY_DISTRICT,
        keywords=("district", "tell me about"),
        synonyms=("city", "town"),
        context_keywords=("amritsar", "ludhiana", "pune", "ahmedabad", "jaipur", "chennai"),
        priority=13,
        min_confidence=0.5,
        context_dependent=True,
        examples=("Tell me about Amritsar", "Pune district data"),
    ),
    IntentPattern(
        intent=Intent.QUERY_BLOCK,
        keywords=("block", "tehsil", "taluk"),
        synonyms=("mandal", "assessment unit"),
        priority=12,
    ),
    IntentPattern(
        intent=Intent.QUERY_CATEGORY,
        keywords=("category", "classification", "categories"),
        synonyms=("classified", "grouping"),
        priority=11,
    ),
    IntentPattern(
        intent=Intent.LIST_STATES,
        keywords=("list states", "which states", "all states"),
        synonyms=("covered states",),
        priority=11,
    ),
    # Assessment categories
    IntentPattern(
        intent=Intent.CRITICAL_AREAS,
        keywords=("critical", "areas"),
        synonyms=("dangerous", "alarming", "severe"),
        context_keywords=("over-exploited", "crisis", "urgent"),
        priority=14,
        examples=("Which areas are critical?", "Show critical regions"),
    ),
    IntentPattern(
        intent=Intent.OVER_EXPLOITED_AREAS,
        keywords=("over-exploited", "overexploited", "exploited"),
        synonyms=("overused", "depleted"),
        priority=15,
        examples=("Over-exploited areas", "Show over-exploited regions"),
    ),
    IntentPattern(
        intent=Intent.SEMI_CRITICAL_AREAS,
        keywords=("semi-critical", "semi critical"),
        synonyms=("moderate stress",),
        priority=15,
    ),
    IntentPattern(
        intent=Intent.SAFE_AREAS,
        keywords=("safe", "sustainable"),
        synonyms=("healthy", "secure"),
        priority=12,
    ),
    IntentPattern(
        intent=Intent.RANKING,
        keywords=("rank", "ranking", "top"),
        synonyms=("worst", "best", "highest", "lowest"),
        priority=10,
    ),
    # Assessment metrics
    IntentPattern(
        intent=Intent.EXTRACTION_STAGE,
        keywords=("stage of extraction", "extraction"),
        synonyms=("withdrawal", "pumping"),
        priority=12,
    ),
    IntentPattern(
        intent=Intent.RECHARGE_DATA,
        keywords=("recharge", "replenishment"),
        synonyms=("refill", "infiltration"),
        priority=12,
    ),
    IntentPattern(
        intent=Intent.WATER_LEVEL,
        keywords=("water level", "water table", "depth"),
        synonyms=("aquifer level",),
        priority=11,
    ),
    IntentPattern(
        intent=Intent.WATER_QUALITY,
        keywords=("quality", "contamination", "pollution"),
        synonyms=("arsenic", "fluoride", "nitrate", "salinity"),
        priority=11,
    ),
    # Analysis
    IntentPattern(
        intent=Intent.COMPARE_LOCATIONS,
        keywords=("compare", "versus", "vs"),
        synonyms=("contrast",),
        context_keywords=("punjab", "haryana", "gujarat", "rajasthan", "maharashtra", "states", "regions"),
        priority=13,
        min_confidence=0.55,
        context_dependent=True,
        examples=("Compare Punjab and Haryana", "Compare Punjab vs Haryana"),
    ),
    IntentPattern(
        intent=Intent.COMPARISON_REQUEST,
        keywords=("difference", "between"),
        synonyms=("differentiate", "better than"),
        priority=12,
        examples=("Difference between Gujarat and Rajasthan",),
    ),
    IntentPattern(
        intent=Intent.HISTORICAL_TREND,
        keywords=("trend", "historical", "over time", "change"),
        synonyms=("pattern", "evolution", "trajectory"),
        context_keywords=("years", "decade", "annual", "seasonal"),
        priority=12,
        min_confidence=0.55,
        context_dependent=True,
        examples=("Historical trend for Punjab", "Groundwater change over time"),
    ),
    IntentPattern(
        intent=Intent.FUTURE_PROJECTION,
        keywords=("future", "projection", "forecast", "predict"),
        synonyms=("outlook", "next decade"),
        priority=11,
    ),
    IntentPattern(
        intent=Intent.STATISTICS_SUMMARY,
        keywords=("summary", "overview", "statistics"),
        synonyms=("totals", "aggregate"),
        priority=10,
    ),
    # Environment
    IntentPattern(
        intent=Intent.RAINFALL_CORRELATION,
        keywords=("rainfall", "monsoon", "rain"),
        synonyms=("precipitation", "weather"),
        priority=11,
        examples=("How does rainfall affect groundwater?",),
    ),
    IntentPattern(
        intent=Intent.CLIMATE_IMPACT,
        keywords=("climate", "global warming"),
        synonyms=("temperature", "heatwave"),
        priority=11,
    ),
    IntentPattern(
        intent=Intent.DROUGHT_RISK,
        keywords=("drought", "dry spell"),
        synonyms=("arid", "water deficit"),
        priority=12,
    ),
    # Sectors
    IntentPattern(
        intent=Intent.AGRICULTURE_IMPACT,
        keywords=("agriculture", "farming", "irrigation", "crops"),
        synonyms=("cultivation", "farm", "harvest"),
        context_keywords=("rice", "wheat", "sugarcane", "cotton"),
        priority=10,
        min_confidence=0.55,
    ),
    IntentPattern(
        intent=Intent.INDUSTRIAL_IMPACT,
        keywords=("industry", "industrial", "factories"),
        synonyms=("manufacturing", "effluent"),
        priority=10,
    ),
    IntentPattern(
        intent=Intent.URBAN_IMPACT,
        keywords=("urban", "city water", "urbanization"),
        synonyms=("metro", "municipal"),
        priority=10,
    ),
    # Policy and management
    IntentPattern(
        intent=Intent.POLICY_SUGGESTION,
        keywords=("policy", "recommendations", "suggestions"),
        synonyms=("advice", "guidance", "measures", "strategies"),
        context_keywords=("government", "regulation", "management"),
        priority=12,
        min_confidence=0.5,
        context_dependent=True,
        examples=("Policy suggestions for Punjab", "What are the policy recommendations?"),
    ),
    IntentPattern(
        intent=Intent.CONSERVATION_METHODS,
        keywords=("conservation", "methods", "save water"),
        synonyms=("preservation", "efficiency"),
        context_keywords=("drip", "harvesting", "recycling"),
        priority=12,
        context_dependent=True,
        examples=("Water conservation methods", "Conservation techniques"),
    ),
    IntentPattern(
        intent=Intent.RAINWATER_HARVESTING,
        keywords=("rainwater harvesting", "harvesting"),
        synonyms=("rooftop", "check dam"),
        priority=13,
    ),
    IntentPattern(
        intent=Intent.GOVERNMENT_SCHEMES,
        keywords=("scheme", "schemes", "yojana"),
        synonyms=("programme", "program", "mission"),
        priority=11,
    ),
    IntentPattern(
        intent=Intent.SUCCESS_STORIES,
        keywords=("success", "stories", "case study"),
        synonyms=("examples", "achievements"),
        priority=10,
    ),
    # Knowledge
    IntentPattern(
        intent=Intent.TECHNICAL_EXPLANATION,
        keywords=("explain", "stage", "extraction", "meaning"),
        synonyms=("define", "describe", "elaborate"),
        context_keywords=("methodology", "formula", "calculation"),
        priority=12,
        min_confidence=0.5,
        examples=("Explain stage of extraction",),
    ),
    IntentPattern(
        intent=Intent.DEFINITION,
        keywords=("what is", "define", "definition"),
        synonyms=("meaning of", "stands for"),
        priority=10,
    ),
    IntentPattern(
        intent=Intent.DATA_SOURCE,
        keywords=("source", "cgwb", "data source"),
        synonyms=("origin", "provenance"),
        priority=10,
    ),
    # Crisis and impact
    IntentPattern(
        intent=Intent.WATER_CRISIS,
        keywords=("crisis", "emergency", "shortage", "scarcity"),
        synonyms=("drought", "deficit", "stress"),
        context_keywords=("urgent", "immediate", "severe"),
        priority=13,
        min_confidence=0.55,
        context_dependent=True,
        examples=("Emergency water shortage",),
    ),
    IntentPattern(
        intent=Intent.ECONOMIC_IMPACT,
        keywords=("economic", "cost", "financial"),
        synonyms=("monetary", "expense", "budget"),
        priority=9,
    ),
    IntentPattern(
        intent=Intent.HEALTH_IMPACT,
        keywords=("health", "disease"),
        synonyms=("illness", "toxic"),
        priority=9,
    ),
    # Dialogue control
    IntentPattern(
        intent=Intent.FOLLOW_UP_QUESTION,
        keywords=("tell me more", "more about", "elaborate"),
        synonyms=("further", "additional", "expand"),
        context_keywords=("that", "this"),
        priority=8,
        min_confidence=0.5,
        context_dependent=True,
        examples=("Tell me more about that",),
    ),
    IntentPattern(
        intent=Intent.CONFIRMATION,
        keywords=("yes", "correct", "right"),
        synonyms=("sure", "okay"),
        priority=8,
    ),
    IntentPattern(
        intent=Intent.NEGATION,
        keywords=("no", "wrong", "incorrect"),
        synonyms=("nope", "not that"),
        priority=8,
    ),
)

# Pairs of intents that boost each other when one follows the other.
RELATED_INTENTS: frozenset[frozenset[Intent]] = frozenset({
    frozenset({Intent.QUERY_LOCATION, Intent.COMPARE_LOCATIONS}),
    frozenset({Intent.CRITICAL_AREAS, Intent.POLICY_SUGGESTION}),
    frozenset({Intent.HISTORICAL_TREND, Intent.COMPARE_LOCATIONS}),
    frozenset({Intent.WATER_CRISIS, Intent.CONSERVATION_METHODS}),
})


def is_related_intent(first: Intent, second: Intent) -> bool:
    """Symmetric relation lookup over RELATED_INTENTS."""
    return frozenset({first, second}) in RELATED_INTENTS
