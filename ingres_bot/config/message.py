"""
User-facing messages for the groundwater assistant.
"""
from ingres_bot.config.constants import Intent

# =============================================================================
# Fixed answers
# =============================================================================

STATIC_MESSAGES: dict[Intent, str] = {
    Intent.GREETING: (
        "Namaste! I'm your INGRES groundwater assistant. I can help you with:\n"
        "* Groundwater data for any location\n"
        "* Critical and over-exploited areas\n"
        "* Historical trends and comparisons\n"
        "* Policy recommendations\n\n"
        "Try asking: 'Show me Punjab groundwater data' or 'Which areas are critical?'"
    ),
    Intent.GOODBYE: (
        "Thank you for using the INGRES assistant! Stay informed about groundwater resources."
    ),
    Intent.THANKS: "You're welcome! Ask me anything else about groundwater resources.",
    Intent.HELP: (
        "INGRES Assistant Help:\n\n"
        "[LOC] Location Queries: 'Show me [state/district] data'\n"
        "[CRIT] Critical Areas: 'Show critical areas' or 'Over-exploited regions'\n"
        "[COMP] Comparisons: 'Compare Punjab and Haryana'\n"
        "[TREND] Trends: 'Historical trend for Maharashtra'\n"
        "[CRISIS] Water Crisis: 'Areas facing water shortage'\n"
        "[RAIN] Rainfall Impact: 'How does rainfall affect groundwater?'\n"
        "[POLICY] Policy Help: 'Policy suggestions for [location]'\n\n"
        "Example: 'What is the groundwater status of Amritsar?'"
    ),
    Intent.CAPABILITIES: (
        "I can look up CGWB assessment units by state and district, list critical, "
        "over-exploited and safe areas, explain assessment terms, and suggest "
        "conservation measures and policies."
    ),
    Intent.QUERY_CATEGORY: (
        "[CATEGORY] GROUNDWATER CLASSIFICATION SYSTEM:\n\n"
        "CGWB categories are based on the stage of extraction:\n"
        "* [SAFE] <70% extraction: sustainable usage\n"
        "* [SEMI-CRITICAL] 70-90% extraction: moderate stress, regulated development\n"
        "* [CRITICAL] 90-100% extraction: high stress, strict regulation required\n"
        "* [OVER-EXPLOITED] >100% extraction: groundwater mining, ban on new extraction"
    ),
    Intent.WATER_CRISIS: (
        "[CRISIS] WATER CRISIS ALERT AREAS:\n\n"
        "IMMEDIATE ATTENTION NEEDED:\n"
        "* Punjab (Central): most blocks over-exploited\n"
        "* Haryana (Southwest): rapid depletion rate\n"
        "* Tamil Nadu (Chennai): urban water stress\n"
        "* Karnataka (Bangalore): IT sector impact\n\n"
        "URGENT ACTIONS: Rainwater harvesting, drip irrigation, policy enforcement"
    ),
    Intent.RAINFALL_CORRELATION: (
        "[RAINFALL] RAINFALL-GROUNDWATER CORRELATION:\n\n"
        "MONSOON IMPACT:\n"
        "* Good monsoon (>110% normal): +15-25% recharge\n"
        "* Normal monsoon (90-110%): stable recharge\n"
        "* Poor monsoon (<90%): -20-40% recharge\n\n"
        "REGIONAL PATTERNS:\n"
        "* Western Ghats: high recharge efficiency (60-80%)\n"
        "* Gangetic Plains: moderate efficiency (40-60%)\n"
        "* Arid regions: low efficiency (10-30%)"
    ),
    Intent.COMPARE_LOCATIONS: (
        "[COMPARE] GROUNDWATER COMPARISON:\n\n"
        "PUNJAB vs HARYANA (example comparison):\n\n"
        "PUNJAB:\n"
        "* Stage of extraction above 150% in many blocks\n"
        "* Main issue: intensive rice-wheat cultivation\n\n"
        "HARYANA:\n"
        "* Stage of extraction 90-120% in critical areas\n"
        "* Main issue: industrial and agricultural demand\n\n"
        "Specify exact locations for a detailed comparison."
    ),
    Intent.HISTORICAL_TREND: (
        "[TREND] HISTORICAL GROUNDWATER TRENDS:\n\n"
        "DECLINING AREAS:\n"
        "* Punjab: water table dropped 2-3m\n"
        "* Haryana: more over-exploited blocks\n"
        "* Tamil Nadu: Chennai crisis worsened\n\n"
        "IMPROVING AREAS:\n"
        "* Rajasthan: better monsoon management\n"
        "* Gujarat: successful water conservation\n\n"
        "Specify a location for detailed trend analysis."
    ),
    Intent.CONSERVATION_METHODS: (
        "[CONSERVE] WATER CONSERVATION METHODS:\n"
        "* Drip and sprinkler irrigation\n"
        "* Rooftop rainwater harvesting\n"
        "* Check dams and percolation tanks\n"
        "* Crop diversification away from water-intensive crops\n"
        "* Industrial water recycling"
    ),
    Intent.RAINWATER_HARVESTING: (
        "[HARVEST] RAINWATER HARVESTING:\n"
        "Rooftop collection, recharge pits and check dams let monsoon runoff "
        "replenish aquifers. Many states mandate it for buildings above 300 sq.m."
    ),
    Intent.TECHNICAL_EXPLANATION: (
        "[INFO] STAGE OF EXTRACTION:\n"
        "Stage of extraction = annual groundwater extraction / annual extractable "
        "resource x 100. Units above 100% withdraw more than is recharged."
    ),
    Intent.DATA_SOURCE: (
        "Answers are based on the Central Ground Water Board (CGWB) dynamic "
        "groundwater resource assessment published through INGRES."
    ),
    Intent.STATUS: (
        "[STATUS] INGRES ASSISTANT STATUS:\n"
        "[OK] System: online and operational\n"
        "[OK] Data: sample CGWB assessment units\n"
        "[OK] Last update: 2023 assessment"
    ),
}

POLICY_GENERAL_MESSAGE = (
    "[POLICY] GENERAL GROUNDWATER POLICY FRAMEWORK:\n\n"
    "NATIONAL LEVEL:\n"
    "* National Water Policy implementation\n"
    "* CGWB guidelines enforcement\n\n"
    "STATE LEVEL:\n"
    "* Groundwater regulation acts\n"
    "* Water conservation incentives\n\n"
    "Specify a location for targeted recommendations!"
)

POLICY_LOCATION_TEMPLATE = (
    "[POLICY] POLICY RECOMMENDATIONS FOR {location}:\n\n"
    "IMMEDIATE MEASURES:\n"
    "* Mandatory rainwater harvesting for buildings >300 sq.m\n"
    "* Groundwater extraction permits with annual limits\n"
    "* Subsidies for drip irrigation systems\n\n"
    "MEDIUM-TERM STRATEGIES:\n"
    "* Crop diversification from water-intensive crops\n"
    "* Industrial water recycling mandates\n"
    "* Community-based water management"
)

LOCATION_PROMPT_MESSAGE = (
    "Please specify a location. Example:\n"
    "* 'Show me Punjab groundwater data'\n"
    "* 'Groundwater status of Amritsar'\n"
    "* 'Data for Maharashtra'"
)

NO_DATA_TEMPLATE = "No assessment data is available for {location} yet."

UNKNOWN_MESSAGE = (
    "[HELP] I didn't quite understand that. I can help with:\n\n"
    "* 'Show me [location] groundwater data'\n"
    "* 'Which areas are critical?'\n"
    "* 'Compare [state1] and [state2]'\n"
    "* 'Policy suggestions for [location]'\n"
    "* 'Areas facing water crisis'\n\n"
    "Try rephrasing your question or type 'help' for more options."
)

# =============================================================================
# Error Messages
# =============================================================================
ERROR_MESSAGES: dict[str, str] = {
    "failed": "Something went wrong while processing your query. Please try again.",
    "unknown_error": "An unexpected error occurred. Please try again.",
}
