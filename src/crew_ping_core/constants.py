"""Shared constants for crew-ping scoring and application drafting."""

from __future__ import annotations

# Candidate targeting weights (max points per sub-score)
TARGETING_WEIGHTS: dict[str, float] = {
    "certs": 40,
    "proximity": 25,
    "experience": 20,
    "freshness": 10,
    "travel_bonus": 5,
}

MIN_ELIGIBLE_SCORE = 25
TOP_TIER_SCORE = 70
MAX_TOTAL_SCORE = 100

# Share of cert points awarded when the criteria require no certifications
NO_CERT_REQUIREMENT_CREDIT = 0.6
# Multiplier applied to partial cert coverage
PARTIAL_CERT_PENALTY = 0.9
# Share of experience points available below the minimum
BELOW_MIN_EXPERIENCE_CREDIT = 0.6
# Years at which the experience curve saturates (ln(years + 1) / ln(16))
EXPERIENCE_SATURATION_YEARS = 15

# (max distance in miles, share of proximity points); radius step follows
PROXIMITY_STEPS: tuple[tuple[float, float], ...] = (
    (25.0, 1.0),
    (50.0, 0.8),
    (100.0, 0.5),
)
WITHIN_RADIUS_CREDIT = 0.25
EXACT_LOCATION_CREDIT = 1.0
PARTIAL_LOCATION_CREDIT = 0.7
SAME_STATE_CREDIT = 0.4
UNKNOWN_LOCATION_CREDIT = 0.3

# (days since last activity, share of freshness points)
FRESHNESS_STEPS: tuple[tuple[int, float], ...] = (
    (7, 1.0),
    (30, 0.8),
    (90, 0.5),
    (180, 0.2),
)

EARTH_RADIUS_MILES = 3959.0

DISQUALIFY_NO_SMS_CONSENT = "No SMS opt-in consent"
DISQUALIFY_NO_PHONE = "No phone number on file"

# Job-fit match score weights
MATCH_WEIGHTS: dict[str, float] = {
    "certs": 40,
    "experience": 25,
    "keywords": 20,
    "travel": 15,
}
MATCH_NO_CERT_REQUIREMENT_CREDIT = 0.5
MATCH_NO_TRAVEL_CREDIT = 0.4
MATCH_EXPERIENCE_SATURATION_YEARS = 10
LOW_MATCH_WARNING_THRESHOLD = 40

# Field resolution confidences
EXACT_TEMPLATE_CONFIDENCE = 1.0
EXACT_TEMPLATE_EMPTY_CONFIDENCE = 0.3
FUZZY_TEMPLATE_CONFIDENCE = 0.8
FUZZY_TEMPLATE_EMPTY_CONFIDENCE = 0.2
CHOICE_INFERENCE_CONFIDENCE = 0.9
SYNTHESIZED_CONFIDENCE = 0.7
ACCEPT_TEMPLATE_CONFIDENCE = 0.7

DEFAULT_ANSWER_MAX_LENGTH = 500
COVER_LETTER_MAX_LENGTH = 800
EXCERPT_MIN_SENTENCE_LENGTH = 20
EXCERPT_MAX_SENTENCES = 3

SCREENING_INDICATORS: tuple[str, ...] = (
    "why",
    "how",
    "describe",
    "explain",
    "tell us",
    "what makes",
    "experience with",
    "familiar with",
    "worked with",
    "cover letter",
    "additional information",
    "anything else",
    "salary expectation",
    "available start",
    "start date",
)

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "is", "are", "was", "were", "be", "been",
        "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "must", "shall", "can", "this", "that",
        "these", "those", "it", "its", "we", "our", "you", "your", "they",
        "their", "all", "each", "every", "both", "few", "more", "most",
        "other", "some", "such", "no", "not", "only", "own", "same", "so",
        "than", "too", "very", "just", "also",
    }
)

US_STATES: dict[str, str] = {
    "alabama": "AL", "alaska": "AK", "arizona": "AZ", "arkansas": "AR",
    "california": "CA", "colorado": "CO", "connecticut": "CT", "delaware": "DE",
    "florida": "FL", "georgia": "GA", "hawaii": "HI", "idaho": "ID",
    "illinois": "IL", "indiana": "IN", "iowa": "IA", "kansas": "KS",
    "kentucky": "KY", "louisiana": "LA", "maine": "ME", "maryland": "MD",
    "massachusetts": "MA", "michigan": "MI", "minnesota": "MN",
    "mississippi": "MS", "missouri": "MO", "montana": "MT", "nebraska": "NE",
    "nevada": "NV", "new hampshire": "NH", "new jersey": "NJ",
    "new mexico": "NM", "new york": "NY", "north carolina": "NC",
    "north dakota": "ND", "ohio": "OH", "oklahoma": "OK", "oregon": "OR",
    "pennsylvania": "PA", "rhode island": "RI", "south carolina": "SC",
    "south dakota": "SD", "tennessee": "TN", "texas": "TX", "utah": "UT",
    "vermont": "VT", "virginia": "VA", "washington": "WA",
    "west virginia": "WV", "wisconsin": "WI", "wyoming": "WY",
    "district of columbia": "DC",
}

# Known market cities (lat, lon) for resolving labels without coordinates
CITY_COORDS: dict[str, tuple[float, float]] = {
    "houston": (29.7604, -95.3698),
    "katy": (29.7858, -95.8245),
    "dallas": (32.7767, -96.7970),
    "atlanta": (33.7490, -84.3880),
    "columbus": (39.9612, -82.9988),
    "new albany": (40.0812, -82.8088),
    "chicago": (41.8781, -87.6298),
    "phoenix": (33.4484, -112.0740),
    "ashburn": (39.0438, -77.4874),
    "reno": (39.5296, -119.8138),
    "hillsboro": (45.5229, -122.9898),
}

# Campaign defaults
DEFAULT_COST_PER_PING = 3.0
CAMPAIGN_TOP_CANDIDATES = 5
