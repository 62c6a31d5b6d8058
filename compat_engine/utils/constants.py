"""
Application-wide constants for the compatibility engine.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "compat-engine"
APP_DISPLAY_NAME: Final[str] = "Listing Compatibility Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Scoring Constants
# =============================================================================

# Score used whenever data is missing; never treated as a mismatch or a perfect match
NEUTRAL_SCORE: Final[int] = 50

MIN_SCORE: Final[int] = 0
MAX_SCORE: Final[int] = 100

# Abstract weight keys applied when the user has no weight preferences
DEFAULT_WEIGHTS: Final[dict[str, float]] = {
    "skills": 0.3,
    "location": 0.15,
    "availability": 0.1,
    "price": 0.1,
    "userPreferences": 0.1,
    "previousInteractions": 0.1,
    "reputation": 0.1,
    "aiTrend": 0.05,
}

# Lower-cased dimension name -> abstract weight key
WEIGHT_KEY_SYNONYMS: Final[dict[str, str]] = {
    "skills match": "skills",
    "tag match": "skills",
    "location match": "location",
    "distance": "location",
    "availability": "availability",
    "schedule match": "availability",
    "price match": "price",
    "salary match": "price",
    "budget match": "price",
    "user preference": "userPreferences",
    "preference match": "userPreferences",
    "interaction history": "previousInteractions",
    "previous interactions": "previousInteractions",
    "reputation": "reputation",
    "rating match": "reputation",
    "trust score": "reputation",
    "trending": "aiTrend",
    "ai boost": "aiTrend",
    "popularity": "aiTrend",
}

# Description thresholds (0-100 scale)
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 90,
    "good": 70,
    "moderate": 50,
}

# Dimensions at or above this score may be cited as the primary match reason
PRIMARY_REASON_THRESHOLD: Final[int] = 70

# Dimensions below this score produce improvement suggestions
LOW_SCORE_THRESHOLD: Final[int] = 50

MAX_IMPROVEMENT_SUGGESTIONS: Final[int] = 3

# Detailed mode only inspects dimensions heavier than this
DETAILED_SUGGESTION_MIN_WEIGHT: Final[float] = 0.3


# =============================================================================
# Ordered Scales
# =============================================================================

# Job experience levels ordered from lowest to highest
EXPERIENCE_LEVELS: Final[tuple[str, ...]] = (
    "entry",
    "junior",
    "mid",
    "senior",
    "expert",
    "lead",
)

LEARNING_LEVELS: Final[tuple[str, ...]] = (
    "beginner",
    "intermediate",
    "advanced",
    "expert",
)

# Marketplace condition ratings (higher is better)
MARKETPLACE_CONDITION_RATINGS: Final[dict[str, int]] = {
    "new": 5,
    "like-new": 4,
    "good": 3,
    "fair": 2,
    "poor": 1,
}

# Giveaway conditions ordered from worst to best
GIVEAWAY_CONDITIONS: Final[tuple[str, ...]] = (
    "poor",
    "fair",
    "good",
    "very good",
    "like new",
    "new",
)

# Community frequencies ordered from rarest to most frequent
COMMUNITY_FREQUENCIES: Final[tuple[str, ...]] = (
    "one-time",
    "yearly",
    "quarterly",
    "monthly",
    "bi-weekly",
    "weekly",
    "daily",
)


# =============================================================================
# Cache Constants
# =============================================================================

DEFAULT_CACHE_TTL_MS: Final[int] = 60 * 60 * 1000  # 1 hour


# =============================================================================
# Enums
# =============================================================================


class Category(str, Enum):
    """Listing categories with a dedicated scorer."""

    JOBS = "jobs"
    SERVICES = "services"
    RENTALS = "rentals"
    MARKETPLACE = "marketplace"
    FAVORS = "favors"
    HOLIDAY = "holiday"
    ART = "art"
    GIVEAWAYS = "giveaways"
    LEARNING = "learning"
    COMMUNITY = "community"

    @property
    def preference_noun(self) -> str:
        """Singular noun used in user-facing messages (e.g. "job preferences")."""
        return _PREFERENCE_NOUNS[self]


_PREFERENCE_NOUNS: Final[dict[Category, str]] = {
    Category.JOBS: "job",
    Category.SERVICES: "service",
    Category.RENTALS: "rental",
    Category.MARKETPLACE: "marketplace",
    Category.FAVORS: "favor",
    Category.HOLIDAY: "holiday",
    Category.ART: "art",
    Category.GIVEAWAYS: "giveaway",
    Category.LEARNING: "learning",
    Category.COMMUNITY: "community",
}


class MatchScoreLevel(Enum):
    """Categorical levels for 0-100 compatibility scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    MODERATE = "moderate"
    POOR = "poor"

    @classmethod
    def from_score(cls, score: float) -> "MatchScoreLevel":
        """Convert a numeric score to a level."""
        if score >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif score >= SCORE_THRESHOLDS["moderate"]:
            return cls.MODERATE
        return cls.POOR
