"""
Compatibility scoring data models.

Defines the scoring request, the weighted dimensions a scorer produces,
and the result record returned (and cached) by the engine.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import Field, field_validator

from compat_engine.utils.constants import MatchScoreLevel

from .base import EmbeddedModel, OpenRecord
from .listings import ListingData
from .preferences import UserPreferences


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class CompatibilityDimension(EmbeddedModel):
    """One named, weighted sub-score."""

    name: str
    score: int = Field(ge=0, le=100)
    weight: float = Field(ge=0)  # Only positive weights contribute
    description: str = ""


class CompatibilityResult(EmbeddedModel):
    """Overall compatibility between a user and a listing."""

    overall_score: int = Field(ge=0, le=100)
    dimensions: list[CompatibilityDimension] = Field(default_factory=list)
    category: str
    subcategory: Optional[str] = None
    listing_id: str = ""
    user_id: Optional[str] = None
    timestamp: datetime = Field(default_factory=utc_now)
    primary_match_reason: str = ""
    improvement_suggestions: list[str] = Field(default_factory=list)

    @property
    def score_level(self) -> MatchScoreLevel:
        """Categorical level of the overall score."""
        return MatchScoreLevel.from_score(self.overall_score)

    @property
    def cache_key_complete(self) -> bool:
        """Whether the result carries every part of its cache key."""
        return bool(self.user_id and self.listing_id and self.category)

    def get_dimension(self, name: str) -> Optional[CompatibilityDimension]:
        """Find a dimension by name (case-insensitive)."""
        target = name.lower()
        for dimension in self.dimensions:
            if dimension.name.lower() == target:
                return dimension
        return None


class UserLocation(EmbeddedModel):
    """Geographic point."""

    lat: float
    lng: float


class ContextualFactors(OpenRecord):
    """Request-time context passed through to scorers."""

    time_of_day: Optional[str] = None
    day_of_week: Optional[str] = None
    recent_searches: list[str] = Field(default_factory=list)
    current_path: Optional[str] = None
    user_location: Optional[UserLocation] = None


class CompatibilityRequest(EmbeddedModel):
    """Input to ``CompatibilityEngine.calculate_compatibility``."""

    listing_id: str = ""
    category: str
    listing_data: dict[str, Any] | ListingData = Field(default_factory=dict)
    user_preferences: UserPreferences = Field(default_factory=UserPreferences)
    contextual_factors: Optional[ContextualFactors] = None
    use_cache: bool = True

    @field_validator("category", "listing_id", mode="before")
    @classmethod
    def coerce_key_part(cls, v: Any) -> Any:
        """Enum members and numeric ids are reduced to plain strings."""
        if isinstance(v, Enum):
            return v.value
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class DetailedCompatibilityRequest(CompatibilityRequest):
    """Input to ``CompatibilityEngine.calculate_detailed_compatibility``."""

    include_improvement_suggestions: bool = True
