"""Data layer for the compatibility engine: plain pydantic records, no storage."""

from .models import (
    CompatibilityDimension,
    CompatibilityRequest,
    CompatibilityResult,
    DetailedCompatibilityRequest,
    ListingData,
    UserPreferences,
)

__all__ = [
    "CompatibilityDimension",
    "CompatibilityRequest",
    "CompatibilityResult",
    "DetailedCompatibilityRequest",
    "ListingData",
    "UserPreferences",
]
