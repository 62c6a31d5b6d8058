"""
Pydantic data models for the compatibility engine.

This module provides all records used throughout the application: user
preferences, per-category listings, and scoring requests and results.
"""

# Base models
from .base import EmbeddedModel, NumericRange, OpenRecord

# Preference models
from .preferences import (
    ArtPreferences,
    CategoryPreferences,
    CommunityPreferences,
    DailyPreferences,
    FavorPreferences,
    GeneralPreferences,
    GiveawayPreferences,
    HolidayPreferences,
    JobPreferences,
    LearningPreferences,
    MarketplacePreferences,
    RentalPreferences,
    ServicePreferences,
    UserPreferences,
)

# Listing models
from .listings import (
    ArtListing,
    CommunityListing,
    FavorListing,
    GiveawayListing,
    HolidayListing,
    JobListing,
    LearningListing,
    ListingData,
    MarketplaceListing,
    RentalListing,
    ServiceListing,
    parse_listing,
)

# Compatibility models
from .compatibility import (
    CompatibilityDimension,
    CompatibilityRequest,
    CompatibilityResult,
    ContextualFactors,
    DetailedCompatibilityRequest,
    UserLocation,
)

__all__ = [
    # Base
    "EmbeddedModel",
    "NumericRange",
    "OpenRecord",
    # Preferences
    "ArtPreferences",
    "CategoryPreferences",
    "CommunityPreferences",
    "DailyPreferences",
    "FavorPreferences",
    "GeneralPreferences",
    "GiveawayPreferences",
    "HolidayPreferences",
    "JobPreferences",
    "LearningPreferences",
    "MarketplacePreferences",
    "RentalPreferences",
    "ServicePreferences",
    "UserPreferences",
    # Listings
    "ArtListing",
    "CommunityListing",
    "FavorListing",
    "GiveawayListing",
    "HolidayListing",
    "JobListing",
    "LearningListing",
    "ListingData",
    "MarketplaceListing",
    "RentalListing",
    "ServiceListing",
    "parse_listing",
    # Compatibility
    "CompatibilityDimension",
    "CompatibilityRequest",
    "CompatibilityResult",
    "ContextualFactors",
    "DetailedCompatibilityRequest",
    "UserLocation",
]
