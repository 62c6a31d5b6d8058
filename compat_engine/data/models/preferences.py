"""
User preference models.

One typed record per listing category, grouped under
``UserPreferences.category_preferences``. Every field is optional: scorers
treat anything missing as neutral.
"""

from typing import Any, Optional

from pydantic import AliasChoices, Field

from .base import EmbeddedModel, NumericRange, OpenRecord


class GeneralPreferences(OpenRecord):
    """Category-agnostic importance sliders (0-1 or 0-5 scale)."""

    price_importance: Optional[float] = None
    location_importance: Optional[float] = None
    quality_importance: Optional[float] = None


class DailyPreferences(OpenRecord):
    """Intent for the current session (carried through, not scored)."""

    intent: Optional[str] = None
    budget: Optional[float] = None
    location: Optional[str] = None
    urgency: Optional[float] = None


class JobPreferences(OpenRecord):
    """What the user wants from a job."""

    desired_skills: list[str] = Field(default_factory=list)
    min_salary: Optional[float] = None
    max_salary: Optional[float] = None
    work_arrangement: list[str] | str = Field(default_factory=list)
    experience_level: Optional[str] = None
    company_size: Optional[str] = None
    industries: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    work_schedule: Optional[str] = None
    remote_preference: Optional[bool] = None

    @property
    def work_arrangements(self) -> list[str]:
        """Preferred arrangements as a list, whichever shape was supplied."""
        if isinstance(self.work_arrangement, str):
            return [self.work_arrangement] if self.work_arrangement else []
        return list(self.work_arrangement)


class ServicePreferences(OpenRecord):
    """What the user wants from a service provider."""

    service_types: list[str] = Field(default_factory=list)
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    preferred_distance: Optional[float] = None
    min_provider_rating: Optional[float] = None
    response_time: Optional[str] = None
    availability: list[str] = Field(default_factory=list)
    experience_level: Optional[str] = None
    location: Optional[str] = None
    payment_methods: list[str] = Field(default_factory=list)
    special_requirements: Optional[str] = None


class RentalPreferences(OpenRecord):
    """What the user wants from a rental."""

    rental_types: list[str] = Field(default_factory=list)
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    location: Optional[str] = None
    min_duration: Optional[float] = None
    max_duration: Optional[float] = None
    required_amenities: list[str] = Field(default_factory=list)
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    square_feet: Optional[float] = None
    pet_friendly: Optional[bool] = None
    furnished: Optional[bool] = None
    parking: Optional[bool] = None
    utilities: list[str] = Field(default_factory=list)
    lease_length: Optional[str] = None
    move_in_date: Optional[str] = None


class MarketplacePreferences(OpenRecord):
    """What the user wants from a marketplace item."""

    item_types: list[str] = Field(default_factory=list)
    max_price: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("maxPrice", "max_price", "maxBudget", "max_budget"),
    )
    min_condition: Optional[str] = None
    max_distance: Optional[float] = None
    preferred_brands: list[str] = Field(default_factory=list)
    price_importance: Optional[float] = None
    quality_importance: Optional[float] = None
    location_importance: Optional[float] = None


class FavorPreferences(OpenRecord):
    """What the user wants from a favor request."""

    favor_types: list[str] = Field(default_factory=list)
    max_time_commitment: Optional[float] = None
    max_distance: Optional[float] = None
    compensation_preference: Optional[str] = None
    min_compensation: Optional[float] = None
    reciprocity_preference: Optional[str] = None
    reciprocity_importance: Optional[float] = None


class HolidayPreferences(OpenRecord):
    """What the user wants from a holiday or travel listing."""

    holiday_types: list[str] = Field(default_factory=list)
    preferred_destinations: list[str] = Field(default_factory=list)
    preferred_activities: list[str] = Field(default_factory=list)
    max_budget: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("maxBudget", "max_budget", "budget"),
    )
    preferred_duration: Optional[NumericRange] = None  # days
    preferred_seasons: list[str] = Field(default_factory=list)


class ArtPreferences(OpenRecord):
    """What the user wants from an art listing."""

    art_types: list[str] = Field(default_factory=list)
    preferred_mediums: list[str] = Field(default_factory=list)
    preferred_styles: list[str] = Field(default_factory=list)
    max_price: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("maxPrice", "max_price", "budget"),
    )
    favorite_artists: list[str] = Field(default_factory=list)
    preferred_format: Optional[str] = None


class GiveawayPreferences(OpenRecord):
    """What the user wants from a giveaway."""

    giveaway_types: list[str] = Field(default_factory=list)
    interested_item_types: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("interestedItemTypes", "interested_item_types", "interests"),
    )
    min_condition: Optional[str] = None  # "any" when unset
    max_distance: Optional[float] = None


class LearningPreferences(OpenRecord):
    """What the user wants from a learning offer."""

    learning_types: list[str] = Field(default_factory=list)
    interested_subjects: list[str] = Field(default_factory=list)
    preferred_formats: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("preferredFormats", "preferred_formats", "format"),
    )
    preferred_level: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("preferredLevel", "preferred_level", "skillLevel", "skill_level"),
    )
    max_price: Optional[float] = None
    preferred_duration: Optional[NumericRange] = None  # weeks


class CommunityPreferences(OpenRecord):
    """What the user wants from a community activity."""

    community_types: list[str] = Field(default_factory=list)
    interested_activities: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("interestedActivities", "interested_activities", "interests"),
    )
    max_distance: Optional[float] = None
    preferred_group_size: Optional[NumericRange] = None
    preferred_age_groups: list[str] = Field(default_factory=list)
    preferred_frequency: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("preferredFrequency", "preferred_frequency", "frequency"),
    )


class CategoryPreferences(OpenRecord):
    """Per-category preference records, keyed by category name."""

    jobs: Optional[JobPreferences] = None
    services: Optional[ServicePreferences] = None
    rentals: Optional[RentalPreferences] = None
    marketplace: Optional[MarketplacePreferences] = None
    favors: Optional[FavorPreferences] = None
    holiday: Optional[HolidayPreferences] = None
    art: Optional[ArtPreferences] = None
    giveaways: Optional[GiveawayPreferences] = None
    learning: Optional[LearningPreferences] = None
    community: Optional[CommunityPreferences] = None

    def for_category(self, category: str) -> Optional[Any]:
        """Preference record for a category, including ones added by custom scorers."""
        if category in type(self).model_fields:
            return getattr(self, category)
        return self.get_extra(category)


class UserPreferences(EmbeddedModel):
    """Everything the engine knows about what a user is looking for."""

    user_id: Optional[str] = None
    general_preferences: Optional[GeneralPreferences] = None
    category_preferences: CategoryPreferences = Field(default_factory=CategoryPreferences)
    daily_preferences: Optional[DailyPreferences] = None
    weight_preferences: Optional[dict[str, float]] = Field(
        default=None,
        validation_alias=AliasChoices("weightPreferences", "weight_preferences", "weights"),
    )

    def preferences_for(self, category: str) -> Optional[Any]:
        """Shortcut for ``category_preferences.for_category``."""
        return self.category_preferences.for_category(category)
