"""Holiday and travel listing scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    HolidayListing,
    NumericRange,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import array_overlap, budget_match, fuzzy_list_match, range_match

DEFAULT_DURATION_DAYS = NumericRange(min=1, max=30)


class HolidayScorer:
    """Compatibility scorer for holiday listings."""

    category = Category.HOLIDAY.value
    dimension_names = ("Destination", "Activities", "Budget", "Duration", "Season")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        holiday = parse_listing(HolidayListing, listing)
        prefs = user_preferences.category_preferences.holiday
        if prefs is None:
            return create_default_result(self.category, user_preferences, holiday)

        destination_score = fuzzy_list_match(holiday.destination, prefs.preferred_destinations)
        activity_score = self._match_activities(prefs.preferred_activities, holiday.activities)
        budget_score = budget_match(holiday.price, prefs.max_budget)
        duration_score = self._match_duration(
            prefs.preferred_duration or DEFAULT_DURATION_DAYS, holiday.duration
        )
        season_score = self._match_season(prefs.preferred_seasons, holiday.season)

        destination = format_value(holiday.destination)
        price = format_value(holiday.price)
        days = format_value(holiday.duration)
        season = format_value(holiday.season)

        dimensions = [
            CompatibilityDimension(
                name="Destination",
                score=destination_score,
                weight=0.3,
                description=describe(
                    destination_score,
                    f"{destination} is one of your preferred destinations",
                    f"{destination} is similar to your preferred destinations",
                    poor=f"{destination} is different from your usual preferences",
                ),
            ),
            CompatibilityDimension(
                name="Activities",
                score=activity_score,
                weight=0.25,
                description=describe(
                    activity_score,
                    "Activities match your preferences perfectly",
                    "Most activities align with your preferences",
                    "Some activities match your preferences",
                    "Activities differ from your usual preferences",
                ),
            ),
            CompatibilityDimension(
                name="Budget",
                score=budget_score,
                weight=0.25,
                description=describe(
                    budget_score,
                    f"The price (${price}) is well within your budget",
                    f"The price (${price}) is close to your budget",
                    f"The price (${price}) is somewhat above your budget",
                    f"The price (${price}) is significantly above your budget",
                ),
            ),
            CompatibilityDimension(
                name="Duration",
                score=duration_score,
                weight=0.1,
                description=describe(
                    duration_score,
                    f"The {days} day duration is perfect for your needs",
                    f"The {days} day duration is close to your preference",
                    f"The {days} day duration is somewhat different from your preference",
                    f"The {days} day duration is very different from your preference",
                ),
            ),
            CompatibilityDimension(
                name="Season",
                score=season_score,
                weight=0.1,
                description=describe(
                    season_score,
                    f"{season} is your preferred travel season",
                    f"{season} is different from your preferred travel seasons",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, holiday)

    def _match_activities(self, preferred: list[str], offered: list[str]) -> int:
        if not preferred or not offered:
            return NEUTRAL_SCORE
        return array_overlap(preferred, offered)

    def _match_duration(self, preferred: NumericRange, days: Optional[float]) -> int:
        if days is None:
            return NEUTRAL_SCORE
        return range_match(days, preferred.min, preferred.max)

    def _match_season(self, preferred: list[str], season: Optional[str]) -> int:
        if not preferred or not season:
            return NEUTRAL_SCORE
        wanted = {s.lower() for s in preferred}
        return 100 if season.lower() in wanted else 30
