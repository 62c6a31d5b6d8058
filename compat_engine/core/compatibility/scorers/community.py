"""Community and social activity scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    CommunityListing,
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    NumericRange,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import COMMUNITY_FREQUENCIES, NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import distance_match, fuzzy_list_match, ordinal_match, range_match

DEFAULT_LISTING_DISTANCE = 10.0
DEFAULT_PREFERRED_DISTANCE = 20.0
DEFAULT_GROUP_SIZE = NumericRange(min=0, max=100)

# Opposite ends of the frequency scale still keep 30 points
FREQUENCY_PENALTY = 70


class CommunityScorer:
    """Compatibility scorer for community listings."""

    category = Category.COMMUNITY.value
    dimension_names = ("Activity Type", "Distance", "Group Size", "Age Group", "Frequency")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        activity = parse_listing(CommunityListing, listing)
        prefs = user_preferences.category_preferences.community
        if prefs is None:
            return create_default_result(self.category, user_preferences, activity)

        activity_score = fuzzy_list_match(activity.activity_type, prefs.interested_activities)
        distance = activity.distance or DEFAULT_LISTING_DISTANCE
        distance_score = distance_match(
            distance, prefs.max_distance or DEFAULT_PREFERRED_DISTANCE
        )
        group_score = self._match_group_size(
            prefs.preferred_group_size or DEFAULT_GROUP_SIZE, activity.group_size
        )
        age_score = self._match_age_group(prefs.preferred_age_groups, activity.age_group)
        frequency_score = self._match_frequency(prefs.preferred_frequency, activity.frequency)

        activity_type = format_value(activity.activity_type)
        miles = format_value(distance)
        size = format_value(activity.group_size)
        age_group = format_value(activity.age_group)
        frequency = format_value(activity.frequency)

        dimensions = [
            CompatibilityDimension(
                name="Activity Type",
                score=activity_score,
                weight=0.3,
                description=describe(
                    activity_score,
                    f"{activity_type} is one of your interested activities",
                    f"{activity_type} is similar to your interested activities",
                    poor=f"{activity_type} is different from your usual interests",
                ),
            ),
            CompatibilityDimension(
                name="Distance",
                score=distance_score,
                weight=0.25,
                description=describe(
                    distance_score,
                    f"Located very close to you ({miles} miles)",
                    f"Located within reasonable distance ({miles} miles)",
                    f"Located somewhat far from you ({miles} miles)",
                    f"Located quite far from your preferred area ({miles} miles)",
                ),
            ),
            CompatibilityDimension(
                name="Group Size",
                score=group_score,
                weight=0.15,
                description=describe(
                    group_score,
                    f"The group size ({size} people) is perfect for you",
                    f"The group size ({size} people) is close to your preference",
                    f"The group size ({size} people) is somewhat different from your preference",
                    f"The group size ({size} people) is very different from your preference",
                ),
            ),
            CompatibilityDimension(
                name="Age Group",
                score=age_score,
                weight=0.15,
                description=describe(
                    age_score,
                    f"The {age_group} age group matches your preference",
                    f"The {age_group} age group differs from your preferred age groups",
                ),
            ),
            CompatibilityDimension(
                name="Frequency",
                score=frequency_score,
                weight=0.15,
                description=describe(
                    frequency_score,
                    f"The {frequency} frequency matches your preference",
                    f"The {frequency} frequency is close to your preference",
                    f"The {frequency} frequency is somewhat different from your preference",
                    f"The {frequency} frequency is very different from your preference",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, activity)

    def _match_group_size(self, preferred: NumericRange, size: Optional[float]) -> int:
        if size is None:
            return NEUTRAL_SCORE
        return range_match(size, preferred.min, preferred.max)

    def _match_age_group(self, preferred: list[str], age_group: Optional[str]) -> int:
        if not preferred or not age_group:
            return NEUTRAL_SCORE
        wanted = {a.lower() for a in preferred}
        return 100 if age_group.lower() in wanted else 30

    def _match_frequency(self, preferred: Optional[str], actual: Optional[str]) -> int:
        if not preferred or not actual:
            return NEUTRAL_SCORE
        if preferred.lower() == actual.lower():
            return 100
        return ordinal_match(actual, preferred, COMMUNITY_FREQUENCIES, penalty=FREQUENCY_PENALTY)
