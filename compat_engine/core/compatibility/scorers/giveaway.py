"""Giveaway listing scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    GiveawayListing,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import GIVEAWAY_CONDITIONS, NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import distance_match, fuzzy_list_match

DEFAULT_LISTING_DISTANCE = 10.0
DEFAULT_PREFERRED_DISTANCE = 20.0


class GiveawayScorer:
    """Compatibility scorer for giveaway listings."""

    category = Category.GIVEAWAYS.value
    dimension_names = ("Item Type", "Condition", "Distance")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        giveaway = parse_listing(GiveawayListing, listing)
        prefs = user_preferences.category_preferences.giveaways
        if prefs is None:
            return create_default_result(self.category, user_preferences, giveaway)

        type_score = fuzzy_list_match(giveaway.item_type, prefs.interested_item_types)
        condition_score = self._match_condition(prefs.min_condition or "any", giveaway.condition)
        distance = giveaway.distance or DEFAULT_LISTING_DISTANCE
        distance_score = distance_match(
            distance, prefs.max_distance or DEFAULT_PREFERRED_DISTANCE
        )

        item_type = format_value(giveaway.item_type)
        condition = format_value(giveaway.condition)
        miles = format_value(distance)

        dimensions = [
            CompatibilityDimension(
                name="Item Type",
                score=type_score,
                weight=0.4,
                description=describe(
                    type_score,
                    f"{item_type} is one of your interested item types",
                    f"{item_type} is similar to your interested item types",
                    poor=f"{item_type} is different from your usual interests",
                ),
            ),
            CompatibilityDimension(
                name="Condition",
                score=condition_score,
                weight=0.3,
                description=describe(
                    condition_score,
                    f"The {condition} condition exceeds your requirements",
                    f"The {condition} condition meets your requirements",
                    f"The {condition} condition is slightly below your requirements",
                    f"The {condition} condition is below your minimum requirements",
                ),
            ),
            CompatibilityDimension(
                name="Distance",
                score=distance_score,
                weight=0.3,
                description=describe(
                    distance_score,
                    f"Located very close to you ({miles} miles)",
                    f"Located within reasonable distance ({miles} miles)",
                    f"Located somewhat far from you ({miles} miles)",
                    f"Located quite far from your preferred area ({miles} miles)",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, giveaway)

    def _match_condition(self, min_condition: str, condition: Optional[str]) -> int:
        """
        Score the item's condition against the user's minimum.

        Meeting the minimum scores 80 plus 5 per step above it; each step
        short costs 20. A minimum of "any" accepts everything.
        """
        if not condition:
            return NEUTRAL_SCORE
        if min_condition.lower() == "any":
            return 100

        try:
            wanted = GIVEAWAY_CONDITIONS.index(min_condition.lower())
            actual = GIVEAWAY_CONDITIONS.index(condition.lower())
        except ValueError:
            return NEUTRAL_SCORE

        if actual >= wanted:
            return min(100, 80 + (actual - wanted) * 5)
        return max(0, 80 - (wanted - actual) * 20)
