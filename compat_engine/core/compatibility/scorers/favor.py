"""Favor listing scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    FavorListing,
    FavorPreferences,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import distance_match, round_half_up, sliding_budget_match, text_similarity


class FavorScorer:
    """Compatibility scorer for favor requests."""

    category = Category.FAVORS.value
    dimension_names = ("Favor Type", "Compensation", "Time Commitment", "Distance", "Reciprocity")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        favor = parse_listing(FavorListing, listing)
        prefs = user_preferences.category_preferences.favors
        if prefs is None:
            return create_default_result(self.category, user_preferences, favor)

        type_score = self._match_favor_type(prefs.favor_types, favor.favor_type)
        compensation_score = self._match_compensation(prefs, favor)
        time_score = sliding_budget_match(favor.estimated_time, prefs.max_time_commitment)
        distance_score = self._match_distance(prefs.max_distance, favor.distance)
        reciprocity_score = self._match_reciprocity(
            prefs.reciprocity_preference, favor.reciprocity
        )

        favor_type = format_value(favor.favor_type)
        compensation = format_value(favor.compensation_type or favor.compensation)
        hours = format_value(favor.estimated_time)
        miles = format_value(favor.distance)
        reciprocity = format_value(favor.reciprocity)

        dimensions = [
            CompatibilityDimension(
                name="Favor Type",
                score=type_score,
                weight=0.3,
                description=describe(
                    type_score,
                    f"{favor_type} is a favor you like to help with",
                    f"{favor_type} is similar to the favors you help with",
                    f"{favor_type} is somewhat related to your favor types",
                    f"{favor_type} is different from the favors you usually help with",
                ),
            ),
            CompatibilityDimension(
                name="Compensation",
                score=compensation_score,
                weight=0.2,
                description=describe(
                    compensation_score,
                    f"The {compensation} compensation matches your expectations",
                    f"The {compensation} compensation is close to your expectations",
                    f"The {compensation} compensation partly matches your expectations",
                    f"The {compensation} compensation falls short of your expectations",
                ),
            ),
            CompatibilityDimension(
                name="Time Commitment",
                score=time_score,
                weight=0.2,
                description=describe(
                    time_score,
                    f"The estimated {hours} hours fit easily into your availability",
                    f"The estimated {hours} hours fit your availability",
                    f"The estimated {hours} hours are somewhat more than you want to give",
                    f"The estimated {hours} hours are well beyond your availability",
                ),
            ),
            CompatibilityDimension(
                name="Distance",
                score=distance_score,
                weight=0.2,
                description=describe(
                    distance_score,
                    f"Located very close to you ({miles} miles)",
                    f"Located within reasonable distance ({miles} miles)",
                    f"Located somewhat far from you ({miles} miles)",
                    f"Located quite far from your preferred area ({miles} miles)",
                ),
            ),
            CompatibilityDimension(
                name="Reciprocity",
                score=reciprocity_score,
                weight=0.1,
                description=describe(
                    reciprocity_score,
                    f"The {reciprocity} reciprocity matches your preference",
                    f"The {reciprocity} reciprocity is close to your preference",
                    f"The {reciprocity} reciprocity is somewhat different from your preference",
                    f"The {reciprocity} reciprocity differs from your preference",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, favor)

    def _match_favor_type(self, favor_types: list[str], favor_type: Optional[str]) -> int:
        if not favor_types or not favor_type:
            return NEUTRAL_SCORE
        if favor_type in favor_types:
            return 100
        return text_similarity(" ".join(favor_types), favor_type)

    def _match_compensation(self, prefs: FavorPreferences, favor: FavorListing) -> int:
        """
        Compare the offered compensation with the preferred kind.

        Monetary offers are also checked against the minimum amount: short
        offers score their share of it, never below 50. Compensation of
        another kind scores 60.
        """
        wanted = prefs.compensation_preference
        if not wanted or not favor.compensation:
            return NEUTRAL_SCORE

        if wanted != favor.compensation_type:
            return 60

        if wanted == "monetary" and prefs.min_compensation:
            amount = favor.compensation_amount
            if amount is None:
                return NEUTRAL_SCORE
            if amount >= prefs.min_compensation:
                return 100
            return max(NEUTRAL_SCORE, round_half_up(amount / prefs.min_compensation * 100))

        return 100

    def _match_distance(self, max_distance: Optional[float], distance: Optional[float]) -> int:
        if not max_distance or not distance:
            return NEUTRAL_SCORE
        return distance_match(distance, max_distance)

    def _match_reciprocity(self, preferred: Optional[str], actual: Optional[str]) -> int:
        if not preferred or not actual:
            return NEUTRAL_SCORE
        if preferred == actual:
            return 100
        if preferred == "either":
            return 90
        return 30
