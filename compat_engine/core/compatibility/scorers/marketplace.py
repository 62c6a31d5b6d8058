"""
Marketplace listing scorer.

Price, condition and distance are weighted by the user's own importance
sliders, taken from the marketplace preferences first, then from the general
preferences (where a 0-5 scale is normalised to 0-1), then from defaults.
"""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    GeneralPreferences,
    MarketplaceListing,
    MarketplacePreferences,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import MARKETPLACE_CONDITION_RATINGS, NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import array_overlap, distance_match, sliding_budget_match, text_similarity

DEFAULT_PRICE_IMPORTANCE = 0.2
DEFAULT_QUALITY_IMPORTANCE = 0.2
DEFAULT_LOCATION_IMPORTANCE = 0.15

# Rating assumed for conditions not on the scale
DEFAULT_CONDITION_RATING = 3


def _importance(
    own: Optional[float],
    general: Optional[float],
    default: float,
) -> float:
    """First truthy importance; general sliders above 1 are on a 0-5 scale."""
    if own:
        return own
    if general:
        return general / 5 if general > 1 else general
    return default


class MarketplaceScorer:
    """Compatibility scorer for marketplace listings."""

    category = Category.MARKETPLACE.value
    dimension_names = ("Item Type", "Price", "Condition", "Distance", "Brand")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        item = parse_listing(MarketplaceListing, listing)
        prefs: Optional[MarketplacePreferences] = user_preferences.category_preferences.marketplace
        if prefs is None:
            return create_default_result(self.category, user_preferences, item)

        general = user_preferences.general_preferences or GeneralPreferences()
        price_weight = _importance(
            prefs.price_importance, general.price_importance, DEFAULT_PRICE_IMPORTANCE
        )
        quality_weight = _importance(
            prefs.quality_importance, general.quality_importance, DEFAULT_QUALITY_IMPORTANCE
        )
        location_weight = _importance(
            prefs.location_importance, general.location_importance, DEFAULT_LOCATION_IMPORTANCE
        )

        type_score = self._match_item_type(prefs.item_types, item.item_type)
        price_score = sliding_budget_match(item.price, prefs.max_price)
        condition_score = self._match_condition(prefs.min_condition, item.condition)
        distance_score = self._match_distance(prefs.max_distance, item.distance)
        brand_score = self._match_brand(prefs.preferred_brands, item.brand)

        item_type = format_value(item.item_type)
        price = format_value(item.price)
        condition = format_value(item.condition)
        miles = format_value(item.distance)
        brand = format_value(item.brand)

        dimensions = [
            CompatibilityDimension(
                name="Item Type",
                score=type_score,
                weight=0.3,
                description=describe(
                    type_score,
                    f"{item_type} is one of the item types you are looking for",
                    f"{item_type} is similar to the items you are looking for",
                    f"{item_type} is somewhat related to your interests",
                    f"{item_type} is different from the items you usually look for",
                ),
            ),
            CompatibilityDimension(
                name="Price",
                score=price_score,
                weight=price_weight,
                description=describe(
                    price_score,
                    f"The price (${price}) is a great deal for your budget",
                    f"The price (${price}) fits your budget",
                    f"The price (${price}) is somewhat above your budget",
                    f"The price (${price}) is well above your budget",
                ),
            ),
            CompatibilityDimension(
                name="Condition",
                score=condition_score,
                weight=quality_weight,
                description=describe(
                    condition_score,
                    f"The {condition} condition meets or exceeds your standard",
                    f"The {condition} condition is close to your standard",
                    f"The {condition} condition is somewhat below your standard",
                    f"The {condition} condition is well below your standard",
                ),
            ),
            CompatibilityDimension(
                name="Distance",
                score=distance_score,
                weight=location_weight,
                description=describe(
                    distance_score,
                    f"Located very close to you ({miles} miles)",
                    f"Located within reasonable distance ({miles} miles)",
                    f"Located somewhat far from you ({miles} miles)",
                    f"Located quite far from your preferred area ({miles} miles)",
                ),
            ),
            CompatibilityDimension(
                name="Brand",
                score=brand_score,
                weight=0.15,
                description=describe(
                    brand_score,
                    f"{brand} is one of your preferred brands",
                    f"{brand} is close to your preferred brands",
                    f"No brand preference applies to {brand}",
                    f"{brand} is not one of your preferred brands",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, item)

    def _match_item_type(self, item_types: list[str], item_type: Optional[str]) -> int:
        if not item_types or not item_type:
            return NEUTRAL_SCORE
        if item_type in item_types:
            return 100
        return text_similarity(" ".join(item_types), item_type)

    def _match_condition(self, min_condition: Optional[str], condition: Optional[str]) -> int:
        """Ratings at or above the minimum score 90 plus 5 per step; each step short costs 30."""
        if not min_condition or not condition:
            return NEUTRAL_SCORE

        wanted = MARKETPLACE_CONDITION_RATINGS.get(min_condition.lower(), DEFAULT_CONDITION_RATING)
        actual = MARKETPLACE_CONDITION_RATINGS.get(condition.lower(), DEFAULT_CONDITION_RATING)
        if actual >= wanted:
            return min(100, 90 + (actual - wanted) * 5)
        return max(0, 90 - (wanted - actual) * 30)

    def _match_distance(self, max_distance: Optional[float], distance: Optional[float]) -> int:
        if not max_distance or distance is None:
            return NEUTRAL_SCORE
        return distance_match(distance, max_distance)

    def _match_brand(self, brands: list[str], brand: Optional[str]) -> int:
        if not brands or not brand:
            return NEUTRAL_SCORE
        if brand in brands:
            return 100
        return array_overlap(brands, [brand])
