"""Service listing scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    ServiceListing,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import budget_match, categorical_match, distance_match, round_half_up

# Assumed when the listing or the user leaves distance unset (miles)
DEFAULT_LISTING_DISTANCE = 10.0
DEFAULT_PREFERRED_DISTANCE = 20.0


class ServiceScorer:
    """Compatibility scorer for service listings."""

    category = Category.SERVICES.value
    dimension_names = ("Service Type", "Price", "Provider Rating", "Location")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        """Score a service on type, price, provider rating and distance."""
        service = parse_listing(ServiceListing, listing)
        prefs = user_preferences.category_preferences.services
        if prefs is None:
            return create_default_result(self.category, user_preferences, service)

        type_score = categorical_match(service.service_type, prefs.service_types)
        price_score = budget_match(service.price, prefs.max_price)
        rating_score = self._match_rating(prefs.min_provider_rating, service.provider_rating)
        distance = service.distance or DEFAULT_LISTING_DISTANCE
        distance_score = distance_match(
            distance, prefs.preferred_distance or DEFAULT_PREFERRED_DISTANCE
        )

        service_type = format_value(service.service_type)
        price = format_value(service.price)
        rating = format_value(service.provider_rating)
        miles = format_value(distance)

        dimensions = [
            CompatibilityDimension(
                name="Service Type",
                score=type_score,
                weight=0.3,
                description=describe(
                    type_score,
                    f"This {service_type} service matches your preferences",
                    f"This {service_type} service is different from your usual preferences",
                ),
            ),
            CompatibilityDimension(
                name="Price",
                score=price_score,
                weight=0.25,
                description=describe(
                    price_score,
                    f"The price (${price}) is well within your budget",
                    f"The price (${price}) is close to your budget",
                    f"The price (${price}) is somewhat above your budget",
                    f"The price (${price}) is significantly above your budget",
                ),
            ),
            CompatibilityDimension(
                name="Provider Rating",
                score=rating_score,
                weight=0.25,
                description=describe(
                    rating_score,
                    f"The provider rating ({rating}/5) is excellent",
                    f"The provider rating ({rating}/5) meets your standards",
                    f"The provider rating ({rating}/5) is slightly below your preference",
                    f"The provider rating ({rating}/5) is below your minimum standard",
                ),
            ),
            CompatibilityDimension(
                name="Location",
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
        ]

        return build_result(self.category, dimensions, user_preferences, service)

    def _match_rating(self, min_rating: Optional[float], actual: Optional[float]) -> int:
        """
        Compare 0-5 star ratings on a 0-100 scale.

        Meeting the minimum scores 90 plus half the margin; falling short
        costs two points per point of shortfall. The two curves meet at
        different heights, so a rating just under the minimum (4.4 against
        4.5 gives 96) outscores one that exactly meets it (90).
        """
        if min_rating is None or actual is None:
            return NEUTRAL_SCORE

        wanted = min_rating / 5 * 100
        got = actual / 5 * 100
        if got >= wanted:
            return min(100, round_half_up(90 + (got - wanted) / 2))
        return max(0, round_half_up(100 - (wanted - got) * 2))
