"""Rental listing scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    RentalListing,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import (
    budget_match,
    categorical_match,
    clamp_score,
    range_match,
    text_similarity,
)


class RentalScorer:
    """Compatibility scorer for rental listings."""

    category = Category.RENTALS.value
    dimension_names = ("Rental Type", "Price", "Location", "Amenities", "Duration")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        rental = parse_listing(RentalListing, listing)
        prefs = user_preferences.category_preferences.rentals
        if prefs is None:
            return create_default_result(self.category, user_preferences, rental)

        type_score = categorical_match(rental.rental_type, prefs.rental_types)
        price_score = budget_match(rental.price, prefs.max_price, deal_threshold=0.8)
        location_score = self._match_location(prefs.location, rental.location)
        amenities_score = self._match_amenities(prefs.required_amenities, rental.amenities)
        duration_score = self._match_duration(
            prefs.min_duration, prefs.max_duration, rental.duration
        )

        rental_type = format_value(rental.rental_type)
        price = format_value(rental.price)
        duration = format_value(rental.duration)

        dimensions = [
            CompatibilityDimension(
                name="Rental Type",
                score=type_score,
                weight=0.25,
                description=describe(
                    type_score,
                    f"This {rental_type} matches your preferred rental type",
                    f"This {rental_type} differs from your usual rental preferences",
                ),
            ),
            CompatibilityDimension(
                name="Price",
                score=price_score,
                weight=0.3,
                description=describe(
                    price_score,
                    f"The price (${price}) is well within your budget",
                    f"The price (${price}) is close to your budget",
                    f"The price (${price}) is somewhat above your budget",
                    f"The price (${price}) is significantly above your budget",
                ),
            ),
            CompatibilityDimension(
                name="Location",
                score=location_score,
                weight=0.25,
                description=describe(
                    location_score,
                    "Located in your preferred area",
                    "Located in an area similar to your preference",
                    "Located somewhat far from your preferred area",
                    "Located in an area different from your preference",
                ),
            ),
            CompatibilityDimension(
                name="Amenities",
                score=amenities_score,
                weight=0.1,
                description=describe(
                    amenities_score,
                    "Has all your required amenities",
                    "Has most of your required amenities",
                    "Has some of your required amenities",
                    "Missing many of your required amenities",
                ),
            ),
            CompatibilityDimension(
                name="Duration",
                score=duration_score,
                weight=0.1,
                description=describe(
                    duration_score,
                    f"The {duration} month duration is perfect for your needs",
                    f"The {duration} month duration is close to your preference",
                    f"The {duration} month duration is somewhat different from your preference",
                    f"The {duration} month duration is very different from your preference",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, rental)

    def _match_location(self, preferred: Optional[str], actual: Optional[str]) -> int:
        # Word overlap stands in for geocoding
        if not preferred or not actual:
            return NEUTRAL_SCORE
        return text_similarity(preferred, actual)

    def _match_amenities(self, required: list[str], actual: list[str]) -> int:
        """Share of required amenities present, matching substrings either way."""
        if not required or not actual:
            return NEUTRAL_SCORE

        offered = [a.lower() for a in actual]
        present = 0
        for amenity in required:
            wanted = amenity.lower()
            if any(wanted in a or a in wanted for a in offered):
                present += 1
        return clamp_score(present / len(required) * 100)

    def _match_duration(
        self,
        min_months: Optional[float],
        max_months: Optional[float],
        actual: Optional[float],
    ) -> int:
        if min_months is None or max_months is None or actual is None:
            return NEUTRAL_SCORE
        return range_match(actual, min_months, max_months)
