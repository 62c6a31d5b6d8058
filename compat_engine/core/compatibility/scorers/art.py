"""Art listing scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    ArtListing,
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import array_overlap, budget_match, fuzzy_list_match


class ArtScorer:
    """Compatibility scorer for art listings."""

    category = Category.ART.value
    dimension_names = ("Medium", "Style", "Price", "Artist", "Format")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        art = parse_listing(ArtListing, listing)
        prefs = user_preferences.category_preferences.art
        if prefs is None:
            return create_default_result(self.category, user_preferences, art)

        medium_score = fuzzy_list_match(art.medium, prefs.preferred_mediums)
        style_score = self._match_style(prefs.preferred_styles, art.style)
        price_score = budget_match(art.price, prefs.max_price)
        artist_score = self._match_artist(prefs.favorite_artists, art.artist)
        format_score = self._match_format(prefs.preferred_format, art.format)

        medium = format_value(art.medium)
        price = format_value(art.price)
        artist = format_value(art.artist)
        art_format = format_value(art.format)

        dimensions = [
            CompatibilityDimension(
                name="Medium",
                score=medium_score,
                weight=0.3,
                description=describe(
                    medium_score,
                    f"{medium} is one of your preferred mediums",
                    f"{medium} is similar to your preferred mediums",
                    poor=f"{medium} is different from your usual preferences",
                ),
            ),
            CompatibilityDimension(
                name="Style",
                score=style_score,
                weight=0.25,
                description=describe(
                    style_score,
                    "Style matches your preferences perfectly",
                    "Style mostly aligns with your preferences",
                    "Style somewhat matches your preferences",
                    "Style differs from your usual preferences",
                ),
            ),
            CompatibilityDimension(
                name="Price",
                score=price_score,
                weight=0.2,
                description=describe(
                    price_score,
                    f"The price (${price}) is well within your budget",
                    f"The price (${price}) is close to your budget",
                    f"The price (${price}) is somewhat above your budget",
                    f"The price (${price}) is significantly above your budget",
                ),
            ),
            CompatibilityDimension(
                name="Artist",
                score=artist_score,
                weight=0.15,
                description=describe(
                    artist_score,
                    f"{artist} is one of your favorite artists",
                    f"{artist} is not in your list of favorite artists",
                ),
            ),
            CompatibilityDimension(
                name="Format",
                score=format_score,
                weight=0.1,
                description=describe(
                    format_score,
                    f"{art_format} format matches your preference",
                    f"{art_format} format differs from your preferred format",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, art)

    def _match_style(self, preferred: list[str], styles: list[str]) -> int:
        if not preferred or not styles:
            return NEUTRAL_SCORE
        return array_overlap(preferred, styles)

    def _match_artist(self, favorites: list[str], artist: Optional[str]) -> int:
        # An unknown artist is not held against the listing
        if not favorites or not artist:
            return NEUTRAL_SCORE
        wanted = {a.lower() for a in favorites}
        return 100 if artist.lower() in wanted else NEUTRAL_SCORE

    def _match_format(self, preferred: Optional[str], actual: Optional[str]) -> int:
        if not preferred or not actual:
            return NEUTRAL_SCORE
        return 100 if preferred.lower() == actual.lower() else 30
