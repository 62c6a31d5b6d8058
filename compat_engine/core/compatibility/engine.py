"""
User-listing compatibility engine.

Routes a scoring request to the scorer registered for its category, caches
the result, and optionally replaces the generic improvement suggestions with
category-aware ones.
"""

from collections.abc import Mapping
from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityRequest,
    CompatibilityResult,
    DetailedCompatibilityRequest,
    ListingData,
)
from compat_engine.utils.config import get_settings
from compat_engine.utils.constants import NEUTRAL_SCORE
from compat_engine.utils.logger import get_logger

from .cache import CompatibilityCache
from .scorers import Scorer, default_scorers
from .suggestions import generate_detailed_suggestions

logger = get_logger(__name__)


class CompatibilityEngine:
    """
    Engine for scoring listings against a user's preferences.

    Holds a registry of category scorers (built once, extendable with
    ``register_scorer``) and an injected result cache.
    """

    def __init__(
        self,
        cache: Optional[CompatibilityCache] = None,
        scorers: Optional[Mapping[str, Scorer]] = None,
        caching_enabled: bool = True,
    ):
        """
        Initialize the compatibility engine.

        Args:
            cache: Result cache; a private one is created when omitted
            scorers: Category -> scorer registry; the built-in scorers when omitted
            caching_enabled: When False the cache is never read or written,
                whatever the request asks for
        """
        self.cache = cache if cache is not None else CompatibilityCache()
        self.caching_enabled = caching_enabled
        self._scorers: dict[str, Scorer] = dict(scorers) if scorers is not None else default_scorers()

    # ── Registry ──────────────────────────────────────────────────────────

    def register_scorer(self, scorer: Scorer, category: Optional[str] = None) -> None:
        """
        Register (or replace) the scorer for a category.

        Args:
            scorer: Object satisfying the Scorer protocol
            category: Category key; defaults to ``scorer.category``
        """
        key = str(category or scorer.category)
        if key in self._scorers:
            logger.info(f"Replacing scorer for category '{key}'")
        self._scorers[key] = scorer

    def get_scorer(self, category: str) -> Optional[Scorer]:
        """Scorer registered for a category, if any."""
        return self._scorers.get(category)

    @property
    def supported_categories(self) -> list[str]:
        """Categories with a registered scorer."""
        return list(self._scorers)

    # ── Scoring ───────────────────────────────────────────────────────────

    def calculate_compatibility(
        self,
        request: CompatibilityRequest | Mapping[str, Any],
    ) -> CompatibilityResult:
        """
        Score one listing for one user.

        Args:
            request: Scoring request (or a mapping with its fields)

        Returns:
            The cached result object on a cache hit, otherwise a fresh result
        """
        if not isinstance(request, CompatibilityRequest):
            request = CompatibilityRequest.model_validate(request)

        user_id = request.user_preferences.user_id
        category = request.category
        listing_id = request.listing_id
        cacheable = (
            self.caching_enabled
            and request.use_cache
            and bool(user_id and listing_id and category)
        )

        if cacheable:
            cached = self.cache.get(user_id, listing_id, category)
            if cached is not None:
                logger.debug(f"Using cached compatibility score for {category}:{listing_id}")
                return cached
            logger.debug(f"Cache miss for {user_id}:{category}:{listing_id}")

        listing = self._listing_with_id(request.listing_data, listing_id)
        scorer = self._scorers.get(category)
        if scorer is None:
            logger.warning(f"No scorer registered for category '{category}', using default result")
            result = self._generic_result(request, listing)
        else:
            logger.debug(f"Scoring listing {listing_id or '?'} with {type(scorer).__name__}")
            result = scorer.calculate_score(
                request.user_preferences,
                listing,
                request.contextual_factors,
            )

        if cacheable:
            self.cache.set(result)

        return result

    def calculate_detailed_compatibility(
        self,
        request: DetailedCompatibilityRequest | Mapping[str, Any],
    ) -> CompatibilityResult:
        """
        Score a listing and attach category-aware improvement suggestions.

        The base result goes through the cache as usual; the suggestions are
        applied to a copy, so the cached object is never modified.
        """
        if not isinstance(request, DetailedCompatibilityRequest):
            if isinstance(request, CompatibilityRequest):
                request = DetailedCompatibilityRequest.model_validate(dict(request))
            else:
                request = DetailedCompatibilityRequest.model_validate(request)

        base_result = self.calculate_compatibility(request)
        if not request.include_improvement_suggestions:
            return base_result

        suggestions = generate_detailed_suggestions(request.category, base_result.dimensions)
        return base_result.model_copy(update={"improvement_suggestions": suggestions})

    def rank_listings(self, results: list[CompatibilityResult]) -> list[CompatibilityResult]:
        """
        Rank results by their overall score.

        Args:
            results: Compatibility results for one user

        Returns:
            Sorted list with highest scores first (ties keep input order)
        """
        return sorted(results, key=lambda r: r.overall_score, reverse=True)

    def _listing_with_id(
        self,
        listing: dict[str, Any] | ListingData,
        listing_id: str,
    ) -> dict[str, Any] | ListingData:
        """
        Make the request's listing id the listing's id.

        Results are cached under ``result.listing_id``, which must equal the
        id used for the lookup; a differing payload id is overridden.
        """
        if not listing_id:
            return listing
        if isinstance(listing, ListingData):
            if listing.id == listing_id:
                return listing
            return listing.model_copy(update={"id": listing_id})
        if listing.get("id") != listing_id:
            return {**listing, "id": listing_id}
        return listing

    def _generic_result(
        self,
        request: CompatibilityRequest,
        listing: dict[str, Any] | ListingData,
    ) -> CompatibilityResult:
        """Neutral result for a category with no registered scorer."""
        if isinstance(listing, ListingData):
            subcategory, listing_id = listing.subcategory, listing.id
        else:
            subcategory, listing_id = listing.get("subcategory"), listing.get("id")

        return CompatibilityResult(
            overall_score=NEUTRAL_SCORE,
            dimensions=[
                CompatibilityDimension(
                    name="Overall Match",
                    score=NEUTRAL_SCORE,
                    weight=1.0,
                    description="General compatibility score",
                )
            ],
            category=request.category,
            subcategory=subcategory or "general",
            listing_id=str(listing_id or ""),
            user_id=request.user_preferences.user_id,
            primary_match_reason="Basic compatibility calculation",
            improvement_suggestions=["Add more specific preferences to get better matches"],
        )


# Singleton instance
_compatibility_engine: Optional[CompatibilityEngine] = None


def get_compatibility_engine() -> CompatibilityEngine:
    """Get or create the process-wide compatibility engine."""
    global _compatibility_engine
    if _compatibility_engine is None:
        cache_settings = get_settings().cache
        _compatibility_engine = CompatibilityEngine(
            cache=CompatibilityCache(default_ttl_ms=cache_settings.ttl_ms),
            caching_enabled=cache_settings.enabled,
        )
    return _compatibility_engine
