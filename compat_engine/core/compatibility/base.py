"""
Scoring logic shared by every category scorer.

Scorers compose these functions rather than inheriting them: weight
resolution and remapping, weighted aggregation, suggestion and reason
generation, and the neutral default result.
"""

from collections.abc import Sequence
from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ListingData,
    UserPreferences,
)
from compat_engine.utils.constants import (
    DEFAULT_WEIGHTS,
    LOW_SCORE_THRESHOLD,
    MAX_IMPROVEMENT_SUGGESTIONS,
    NEUTRAL_SCORE,
    PRIMARY_REASON_THRESHOLD,
    SCORE_THRESHOLDS,
    WEIGHT_KEY_SYNONYMS,
    Category,
)

from .similarity import round_half_up

LIMITED_DATA_REASON = "Limited preference data available"
MODERATE_REASON = "Moderate overall compatibility."


def default_weights() -> dict[str, float]:
    """Fresh copy of the default abstract weight table."""
    return dict(DEFAULT_WEIGHTS)


def resolve_weights(user_preferences: Optional[UserPreferences]) -> dict[str, float]:
    """
    Weight table for a user.

    The user's own table replaces the defaults outright; the two are never
    merged.
    """
    if user_preferences is not None and user_preferences.weight_preferences is not None:
        return dict(user_preferences.weight_preferences)
    return default_weights()


def weight_key_for(dimension_name: str) -> Optional[str]:
    """Abstract weight key a dimension name maps to, if any."""
    return WEIGHT_KEY_SYNONYMS.get(dimension_name.strip().lower())


def apply_user_weights(
    dimensions: Sequence[CompatibilityDimension],
    weights: dict[str, float],
) -> list[CompatibilityDimension]:
    """
    Remap dimension weights through the synonym table.

    Returns new dimension objects. A dimension keeps its own weight when its
    name has no synonym or when the table lacks the synonym's key.
    """
    remapped = []
    for dim in dimensions:
        key = weight_key_for(dim.name)
        if key is not None and key in weights:
            remapped.append(dim.model_copy(update={"weight": weights[key]}))
        else:
            remapped.append(dim.model_copy())
    return remapped


def calculate_overall_score(
    dimensions: Sequence[CompatibilityDimension],
    user_preferences: Optional[UserPreferences] = None,
) -> int:
    """
    Weighted mean of dimension scores.

    Args:
        dimensions: Scored dimensions
        user_preferences: When given, synonym-named dimensions take their
            weight from the user's table (or the default table) before
            averaging

    Returns:
        Integer score 0-100; 0 when no dimension has a positive weight
    """
    if user_preferences is not None:
        dimensions = apply_user_weights(dimensions, resolve_weights(user_preferences))

    weighted = [(d.score, d.weight) for d in dimensions if d.weight > 0]
    total_weight = sum(w for _, w in weighted)
    if total_weight <= 0:
        return 0

    weighted_sum = sum(s * w for s, w in weighted)
    return round_half_up(weighted_sum / total_weight)


def generate_improvement_suggestions(
    dimensions: Sequence[CompatibilityDimension],
) -> list[str]:
    """One suggestion for each of the (up to three) weakest dimensions below 50."""
    low = sorted(
        (d for d in dimensions if d.score < LOW_SCORE_THRESHOLD),
        key=lambda d: d.score,
    )
    return [
        f"Improve your {d.name.lower()} match by updating your preferences."
        for d in low[:MAX_IMPROVEMENT_SUGGESTIONS]
    ]


def find_primary_match_reason(dimensions: Sequence[CompatibilityDimension]) -> str:
    """Cite the strongest dimension scoring at least 70; the first one wins ties."""
    best: Optional[CompatibilityDimension] = None
    for dim in dimensions:
        if dim.score < PRIMARY_REASON_THRESHOLD:
            continue
        if best is None or dim.score > best.score:
            best = dim

    if best is None:
        return MODERATE_REASON
    return f"Strong match on {best.name.lower()}."


def _listing_field(listing: Any, name: str) -> Any:
    if listing is None:
        return None
    if isinstance(listing, ListingData):
        return getattr(listing, name, None)
    if isinstance(listing, dict):
        return listing.get(name)
    return None


def _category_parts(category: Category | str) -> tuple[str, str]:
    """Category value and the noun used in "add ... preferences" messages."""
    try:
        known = Category(category)
    except ValueError:
        return str(category), str(category)
    return known.value, known.preference_noun


def create_default_result(
    category: Category | str,
    user_preferences: UserPreferences,
    listing: Any = None,
) -> CompatibilityResult:
    """
    Neutral result for a user with no preferences in this category.

    Missing data is neither a mismatch nor a perfect match, so the result
    carries a single 50-point dimension.
    """
    category_value, noun = _category_parts(category)
    return CompatibilityResult(
        overall_score=NEUTRAL_SCORE,
        dimensions=[
            CompatibilityDimension(
                name="Overall Match",
                score=NEUTRAL_SCORE,
                weight=1.0,
                description="Based on general profile information",
            )
        ],
        category=category_value,
        subcategory=_listing_field(listing, "subcategory"),
        listing_id=_listing_field(listing, "id") or "",
        user_id=user_preferences.user_id,
        primary_match_reason=LIMITED_DATA_REASON,
        improvement_suggestions=[
            f"Add {noun} preferences to get more accurate matches"
        ],
    )


def build_result(
    category: Category | str,
    dimensions: list[CompatibilityDimension],
    user_preferences: UserPreferences,
    listing: ListingData,
) -> CompatibilityResult:
    """Aggregate scored dimensions into a timestamped result."""
    return CompatibilityResult(
        overall_score=calculate_overall_score(dimensions, user_preferences),
        dimensions=dimensions,
        category=_category_parts(category)[0],
        subcategory=listing.subcategory,
        listing_id=listing.id,
        user_id=user_preferences.user_id,
        primary_match_reason=find_primary_match_reason(dimensions),
        improvement_suggestions=generate_improvement_suggestions(dimensions),
    )


def describe(
    score: int,
    excellent: str,
    good: str,
    moderate: Optional[str] = None,
    poor: Optional[str] = None,
) -> str:
    """
    Pick a description by score threshold (>=90, >=70, >=50, else).

    Omitted tiers fall through to the next lower one that was given.
    """
    if score >= SCORE_THRESHOLDS["excellent"]:
        return excellent
    if score >= SCORE_THRESHOLDS["good"]:
        return good
    if score >= SCORE_THRESHOLDS["moderate"] and moderate is not None:
        return moderate
    if poor is not None:
        return poor
    if moderate is not None:
        return moderate
    return good


def format_value(value: Any) -> str:
    """Render a listing value for a description; whole floats lose their ``.0``."""
    if value is None or value == "":
        return "unknown"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
