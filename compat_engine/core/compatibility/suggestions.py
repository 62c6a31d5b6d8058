"""
Category-aware improvement suggestions for detailed compatibility results.

Only heavy, weak dimensions are considered (score below 50 and weight above
0.3). Each category has an ordered list of rules; a rule fires when the name
of any considered dimension contains its keyword. When nothing fires, two
generic suggestions are returned instead.
"""

from collections.abc import Sequence

from compat_engine.data.models import CompatibilityDimension
from compat_engine.utils.constants import (
    DETAILED_SUGGESTION_MIN_WEIGHT,
    LOW_SCORE_THRESHOLD,
    Category,
)

FALLBACK_SUGGESTIONS: tuple[str, ...] = (
    "Complete your profile to improve match accuracy.",
    "Add more specific preferences in your settings.",
)

# Category -> ordered (dimension-name keyword, suggestion) rules
SUGGESTION_RULES: dict[str, tuple[tuple[str, str], ...]] = {
    Category.JOBS.value: (
        ("skill", "Consider adding more relevant skills to your profile that match this job listing."),
        ("location", "This job is outside your preferred location range. Consider expanding your location preferences."),
        ("salary", "The salary range for this job differs from your preferences. Adjust your expected salary range for better matches."),
        ("experience", "This role targets a different experience level. Review the experience level in your job preferences."),
    ),
    Category.MARKETPLACE.value: (
        ("price", "This item is outside your preferred price range. Consider adjusting your budget preferences."),
        ("category", "This item category doesn't match your preferred categories. Update your interests for better matches."),
        ("item type", "This item category doesn't match your preferred categories. Update your interests for better matches."),
        ("condition", "This item's condition is below your standard. Consider relaxing your minimum condition."),
        ("distance", "This item is far from you. Consider increasing your maximum distance."),
    ),
    Category.SERVICES.value: (
        ("service type", "This service type isn't one you usually look for. Add it to your service types if it interests you."),
        ("price", "This service costs more than your budget. Consider adjusting your maximum price."),
        ("rating", "This provider is rated below your minimum. Lower your minimum rating to see more providers."),
        ("location", "This provider is far from you. Consider increasing your preferred distance."),
    ),
    Category.RENTALS.value: (
        ("rental type", "This rental type differs from your preferences. Add more rental types to widen your matches."),
        ("price", "This rental is above your budget. Consider adjusting your price range."),
        ("location", "This rental is outside your preferred area. Consider expanding your location preferences."),
        ("amenities", "This rental lacks some of your required amenities. Review which amenities are essential."),
    ),
    Category.FAVORS.value: (
        ("favor type", "This favor differs from the kinds you help with. Update your favor types for better matches."),
        ("compensation", "The compensation differs from what you expect. Review your compensation preferences."),
        ("distance", "This favor is far from you. Consider increasing your maximum distance."),
    ),
    Category.HOLIDAY.value: (
        ("destination", "This destination isn't among your preferences. Add more destinations to discover new trips."),
        ("activities", "The activities differ from your interests. Update your preferred activities."),
        ("budget", "This trip is above your budget. Consider adjusting your holiday budget."),
    ),
    Category.ART.value: (
        ("medium", "This medium isn't among your preferred mediums. Add more mediums to broaden your matches."),
        ("style", "This style differs from your preferences. Update your preferred styles."),
        ("price", "This piece is above your budget. Consider adjusting your maximum price."),
    ),
    Category.GIVEAWAYS.value: (
        ("item type", "This item isn't among your interests. Update the item types you are interested in."),
        ("condition", "This item's condition is below your minimum. Consider accepting items in any condition."),
        ("distance", "This giveaway is far from you. Consider increasing your maximum distance."),
    ),
    Category.LEARNING.value: (
        ("subject", "This subject isn't among your interests. Add more subjects to your learning preferences."),
        ("level", "This course targets a different level. Review your preferred level."),
        ("format", "This course format differs from your preferences. Consider other learning formats."),
        ("price", "This course is above your budget. Consider adjusting your maximum price."),
    ),
    Category.COMMUNITY.value: (
        ("activity", "This activity isn't among your interests. Update your interested activities."),
        ("distance", "This activity is far from you. Consider increasing your maximum distance."),
        ("frequency", "This activity meets at a different frequency. Review your preferred frequency."),
    ),
}


def weak_dimensions(dimensions: Sequence[CompatibilityDimension]) -> list[CompatibilityDimension]:
    """Dimensions heavy and weak enough to warrant specific advice."""
    return [
        d for d in dimensions
        if d.score < LOW_SCORE_THRESHOLD and d.weight > DETAILED_SUGGESTION_MIN_WEIGHT
    ]


def generate_detailed_suggestions(
    category: str,
    dimensions: Sequence[CompatibilityDimension],
) -> list[str]:
    """
    Generate category-aware improvement suggestions.

    Args:
        category: Listing category of the result
        dimensions: The result's dimensions

    Returns:
        One suggestion per fired rule, in rule order, or the generic
        fallbacks when no rule fires
    """
    names = [d.name.lower() for d in weak_dimensions(dimensions)]
    suggestions: list[str] = []
    for keyword, suggestion in SUGGESTION_RULES.get(category, ()):
        if suggestion in suggestions:
            continue
        if any(keyword in name for name in names):
            suggestions.append(suggestion)

    return suggestions or list(FALLBACK_SUGGESTIONS)
