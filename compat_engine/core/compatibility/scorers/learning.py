"""Learning and course listing scorer."""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    LearningListing,
    NumericRange,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import LEARNING_LEVELS, NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import budget_match, fuzzy_list_match, ordinal_match, range_match

DEFAULT_DURATION_WEEKS = NumericRange(min=1, max=52)


class LearningScorer:
    """Compatibility scorer for learning listings."""

    category = Category.LEARNING.value
    dimension_names = ("Subject", "Format", "Level", "Price", "Duration")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        course = parse_listing(LearningListing, listing)
        prefs = user_preferences.category_preferences.learning
        if prefs is None:
            return create_default_result(self.category, user_preferences, course)

        subject_score = fuzzy_list_match(course.subject, prefs.interested_subjects)
        format_score = self._match_format(prefs.preferred_formats, course.format)
        level_score = self._match_level(prefs.preferred_level or "any", course.level)
        price_score = budget_match(course.price, prefs.max_price)
        duration_score = self._match_duration(
            prefs.preferred_duration or DEFAULT_DURATION_WEEKS, course.duration_weeks
        )

        subject = format_value(course.subject)
        course_format = format_value(course.format)
        level = format_value(course.level)
        price = format_value(course.price)
        weeks = format_value(course.duration_weeks)

        dimensions = [
            CompatibilityDimension(
                name="Subject",
                score=subject_score,
                weight=0.35,
                description=describe(
                    subject_score,
                    f"{subject} is one of your interested subjects",
                    f"{subject} is similar to your interested subjects",
                    poor=f"{subject} is different from your usual interests",
                ),
            ),
            CompatibilityDimension(
                name="Format",
                score=format_score,
                weight=0.2,
                description=describe(
                    format_score,
                    f"{course_format} format matches your preference",
                    f"{course_format} format differs from your preferred formats",
                ),
            ),
            CompatibilityDimension(
                name="Level",
                score=level_score,
                weight=0.2,
                description=describe(
                    level_score,
                    f"The {level} level is perfect for you",
                    f"The {level} level is close to your preference",
                    f"The {level} level is somewhat different from your preference",
                    f"The {level} level is very different from your preference",
                ),
            ),
            CompatibilityDimension(
                name="Price",
                score=price_score,
                weight=0.15,
                description=describe(
                    price_score,
                    f"The price (${price}) is well within your budget",
                    f"The price (${price}) is close to your budget",
                    f"The price (${price}) is somewhat above your budget",
                    f"The price (${price}) is significantly above your budget",
                ),
            ),
            CompatibilityDimension(
                name="Duration",
                score=duration_score,
                weight=0.1,
                description=describe(
                    duration_score,
                    f"The {weeks} week duration is perfect for your needs",
                    f"The {weeks} week duration is close to your preference",
                    f"The {weeks} week duration is somewhat different from your preference",
                    f"The {weeks} week duration is very different from your preference",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, course)

    def _match_format(self, preferred: list[str], actual: Optional[str]) -> int:
        if not preferred or not actual:
            return NEUTRAL_SCORE
        wanted = {f.lower() for f in preferred}
        return 100 if actual.lower() in wanted else 30

    def _match_level(self, preferred: str, actual: Optional[str]) -> int:
        if not actual:
            return NEUTRAL_SCORE
        if preferred.lower() in ("any", actual.lower()):
            return 100
        return ordinal_match(actual, preferred, LEARNING_LEVELS)

    def _match_duration(self, preferred: NumericRange, weeks: Optional[float]) -> int:
        if weeks is None:
            return NEUTRAL_SCORE
        return range_match(weeks, preferred.min, preferred.max)
