"""
Job listing scorer.

Scores a job against the user's job preferences on skills, salary, work
arrangement and experience level.
"""

from typing import Any, Optional

from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityResult,
    ContextualFactors,
    JobListing,
    JobPreferences,
    UserPreferences,
    parse_listing,
)
from compat_engine.utils.constants import EXPERIENCE_LEVELS, NEUTRAL_SCORE, Category

from ..base import build_result, create_default_result, describe, format_value
from ..similarity import array_overlap, categorical_match, ordinal_match, range_match


class JobScorer:
    """Compatibility scorer for job listings."""

    category = Category.JOBS.value
    dimension_names = ("Skills Match", "Salary Match", "Work Arrangement", "Experience Level")

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        """
        Score a job listing for a user.

        Args:
            user_preferences: The user's preferences
            listing: JobListing or raw listing mapping
            contextual_factors: Accepted for interface compatibility; unused

        Returns:
            CompatibilityResult with four dimensions, or the neutral default
            when the user has no job preferences
        """
        job = parse_listing(JobListing, listing)
        prefs: Optional[JobPreferences] = user_preferences.category_preferences.jobs
        if prefs is None:
            return create_default_result(self.category, user_preferences, job)

        skills_score = self._match_skills(prefs.desired_skills, job.required_skills)
        salary = job.salary_value
        salary_score = self._match_salary(prefs.min_salary, prefs.max_salary, salary)
        arrangement_score = categorical_match(job.work_arrangement, prefs.work_arrangements)
        experience_score = ordinal_match(
            job.experience_level, prefs.experience_level, EXPERIENCE_LEVELS
        )

        arrangement = format_value(job.work_arrangement)
        level = format_value(job.experience_level)
        salary_text = format_value(salary)

        dimensions = [
            CompatibilityDimension(
                name="Skills Match",
                score=skills_score,
                weight=0.4,
                description=describe(
                    skills_score,
                    "Your skills are a perfect match!",
                    "Your skills align well with this job",
                    "You have some relevant skills for this job",
                    "You may need to develop more skills for this role",
                ),
            ),
            CompatibilityDimension(
                name="Salary Match",
                score=salary_score,
                weight=0.25,
                description=describe(
                    salary_score,
                    f"The salary (${salary_text}) matches your expectations",
                    f"The salary (${salary_text}) is close to your range",
                    f"The salary (${salary_text}) is somewhat outside your range",
                    f"The salary (${salary_text}) is far from your preferred range",
                ),
            ),
            CompatibilityDimension(
                name="Work Arrangement",
                score=arrangement_score,
                weight=0.2,
                description=describe(
                    arrangement_score,
                    f"This {arrangement} position matches your preference",
                    f"This {arrangement} position differs from your preferences",
                ),
            ),
            CompatibilityDimension(
                name="Experience Level",
                score=experience_score,
                weight=0.15,
                description=describe(
                    experience_score,
                    f"The {level} experience level is perfect for you",
                    f"The {level} experience level is close to your preference",
                    f"The {level} experience level is somewhat different from your preference",
                    f"The {level} experience level is very different from your preference",
                ),
            ),
        ]

        return build_result(self.category, dimensions, user_preferences, job)

    def _match_skills(self, desired: list[str], required: list[str]) -> int:
        """Overlap of the two skill lists, compared case-insensitively."""
        if not desired or not required:
            return NEUTRAL_SCORE
        return array_overlap(
            [s.lower() for s in required],
            [s.lower() for s in desired],
        )

    def _match_salary(
        self,
        min_desired: Optional[float],
        max_desired: Optional[float],
        actual: Optional[float],
    ) -> int:
        if min_desired is None or max_desired is None or actual is None:
            return NEUTRAL_SCORE
        return range_match(actual, min_desired, max_desired)
