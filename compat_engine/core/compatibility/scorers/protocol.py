"""Scorer protocol for pluggable category scorers.

Defines the interface every category scorer satisfies. The engine keeps a
registry of these keyed by category; custom scorers registered at runtime
only need to match this shape.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from compat_engine.data.models import (
    CompatibilityResult,
    ContextualFactors,
    UserPreferences,
)


@runtime_checkable
class Scorer(Protocol):
    """Protocol for category scorers."""

    category: str
    dimension_names: tuple[str, ...]

    def calculate_score(
        self,
        user_preferences: UserPreferences,
        listing: Any,
        contextual_factors: Optional[ContextualFactors] = None,
    ) -> CompatibilityResult:
        """Score one listing for one user."""
        ...
