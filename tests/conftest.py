"""
Shared test fixtures for the compatibility engine test suite.

Sets environment variables before any package imports so settings resolve to
the testing profile, then provides factory fixtures for preferences, listings
and requests, plus an isolated cache driven by a fake clock.
"""

import os

# === Set environment BEFORE any compat_engine imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")

from typing import Any, Optional

import pytest
from loguru import logger

from compat_engine.core.compatibility import CompatibilityCache, CompatibilityEngine
from compat_engine.data.models import (
    CompatibilityDimension,
    CompatibilityRequest,
    CompatibilityResult,
    UserPreferences,
)


# ---------------------------------------------------------------------------
# Clock and logging helpers
# ---------------------------------------------------------------------------


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: int = 1_700_000_000_000):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> CompatibilityCache:
    """Isolated cache per test."""
    cache = CompatibilityCache(clock=clock)
    yield cache
    cache.stop_cleanup_timer()


@pytest.fixture
def engine(cache) -> CompatibilityEngine:
    return CompatibilityEngine(cache=cache)


@pytest.fixture
def log_messages():
    """Capture loguru records (level, message) emitted during a test."""
    records: list[tuple[str, str]] = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_preferences():
    """Factory that returns a callable to build UserPreferences."""

    def _factory(
        user_id: Optional[str] = "user-1",
        weights: Optional[dict[str, float]] = None,
        general: Optional[dict[str, Any]] = None,
        **category_preferences: dict[str, Any],
    ) -> UserPreferences:
        data: dict[str, Any] = {
            "userId": user_id,
            "categoryPreferences": category_preferences,
        }
        if weights is not None:
            data["weightPreferences"] = weights
        if general is not None:
            data["generalPreferences"] = general
        return UserPreferences.model_validate(data)

    return _factory


@pytest.fixture
def make_dimension():
    """Factory that returns a callable to build CompatibilityDimension."""

    def _factory(
        name: str = "Skills Match",
        score: int = 80,
        weight: float = 0.5,
        description: str = "",
    ) -> CompatibilityDimension:
        return CompatibilityDimension(name=name, score=score, weight=weight, description=description)

    return _factory


@pytest.fixture
def make_result(make_dimension):
    """Factory that returns a callable to build CompatibilityResult."""

    def _factory(
        overall_score: int = 75,
        category: str = "jobs",
        listing_id: str = "listing-1",
        user_id: Optional[str] = "user-1",
        dimensions: Optional[list[CompatibilityDimension]] = None,
        **kwargs,
    ) -> CompatibilityResult:
        return CompatibilityResult(
            overall_score=overall_score,
            dimensions=dimensions if dimensions is not None else [make_dimension()],
            category=category,
            listing_id=listing_id,
            user_id=user_id,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_request():
    """Factory that returns a callable to build CompatibilityRequest."""

    def _factory(
        user_preferences: UserPreferences,
        listing_data: Optional[dict[str, Any]] = None,
        category: str = "jobs",
        listing_id: str = "job-1",
        use_cache: bool = True,
    ) -> CompatibilityRequest:
        return CompatibilityRequest(
            listing_id=listing_id,
            category=category,
            listing_data=listing_data or {},
            user_preferences=user_preferences,
            use_cache=use_cache,
        )

    return _factory


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def job_preferences(make_preferences) -> UserPreferences:
    """Frontend developer looking for a remote or hybrid mid-level role."""
    return make_preferences(
        weights={"skills": 0.5, "price": 0.3},
        jobs={
            "desiredSkills": ["JavaScript", "React", "TypeScript"],
            "minSalary": 80000,
            "maxSalary": 120000,
            "workArrangement": ["remote", "hybrid"],
            "experienceLevel": "mid",
        },
    )


@pytest.fixture
def job_listing() -> dict[str, Any]:
    return {
        "id": "job-1",
        "title": "Frontend Developer",
        "category": "jobs",
        "skills": ["JavaScript", "React", "TypeScript", "CSS"],
        "salary": {"min": 90000, "max": 130000},
    }
