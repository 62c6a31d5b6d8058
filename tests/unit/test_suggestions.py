"""
Tests for compat_engine.core.compatibility.suggestions — detailed suggestions.
"""

import pytest

from compat_engine.core.compatibility.suggestions import (
    FALLBACK_SUGGESTIONS,
    SUGGESTION_RULES,
    generate_detailed_suggestions,
    weak_dimensions,
)
from compat_engine.utils.constants import Category


class TestWeakDimensions:
    def test_needs_low_score_and_heavy_weight(self, make_dimension):
        dims = [
            make_dimension(name="A", score=20, weight=0.4),
            make_dimension(name="B", score=20, weight=0.3),  # not heavier than 0.3
            make_dimension(name="C", score=50, weight=0.4),  # not below 50
        ]
        assert [d.name for d in weak_dimensions(dims)] == ["A"]


class TestGenerateDetailedSuggestions:
    def test_rules_for_every_category(self):
        assert set(SUGGESTION_RULES) == {c.value for c in Category}

    def test_job_skills(self, make_dimension):
        dims = [
            make_dimension(name="Skills Match", score=20, weight=0.4),
            make_dimension(name="Salary Match", score=10, weight=0.25),  # too light
        ]
        assert generate_detailed_suggestions("jobs", dims) == [
            "Consider adding more relevant skills to your profile that match this job listing."
        ]

    def test_rule_order_not_dimension_order(self, make_dimension):
        dims = [
            make_dimension(name="Distance", score=10, weight=0.35),
            make_dimension(name="Price", score=10, weight=0.5),
        ]
        suggestions = generate_detailed_suggestions("marketplace", dims)
        assert suggestions[0].startswith("This item is outside your preferred price range")
        assert suggestions[1].startswith("This item is far from you")

    def test_shared_message_not_repeated(self, make_dimension):
        dims = [
            make_dimension(name="Item Type", score=10, weight=0.4),
            make_dimension(name="Category", score=10, weight=0.4),
        ]
        assert len(generate_detailed_suggestions("marketplace", dims)) == 1

    def test_fallback_when_nothing_fires(self, make_dimension):
        dims = [make_dimension(name="Skills Match", score=90, weight=0.4)]
        assert generate_detailed_suggestions("jobs", dims) == list(FALLBACK_SUGGESTIONS)

    @pytest.mark.parametrize("category", ["pets", ""])
    def test_unknown_category_falls_back(self, make_dimension, category):
        dims = [make_dimension(name="Skills Match", score=10, weight=0.4)]
        assert generate_detailed_suggestions(category, dims) == list(FALLBACK_SUGGESTIONS)
