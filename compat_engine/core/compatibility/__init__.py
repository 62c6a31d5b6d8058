"""User-listing compatibility scoring module."""

from .cache import CompatibilityCache, make_key
from .engine import CompatibilityEngine, get_compatibility_engine
from .scorers import Scorer, default_scorers
from .suggestions import generate_detailed_suggestions

__all__ = [
    "CompatibilityCache",
    "CompatibilityEngine",
    "Scorer",
    "default_scorers",
    "generate_detailed_suggestions",
    "get_compatibility_engine",
    "make_key",
]
