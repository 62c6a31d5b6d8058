"""
Similarity primitives.

Small pure functions shared by every category scorer. Each returns an integer
score on the 0-100 scale. Scores are rounded half-up (``floor(x + 0.5)``) so
that a raw 72.5 becomes 73; Python's built-in ``round`` rounds half to even
and is never used for scores.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from compat_engine.utils.constants import MAX_SCORE, MIN_SCORE, NEUTRAL_SCORE


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round and clamp a raw score into 0-100."""
    return max(MIN_SCORE, min(MAX_SCORE, round_half_up(value)))


def to_number(value: Any) -> Optional[float]:
    """
    Leniently coerce a value to a finite float.

    Accepts ints, floats and numeric strings. Booleans, NaN, infinities and
    anything unparseable give None.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _words(text: str) -> list[str]:
    return text.strip().lower().split()


def text_similarity(text1: Optional[str], text2: Optional[str]) -> int:
    """
    Word-overlap similarity of two strings.

    Identical strings (ignoring case and surrounding whitespace) score 100.
    Otherwise the number of words of ``text1`` found in ``text2`` is divided
    by the number of distinct words across both.
    """
    if not text1 or not text2:
        return 0

    a = text1.strip().lower()
    b = text2.strip().lower()
    if a == b:
        return MAX_SCORE

    words1 = _words(a)
    words2 = _words(b)
    union = set(words1) | set(words2)
    if not union:
        return 0

    lookup = set(words2)
    common = sum(1 for w in words1 if w in lookup)
    return clamp_score(common / len(union) * 100)


def array_overlap(list1: Optional[Sequence[Any]], list2: Optional[Sequence[Any]]) -> int:
    """Elements of ``list1`` present in ``list2`` over the size of their union."""
    if not list1 or not list2:
        return 0

    lookup = set(list2)
    union = set(list1) | lookup
    common = sum(1 for item in list1 if item in lookup)
    return clamp_score(common / len(union) * 100)


def range_match(value: Any, min_value: Any, max_value: Any) -> int:
    """
    Score how well a value fits an inclusive range.

    Inside the range scores 100. Below the minimum the score falls with the
    relative shortfall; above the maximum it falls at half that rate.
    """
    v = to_number(value)
    lo = to_number(min_value)
    hi = to_number(max_value)
    if v is None or lo is None or hi is None:
        return 0

    if lo <= v <= hi:
        return MAX_SCORE

    if v < lo:
        if lo <= 0:
            return 0
        return max(MIN_SCORE, round_half_up((1 - (lo - v) / lo) * 100))

    if hi <= 0:
        return 0
    return max(MIN_SCORE, round_half_up((1 - 0.5 * (v - hi) / hi) * 100))


def distance_match(distance: Any, max_desired: Any) -> int:
    """Full marks within ``max_desired``; linear decay to 0 at twice that."""
    d = to_number(distance)
    limit = to_number(max_desired)
    if d is None or limit is None or limit <= 0:
        return 0

    if d <= limit:
        return MAX_SCORE
    return max(MIN_SCORE, round_half_up((1 - (d - limit) / limit) * 100))


# ── Helpers shared by the category scorers ────────────────────────────────


def budget_match(price: Any, max_price: Any, deal_threshold: float = 0.7) -> int:
    """
    Score a price against a maximum budget.

    At or below ``deal_threshold * max_price`` scores 100, within budget 90,
    over budget loses one point per percent of excess. Missing data is
    neutral.
    """
    p = to_number(price)
    budget = to_number(max_price)
    if p is None or budget is None or budget <= 0:
        return NEUTRAL_SCORE

    if p <= budget * deal_threshold:
        return MAX_SCORE
    if p <= budget:
        return 90

    excess = (p - budget) / budget
    return max(MIN_SCORE, round_half_up(100 - excess * 100))


def sliding_budget_match(value: Any, max_value: Any) -> int:
    """
    Score 80-100 within the limit (cheaper is better), 0-80 over it.

    Used for marketplace prices and favor time commitments.
    """
    v = to_number(value)
    limit = to_number(max_value)
    if v is None or limit is None or limit <= 0:
        return NEUTRAL_SCORE

    if v <= limit:
        return round_half_up(80 + (1 - v / limit) * 20)

    over = (v - limit) / limit
    return max(MIN_SCORE, round_half_up(80 - over * 100))


def categorical_match(
    value: Optional[str],
    accepted: Optional[Iterable[str]],
    hit: int = MAX_SCORE,
    miss: int = MIN_SCORE,
) -> int:
    """``hit`` if ``value`` is one of ``accepted``, else ``miss``; neutral when either is missing."""
    if not value:
        return NEUTRAL_SCORE
    options = list(accepted or [])
    if not options:
        return NEUTRAL_SCORE
    return hit if value in options else miss


def fuzzy_list_match(value: Optional[str], candidates: Optional[Iterable[str]]) -> int:
    """
    Best fuzzy match of a string against a list of preferred strings.

    Exact (case-insensitive) scores 100, a substring either way 80,
    otherwise 30.
    """
    if not value:
        return NEUTRAL_SCORE
    options = [c for c in (candidates or []) if c]
    if not options:
        return NEUTRAL_SCORE

    target = value.lower()
    lowered = [c.lower() for c in options]
    if target in lowered:
        return MAX_SCORE
    if any(c in target or target in c for c in lowered):
        return 80
    return 30


def ordinal_match(
    actual: Optional[str],
    preferred: Optional[str],
    scale: Sequence[str],
    span: Optional[float] = None,
    penalty: float = 100,
) -> int:
    """
    Score the distance between two positions on an ordered scale.

    Equal positions score 100; each step away costs ``penalty / span``
    points, where ``span`` defaults to the length of the scale minus one.
    Values not on the scale are neutral.
    """
    if not actual or not preferred:
        return NEUTRAL_SCORE

    levels = [s.lower() for s in scale]
    a = actual.lower()
    p = preferred.lower()
    if a not in levels or p not in levels:
        return NEUTRAL_SCORE

    steps = abs(levels.index(a) - levels.index(p))
    if steps == 0:
        return MAX_SCORE
    width = span if span is not None else len(levels) - 1
    return clamp_score(100 - steps / width * penalty)
