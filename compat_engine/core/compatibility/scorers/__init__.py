"""
Category scorers.

One scorer per listing category, each satisfying the ``Scorer`` protocol.
"""

from .art import ArtScorer
from .community import CommunityScorer
from .favor import FavorScorer
from .giveaway import GiveawayScorer
from .holiday import HolidayScorer
from .job import JobScorer
from .learning import LearningScorer
from .marketplace import MarketplaceScorer
from .protocol import Scorer
from .rental import RentalScorer
from .service import ServiceScorer


def default_scorers() -> dict[str, Scorer]:
    """Fresh instances of the built-in scorers, keyed by category."""
    scorers: list[Scorer] = [
        JobScorer(),
        ServiceScorer(),
        RentalScorer(),
        MarketplaceScorer(),
        FavorScorer(),
        HolidayScorer(),
        ArtScorer(),
        GiveawayScorer(),
        LearningScorer(),
        CommunityScorer(),
    ]
    return {scorer.category: scorer for scorer in scorers}


__all__ = [
    "ArtScorer",
    "CommunityScorer",
    "FavorScorer",
    "GiveawayScorer",
    "HolidayScorer",
    "JobScorer",
    "LearningScorer",
    "MarketplaceScorer",
    "RentalScorer",
    "Scorer",
    "ServiceScorer",
    "default_scorers",
]
