"""Favicon ranking logic for ordering candidates before they are tried"""

from sitefavicon.favicon.constants import ORDER_PENALTY, SIZE_WEIGHT
from sitefavicon.favicon.models import Candidate


class FaviconSelector:
    """Rank candidates: declared size dominates, format and relation break near ties,
    document order breaks exact ties.
    """

    @staticmethod
    def score(candidate: Candidate) -> float:
        """Return the ranking score of a candidate, higher is better."""
        return (
            candidate.declared_size * SIZE_WEIGHT
            + candidate.format_score
            + candidate.rel_score
            - candidate.discovery_order * ORDER_PENALTY
        )

    @staticmethod
    def rank_candidates(candidates: list[Candidate]) -> list[Candidate]:
        """Return candidates best first. The sort is stable."""
        return sorted(candidates, key=FaviconSelector.score, reverse=True)
