"""
Ranker

Orders scored candidates by score, highest first.
"""

from typing import List
from .contracts import ScoredCandidate


def rank_candidates(
    scored_candidates: List[ScoredCandidate]
) -> List[ScoredCandidate]:
    """
    Rank candidates by score (descending).

    The sort is stable, so equal scores keep discovery order. No other
    tie-break is applied.

    Args:
        scored_candidates: Scored candidates in discovery order

    Returns:
        Sorted list by score
    """
    return sorted(
        scored_candidates,
        key=lambda x: x.score,
        reverse=True
    )
