"""
Scorer

Combines signals into a single integer score:

    score = 1 + same_industry + (mutual_count > 0) + in_target_company
"""

from .constants import BASE_SCORE, SIGNAL_WEIGHTS
from .contracts import ScoringDetail, ScoringSignals


def score_signals(signals: ScoringSignals) -> ScoringDetail:
    """
    Score one candidate and record which signals fired.

    Args:
        signals: Collected signals

    Returns:
        ScoringDetail with fired flags and the resulting score
    """
    fired = {
        "same_industry": signals.same_industry,
        "has_mutual_connections": signals.mutual_count > 0,
        "in_target_company": signals.in_target_company,
    }

    score = BASE_SCORE + sum(
        SIGNAL_WEIGHTS[name] for name, hit in fired.items() if hit
    )

    return ScoringDetail(score=score, **fired)


def score(signals: ScoringSignals) -> int:
    return score_signals(signals).score
