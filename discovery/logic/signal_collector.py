"""
Signal Collector

Gathers the independent relevance signals for each candidate. Signals are
pure functions of the user context and the candidate, so collection for
different candidates can run in parallel.
"""

import logging
from typing import Iterable, Optional

from .contracts import CandidateContact, ScoringSignals, UserContext
from .errors import UpstreamUnavailable
from .store import ContactGraphStore

logger = logging.getLogger(__name__)


def _fold(value: Optional[str]) -> str:
    return (value or "").strip().casefold()


def load_user_context(store: ContactGraphStore, user_id: str) -> UserContext:
    """
    Load the user's industry and target companies.

    Both are optional enrichments: if either read fails, that signal is
    treated as absent instead of failing the request.
    """
    industry: Optional[str] = None
    try:
        industry = store.get_user_industry(user_id)
    except UpstreamUnavailable as e:
        logger.warning(f"Industry unavailable for user {user_id}, same-industry signal disabled: {e}")

    target_companies: Iterable[str] = []
    try:
        target_companies = store.list_target_companies(user_id)
    except UpstreamUnavailable as e:
        logger.warning(f"Target companies unavailable for user {user_id}, target-company signal disabled: {e}")

    return UserContext(
        user_id=user_id,
        industry=industry,
        target_companies={_fold(name) for name in target_companies if _fold(name)},
    )


def is_same_industry(user: UserContext, candidate: CandidateContact) -> bool:
    user_industry = _fold(user.industry)
    candidate_industry = _fold(candidate.contact.industry)
    return bool(user_industry) and user_industry == candidate_industry


def is_in_target_company(user: UserContext, candidate: CandidateContact) -> bool:
    company = _fold(candidate.contact.company)
    return bool(company) and company in user.target_companies


def collect_signals(user: UserContext, candidate: CandidateContact) -> ScoringSignals:
    """
    Compute every signal for one candidate.

    Args:
        user: Requesting user's context
        candidate: Candidate from discovery

    Returns:
        ScoringSignals
    """
    return ScoringSignals(
        same_industry=is_same_industry(user, candidate),
        mutual_count=candidate.mutual_count,
        in_target_company=is_in_target_company(user, candidate),
    )
