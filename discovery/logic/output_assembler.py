"""
Output Assembler

Transforms ranked, scored candidates into the SuggestedContact view.
"""

from typing import List

from .contracts import ScoredCandidate, SuggestedContact


def assemble_suggestion(scored: ScoredCandidate) -> SuggestedContact:
    """
    Convert a ScoredCandidate into a SuggestedContact.

    Args:
        scored: The scored candidate

    Returns:
        SuggestedContact object
    """
    contact = scored.candidate.contact

    return SuggestedContact(
        # Identity & profile
        id=contact.id,
        full_name=contact.full_name,
        headline=contact.headline,
        company=contact.company,
        role=contact.role,
        industry=contact.industry,

        # Channels
        linkedin_profile_url=contact.linkedin_profile_url,
        email=contact.email,
        phone=contact.phone,

        # Scoring
        score=scored.score,
        mutual_connections_count=scored.signals.mutual_count,
        connection_path=list(scored.connection_path),
        scoring_details=scored.detail,
    )


def assemble_output(ranked: List[ScoredCandidate]) -> List[SuggestedContact]:
    return [assemble_suggestion(s) for s in ranked]
