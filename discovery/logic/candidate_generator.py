"""
Candidate Generator

Expands a user's first-degree contacts one hop along their connections and
collapses the result into distinct second-degree candidates.
"""

import logging
from typing import Dict, List, Optional, Set

from .concurrency import RequestContext, fan_out
from .constants import MAX_WORKERS
from .contracts import CandidateContact, Contact, Edge
from .errors import NotFound
from .store import ContactGraphStore

logger = logging.getLogger(__name__)


def group_intermediaries(
    edges: List[Edge],
    first_degree_ids: Set[str]
) -> Dict[str, List[str]]:
    """
    Group one-hop edges by target.

    Targets already in the first-degree set are dropped. Each target keeps
    its distinct source ids in the order the edges were discovered, so a
    duplicate edge through the same intermediary is counted once.

    Args:
        edges: Edges whose source is in the first-degree set
        first_degree_ids: The user's first-degree contact ids

    Returns:
        Ordered mapping of target id to its intermediary ids
    """
    grouped: Dict[str, List[str]] = {}
    for edge in edges:
        if edge.target_id in first_degree_ids:
            continue
        sources = grouped.setdefault(edge.target_id, [])
        if edge.source_id not in sources:
            sources.append(edge.source_id)
    return grouped


def discover_candidates(
    store: ContactGraphStore,
    user_id: str,
    first_degree: Optional[List[Contact]] = None,
    ctx: Optional[RequestContext] = None,
    max_workers: int = MAX_WORKERS,
) -> List[CandidateContact]:
    """
    Find every distinct second-degree contact of a user.

    Filters out:
    - Contacts already in the user's network
    - Contacts owned by the user (self-introduced loops)
    - Edges whose target no longer exists

    Args:
        store: Contact graph store
        user_id: Requesting user
        first_degree: The user's contacts, if the caller already fetched them
        ctx: Request deadline/cancellation
        max_workers: Bound on concurrent contact lookups

    Returns:
        One CandidateContact per distinct target, in discovery order
    """
    ctx = ctx or RequestContext()

    if first_degree is None:
        first_degree = store.list_contacts_by_owner(user_id)
        ctx.check()
    first_degree_ids = {c.id for c in first_degree}

    if not first_degree_ids:
        return []

    edges = store.list_edges_by_source(first_degree_ids)
    ctx.check()
    grouped = group_intermediaries(edges, first_degree_ids)
    logger.info(f"One-hop expansion: {len(edges)} edges, {len(grouped)} distinct targets")

    def _resolve(target_id: str) -> Optional[Contact]:
        try:
            return store.get_contact(target_id)
        except NotFound:
            logger.warning(f"Skipping broken connection target {target_id}")
            return None

    contacts = fan_out(list(grouped), _resolve, max_workers=max_workers, ctx=ctx)

    candidates: List[CandidateContact] = []
    for contact, (target_id, intermediary_ids) in zip(contacts, grouped.items()):
        if contact is None:
            continue
        if contact.user_id == user_id:
            continue
        candidates.append(CandidateContact(contact=contact, intermediary_ids=intermediary_ids))

    return candidates
