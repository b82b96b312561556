"""
Path Resolver

Builds the introduction path for a suggested contact.

Only one hop is ever resolved: the path goes through the first mutual
connection found, even when several exist. This is not a shortest-path
search.
"""

import logging
from typing import Dict, List, Optional

from .concurrency import RequestContext
from .constants import PATH_ANCHOR
from .contracts import CandidateContact, ConnectionPath, Contact, MutualConnection
from .errors import InvalidArgument
from .store import ContactGraphStore

logger = logging.getLogger(__name__)


def _to_mutual(contact: Contact) -> MutualConnection:
    return MutualConnection(
        id=contact.id,
        full_name=contact.full_name,
        company=contact.company,
        role=contact.role,
    )


def path_labels(intermediary: Optional[Contact]) -> List[str]:
    """Label form of a path: ["You"] or ["You", <intermediary name>]."""
    if intermediary is None:
        return [PATH_ANCHOR]
    return [PATH_ANCHOR, intermediary.full_name]


def inline_path(
    candidate: CandidateContact,
    first_degree_by_id: Dict[str, Contact]
) -> List[str]:
    """
    Path labels for a candidate already produced by discovery.

    Uses the first intermediary in discovery order; needs no extra reads
    because intermediaries are always first-degree contacts.
    """
    for intermediary_id in candidate.intermediary_ids:
        intermediary = first_degree_by_id.get(intermediary_id)
        if intermediary is not None:
            return path_labels(intermediary)
    return path_labels(None)


def resolve_path(
    store: ContactGraphStore,
    user_id: str,
    candidate_id: str,
    first_degree: Optional[List[Contact]] = None,
    ctx: Optional[RequestContext] = None,
) -> ConnectionPath:
    """
    Resolve the introduction path and every mutual connection for one candidate.

    Args:
        store: Contact graph store
        user_id: Requesting user
        candidate_id: Suggested contact to reach
        first_degree: The user's contacts, if the caller already fetched them
        ctx: Request deadline/cancellation, checked after each store read

    Returns:
        ConnectionPath

    Raises:
        InvalidArgument: candidate_id is empty
        NotFound: candidate does not exist
        Cancelled: deadline exceeded or caller cancelled
    """
    if not candidate_id or not candidate_id.strip():
        raise InvalidArgument("candidate id must not be empty")
    ctx = ctx or RequestContext()

    if first_degree is None:
        first_degree = store.list_contacts_by_owner(user_id)
        ctx.check()
    first_degree_by_id = {c.id: c for c in first_degree}

    suggested = store.get_contact(candidate_id)
    ctx.check()

    edges = store.list_edges_by_target(candidate_id, set(first_degree_by_id))
    ctx.check()

    mutual_connections: List[MutualConnection] = []
    seen = set()
    for edge in edges:
        if edge.source_id in seen:
            continue
        intermediary = first_degree_by_id.get(edge.source_id)
        if intermediary is None:
            continue
        seen.add(edge.source_id)
        mutual_connections.append(_to_mutual(intermediary))

    direct_path = mutual_connections[:1]
    first = first_degree_by_id[direct_path[0].id] if direct_path else None

    logger.info(f"Resolved path to {candidate_id}: {len(mutual_connections)} mutual connections")

    return ConnectionPath(
        suggested_contact=suggested,
        direct_path=direct_path,
        path=path_labels(first),
        mutual_connections=mutual_connections,
    )
