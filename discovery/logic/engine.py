"""
Discovery Engine

Main orchestrator for second-degree contact suggestions. This is the entry
point for the three caller operations: ranked suggestions, connection path,
and action recording.
"""

import logging
import time
from typing import Dict, List, Optional

from .action_recorder import record_action
from .candidate_generator import discover_candidates
from .concurrency import RequestContext, fan_out
from .constants import MAX_WORKERS, REQUEST_TIMEOUT_SECONDS
from .contracts import (
    CandidateContact,
    ConnectionPath,
    Contact,
    ScoredCandidate,
    SuggestedContact,
    SuggestionAction,
    UserContext,
)
from .errors import InvalidArgument
from .output_assembler import assemble_output
from .path_resolver import inline_path, resolve_path
from .ranker import rank_candidates
from .scorer import score_signals
from .signal_collector import collect_signals, load_user_context
from .store import ContactGraphStore, SuggestionActionStore

logger = logging.getLogger(__name__)


class DiscoveryEngine:
    """
    Stateless engine over an injected contact graph store.

    Pipeline flow for suggestions:
    1. First-degree fetch - the user's own contacts (failure is fatal)
    2. Candidate Discovery - one-hop expansion, filtering, de-duplication
    3. Signal Collection - industry, mutual connections, target company
    4. Scoring - base 1, +1 per fired signal
    5. Ranking - stable sort by score, highest first
    6. Output Assembly - SuggestedContact views with inline paths
    """

    def __init__(
        self,
        store: ContactGraphStore,
        action_store: Optional[SuggestionActionStore] = None,
        max_workers: Optional[int] = None,
        timeout_seconds: Optional[float] = None,
    ):
        """
        Args:
            store: Read-only contact graph store
            action_store: Sink for suggestion feedback; defaults to store
            max_workers: Fan-out pool bound (DISCOVERY_MAX_WORKERS by default)
            timeout_seconds: Per-request deadline (DISCOVERY_REQUEST_TIMEOUT by default)
        """
        self.store = store
        self.action_store = action_store or store
        self.max_workers = max_workers or MAX_WORKERS
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else REQUEST_TIMEOUT_SECONDS

    def new_context(self) -> RequestContext:
        return RequestContext(timeout_seconds=self.timeout_seconds)

    def get_suggestions(
        self,
        user_id: str,
        ctx: Optional[RequestContext] = None
    ) -> List[SuggestedContact]:
        """
        Ranked second-degree suggestions for a user.

        Args:
            user_id: Requesting user
            ctx: Request deadline/cancellation; a fresh one is created if None

        Returns:
            Suggestions sorted by score, highest first

        Raises:
            InvalidArgument: empty user id
            UpstreamUnavailable: the first-degree fetch or edge expansion failed
            Cancelled: deadline exceeded or caller cancelled
        """
        if not user_id:
            raise InvalidArgument("user id must not be empty")
        ctx = ctx or self.new_context()
        start_time = time.perf_counter()

        # Step 1: First-degree set
        first_degree = self.store.list_contacts_by_owner(user_id)
        ctx.check()
        logger.info(f"Suggestions for user {user_id}: {len(first_degree)} first-degree contacts")
        if not first_degree:
            return []

        # Step 2: Candidate discovery
        candidates = discover_candidates(
            self.store,
            user_id,
            first_degree=first_degree,
            ctx=ctx,
            max_workers=self.max_workers,
        )
        logger.info(f"Candidates discovered: {len(candidates)}")
        ctx.check()
        if not candidates:
            return []

        # Steps 3 & 4: Signals and scores, one task per candidate
        user = load_user_context(self.store, user_id)
        ctx.check()
        first_degree_by_id = {c.id: c for c in first_degree}
        scored = fan_out(
            candidates,
            lambda c: self._score_candidate(user, c, first_degree_by_id),
            max_workers=self.max_workers,
            ctx=ctx,
        )

        # Step 5: Rank
        ranked = rank_candidates(scored)

        # Step 6: Assemble
        output = assemble_output(ranked)

        processing_time = (time.perf_counter() - start_time) * 1000
        logger.info(f"Suggestions ready: {len(output)} ({processing_time:.2f}ms)")
        return output

    def get_connection_path(
        self,
        user_id: str,
        candidate_id: str,
        ctx: Optional[RequestContext] = None
    ) -> ConnectionPath:
        """
        Introduction path and mutual connections for one candidate.

        Raises:
            InvalidArgument: empty candidate id
            NotFound: candidate does not exist
            UpstreamUnavailable: a store read failed
            Cancelled: deadline exceeded or caller cancelled
        """
        return resolve_path(self.store, user_id, candidate_id, ctx=ctx or self.new_context())

    def record_action(
        self,
        user_id: str,
        candidate_id: str,
        action,
        notes: Optional[str] = None
    ) -> SuggestionAction:
        """
        Append one feedback record.

        Raises:
            InvalidArgument: unknown action or empty candidate id
            UpstreamUnavailable: the write failed
        """
        return record_action(self.action_store, user_id, candidate_id, action, notes)

    @staticmethod
    def _score_candidate(
        user: UserContext,
        candidate: CandidateContact,
        first_degree_by_id: Dict[str, Contact],
    ) -> ScoredCandidate:
        signals = collect_signals(user, candidate)
        return ScoredCandidate(
            candidate=candidate,
            signals=signals,
            detail=score_signals(signals),
            connection_path=inline_path(candidate, first_degree_by_id),
        )
