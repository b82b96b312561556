"""
Action Recorder

Appends user feedback on a suggestion. Write-only: nothing reads these
records back into scoring.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from .constants import SuggestionActionKind
from .contracts import SuggestionAction
from .errors import InvalidArgument
from .store import SuggestionActionStore

logger = logging.getLogger(__name__)


def parse_action(action) -> SuggestionActionKind:
    """Validate an action against the closed set of kinds."""
    if isinstance(action, SuggestionActionKind):
        return action
    try:
        return SuggestionActionKind(action)
    except ValueError:
        allowed = ", ".join(k.value for k in SuggestionActionKind)
        raise InvalidArgument(f"Invalid action '{action}'. Expected one of: {allowed}")


def record_action(
    store: SuggestionActionStore,
    user_id: str,
    candidate_id: str,
    action,
    notes: Optional[str] = None,
) -> SuggestionAction:
    """
    Record one action. Every call creates a new row; recording the same
    action twice yields two records.

    Raises:
        InvalidArgument: unknown action or empty candidate id
    """
    kind = parse_action(action)
    if not candidate_id or not candidate_id.strip():
        raise InvalidArgument("candidate id must not be empty")

    record = SuggestionAction(
        user_id=user_id,
        suggested_contact_id=candidate_id,
        action=kind,
        notes=notes,
        created_at=datetime.now(timezone.utc).replace(tzinfo=None),
    )
    stored = store.insert_suggestion_action(record)
    logger.info(f"Recorded '{kind.value}' on {candidate_id} for user {user_id}")
    return stored
