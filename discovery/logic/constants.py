"""
Discovery Engine Constants

Signal weights, the closed set of suggestion actions, and the runtime
tunables for the fan-out pool. All scoring values are deterministic.
"""

import os
from enum import Enum
from typing import Dict

from dotenv import load_dotenv

load_dotenv()

ENGINE_VERSION = "1.0.0"

# =============================================================================
# SCORING
# =============================================================================

BASE_SCORE = 1

# Each signal adds its weight once when it fires. Mutual connections are a
# presence test: five mutual connections score the same as one.
SIGNAL_WEIGHTS: Dict[str, int] = {
    "same_industry": 1,
    "has_mutual_connections": 1,
    "in_target_company": 1,
}

MAX_SCORE = BASE_SCORE + sum(SIGNAL_WEIGHTS.values())

# =============================================================================
# PATHS
# =============================================================================

# Anchor label that starts every introduction path
PATH_ANCHOR = "You"

# =============================================================================
# ACTIONS
# =============================================================================

class SuggestionActionKind(str, Enum):
    """Feedback a user can record on a suggestion."""
    VIEWED = "viewed"
    ACCEPTED = "accepted"
    IGNORED = "ignored"
    CONTACTED = "contacted"


# =============================================================================
# CONCURRENCY & TIMEOUTS
# =============================================================================

MAX_WORKERS = int(os.getenv("DISCOVERY_MAX_WORKERS", "8"))
# Seconds per request; 0 expires immediately
REQUEST_TIMEOUT_SECONDS = float(os.getenv("DISCOVERY_REQUEST_TIMEOUT", "10"))

# How often a waiting fan-out re-checks the cancellation flag
CANCEL_POLL_INTERVAL_SECONDS = 0.05
