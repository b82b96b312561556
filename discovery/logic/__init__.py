"""
Discovery Logic Module

Provides the deterministic second-degree contact suggestion engine.
"""

from .contracts import (
    Contact,
    Edge,
    CandidateContact,
    UserContext,
    ScoringSignals,
    ScoringDetail,
    ScoredCandidate,
    SuggestedContact,
    MutualConnection,
    ConnectionPath,
    SuggestionAction,
)
from .constants import SuggestionActionKind
from .concurrency import RequestContext
from .engine import DiscoveryEngine
from .errors import (
    DiscoveryError,
    NotFound,
    InvalidArgument,
    UpstreamUnavailable,
    Cancelled,
)

__all__ = [
    # Main engine
    "DiscoveryEngine",
    "RequestContext",

    # Contracts
    "Contact",
    "Edge",
    "CandidateContact",
    "UserContext",
    "ScoringSignals",
    "ScoringDetail",
    "ScoredCandidate",
    "SuggestedContact",
    "MutualConnection",
    "ConnectionPath",
    "SuggestionAction",

    # Enums
    "SuggestionActionKind",

    # Errors
    "DiscoveryError",
    "NotFound",
    "InvalidArgument",
    "UpstreamUnavailable",
    "Cancelled",
]
