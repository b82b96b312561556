"""
Data Contracts for the Contact Discovery Engine

Pydantic models for the store boundary (Contact, Edge), the intermediate
pipeline structures, and the outputs handed to callers. Rows coming out of
the store are validated into these models before any business logic runs.
"""

from datetime import datetime
from typing import List, Optional, Set
from pydantic import BaseModel, Field

from .constants import SuggestionActionKind


# =============================================================================
# STORE BOUNDARY
# =============================================================================

class Contact(BaseModel):
    """
    A professional contact owned by exactly one user.
    Absent optional attributes are None, never empty strings.
    """
    id: str
    user_id: str
    full_name: str

    # Profile
    headline: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    industry: Optional[str] = None

    # Channels
    linkedin_profile_url: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class Edge(BaseModel):
    """Directed connection: source knows target."""
    source_id: str
    target_id: str


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class CandidateContact(BaseModel):
    """
    A distinct second-degree contact with the first-degree contacts that
    point at it, in discovery order and without repeats.
    """
    contact: Contact
    intermediary_ids: List[str] = Field(default_factory=list)

    @property
    def mutual_count(self) -> int:
        return len(self.intermediary_ids)


class UserContext(BaseModel):
    """Per-request facts about the requesting user."""
    user_id: str
    industry: Optional[str] = None
    target_companies: Set[str] = Field(default_factory=set)  # case-folded


class ScoringSignals(BaseModel):
    """Independent relevance signals for one candidate."""
    same_industry: bool = False
    mutual_count: int = Field(default=0, ge=0)
    in_target_company: bool = False


class ScoringDetail(BaseModel):
    """Which signals fired, plus the resulting score."""
    same_industry: bool = False
    has_mutual_connections: bool = False
    in_target_company: bool = False
    score: int = Field(default=1, ge=1)


class ScoredCandidate(BaseModel):
    """A candidate with its signals and score, between scoring and ranking."""
    candidate: CandidateContact
    signals: ScoringSignals
    detail: ScoringDetail
    connection_path: List[str] = Field(default_factory=list)

    @property
    def score(self) -> int:
        return self.detail.score


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class SuggestedContact(BaseModel):
    """One ranked suggestion as presented to the user."""
    id: str
    full_name: str
    headline: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    industry: Optional[str] = None
    linkedin_profile_url: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    score: int = Field(ge=1)
    mutual_connections_count: int = Field(ge=0)
    connection_path: List[str] = Field(default_factory=list)
    scoring_details: ScoringDetail


class MutualConnection(BaseModel):
    """Display attributes of a first-degree contact that knows the candidate."""
    id: str
    full_name: str
    company: Optional[str] = None
    role: Optional[str] = None


class ConnectionPath(BaseModel):
    """
    How the user would reach a suggested contact.

    direct_path holds at most one intermediary: the first mutual connection
    in edge order. path is the label form, always starting with "You".
    """
    suggested_contact: Contact
    direct_path: List[MutualConnection] = Field(default_factory=list)
    path: List[str] = Field(default_factory=list)
    mutual_connections: List[MutualConnection] = Field(default_factory=list)


class SuggestionAction(BaseModel):
    """Audit record of a user's feedback on a suggestion."""
    id: Optional[int] = None
    user_id: str
    suggested_contact_id: str
    action: SuggestionActionKind
    notes: Optional[str] = None
    created_at: datetime
