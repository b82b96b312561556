"""
Store Ports

Interfaces the engine depends on. The SQLAlchemy adapter implements both;
tests substitute in-memory fakes.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Set

from .contracts import Contact, Edge, SuggestionAction


class ContactGraphStore(Protocol):
    """Read-only view of contacts and the connections between them."""

    def list_contacts_by_owner(self, user_id: str) -> List[Contact]:
        ...

    def get_contact(self, contact_id: str) -> Contact:
        """Raises NotFound when the contact does not exist."""
        ...

    def list_edges_by_source(self, contact_ids: Set[str]) -> List[Edge]:
        ...

    def list_edges_by_target(self, contact_id: str, source_filter: Set[str]) -> List[Edge]:
        ...

    def get_user_industry(self, user_id: str) -> Optional[str]:
        ...

    def list_target_companies(self, user_id: str) -> List[str]:
        ...


class SuggestionActionStore(Protocol):
    """Append-only sink for suggestion feedback."""

    def insert_suggestion_action(self, action: SuggestionAction) -> SuggestionAction:
        ...
