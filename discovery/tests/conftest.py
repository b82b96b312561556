from __future__ import annotations

import os
import threading
import time
from typing import Dict, List, Optional, Set

import pytest

# db.py refuses to import without a URL; tests never touch this database
os.environ.setdefault("DATABASE_URL", "sqlite://")

from discovery.logic.contracts import Contact, Edge, SuggestionAction
from discovery.logic.errors import NotFound, UpstreamUnavailable


class InMemoryGraphStore:
    """Fake contact graph store; edges keep insertion order."""

    def __init__(self):
        self.contacts: Dict[str, Contact] = {}
        self.edges: List[Edge] = []
        self.industries: Dict[str, Optional[str]] = {}
        self.targets: Dict[str, List[str]] = {}
        self.actions: List[SuggestionAction] = []
        self.failing: Set[str] = set()
        self.calls: List[str] = []
        self.get_contact_gate: Optional[threading.Event] = None
        self.edge_delay: float = 0.0
        self._lock = threading.Lock()

    # -- seeding -------------------------------------------------------------
    def add_contact(self, contact_id: str, owner: str, name: Optional[str] = None, **attrs) -> Contact:
        contact = Contact(id=contact_id, user_id=owner, full_name=name or contact_id, **attrs)
        self.contacts[contact_id] = contact
        return contact

    def connect(self, source: str, target: str) -> None:
        self.edges.append(Edge(source_id=source, target_id=target))

    def _enter(self, op: str) -> None:
        with self._lock:
            self.calls.append(op)
        if op in self.failing:
            raise UpstreamUnavailable(f"{op} failed")

    # -- ContactGraphStore ---------------------------------------------------
    def list_contacts_by_owner(self, user_id: str) -> List[Contact]:
        self._enter("list_contacts_by_owner")
        return [c for c in self.contacts.values() if c.user_id == user_id]

    def get_contact(self, contact_id: str) -> Contact:
        self._enter("get_contact")
        if self.get_contact_gate is not None:
            self.get_contact_gate.wait(timeout=5)
        if contact_id not in self.contacts:
            raise NotFound(contact_id)
        return self.contacts[contact_id]

    def list_edges_by_source(self, contact_ids: Set[str]) -> List[Edge]:
        self._enter("list_edges_by_source")
        if self.edge_delay:
            time.sleep(self.edge_delay)
        return [e for e in self.edges if e.source_id in contact_ids]

    def list_edges_by_target(self, contact_id: str, source_filter: Set[str]) -> List[Edge]:
        self._enter("list_edges_by_target")
        return [e for e in self.edges if e.target_id == contact_id and e.source_id in source_filter]

    def get_user_industry(self, user_id: str) -> Optional[str]:
        self._enter("get_user_industry")
        return self.industries.get(user_id)

    def list_target_companies(self, user_id: str) -> List[str]:
        self._enter("list_target_companies")
        return list(self.targets.get(user_id, []))

    # -- SuggestionActionStore -----------------------------------------------
    def insert_suggestion_action(self, action: SuggestionAction) -> SuggestionAction:
        self._enter("insert_suggestion_action")
        with self._lock:
            stored = action.model_copy(update={"id": len(self.actions) + 1})
            self.actions.append(stored)
        return stored


@pytest.fixture
def store() -> InMemoryGraphStore:
    return InMemoryGraphStore()


@pytest.fixture
def network(store: InMemoryGraphStore) -> InMemoryGraphStore:
    """
    User "u" owns A, B, C.  A and B know X (tech, Acme); C knows Y (finance, Globex).
    X and Y belong to another user's address book.
    """
    store.industries["u"] = "tech"
    store.targets["u"] = ["ACME"]

    store.add_contact("A", "u", "Alice", company="Initech", role="Engineer")
    store.add_contact("B", "u", "Bob", company="Hooli", role="Manager")
    store.add_contact("C", "u", "Carol")

    store.add_contact("X", "other", "Xavier", industry="Tech", company="Acme")
    store.add_contact("Y", "other", "Yolanda", industry="Finance", company="Globex")

    store.connect("A", "X")
    store.connect("B", "X")
    store.connect("C", "Y")
    return store
