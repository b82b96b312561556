"""
Data Adapter for the Discovery Engine

Reads contacts, connections and user preferences from the relational tables
and transforms rows into the engine's contracts. Also appends suggestion
feedback rows.

This is a pure READ + TRANSFORM layer (plus one append):
- NO scoring logic
- NO ranking
- NO filtering beyond what each query asks for

Every call opens its own short-lived session, so the adapter is safe to
share across the engine's worker threads.
"""

import logging
from contextlib import AbstractContextManager
from functools import wraps
from typing import Callable, List, Optional, Set

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db import get_db
from ..models import (
    User,
    ProfessionalContact,
    ContactConnection,
    UserTargetCompany,
    ContactSuggestionTracking,
)
from .contracts import Contact, Edge, SuggestionAction
from .errors import NotFound, UpstreamUnavailable

logger = logging.getLogger(__name__)

SessionScope = Callable[[], AbstractContextManager]


def _clean(value: Optional[str]) -> Optional[str]:
    """Map blank strings to None so 'unset' has exactly one representation."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _to_contact(row: ProfessionalContact) -> Contact:
    return Contact(
        id=row.id,
        user_id=row.user_id,
        full_name=row.full_name or "",
        headline=_clean(row.headline),
        company=_clean(row.company),
        role=_clean(row.role),
        industry=_clean(row.industry),
        linkedin_profile_url=_clean(row.linkedin_profile_url),
        email=_clean(row.email),
        phone=_clean(row.phone),
    )


def _to_edge(row: ContactConnection) -> Edge:
    return Edge(source_id=row.contact_id, target_id=row.connected_contact_id)


def _upstream(operation: str):
    """Turn database failures into UpstreamUnavailable."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except SQLAlchemyError as e:
                logger.error(f"Contact store query failed: {operation}: {e}")
                raise UpstreamUnavailable(f"{operation} failed") from e
        return wrapper
    return decorator


class SqlAlchemyGraphStore:
    """ContactGraphStore and SuggestionActionStore backed by SQLAlchemy."""

    def __init__(self, session_scope: SessionScope = get_db):
        """
        Args:
            session_scope: Zero-argument callable returning a context manager
                that yields a Session and commits/closes it on exit.
        """
        self._session_scope = session_scope

    @_upstream("list_contacts_by_owner")
    def list_contacts_by_owner(self, user_id: str) -> List[Contact]:
        db: Session
        with self._session_scope() as db:
            rows = db.execute(
                select(ProfessionalContact)
                .where(ProfessionalContact.user_id == user_id)
                .order_by(ProfessionalContact.created_at, ProfessionalContact.id)
            ).scalars().all()
            return [_to_contact(r) for r in rows]

    @_upstream("get_contact")
    def get_contact(self, contact_id: str) -> Contact:
        db: Session
        with self._session_scope() as db:
            row = db.get(ProfessionalContact, contact_id)
            if row is None:
                raise NotFound(f"Contact {contact_id} not found")
            return _to_contact(row)

    @_upstream("list_edges_by_source")
    def list_edges_by_source(self, contact_ids: Set[str]) -> List[Edge]:
        if not contact_ids:
            return []
        db: Session
        with self._session_scope() as db:
            rows = db.execute(
                select(ContactConnection)
                .where(ContactConnection.contact_id.in_(list(contact_ids)))
                .order_by(ContactConnection.id)
            ).scalars().all()
            return [_to_edge(r) for r in rows]

    @_upstream("list_edges_by_target")
    def list_edges_by_target(self, contact_id: str, source_filter: Set[str]) -> List[Edge]:
        if not source_filter:
            return []
        db: Session
        with self._session_scope() as db:
            rows = db.execute(
                select(ContactConnection)
                .where(
                    ContactConnection.connected_contact_id == contact_id,
                    ContactConnection.contact_id.in_(list(source_filter)),
                )
                .order_by(ContactConnection.id)
            ).scalars().all()
            return [_to_edge(r) for r in rows]

    @_upstream("get_user_industry")
    def get_user_industry(self, user_id: str) -> Optional[str]:
        db: Session
        with self._session_scope() as db:
            industry = db.execute(
                select(User.industry).where(User.id == user_id)
            ).scalar_one_or_none()
            return _clean(industry)

    @_upstream("list_target_companies")
    def list_target_companies(self, user_id: str) -> List[str]:
        db: Session
        with self._session_scope() as db:
            names = db.execute(
                select(UserTargetCompany.company_name)
                .where(UserTargetCompany.user_id == user_id)
                .order_by(UserTargetCompany.id)
            ).scalars().all()
            return [n for n in (_clean(n) for n in names) if n]

    @_upstream("insert_suggestion_action")
    def insert_suggestion_action(self, action: SuggestionAction) -> SuggestionAction:
        db: Session
        with self._session_scope() as db:
            row = ContactSuggestionTracking(
                user_id=action.user_id,
                suggested_contact_id=action.suggested_contact_id,
                action=action.action.value,
                notes=action.notes,
                created_at=action.created_at,
            )
            db.add(row)
            db.flush()
            return action.model_copy(update={"id": row.id})
