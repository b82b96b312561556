"""
SQLite-backed tests for the SQLAlchemy store adapter.
"""

from contextlib import contextmanager
from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from db import Base
from discovery.logic.adapter import SqlAlchemyGraphStore
from discovery.logic.contracts import SuggestionAction
from discovery.logic.constants import SuggestionActionKind
from discovery.logic.engine import DiscoveryEngine
from discovery.logic.errors import NotFound, UpstreamUnavailable
from discovery.models import (
    User,
    ProfessionalContact,
    ContactConnection,
    UserTargetCompany,
    ContactSuggestionTracking,
)


def _scope_for(engine):
    Session = sessionmaker(bind=engine, autoflush=False, future=True)

    @contextmanager
    def scope():
        db = Session()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    return scope


@pytest.fixture
def sql_scope(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'discovery.db'}",
        future=True,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield _scope_for(engine)
    engine.dispose()


@pytest.fixture
def seeded(sql_scope):
    t0 = datetime(2025, 1, 1)
    with sql_scope() as db:
        db.add_all([
            User(id="u", email="u@example.com", full_name="Una", industry="Tech"),
            User(id="other", email="o@example.com", full_name="Otto"),
        ])
        db.flush()
        db.add_all([
            ProfessionalContact(id="A", user_id="u", full_name="Alice", company="Initech", role="Engineer", created_at=t0),
            ProfessionalContact(id="B", user_id="u", full_name="Bob", created_at=t0 + timedelta(minutes=1)),
            ProfessionalContact(id="C", user_id="u", full_name="Carol", created_at=t0 + timedelta(minutes=2)),
            ProfessionalContact(id="X", user_id="other", full_name="Xavier", industry="tech", company="ACME", headline="  "),
            ProfessionalContact(id="Y", user_id="other", full_name="Yolanda", industry="Finance", company="Globex"),
        ])
        db.flush()
        db.add_all([
            ContactConnection(contact_id="A", connected_contact_id="X"),
            ContactConnection(contact_id="B", connected_contact_id="X"),
            ContactConnection(contact_id="C", connected_contact_id="Y"),
            ContactConnection(contact_id="C", connected_contact_id="GHOST"),
            UserTargetCompany(user_id="u", company_name="Acme"),
        ])
    return SqlAlchemyGraphStore(session_scope=sql_scope)


def test_contacts_by_owner_in_creation_order(seeded):
    assert [c.id for c in seeded.list_contacts_by_owner("u")] == ["A", "B", "C"]


def test_blank_attributes_become_unset(seeded):
    x = seeded.get_contact("X")
    assert x.headline is None
    assert x.phone is None
    assert x.company == "ACME"


def test_get_contact_missing_raises_not_found(seeded):
    with pytest.raises(NotFound):
        seeded.get_contact("GHOST")


def test_edges_follow_insertion_order(seeded):
    edges = seeded.list_edges_by_source({"A", "B", "C"})
    assert [(e.source_id, e.target_id) for e in edges] == [
        ("A", "X"), ("B", "X"), ("C", "Y"), ("C", "GHOST"),
    ]
    assert seeded.list_edges_by_source(set()) == []


def test_edges_by_target_respect_source_filter(seeded):
    edges = seeded.list_edges_by_target("X", {"B", "C"})
    assert [(e.source_id, e.target_id) for e in edges] == [("B", "X")]


def test_user_preferences(seeded):
    assert seeded.get_user_industry("u") == "Tech"
    assert seeded.get_user_industry("other") is None
    assert seeded.get_user_industry("nobody") is None
    assert seeded.list_target_companies("u") == ["Acme"]


def test_insert_suggestion_action_appends_rows(seeded, sql_scope):
    action = SuggestionAction(
        user_id="u",
        suggested_contact_id="X",
        action=SuggestionActionKind.CONTACTED,
        notes="sent intro",
        created_at=datetime(2025, 2, 1),
    )
    first = seeded.insert_suggestion_action(action)
    second = seeded.insert_suggestion_action(action)
    assert first.id is not None and second.id is not None
    assert first.id != second.id

    with sql_scope() as db:
        rows = db.execute(select(ContactSuggestionTracking)).scalars().all()
        assert [(r.action, r.notes) for r in rows] == [("contacted", "sent intro")] * 2


def test_database_errors_become_upstream_unavailable(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'empty.db'}", future=True)
    store = SqlAlchemyGraphStore(session_scope=_scope_for(engine))
    with pytest.raises(UpstreamUnavailable):
        store.list_contacts_by_owner("u")


def test_engine_over_sql_store(seeded):
    engine = DiscoveryEngine(store=seeded, max_workers=4, timeout_seconds=5)
    suggestions = engine.get_suggestions("u")
    assert [(s.id, s.score, s.mutual_connections_count) for s in suggestions] == [
        ("X", 4, 2),
        ("Y", 2, 1),
    ]

    path = engine.get_connection_path("u", "X")
    assert [m.full_name for m in path.direct_path] == ["Alice"]
    assert [m.full_name for m in path.mutual_connections] == ["Alice", "Bob"]
