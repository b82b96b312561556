"""
Tests for second-degree candidate discovery.
"""

import pytest

from discovery.logic.candidate_generator import discover_candidates, group_intermediaries
from discovery.logic.contracts import Edge
from discovery.logic.errors import UpstreamUnavailable


def _by_id(candidates):
    return {c.contact.id: c for c in candidates}


def test_empty_network_short_circuits(store):
    store.add_contact("X", "other")
    assert discover_candidates(store, "u") == []
    assert "list_edges_by_source" not in store.calls


def test_candidate_reached_twice_appears_once(network):
    candidates = discover_candidates(network, "u")
    ids = [c.contact.id for c in candidates]
    assert ids == ["X", "Y"]

    x = _by_id(candidates)["X"]
    assert x.intermediary_ids == ["A", "B"]
    assert x.mutual_count == 2
    assert _by_id(candidates)["Y"].mutual_count == 1


def test_duplicate_edges_through_same_intermediary_count_once(network):
    network.connect("A", "X")
    network.connect("A", "X")
    x = _by_id(discover_candidates(network, "u"))["X"]
    assert x.intermediary_ids == ["A", "B"]


def test_first_degree_targets_are_excluded(network):
    network.connect("A", "B")
    ids = {c.contact.id for c in discover_candidates(network, "u")}
    assert "B" not in ids
    assert ids == {"X", "Y"}


def test_targets_owned_by_user_are_excluded(network):
    # "D" belongs to u but the caller's first-degree list predates it
    network.add_contact("D", "u", "Dana")
    network.connect("A", "D")
    first_degree = [network.contacts[i] for i in ("A", "B", "C")]
    ids = {c.contact.id for c in discover_candidates(network, "u", first_degree=first_degree)}
    assert "D" not in ids


def test_broken_target_is_skipped(network):
    network.connect("A", "GHOST")
    ids = [c.contact.id for c in discover_candidates(network, "u")]
    assert ids == ["X", "Y"]


def test_candidate_carries_contact_attributes(network):
    x = _by_id(discover_candidates(network, "u"))["X"]
    assert x.contact.full_name == "Xavier"
    assert x.contact.company == "Acme"
    assert x.contact.user_id == "other"


def test_edge_expansion_failure_propagates(network):
    network.failing.add("list_edges_by_source")
    with pytest.raises(UpstreamUnavailable):
        discover_candidates(network, "u")


def test_group_intermediaries_keeps_discovery_order():
    edges = [
        Edge(source_id="B", target_id="X"),
        Edge(source_id="A", target_id="Y"),
        Edge(source_id="A", target_id="X"),
        Edge(source_id="B", target_id="X"),
        Edge(source_id="A", target_id="B"),
    ]
    grouped = group_intermediaries(edges, {"A", "B"})
    assert list(grouped) == ["X", "Y"]
    assert grouped["X"] == ["B", "A"]
    assert grouped["Y"] == ["A"]
