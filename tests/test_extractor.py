"""Tests for pivotgraph/extractor.py: rows -> hub nodes, entities, hyperedges."""

from __future__ import annotations

import itertools

import pytest

from pivotgraph.errors import ShapeError
from pivotgraph.extractor import HyperGraphExtractor, extract_hypergraph, new_event_token
from pivotgraph.models import Pivot
from pivotgraph.provenance import ProvenanceTracker


# =============================================================================
# Helpers
# =============================================================================


def _extractor() -> HyperGraphExtractor:
    counter = itertools.count()
    return HyperGraphExtractor(
        "EventID",
        ProvenanceTracker(),
        new_token=lambda: f"evt-{next(counter)}",
    )


def _make_pivot(**kwargs) -> Pivot:
    defaults = {"id": "p1", "events": []}
    defaults.update(kwargs)
    return Pivot.model_validate(defaults)


def _entities(graph):
    return [n for n in graph.nodes if n["type"] != "EventID"]


def _hubs(graph):
    return [n for n in graph.nodes if n["type"] == "EventID"]


# =============================================================================
# Scenarios
# =============================================================================


def test_single_event_yields_hub_two_entities_two_edges():
    pivot = _make_pivot(
        events=[{"EventID": None, "host": "a", "user": "x"}],
        connections=["host", "user"],
        attributes=[],
    )
    graph = _extractor().extract(pivot)

    assert len(_hubs(graph)) == 1
    assert [n["node"] for n in _entities(graph)] == ["a", "x"]
    assert [(e["source"], e["destination"]) for e in graph.edges] == [
        ("evt-0", "a"),
        ("evt-0", "x"),
    ]

    hub = _hubs(graph)[0]
    assert hub == {"host": "a", "user": "x", "node": "evt-0", "type": "EventID"}

    edge = graph.edges[0]
    assert edge["edge"] == "evt-0:host"
    assert edge["edgeType"] == "EventID->host"
    assert edge["edgeTitle"] == "evt-0->a"
    assert edge["col"] == "host"


def test_shared_value_yields_one_entity_and_one_edge_per_event():
    pivot = _make_pivot(events=[{"host": "a"}, {"host": "a"}])
    graph = _extractor().extract(pivot)

    entities = _entities(graph)
    assert len(entities) == 1
    assert entities[0]["node"] == "a"
    assert entities[0]["cols"] == ["host"]
    assert [e["edge"] for e in graph.edges] == ["evt-0:host", "evt-1:host"]


def test_blank_values_never_become_entities_or_edges():
    pivot = _make_pivot(
        events=[{"host": ""}, {"host": '""'}, {"host": "  ''  "}, {"host": "   "}],
        connections=["host"],
    )
    graph = _extractor().extract(pivot)
    assert _entities(graph) == []
    assert graph.edges == []
    assert len(_hubs(graph)) == 4


def test_zero_events_is_an_empty_graph():
    graph = _extractor().extract(_make_pivot())
    assert graph.nodes == []
    assert graph.edges == []


# =============================================================================
# Merge semantics
# =============================================================================


def test_cols_contain_each_referencing_field_once():
    pivot = _make_pivot(events=[{"src": "a"}, {"dst": "a"}, {"src": "a", "dst": "a"}])
    graph = _extractor().extract(pivot)

    entities = _entities(graph)
    assert len(entities) == 1
    assert entities[0]["type"] == "src"
    assert entities[0]["cols"] == ["src", "dst"]
    assert len(graph.edges) == 4


def test_provenance_accumulates_distinct_values():
    pivot = _make_pivot(
        events=[
            {"host": "a", "index": "i1"},
            {"host": "a", "index": "i2", "vendor": "v"},
            {"host": "a", "index": "i1"},
        ],
        connections=["host"],
    )
    graph = _extractor().extract(pivot)

    entity = _entities(graph)[0]
    assert entity["index"] == ["i1", "i2"]
    assert entity["vendor"] == ["v"]

    # Hub nodes and edges keep their own row's snapshot
    assert _hubs(graph)[0]["index"] == ["i1"]
    assert graph.edges[0]["index"] == ["i1"]


def test_numeric_and_string_forms_share_an_entity():
    pivot = _make_pivot(events=[{"port": 443}, {"port": "443"}, {"port": 443.0}])
    graph = _extractor().extract(pivot)

    entities = _entities(graph)
    assert len(entities) == 1
    assert entities[0]["node"] == 443
    assert {e["destination"] for e in graph.edges} == {443}


def test_event_id_field_used_as_hub_identity():
    pivot = _make_pivot(events=[{"EventID": "e42", "host": "a"}])
    graph = _extractor().extract(pivot)
    assert _hubs(graph)[0]["node"] == "e42"
    assert graph.edges[0]["source"] == "e42"
    assert graph.edges[0]["EventID"] == "e42"


def test_falsy_but_present_event_id_is_kept():
    pivot = _make_pivot(events=[{"EventID": 0, "host": "a"}, {"EventID": "", "host": "b"}])
    graph = _extractor().extract(pivot)
    assert [h["node"] for h in _hubs(graph)] == [0, "evt-0"]
    assert graph.edges[0]["edge"] == "0:host"


def test_attributes_policy_applies_to_hub_and_edges():
    pivot = _make_pivot(
        events=[{"EventID": "e1", "host": "a", "user": "x", "msg": "hello"}],
        connections=["host"],
        attributes=["msg", "user"],
        attributesBlacklist=["user"],
    )
    graph = _extractor().extract(pivot)
    hub = _hubs(graph)[0]
    assert hub["msg"] == "hello"
    assert "user" not in hub
    assert "host" not in hub
    assert graph.edges[0]["msg"] == "hello"


# =============================================================================
# Pre-existing pivot graph
# =============================================================================


def test_pivot_graph_nodes_filtered_by_connections():
    pivot = _make_pivot(
        events=[{"host": "a"}],
        connections=["host"],
        graph={
            "nodes": [
                {"node": "z", "type": "host"},
                {"node": "q", "type": "user"},
                {"node": "e9", "type": "EventID"},
            ],
            "edges": [],
        },
    )
    graph = _extractor().extract(pivot)
    assert [n["node"] for n in graph.nodes] == ["evt-0", "a", "z", "e9"]


def test_pivot_graph_edges_get_stable_synthetic_ids():
    edges = [
        {"source": "s", "destination": "d"},
        {"source": "s", "destination": "d2", "edge": "keep"},
        {"source": "s2", "destination": "d"},
    ]
    pivot = _make_pivot(events=[], graph={"nodes": [], "edges": edges})

    first = _extractor().extract(pivot)
    second = _extractor().extract(pivot)

    assert [e["edge"] for e in first.edges] == ["edge_p1_0", "keep", "edge_p1_2"]
    assert [e["edge"] for e in second.edges] == [e["edge"] for e in first.edges]
    assert "edge" not in pivot.graph.edges[0]


# =============================================================================
# Errors / tokens
# =============================================================================


def test_non_mapping_row_fails_whole_extraction():
    pivot = Pivot.model_construct(id="p1", events=[{"host": "a"}, "not-a-row"])
    with pytest.raises(ShapeError) as exc:
        _extractor().extract(pivot)
    assert exc.value.code == "INVALID_EVENT"


def test_generated_tokens_are_unique():
    tokens = {new_event_token() for _ in range(1000)}
    assert len(tokens) == 1000


def test_extract_hypergraph_uses_default_tracker():
    pivot = _make_pivot(events=[{"EventID": "e1", "host": "a", "index": "main"}])
    graph = extract_hypergraph(pivot, "EventID")
    assert _entities(graph)[0]["index"] == ["main"]
