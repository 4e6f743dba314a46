"""Tests for PathBuilder: append/pop rules, totals, budget and optimality reference."""

import logging
import random

import pytest

from navplan.algorithms.cost import edge_plus_node_energy, walk_cost
from navplan.config import PlannerConfig
from navplan.model.path_builder import PathBuilder
from navplan.types.base import NodeSelection
from navplan.types.dto import Edge, Node, PathTotals, Vector3


class TestAppendAndPop:
    def test_first_append_accepts_any_id(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        assert builder.try_append("not-in-graph")
        assert builder.get_sequence() == ["not-in-graph"]

    def test_append_requires_edge_from_last(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        assert builder.try_append("B")
        # No B -> A edge
        assert not builder.try_append("A")
        assert builder.get_sequence() == ["B"]
        assert len(builder) == 1

    def test_append_rejects_revisit(self, abc_graph):
        abc_graph.add_edge(Edge("C", "A"))
        builder = PathBuilder(abc_graph, 5)
        for node_id in ("A", "B", "C"):
            assert builder.try_append(node_id)
        # C -> A exists, but A is already in the path
        assert not builder.try_append("A")
        assert builder.get_sequence() == ["A", "B", "C"]

    def test_append_same_id_twice(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        assert builder.try_append("C")
        assert not builder.try_append("C")
        assert builder.get_sequence() == ["C"]

    def test_pop_empty(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        assert builder.pop() is None
        assert builder.get_sequence() == []

    def test_pop_returns_last(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        builder.try_append("A")
        builder.try_append("B")
        assert builder.pop() == "B"
        assert builder.get_sequence() == ["A"]
        # Popped node may be appended again
        assert builder.try_append("B")

    def test_clear(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        builder.try_append("A")
        builder.try_append("C")
        builder.clear()
        assert builder.get_sequence() == []
        assert builder.try_append("B")


class TestSnapshots:
    def test_returned_sequence_is_a_copy(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        builder.try_append("A")
        seq = builder.get_sequence()
        seq.append("B")
        assert builder.get_sequence() == ["A"]

    def test_earlier_snapshot_unaffected_by_mutation(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        builder.try_append("A")
        before = builder.get_state()
        builder.try_append("B")
        builder.pop()
        builder.pop()
        assert before.sequence == ["A"]
        assert before.totals.node_count == 1


class TestTotalsAndBudget:
    def test_budget_clamped(self, abc_graph):
        builder = PathBuilder(abc_graph, -3)
        assert builder.get_energy_budget() == 0
        builder.set_energy_budget(-1)
        assert builder.get_energy_budget() == 0
        builder.set_energy_budget(12)
        assert builder.get_energy_budget() == 12

    def test_totals_empty(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        assert builder.get_totals() == PathTotals(0, 0, 0)
        assert not builder.is_over_budget()

    def test_exact_budget_is_not_over(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        for node_id in ("A", "B", "C"):
            assert builder.try_append(node_id)
        assert builder.get_totals() == PathTotals(3, 5, 9)
        assert not builder.is_over_budget()

        builder.set_energy_budget(4.5)
        assert builder.is_over_budget()

    def test_unresolved_ids_dropped_from_totals(self, abc_graph, caplog):
        builder = PathBuilder(abc_graph, 5)
        builder.try_append("A")
        builder.try_append("B")
        abc_graph.remove_node("B")

        with caplog.at_level(logging.WARNING, logger="navplan"):
            totals = builder.get_totals()
        assert totals == PathTotals(1, 0, 0)
        assert builder.get_sequence() == ["A", "B"]
        assert builder.get_unresolved_ids() == ["B"]
        assert "unresolved" in caplog.text

    def test_unresolved_warning_can_be_disabled(self, abc_graph, caplog):
        builder = PathBuilder(
            abc_graph, 5, config=PlannerConfig(warn_on_unresolved=False)
        )
        builder.try_append("ghost")
        with caplog.at_level(logging.WARNING, logger="navplan"):
            assert builder.get_nodes() == []
        assert "unresolved" not in caplog.text

    def test_positions(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        builder.try_append("A")
        builder.try_append("C")
        assert builder.get_positions() == [
            Vector3(0.0, 0.0, 0.0),
            Vector3(1.0, 0.0, 1.0),
        ]


class TestDijkstraReference:
    def test_none_for_short_sequences(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        assert builder.get_dijkstra_min_cost() is None
        builder.try_append("A")
        assert builder.get_dijkstra_min_cost() is None
        assert builder.get_walk_cost() is None

    def test_scenario_abc(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        for node_id in ("A", "B", "C"):
            assert builder.try_append(node_id)

        assert builder.get_dijkstra_min_cost() == 3
        assert builder.get_walk_cost() == 7
        # Reference never alters the sequence
        assert builder.get_sequence() == ["A", "B", "C"]

    def test_none_when_endpoints_disconnected(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        builder.try_append("A")
        builder.try_append("B")
        # Remove every route A -> B after the fact
        abc_graph.remove_node("B")
        abc_graph.add_node(Node("B", energy_cost=3))
        assert builder.get_dijkstra_min_cost() is None

    @pytest.mark.parametrize(
        "selection", [NodeSelection.LINEAR_SCAN, NodeSelection.HEAP]
    )
    def test_min_cost_never_exceeds_walk(self, line_graph, selection):
        # Add shortcuts so random walks are rarely optimal
        line_graph.add_edge(Edge("A", "C", 1))
        line_graph.add_edge(Edge("B", "D", 9))
        line_graph.add_edge(Edge("C", "E", 0))
        line_graph.add_edge(Edge("B", "E", 20))
        config = PlannerConfig(node_selection=selection)
        cost = edge_plus_node_energy(line_graph)

        rng = random.Random(7)
        for _ in range(25):
            builder = PathBuilder(line_graph, 100, config=config)
            builder.try_append("A")
            while True:
                last = builder.get_sequence()[-1]
                options = sorted(e.to_id for e in line_graph.get_edges_from(last))
                if not options:
                    break
                assert builder.try_append(rng.choice(options))

            seq = builder.get_sequence()
            assert builder.get_dijkstra_min_cost() <= walk_cost(seq, cost)
            assert builder.get_dijkstra_min_cost() <= builder.get_walk_cost()


class TestState:
    def test_state_bundle(self, abc_graph):
        builder = PathBuilder(abc_graph, 5)
        for node_id in ("A", "B", "C"):
            builder.try_append(node_id)
        state = builder.get_state()
        assert state.sequence == ["A", "B", "C"]
        assert state.totals == PathTotals(3, 5, 9)
        assert state.energy_budget == 5
        assert state.is_over_budget is False
        assert state.dijkstra_min_cost == 3
        assert state.walk_cost == 7
        assert state.unresolved_ids == []

    def test_state_to_dict(self, abc_graph):
        builder = PathBuilder(abc_graph, 4)
        builder.try_append("A")
        builder.try_append("B")
        data = builder.get_state().to_dict()
        assert data == {
            "sequence": ["A", "B"],
            "totals": {"node_count": 2, "total_energy": 3, "total_score": 5},
            "energy_budget": 4,
            "is_over_budget": False,
            "dijkstra_min_cost": 4,
            "walk_cost": 4,
            "unresolved_ids": [],
        }

    def test_works_with_minimal_graph_store(self):
        class DictStore:
            """Graph store exposing only the four read operations."""

            def __init__(self):
                self.nodes = {"A": Node("A"), "B": Node("B", energy_cost=2)}
                self.edges = {"A": [Edge("A", "B", 5)]}

            def get_nodes(self):
                return list(self.nodes.values())

            def get_node(self, node_id):
                return self.nodes.get(node_id)

            def has_edge(self, from_id, to_id):
                return any(e.to_id == to_id for e in self.edges.get(from_id, []))

            def get_edges_from(self, node_id):
                return list(self.edges.get(node_id, []))

        builder = PathBuilder(DictStore(), 10)
        assert builder.try_append("A")
        assert builder.try_append("B")
        assert builder.get_dijkstra_min_cost() == 7
        assert builder.get_totals().total_energy == 2
