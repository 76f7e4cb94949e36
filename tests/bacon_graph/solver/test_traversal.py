"""
Tests for the breadth-first search from the reference actor.
"""

import pytest

from bacon_graph.exceptions import ReferenceActorNotFoundException
from bacon_graph.graph import ActorMovieGraph, GraphBuilder, iter_records
from bacon_graph.models import NodeKind
from bacon_graph.solver.traversal import ShortestPathTree, breadth_first_search

REFERENCE_ACTOR = "Bacon, Kevin (I)"


@pytest.mark.unit
class TestBreadthFirstSearch:
    """Unit tests for breadth_first_search and ShortestPathTree."""

    @pytest.fixture
    def tree(self, sample_graph: ActorMovieGraph) -> ShortestPathTree:
        return breadth_first_search(sample_graph, REFERENCE_ACTOR)

    def test_root_distance_is_zero(self, sample_graph, tree):
        root = sample_graph.actor_id(REFERENCE_ACTOR)
        assert tree.root == root
        assert tree.distance(root) == 0
        assert tree.predecessor(root) is None

    def test_hop_distances(self, sample_graph, tree):
        distances = {
            name: tree.distance(sample_graph.actor_id(name))
            for name in sample_graph.actor_names()
        }
        assert distances == {
            "Bacon, Kevin (I)": 0,
            "Hanks, Tom": 2,
            "Singer, Lori": 2,
            "Perkins, Elizabeth": 4,
            "Loner, Lonny": None,
        }

    def test_distance_parity_follows_node_kind(self, sample_graph, tree):
        for node_id in range(sample_graph.node_count):
            distance = tree.distance(node_id)
            if distance is None:
                continue
            expected = NodeKind.MOVIE if distance % 2 else NodeKind.ACTOR
            assert sample_graph.kind(node_id) is expected

    def test_predecessor_is_one_step_closer(self, sample_graph, tree):
        for node_id in range(sample_graph.node_count):
            predecessor = tree.predecessor(node_id)
            if predecessor is None:
                continue
            assert tree.distance(predecessor) == tree.distance(node_id) - 1
            assert predecessor in sample_graph.neighbours(node_id)

    def test_unreached_nodes(self, sample_graph, tree):
        loner = sample_graph.actor_id("Loner, Lonny")
        assert not tree.is_reached(loner)
        assert tree.distance(loner) is None
        assert tree.predecessor(loner) is None
        assert tree.path_to(loner) == [loner]
        assert tree.reached_count == 7

    def test_path_to(self, sample_graph, tree):
        perkins = sample_graph.actor_id("Perkins, Elizabeth")
        names = [sample_graph.name(node_id) for node_id in tree.path_to(perkins)]
        assert names == [
            "Bacon, Kevin (I)",
            "Apollo 13 (1995)",
            "Hanks, Tom",
            "Big (1988)",
            "Perkins, Elizabeth",
        ]

    def test_rerunning_gives_same_tree(self, sample_graph, tree):
        assert breadth_first_search(sample_graph, REFERENCE_ACTOR) == tree

    def test_other_reference_actor(self, sample_graph):
        tree = breadth_first_search(sample_graph, "Perkins, Elizabeth")
        assert tree.distance(sample_graph.actor_id("Bacon, Kevin (I)")) == 4
        assert tree.distance(sample_graph.actor_id("Perkins, Elizabeth")) == 0

    def test_missing_reference_actor(self, sample_graph):
        with pytest.raises(ReferenceActorNotFoundException, match="Nobody was not found") as exc_info:
            breadth_first_search(sample_graph, "Nobody")
        assert exc_info.value.reference_actor == "Nobody"

    def test_reference_actor_without_movies(self):
        graph = GraphBuilder().add_records(iter_records(["<a>Alone", "<a>X", "<t>M1"])).build()
        tree = breadth_first_search(graph, "Alone")

        assert tree.reached_count == 1
        assert tree.distance(graph.actor_id("X")) is None

    def test_shortest_of_several_paths_is_found(self):
        # X reaches Z directly through M3 and the long way through Y
        lines = [
            "<a>X", "<t>M1", "<t>M3",
            "<a>Y", "<t>M1", "<t>M2",
            "<a>Z", "<t>M2", "<t>M3",
        ]
        graph = GraphBuilder().add_records(iter_records(lines)).build()
        tree = breadth_first_search(graph, "X")

        z = graph.actor_id("Z")
        assert tree.distance(z) == 2
        assert [graph.name(n) for n in tree.path_to(z)] == ["X", "M3", "Z"]
