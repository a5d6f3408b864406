"""
Tests for the similarity graph, the cost model and Dijkstra.
"""

import math
import random

import networkx as nx
import pytest

from tunegraph.graph.similarity import SimilarityGraph, similarity_cost
from tunegraph.models import Genre, Song


class TestSimilarityCost:
    """Tests for the genre/artist cost model."""

    def setup_method(self):
        self.s1 = Song(1, "S1", Genre.ROCK, artist_id=10)
        self.s2 = Song(2, "S2", Genre.ROCK, artist_id=10)
        self.s3 = Song(3, "S3", Genre.RAP, artist_id=20)
        self.s4 = Song(4, "S4", Genre.ROCK, artist_id=20)
        self.s5 = Song(5, "S5", Genre.POP, artist_id=10)

    def test_same_genre_and_artist_costs_zero(self):
        assert similarity_cost(self.s1, self.s2) == 0.0

    def test_nothing_shared_costs_one(self):
        assert similarity_cost(self.s1, self.s3) == 1.0

    def test_genre_only(self):
        assert similarity_cost(self.s1, self.s4) == pytest.approx(0.4)

    def test_artist_only(self):
        assert similarity_cost(self.s1, self.s5) == pytest.approx(0.6)

    def test_custom_weights(self):
        assert similarity_cost(self.s1, self.s4, genre_weight=0.5, artist_weight=0.5) == pytest.approx(0.5)


class TestSimilarityGraphMutation:
    """Tests for node and edge mutation."""

    def setup_method(self):
        self.graph = SimilarityGraph()

    def test_connect_is_symmetric(self):
        """The same weight is stored in both adjacency maps."""
        self.graph.connect("a", "b", 0.3)

        assert self.graph.neighbors("a")["b"] == 0.3
        assert self.graph.neighbors("b")["a"] == 0.3

    def test_connect_adds_missing_nodes(self):
        self.graph.connect("a", "b", 0.3)

        assert "a" in self.graph
        assert "b" in self.graph
        assert len(self.graph) == 2

    def test_no_self_loops(self):
        """Connecting a node to itself does nothing."""
        self.graph.add_node("a")
        self.graph.connect("a", "a", 0.1)

        assert "a" not in self.graph.neighbors("a")
        assert len(self.graph.neighbors("a")) == 0

    def test_reconnect_overwrites_weight(self):
        """Last write wins in both directions."""
        self.graph.connect("a", "b", 0.3)
        self.graph.connect("b", "a", 0.8)

        assert self.graph.neighbors("a")["b"] == 0.8
        assert self.graph.neighbors("b")["a"] == 0.8
        assert self.graph.edge_count() == 1

    def test_add_node_is_idempotent(self):
        """Re-adding a node keeps its edges and the node count."""
        self.graph.connect("a", "b", 0.3)
        self.graph.add_node("a")

        assert len(self.graph.all_nodes()) == 2
        assert self.graph.neighbors("a")["b"] == 0.3

    def test_remove_node_tears_down_both_directions(self):
        """No remaining node keeps an edge to the removed one."""
        self.graph.connect("a", "b", 0.1)
        self.graph.connect("a", "c", 0.2)
        self.graph.connect("b", "c", 0.3)

        self.graph.remove_node("a")

        assert "a" not in self.graph
        for node in self.graph.all_nodes():
            assert "a" not in self.graph.neighbors(node)
        assert self.graph.neighbors("b")["c"] == 0.3

    def test_remove_unknown_node_is_noop(self):
        self.graph.connect("a", "b", 0.1)
        self.graph.remove_node("zzz")

        assert len(self.graph) == 2

    def test_neighbors_of_unknown_node_is_empty(self):
        assert len(self.graph.neighbors("ghost")) == 0

    def test_songs_as_nodes(self):
        """Song records work as nodes and compare by id."""
        s1 = Song(1, "One", Genre.ROCK, 1)
        s2 = Song(2, "Two", Genre.ROCK, 1)
        self.graph.connect(s1, s2, 0.0)
        self.graph.add_node(Song(1, "One (remaster)", Genre.ROCK, 1))

        assert len(self.graph.all_nodes()) == 2


class TestShortestPath:
    """Tests for Dijkstra."""

    def setup_method(self):
        self.graph = SimilarityGraph()

    def test_chain(self):
        """A-B (0.2), B-C (0.3): the path to C goes through B with cost 0.5."""
        self.graph.connect("A", "B", 0.2)
        self.graph.connect("B", "C", 0.3)

        path = self.graph.shortest_path("A", "C")

        assert path == ["A", "B", "C"]
        assert self.graph.path_cost(path) == pytest.approx(0.5)

    def test_prefers_cheaper_detour(self):
        """A two-hop path beats a more expensive direct edge."""
        self.graph.connect("A", "C", 1.0)
        self.graph.connect("A", "B", 0.2)
        self.graph.connect("B", "C", 0.3)

        assert self.graph.shortest_path("A", "C") == ["A", "B", "C"]

    def test_unreachable_returns_destination_only(self):
        """A disconnected destination yields a single-element result."""
        self.graph.connect("A", "B", 0.2)
        self.graph.add_node("Z")

        path = self.graph.shortest_path("A", "Z")

        assert path == ["Z"]
        assert self.graph.path_cost(["A", "Z"]) == math.inf

    def test_same_node(self):
        self.graph.connect("A", "B", 0.2)

        assert self.graph.shortest_path("A", "A") == ["A"]

    def test_unknown_origin(self):
        self.graph.connect("A", "B", 0.2)

        assert self.graph.shortest_path("ghost", "B") == ["B"]

    def test_zero_weight_edges(self):
        self.graph.connect("A", "B", 0.0)
        self.graph.connect("B", "C", 0.0)
        self.graph.connect("A", "C", 0.5)

        path = self.graph.shortest_path("A", "C")

        assert self.graph.path_cost(path) == 0.0

    def test_matches_networkx_on_random_graphs(self):
        """Reported cost equals networkx's Dijkstra on random weighted graphs."""
        rng = random.Random(1234)
        for _ in range(20):
            graph = SimilarityGraph()
            reference = nx.Graph()
            nodes = list(range(12))
            for n in nodes:
                graph.add_node(n)
                reference.add_node(n)
            for a in nodes:
                for b in nodes:
                    if a < b and rng.random() < 0.25:
                        w = round(rng.random(), 2)
                        graph.connect(a, b, w)
                        reference.add_edge(a, b, weight=w)

            origin, destination = rng.sample(nodes, 2)
            path = graph.shortest_path(origin, destination)
            try:
                expected = nx.dijkstra_path_length(reference, origin, destination)
            except nx.NetworkXNoPath:
                assert path == [destination]
                continue

            assert path[0] == origin
            assert path[-1] == destination
            assert graph.path_cost(path) == pytest.approx(expected)

    def test_end_to_end_weights(self):
        """Three songs connected by the cost model give the expected weights."""
        s1 = Song(1, "S1", Genre.ROCK, artist_id=1)
        s2 = Song(2, "S2", Genre.ROCK, artist_id=1)
        s3 = Song(3, "S3", Genre.RAP, artist_id=2)
        songs = [s1, s2, s3]
        for a in songs:
            for b in songs:
                if a != b:
                    self.graph.connect(a, b, similarity_cost(a, b))

        assert self.graph.edge_weight(s1, s2) == 0.0
        assert self.graph.edge_weight(s1, s3) == 1.0
        assert self.graph.edge_weight(s2, s3) == 1.0
