"""Tests for graph generation helpers."""

import math
import random

import pytest

from floydpar.core.graph_generator import count_infinities, from_edges, generate_random_graph

INF = math.inf


class TestGenerateRandomGraph:

    def test_shape_and_diagonal(self):
        graph = generate_random_graph(12, random.Random(1))
        assert len(graph) == 12 and all(len(row) == 12 for row in graph)
        assert all(graph[i][i] == 0 for i in range(12))

    def test_weights_in_range(self):
        graph = generate_random_graph(15, random.Random(2))
        for row in graph:
            for w in row:
                assert math.isinf(w) or (0 <= w < 10 and float(w).is_integer())

    def test_reproducible_with_seed(self):
        assert generate_random_graph(8, random.Random(5)) == generate_random_graph(8, random.Random(5))

    def test_roughly_a_quarter_infinite(self):
        graph = generate_random_graph(60, random.Random(3))
        ratio = count_infinities(graph) / (60 * 59)
        assert 0.15 < ratio < 0.35

    def test_negative_size(self):
        with pytest.raises(ValueError):
            generate_random_graph(-1)


def test_from_edges():
    graph = from_edges(3, [(0, 1, 4), (0, 1, 2), (2, 0, 1), (0, 5, 1)])
    assert graph == [[0, 2, INF], [INF, 0, INF], [1, INF, 0]]


def test_count_infinities():
    assert count_infinities([[0, INF], [INF, 0]]) == 2
