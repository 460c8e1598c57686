"""Tests for path reconstruction."""

import math

import pytest

from floydpar.core.errors import PathIntegrityError
from floydpar.core.matrix import NO_PATH
from floydpar.algorithms.floyd_warshall import FloydWarshall, all_paths, path_weight, rebuild_path

INF = math.inf


class TestRebuildPath:

    def test_round_trip_weights(self, small_graph):
        """Every reachable pair: starts at i, ends at j, at most N vertices, weight equals dist."""
        dist, nxt = FloydWarshall(small_graph).run()
        n = len(dist)
        for i in range(n):
            for j in range(n):
                path = rebuild_path(i, j, nxt)
                if math.isinf(dist[i][j]):
                    assert path == []
                    continue
                assert path[0] == i and path[-1] == j
                assert len(path) <= n
                assert path_weight(path, small_graph) == dist[i][j]

    def test_unreachable_is_empty(self, scenario_graph):
        nxt = [[0, 1, NO_PATH], [NO_PATH, 1, NO_PATH], [NO_PATH, NO_PATH, 2]]
        assert rebuild_path(0, 2, nxt) == []
        assert rebuild_path(1, 0, nxt) == []

    def test_same_vertex(self):
        assert rebuild_path(1, 1, [[0, NO_PATH], [NO_PATH, 1]]) == [1]

    def test_corrupted_matrix_raises(self):
        nxt = [
            [0, 1, 1],
            [0, 1, 0],
            [NO_PATH, NO_PATH, 2],
        ]
        with pytest.raises(PathIntegrityError):
            rebuild_path(0, 2, nxt)

    @pytest.mark.parametrize("hop", [7, -2])
    def test_hop_out_of_range_raises(self, hop):
        with pytest.raises(PathIntegrityError):
            rebuild_path(0, 1, [[0, hop], [0, 1]])

    def test_out_of_range(self):
        with pytest.raises(ValueError):
            rebuild_path(0, 5, [[0]])
        with pytest.raises(ValueError):
            rebuild_path(-1, 0, [[0]])

    def test_all_paths(self, scenario_graph):
        _, nxt = FloydWarshall(scenario_graph).run()
        paths = all_paths(nxt)
        assert len(paths) == 6
        assert paths[(2, 1)] == [2, 0, 1]
        assert (0, 0) not in paths

    def test_path_weight_single_vertex(self):
        assert path_weight([0], [[0]]) == 0.0
