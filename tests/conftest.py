from itertools import permutations
import math
import random

import pytest

from floydpar.core.graph_generator import generate_random_graph

INF = math.inf


def brute_force_shortest(graph):
    """Mínimo sobre todos los caminos simples (válido sin ciclos negativos)."""
    n = len(graph)
    best = [[INF] * n for _ in range(n)]
    for i in range(n):
        best[i][i] = 0.0
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            others = [v for v in range(n) if v not in (i, j)]
            for r in range(len(others) + 1):
                for middle in permutations(others, r):
                    route = (i,) + middle + (j,)
                    total = sum(graph[u][v] for u, v in zip(route, route[1:]))
                    if total < best[i][j]:
                        best[i][j] = total
    return best


def random_dag(n, rng):
    """Grafo acíclico con pesos negativos permitidos (nunca hay ciclo negativo)."""
    graph = [[INF] * n for _ in range(n)]
    for i in range(n):
        graph[i][i] = 0.0
        for j in range(i + 1, n):
            if rng.random() < 0.6:
                graph[i][j] = float(rng.randint(-5, 9))
    return graph


@pytest.fixture
def scenario_graph():
    return [
        [0, 1, INF],
        [INF, 0, 1],
        [1, INF, 0],
    ]


@pytest.fixture
def negative_cycle_graph():
    return [
        [0, -3],
        [-3, 0],
    ]


@pytest.fixture(params=[0, 1, 2, 3, 4])
def small_graph(request):
    rng = random.Random(request.param)
    if request.param % 2:
        return random_dag(rng.randint(2, 6), rng)
    return generate_random_graph(rng.randint(2, 6), rng)
