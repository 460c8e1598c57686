# core/graph_generator.py
from __future__ import annotations
from typing import Iterable, Optional, Sequence, Tuple
import math
import random

from .matrix import INF, Matrix

Edge = Tuple[int, int, float]  # (u, v, w)


def generate_random_graph(size: int, rng: Optional[random.Random] = None,
                          max_weight: int = 10, inf_threshold: int = -5) -> Matrix:
    """
    Grafo dirigido aleatorio de size x size.
    - Diagonal en 0.
    - Por celda se sortea r en [-10, 10); si r <= inf_threshold no hay arista (~30%).
    - Si hay arista, peso entero en [0, max_weight).
    """
    if size < 0:
        raise ValueError(f"El tamaño debe ser >= 0, se recibió {size}")
    rng = rng or random.Random()
    graph: Matrix = []
    for i in range(size):
        row = []
        for j in range(size):
            r = rng.randrange(-10, 10)
            if i == j:
                row.append(0.0)
            elif r <= inf_threshold:
                row.append(INF)
            else:
                row.append(float(rng.randrange(max_weight)))
        graph.append(row)
    return graph


def count_infinities(graph: Sequence[Sequence[float]]) -> int:
    return sum(1 for row in graph for w in row if math.isinf(w))


def from_edges(n: int, edges: Iterable[Edge]) -> Matrix:
    """
    Matriz de distancias a partir de aristas (u, v, w).
    Aristas con vértices fuera de rango se ignoran; con duplicados queda el menor.
    """
    graph: Matrix = [[INF] * n for _ in range(n)]
    for i in range(n):
        graph[i][i] = 0.0
    for u, v, w in edges:
        if not (0 <= u < n and 0 <= v < n):
            continue
        if w < graph[u][v]:
            graph[u][v] = float(w)
    return graph
