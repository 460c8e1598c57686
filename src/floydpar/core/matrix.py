# core/matrix.py
from __future__ import annotations
from typing import List, Sequence
import math

from .errors import DimensionMismatchError

Matrix = List[List[float]]      # dist[i][j], math.inf = sin arista
PathMatrix = List[List[int]]    # next[i][j], NO_PATH = sin camino

INF = math.inf
NO_PATH = -1


def check_square(matrix: Sequence[Sequence], name: str = "matrix") -> int:
    """Valida que la matriz sea cuadrada y devuelve N."""
    n = len(matrix)
    for i, row in enumerate(matrix):
        if len(row) != n:
            raise DimensionMismatchError(
                f"{name} no es cuadrada: fila {i} tiene {len(row)} columnas, se esperaban {n}"
            )
    return n


def check_same_shape(a: Sequence[Sequence], b: Sequence[Sequence]) -> int:
    """Both matrices must be square and of equal size. Returns N."""
    n = check_square(a, "primera matriz")
    m = check_square(b, "segunda matriz")
    if n != m:
        raise DimensionMismatchError(f"Tamaños distintos: {n}x{n} vs {m}x{m}")
    return n


def copy_matrix(graph: Sequence[Sequence[float]]) -> Matrix:
    """Copia profunda del grafo semilla (cada motor trabaja sobre la suya)."""
    check_square(graph, "graph")
    return [[float(w) for w in row] for row in graph]


def create_path_matrix(graph: Sequence[Sequence[float]]) -> PathMatrix:
    """
    Matriz de siguiente salto inicial:
      next[i][j] = j si graph[i][j] es finito, NO_PATH en otro caso.
    """
    n = check_square(graph, "graph")
    return [
        [NO_PATH if math.isinf(graph[i][j]) and graph[i][j] > 0 else j for j in range(n)]
        for i in range(n)
    ]


def check_vertex(v: int, n: int) -> None:
    """Vértice válido: entero en [0, n). Sin índices negativos."""
    if not 0 <= v < n:
        raise ValueError(f"Vértice {v} fuera de rango [0, {n})")
