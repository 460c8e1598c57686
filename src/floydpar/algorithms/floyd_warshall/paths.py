# algorithms/floyd_warshall/paths.py
from __future__ import annotations
from typing import Dict, List, Sequence, Tuple

from floydpar.core.errors import PathIntegrityError
from floydpar.core.matrix import NO_PATH, PathMatrix, check_square, check_vertex


def rebuild_path(src: int, dst: int, path_matrix: PathMatrix) -> List[int]:
    """
    Reconstruye el camino src->dst siguiendo la matriz de siguiente salto.

    Retorna [] si no hay camino (caso normal, no es error).
    El recorrido se acota a N saltos; si no converge la matriz está corrupta
    y se lanza PathIntegrityError.
    """
    n = len(path_matrix)
    check_vertex(src, n)
    check_vertex(dst, n)

    path = [src]
    current = src
    for _ in range(n):
        if current == dst:
            return path
        hop = path_matrix[current][dst]
        if hop == NO_PATH:
            return []
        if not 0 <= hop < n:
            raise PathIntegrityError(f"Salto inválido {hop} en next[{current}][{dst}]")
        path.append(hop)
        current = hop
    raise PathIntegrityError(f"El camino {src}->{dst} no converge en {n} pasos: {path}")


def all_paths(path_matrix: PathMatrix) -> Dict[Tuple[int, int], List[int]]:
    """Camino para cada par (i, j) con i != j."""
    n = check_square(path_matrix, "path_matrix")
    return {
        (i, j): rebuild_path(i, j, path_matrix)
        for i in range(n)
        for j in range(n)
        if i != j
    }


def path_weight(path: Sequence[int], graph: Sequence[Sequence[float]]) -> float:
    """Suma de los pesos de las aristas consecutivas del camino."""
    return sum((graph[u][v] for u, v in zip(path, path[1:])), 0.0)
