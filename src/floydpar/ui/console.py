# ui/console.py
from __future__ import annotations
from typing import List, Sequence
import math

from floydpar.algorithms.floyd_warshall.paths import rebuild_path
from floydpar.core.matrix import PathMatrix, check_square


def format_matrix(dist: Sequence[Sequence[float]]) -> str:
    """Tabla separada por tabs con cabeceras [i] e INF para infinito."""
    n = check_square(dist, "dist")
    lines = ["\t" + "".join(f"[{i}]\t" for i in range(n))]
    for i in range(n):
        cells = []
        for w in dist[i]:
            if math.isinf(w) and w > 0:
                cells.append("INF")
            elif float(w).is_integer():
                cells.append(str(int(w)))
            else:
                cells.append(str(w))
        lines.append(f"[{i}]\t" + "".join(c + "\t" for c in cells))
    return "\n".join(lines)


def format_path(path: Sequence[int]) -> str:
    if not path:
        return "No path."
    return " -> ".join(str(v) for v in path)


def format_all_paths(path_matrix: PathMatrix) -> str:
    n = check_square(path_matrix, "path_matrix")
    lines: List[str] = []
    for i in range(n):
        for j in range(n):
            if i != j:
                lines.append(f"Path from [{i}] to [{j}]: {format_path(rebuild_path(i, j, path_matrix))}")
    return "\n".join(lines)
