# algorithms/floyd_warshall/sequential.py
from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple
import logging
import math

from floydpar.core.errors import NegativeCycleError
from floydpar.core.matrix import (
    Matrix,
    PathMatrix,
    check_same_shape,
    copy_matrix,
    create_path_matrix,
    check_vertex,
)
from floydpar.core.graph_generator import Edge, from_edges
from .paths import rebuild_path

logger = logging.getLogger(__name__)


def relax_row(dist: Matrix, path_matrix: PathMatrix, i: int, k: int,
              row_k: Sequence[float], dik: float, next_ik: int) -> None:
    """
    Relaja la fila i contra el intermedio k.
    row_k es la fila k que se usa como lectura (la viva o una copia).
    """
    row_i = dist[i]
    next_i = path_matrix[i]
    # chequeo de ciclo negativo antes de tocar la diagonal
    if dik + row_k[i] < 0:
        raise NegativeCycleError(vertex=i, intermediate=k)
    for j, dkj in enumerate(row_k):
        if math.isinf(dkj):
            continue
        alt = dik + dkj
        if alt < row_i[j]:
            row_i[j] = alt
            next_i[j] = next_ik


def floyd_warshall_sequential(dist: Matrix, path_matrix: PathMatrix) -> Matrix:
    """
    Floyd–Warshall clásico, in-place sobre dist y path_matrix.

    :return: la misma dist, ya relajada.
    :raises NegativeCycleError: si algún dist[i][i] quedaría negativo.
    :raises DimensionMismatchError: si las matrices no son cuadradas e iguales.
    """
    n = check_same_shape(dist, path_matrix)
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            dik = dist[i][k]
            if math.isinf(dik):
                continue
            relax_row(dist, path_matrix, i, k, row_k, dik, path_matrix[i][k])
        logger.debug("fase k=%d completada", k)
    return dist


class FloydWarshall:
    """
    All-Pairs Shortest Paths (versión secuencial de referencia).
    - Trabaja sobre una copia propia del grafo semilla.
    - Acepta pesos negativos, pero NO ciclos negativos.
    - Útil si harás muchas consultas (u->v) tras un único pre-cálculo.
    """

    name = "sequential"

    def __init__(self, graph: Sequence[Sequence[float]]):
        self.dist: Matrix = copy_matrix(graph)
        self.next: PathMatrix = create_path_matrix(graph)
        self.finished = False

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "FloydWarshall":
        """Construye el grafo desde aristas (u, v, w); con duplicados queda el menor."""
        return cls(from_edges(n, edges))

    @property
    def size(self) -> int:
        return len(self.dist)

    def _relax(self) -> None:
        floyd_warshall_sequential(self.dist, self.next)

    def run(self) -> Tuple[Matrix, PathMatrix]:
        """Ejecuta Floyd–Warshall. Lanza NegativeCycleError si detecta ciclo negativo."""
        self.finished = False
        try:
            self._relax()
        except NegativeCycleError as e:
            logger.error("%s: %s", self.name, e)
            raise
        self.finished = True
        return self.dist, self.next

    def _require_finished(self) -> None:
        if not self.finished:
            raise RuntimeError("Floyd–Warshall no ejecutado. Llama run() primero.")

    def distance(self, src: int, dst: int) -> float:
        """Devuelve la distancia mínima entre src y dst (o inf si no hay camino)."""
        self._require_finished()
        check_vertex(src, self.size)
        check_vertex(dst, self.size)
        return self.dist[src][dst]

    def rebuild_path(self, src: int, dst: int) -> List[int]:
        """Reconstruye el camino src->dst. Retorna [] si no hay camino."""
        self._require_finished()
        return rebuild_path(src, dst, self.next)

