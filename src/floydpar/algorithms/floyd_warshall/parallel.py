# algorithms/floyd_warshall/parallel.py
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor, wait
from typing import List, Optional, Sequence, Tuple
import logging
import math
import threading

from floydpar.core.errors import NegativeCycleError
from floydpar.core.matrix import Matrix, PathMatrix, check_same_shape
from .sequential import FloydWarshall, relax_row

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8

# (fila k, columna k de dist, columna k de next) congeladas al inicio de la fase
Pivot = Tuple[List[float], List[float], List[int]]


def partition_rows(n: int, workers: int) -> List[range]:
    """
    Reparte las filas [0, n) en bloques contiguos y disjuntos, uno por worker.
    Los primeros n % workers bloques llevan una fila extra.
    """
    if workers < 1:
        raise ValueError(f"max_workers debe ser >= 1, se recibió {workers}")
    workers = max(1, min(workers, n))
    base, extra = divmod(n, workers)
    blocks: List[range] = []
    start = 0
    for w in range(workers):
        end = start + base + (1 if w < extra else 0)
        blocks.append(range(start, end))
        start = end
    return blocks


def _relax_block(dist: Matrix, path_matrix: PathMatrix, rows: range, k: int,
                 pivot: Optional[Pivot], abort: threading.Event) -> None:
    """Trabajo de un worker en la fase k: solo escribe las filas de su bloque."""
    for i in rows:
        if abort.is_set():
            return
        if pivot is not None:
            row_k, col_k, next_col_k = pivot
            dik, next_ik = col_k[i], next_col_k[i]
        else:
            # lectura viva de la fila k: carrera benigna con el dueño de la fila k
            row_k = dist[k]
            dik, next_ik = dist[i][k], path_matrix[i][k]
        if math.isinf(dik):
            continue
        try:
            relax_row(dist, path_matrix, i, k, row_k, dik, next_ik)
        except NegativeCycleError:
            abort.set()
            raise


def floyd_warshall_parallel(dist: Matrix, path_matrix: PathMatrix,
                            max_workers: int = DEFAULT_MAX_WORKERS,
                            snapshot: bool = True) -> Matrix:
    """
    Floyd–Warshall repartiendo las filas i entre un pool acotado de hilos.

    Cada fase k espera a todos los workers antes de empezar la k+1.
    Con snapshot=True la fila y columna k se copian al inicio de la fase y
    la relajación lee de la copia; con snapshot=False se lee la matriz
    compartida tal cual (comportamiento no determinista, mismo punto fijo).

    :raises NegativeCycleError: si algún worker detecta un ciclo negativo.
    """
    n = check_same_shape(dist, path_matrix)
    if n == 0:
        return dist
    blocks = partition_rows(n, max_workers)
    abort = threading.Event()
    logger.debug("parallel: n=%d, %d bloques de filas, snapshot=%s", n, len(blocks), snapshot)

    with ThreadPoolExecutor(max_workers=len(blocks), thread_name_prefix="fw-worker") as executor:
        for k in range(n):
            pivot: Optional[Pivot] = None
            if snapshot:
                pivot = (list(dist[k]), [row[k] for row in dist], [row[k] for row in path_matrix])
            futures = [
                executor.submit(_relax_block, dist, path_matrix, rows, k, pivot, abort)
                for rows in blocks
            ]
            # barrera de fase
            wait(futures)
            for future in futures:
                error = future.exception()
                if error is not None:
                    logger.warning("parallel: fase k=%d abortada", k)
                    raise error
    return dist


class ParallelFloydWarshall(FloydWarshall):
    """
    Misma API que FloydWarshall, pero relaja las filas de cada fase en paralelo.
    """

    name = "parallel"

    def __init__(self, graph: Sequence[Sequence[float]],
                 max_workers: int = DEFAULT_MAX_WORKERS, snapshot: bool = True):
        if max_workers < 1:
            raise ValueError(f"max_workers debe ser >= 1, se recibió {max_workers}")
        super().__init__(graph)
        self.max_workers = max_workers
        self.snapshot = snapshot

    def _relax(self) -> None:
        floyd_warshall_parallel(self.dist, self.next, self.max_workers, self.snapshot)
