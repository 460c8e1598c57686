# algorithms/solver.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence
import logging
import time

from floydpar.core.errors import NegativeCycleError
from floydpar.core.matrix import Matrix, PathMatrix
from floydpar.algorithms.floyd_warshall import (
    DEFAULT_MAX_WORKERS,
    FloydWarshall,
    ParallelFloydWarshall,
)

logger = logging.getLogger(__name__)


class ResultStatus(str, Enum):
    SUCCESS = "success"
    NEGATIVE_CYCLE = "negative_cycle"


class Strategy(str, Enum):
    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


@dataclass
class ApspResult:
    """
    Resultado etiquetado de una ejecución.
    Con NEGATIVE_CYCLE dist y paths valen None: el estado parcial se descarta.
    """
    strategy: Strategy
    status: ResultStatus
    dist: Optional[Matrix]
    paths: Optional[PathMatrix]
    elapsed: float
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS


def build_engine(graph: Sequence[Sequence[float]], strategy: Strategy = Strategy.SEQUENTIAL,
                 max_workers: int = DEFAULT_MAX_WORKERS, snapshot: bool = True) -> FloydWarshall:
    strategy = Strategy(strategy)
    if strategy is Strategy.PARALLEL:
        return ParallelFloydWarshall(graph, max_workers=max_workers, snapshot=snapshot)
    return FloydWarshall(graph)


def solve(graph: Sequence[Sequence[float]], strategy: Strategy = Strategy.SEQUENTIAL,
          max_workers: int = DEFAULT_MAX_WORKERS, snapshot: bool = True) -> ApspResult:
    """
    Ejecuta un motor sobre copias propias del grafo y mide el tiempo.
    No lanza NegativeCycleError: lo devuelve como status.
    DimensionMismatchError sí se propaga (precondición).
    """
    engine = build_engine(graph, strategy, max_workers, snapshot)
    strategy = Strategy(strategy)
    start = time.perf_counter()
    try:
        dist, paths = engine.run()
    except NegativeCycleError as e:
        elapsed = time.perf_counter() - start
        return ApspResult(strategy, ResultStatus.NEGATIVE_CYCLE, None, None, elapsed, str(e))
    elapsed = time.perf_counter() - start
    logger.info("%s: n=%d resuelto en %.6fs", strategy.value, engine.size, elapsed)
    return ApspResult(strategy, ResultStatus.SUCCESS, dist, paths, elapsed)
