# algorithms/floyd_warshall/compare.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from floydpar.core.matrix import Matrix, PathMatrix, check_same_shape


def count_differences(a: Sequence[Sequence], b: Sequence[Sequence]) -> int:
    """
    Cuenta las celdas en que a y b difieren (tolerancia cero).
    Sirve igual para matrices de distancias y de caminos; inf == inf.
    """
    n = check_same_shape(a, b)
    return sum(1 for i in range(n) for j in range(n) if a[i][j] != b[i][j])


@dataclass
class ComparisonReport:
    """Diferencias entre dos ejecuciones; el umbral lo decide quien llama."""
    length_differences: int
    path_differences: int

    @property
    def identical(self) -> bool:
        return self.length_differences == 0 and self.path_differences == 0


def compare_runs(dist_a: Matrix, next_a: PathMatrix, dist_b: Matrix, next_b: PathMatrix) -> ComparisonReport:
    return ComparisonReport(
        length_differences=count_differences(dist_a, dist_b),
        path_differences=count_differences(next_a, next_b),
    )
