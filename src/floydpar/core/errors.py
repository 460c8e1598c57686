# core/errors.py
from __future__ import annotations
from typing import Optional


class FloydParError(Exception):
    """Base de todos los errores del paquete."""
    pass


class NegativeCycleError(FloydParError):
    """Se detectó un ciclo de peso negativo durante la relajación."""

    def __init__(self, vertex: Optional[int] = None, intermediate: Optional[int] = None):
        self.vertex = vertex
        self.intermediate = intermediate
        if vertex is None:
            msg = "Negative cycle detected."
        else:
            msg = f"Negative cycle detected through vertex {vertex} (intermediate {intermediate})."
        super().__init__(msg)


class DimensionMismatchError(FloydParError, ValueError):
    """Matrices no cuadradas o de tamaños distintos."""
    pass


class PathIntegrityError(FloydParError):
    """La matriz de caminos no converge al destino en N pasos."""
    pass
