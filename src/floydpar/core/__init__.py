from .errors import FloydParError, NegativeCycleError, DimensionMismatchError, PathIntegrityError
from .matrix import Matrix, PathMatrix, INF, NO_PATH, copy_matrix, create_path_matrix, check_square, check_same_shape, check_vertex

__all__ = [
    "FloydParError",
    "NegativeCycleError",
    "DimensionMismatchError",
    "PathIntegrityError",
    "Matrix",
    "PathMatrix",
    "INF",
    "NO_PATH",
    "copy_matrix",
    "create_path_matrix",
    "check_square",
    "check_same_shape",
    "check_vertex",
]
