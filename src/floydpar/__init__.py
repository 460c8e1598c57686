from floydpar.core import (
    INF,
    NO_PATH,
    DimensionMismatchError,
    FloydParError,
    NegativeCycleError,
    PathIntegrityError,
    copy_matrix,
    create_path_matrix,
)
from floydpar.algorithms.floyd_warshall import (
    FloydWarshall,
    ParallelFloydWarshall,
    all_paths,
    compare_runs,
    count_differences,
    floyd_warshall_parallel,
    floyd_warshall_sequential,
    path_weight,
    rebuild_path,
)
from floydpar.algorithms.solver import ApspResult, ResultStatus, Strategy, solve

__version__ = "0.1.0"
