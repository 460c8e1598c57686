from .sequential import FloydWarshall, floyd_warshall_sequential
from .parallel import ParallelFloydWarshall, floyd_warshall_parallel, partition_rows, DEFAULT_MAX_WORKERS
from .paths import rebuild_path, all_paths, path_weight
from .compare import ComparisonReport, compare_runs, count_differences

__all__ = [
    "FloydWarshall",
    "ParallelFloydWarshall",
    "floyd_warshall_sequential",
    "floyd_warshall_parallel",
    "partition_rows",
    "DEFAULT_MAX_WORKERS",
    "rebuild_path",
    "all_paths",
    "path_weight",
    "ComparisonReport",
    "compare_runs",
    "count_differences",
]
