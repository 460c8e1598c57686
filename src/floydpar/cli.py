# cli.py
from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import os
import random
import sys

from floydpar.algorithms.floyd_warshall import compare_runs
from floydpar.algorithms.floyd_warshall.compare import ComparisonReport
from floydpar.algorithms.report_generator import ReportGenerator
from floydpar.algorithms.solver import ApspResult, Strategy, solve
from floydpar.config_loader import ConfigLoadError, ConfigLoader, RunConfig
from floydpar.core.graph_generator import count_infinities, generate_random_graph
from floydpar.ui.console import format_all_paths, format_matrix

logger = logging.getLogger(__name__)


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="floydpar",
        description="Floyd–Warshall secuencial vs. paralelo por filas sobre un grafo aleatorio.",
    )
    parser.add_argument("--config", type=str, default=None, help="archivo JSON de configuración")
    parser.add_argument("--size", type=int, default=None)
    parser.add_argument("--workers", dest="max_workers", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-snapshot", dest="snapshot", action="store_const", const=False, default=None,
                        help="leer la fila k compartida sin copiarla (carrera benigna)")
    parser.add_argument("--report-dir", type=str, default=None)
    parser.add_argument("--quiet", dest="show_matrices", action="store_const", const=False, default=None,
                        help="no imprimir matrices ni caminos")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def load_run_config(args: argparse.Namespace) -> RunConfig:
    conf = ConfigLoader(args.config).load() if args.config else RunConfig()
    return conf.merged(
        size=args.size,
        max_workers=args.max_workers,
        seed=args.seed,
        snapshot=args.snapshot,
        report_dir=args.report_dir,
        show_matrices=args.show_matrices,
    )


def ask_size() -> int:
    return int(input("Enter the size of the matrix: "))


def _print_result(title: str, result: ApspResult, show: bool) -> None:
    print(f"\n{title}: Success")
    if show:
        print(format_matrix(result.dist))
        print("\nPaths:")
        print(format_all_paths(result.paths))


def run(conf: RunConfig) -> int:
    size = conf.size if conf.size is not None else ask_size()
    if size < 0:
        print("El tamaño debe ser >= 0.", file=sys.stderr)
        return 2

    graph = generate_random_graph(size, random.Random(conf.seed))
    infinities = count_infinities(graph)
    print(f"\nCount of infinities: {infinities}\n")
    if conf.show_matrices:
        print(format_matrix(graph))
    print(f"\nMaximum processors count: {os.cpu_count()}")

    report = ReportGenerator(conf.report_dir) if conf.report_dir else None
    if report:
        report.log_graph(size, infinities, conf.seed, conf.max_workers, conf.snapshot)

    print("\nCalculating...")
    sequential = solve(graph, Strategy.SEQUENTIAL)
    if report:
        report.log_engine(sequential)
    if not sequential.ok:
        return _negative_cycle(report, sequential)
    _print_result("Original algorithm of Floyd-Warshall", sequential, conf.show_matrices)

    parallel = solve(graph, Strategy.PARALLEL, max_workers=conf.max_workers, snapshot=conf.snapshot)
    if report:
        report.log_engine(parallel)
    if not parallel.ok:
        return _negative_cycle(report, parallel)
    _print_result("Parallel algorithm of Floyd-Warshall (by splitting the matrix into rows)",
                  parallel, conf.show_matrices)

    comparison: ComparisonReport = compare_runs(sequential.dist, sequential.paths, parallel.dist, parallel.paths)
    print("\nComparing results between lengths:")
    print(f"There are {comparison.length_differences} difference between original and parallel algorithms' lengths.")
    print("\nComparing results between paths:")
    print(f"There are {comparison.path_differences} difference between original and parallel algorithms' paths.")
    if not comparison.identical:
        logger.warning("Los motores difieren: %s", comparison)

    print("\nExecution time:")
    print(f"Original algorithm: {sequential.elapsed:.6f}s.")
    print(f"Parallel algorithm: {parallel.elapsed:.6f}s.")

    if report:
        report.log_comparison(comparison)
        print(f"\nReport: {report.finalize('finished')}")
    return 0


def _negative_cycle(report: Optional[ReportGenerator], result: ApspResult) -> int:
    print("\nGraph has a negative cycle.\n")
    logger.error("%s: %s", result.strategy.value, result.detail)
    if report:
        print(f"Report: {report.finalize('negative_cycle')}")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = get_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        conf = load_run_config(args)
    except ConfigLoadError as e:
        print(f"Error de configuración: {e}", file=sys.stderr)
        return 2
    try:
        return run(conf)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
