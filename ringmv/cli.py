"""Command line benchmark: ring-distributed dense matrix-vector multiply."""

from __future__ import annotations

import argparse
import math
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .partition import chunk_start, rows_in_rank, write_matrix_file, write_vector_file
from .ring import RankComm, create_world, dmvm


@dataclass
class RankResult:
    """The local data and timing one rank ends up with."""

    rank: int
    a: np.ndarray
    x: np.ndarray
    y: np.ndarray
    walltime: float


def init_local(n: int, rank: int, size: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Build a rank's block: ``x[i] = g``, ``y[i] = 0``, ``a[i, j] = j + g`` with ``g`` the global row."""
    first = chunk_start(n, rank, size)
    count = rows_in_rank(n, rank, size)
    x = np.arange(first, first + count, dtype=float)
    y = np.zeros(count)
    a = np.add.outer(x, np.arange(n, dtype=float))
    return a, x, y


def run(n: int, iterations: int, size: int = 1) -> list[RankResult]:
    """Run the benchmark on ``size`` ranks and return their results ordered by rank."""
    world = create_world(size)

    def work(comm: RankComm) -> RankResult:
        a, x, y = init_local(n, comm.rank, size)
        walltime = dmvm(y, a, x, n, iterations, comm)
        return RankResult(comm.rank, a, x, y, walltime)

    with ThreadPoolExecutor(max_workers=size) as pool:
        return list(pool.map(work, world))


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark, print ``iter N MFlop/s walltime`` and dump each rank's data."""
    parser = argparse.ArgumentParser(prog="ringmv")
    parser.add_argument("n", nargs="?", type=int)
    parser.add_argument("iterations", nargs="?", type=int)
    parser.add_argument("--ranks", "-np", type=int, default=1)
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    args = parser.parse_args(argv)

    if args.n is None or args.iterations is None:
        print(f"Usage: {parser.prog} <N> <iter>")
        return 0
    if args.ranks < 1:
        parser.error("--ranks must be positive")

    results = run(args.n, args.iterations, args.ranks)

    walltime = results[0].walltime
    flops = 2.0 * args.n * args.n * args.iterations
    rate = 1.0e-6 * flops / walltime if walltime > 0 else math.inf
    print(f"{args.iterations} {args.n} {rate:.2f} {walltime:.2f}")
    sys.stdout.flush()

    for result in results:
        write_matrix_file(result.a, result.rank, args.output_dir)
        write_vector_file(result.x, result.rank, "x", args.output_dir)
        write_vector_file(result.y, result.rank, "y", args.output_dir)
    return 0