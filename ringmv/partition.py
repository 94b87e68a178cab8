"""Row-block partitioning of a square matrix across ranks, and text dumps of local data."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def _check(n: int, rank: int, size: int) -> None:
    if size < 1:
        raise ValueError(f"number of ranks must be positive, got {size}")
    if n < 0:
        raise ValueError(f"problem size must not be negative, got {n}")
    if rank < 0:
        raise ValueError(f"rank must not be negative, got {rank}")


def chunk_start(n: int, rank: int, size: int) -> int:
    """Return the first global row owned by ``rank`` when ``n`` rows go to ``size`` ranks."""
    _check(n, rank, size)
    return rank * (n // size) + min(n % size, rank)


def rows_in_rank(n: int, rank: int, size: int) -> int:
    """Return how many rows ``rank`` owns; the first ``n % size`` ranks get one extra."""
    _check(n, rank, size)
    return n // size + (1 if n % size > rank else 0)


def format_matrix(matrix: Iterable[Iterable[float]]) -> str:
    """Render a matrix one row per line, each value as `` %3.2f ``."""
    return "".join(
        "".join(f" {value:3.2f} " for value in row) + "\n" for row in matrix
    )


def format_vector(vector: Iterable[float]) -> str:
    """Render a vector one value per line as ``%3.2f``."""
    return "".join(f"{value:3.2f}\n" for value in vector)


def write_matrix_file(matrix, rank: int, directory: str | Path = ".") -> Path:
    """Write a rank's matrix block to ``data_mat_<rank>.txt`` and return the path."""
    path = Path(directory) / f"data_mat_{rank}.txt"
    path.write_text(format_matrix(matrix))
    return path


def write_vector_file(vector, rank: int, name: str, directory: str | Path = ".") -> Path:
    """Write a rank's vector to ``data_vec_<name>_<rank>.txt`` and return the path."""
    if len(name) != 1:
        raise ValueError(f"vector name must be a single character, got {name!r}")
    path = Path(directory) / f"data_vec_{name}_{rank}.txt"
    path.write_text(format_vector(vector))
    return path