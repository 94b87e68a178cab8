"""Distributed matrix-vector multiply with the right-hand side rotated around a ring of ranks."""

from __future__ import annotations

import queue

import numpy as np

from .partition import chunk_start, rows_in_rank
from .timing import time_stamp


class RankComm:
    """One rank's endpoint in an in-process world of ranks exchanging arrays."""

    def __init__(self, rank: int, size: int, mailboxes: dict[tuple[int, int], queue.Queue]):
        self.rank = rank
        self.size = size
        self._mailboxes = mailboxes

    def _check_peer(self, peer: int) -> None:
        if not 0 <= peer < self.size:
            raise ValueError(f"rank {peer} is outside a world of {self.size}")

    def send(self, dest: int, data) -> None:
        """Send a copy of ``data`` to rank ``dest``."""
        self._check_peer(dest)
        self._mailboxes[(self.rank, dest)].put(np.array(data, dtype=float, copy=True))

    def recv(self, source: int) -> np.ndarray:
        """Block until an array from rank ``source`` arrives and return it."""
        self._check_peer(source)
        return self._mailboxes[(source, self.rank)].get()

    def __repr__(self) -> str:
        return f"RankComm(rank={self.rank}, size={self.size})"


def create_world(size: int) -> list[RankComm]:
    """Create ``size`` connected endpoints, one per rank."""
    if size < 1:
        raise ValueError(f"world size must be positive, got {size}")
    mailboxes = {(s, d): queue.Queue() for s in range(size) for d in range(size)}
    return [RankComm(rank, size, mailboxes) for rank in range(size)]


def dmvm(y: np.ndarray, a: np.ndarray, x: np.ndarray, n: int, iterations: int, comm: RankComm) -> float:
    """Accumulate ``a @ x_global`` into ``y`` ``iterations`` times and return the wall time.

    ``a`` holds this rank's rows (shape ``(local, n)``), ``x`` and ``y`` its slice of
    the vectors. The slices of ``x`` travel around the ring, so every rank sees every
    slice once per iteration; ``x`` holds its own slice again on return.
    """
    rank, size = comm.rank, comm.size
    local = rows_in_rank(n, rank, size)
    if a.shape != (local, n):
        raise ValueError(f"matrix block must have shape {(local, n)}, got {a.shape}")
    if x.shape != (local,) or y.shape != (local,):
        raise ValueError(f"vector slices must have length {local}")

    upper = (rank - 1) % size
    lower = (rank + 1) % size
    width = n // size + (1 if n % size else 0)
    buffer = np.zeros(width)
    buffer[:local] = x
    owner = rank

    start = time_stamp()
    for _ in range(iterations):
        for _ in range(size):
            first = chunk_start(n, owner, size)
            count = rows_in_rank(n, owner, size)
            y += a[:, first:first + count] @ buffer[:count]
            if rank == 0:
                comm.send(upper, buffer)
                buffer = comm.recv(lower)
            else:
                incoming = comm.recv(lower)
                comm.send(upper, buffer)
                buffer = incoming
            owner = (owner + 1) % size
    end = time_stamp()

    x[:] = buffer[:local]
    return end - start