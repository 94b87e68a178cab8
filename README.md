# ringmv

A benchmark for dense matrix-vector multiplication spread across several
ranks. Each rank holds a block of matrix rows and a slice of the vector `x`.
The slices of `x` travel around a ring of ranks, so every rank multiplies
its rows by the whole vector once per iteration. The ranks run as threads
inside one process and exchange copies of NumPy arrays through in-memory
queues.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
ringmv <N> <iter> [--ranks R] [--output-dir DIR]
```

- `N` is the size of the square matrix.
- `iter` is the number of times the full ring of multiplications is repeated.
- `--ranks` (or `-np`) is the number of ranks, 1 by default. It must be
  positive.
- `--output-dir` is the directory the data files go to, the current
  directory by default.

If `N` or `iter` is missing, the command prints `Usage: ringmv <N> <iter>`
and exits without an error.

The command prints one line:

```
<iter> <N> <MFLOP/s> <walltime in seconds>
```

The walltime is the one measured on rank 0, and the matrix work counts as
`2 * N * N * iter` floating-point operations. If the measured time is zero,
the rate is printed as `inf`.

Each rank then writes its data as text files:

- `data_mat_<rank>.txt` holds the rank's block of matrix rows, one row per
  line.
- `data_vec_x_<rank>.txt` holds the rank's slice of `x`, one value per line.
- `data_vec_y_<rank>.txt` holds the rank's slice of the result `y`.

Values are written with two decimals. Entry `(i, j)` of the matrix is
`i + j` and entry `i` of `x` is `i`, where `i` and `j` are global indices.
`y` starts at zero and gains `A @ x` on every iteration.

## Library use

`ringmv.partition` splits rows across ranks. Ranks with a lower number get
the rows left over after an even split:

```python
from ringmv.partition import chunk_start, rows_in_rank

rows_in_rank(10, 0, 3)   # 4
chunk_start(10, 1, 3)    # 4
```

The same module renders data as text with `format_matrix` and
`format_vector`, and writes the per-rank files with `write_matrix_file` and
`write_vector_file`; both return the path they wrote.

`ringmv.ring.create_world(size)` returns one `RankComm` per rank;
`RankComm.send` and `RankComm.recv` move array copies between ranks. The
kernel `ringmv.ring.dmvm(y, a, x, n, iterations, comm)` adds the rank's
share of `A @ x` into `y` in place, `iterations` times, and returns the
elapsed time in seconds. When it returns, `x` holds the rank's own slice
again.

`ringmv.cli.init_local(n, rank, size)` builds one rank's `a`, `x` and `y`.
`ringmv.cli.run(n, iterations, size)` runs the whole benchmark across
`size` ranks and returns one `RankResult` (with `rank`, `a`, `x`, `y` and
`walltime`) for each rank, ordered by rank.

`ringmv.timing` gives monotonic time stamps (`time_stamp`) and the clock
resolution (`time_resolution`).

## What it does not do

The ranks are threads in a single process; the package does not run ranks
as separate processes or on several machines. It does not pin ranks or
threads to particular CPUs.