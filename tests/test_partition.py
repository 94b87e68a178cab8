import pytest

from ringmv.partition import (
    chunk_start,
    format_matrix,
    format_vector,
    rows_in_rank,
    write_matrix_file,
    write_vector_file,
)


@pytest.mark.parametrize("n,size", [(10, 3), (7, 7), (5, 8), (0, 2), (100, 1), (13, 4)])
def test_rows_cover_problem(n, size):
    assert sum(rows_in_rank(n, r, size) for r in range(size)) == n


@pytest.mark.parametrize("n,size", [(10, 3), (5, 8), (13, 4)])
def test_chunks_are_contiguous(n, size):
    assert chunk_start(n, 0, size) == 0
    for rank in range(size - 1):
        assert chunk_start(n, rank + 1, size) == chunk_start(n, rank, size) + rows_in_rank(
            n, rank, size
        )


@pytest.mark.parametrize("n,size", [(10, 3), (11, 4)])
def test_rows_differ_by_at_most_one(n, size):
    rows = [rows_in_rank(n, r, size) for r in range(size)]
    assert max(rows) - min(rows) <= 1
    assert rows == sorted(rows, reverse=True)


def test_zero_ranks_rejected():
    with pytest.raises(ValueError):
        rows_in_rank(4, 0, 0)
    with pytest.raises(ValueError):
        chunk_start(4, 0, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        chunk_start(-1, 0, 2)


def test_format_vector():
    assert format_vector([1.0, 2.5]) == "1.00\n2.50\n"


def test_format_matrix():
    assert format_matrix([[1.0, 2.0], [3.0, 4.0]]) == " 1.00  2.00 \n 3.00  4.00 \n"


def test_write_matrix_file(tmp_path):
    matrix = [[1.0, 2.0], [3.0, 4.5]]
    path = write_matrix_file(matrix, 2, tmp_path)
    assert path.name == "data_mat_2.txt"
    assert path.read_text() == format_matrix(matrix)


def test_write_vector_file(tmp_path):
    vector = [0.5, 1.25, 3.0]
    path = write_vector_file(vector, 1, "y", tmp_path)
    assert path.name == "data_vec_y_1.txt"
    assert path.read_text() == format_vector(vector)


def test_vector_name_must_be_one_character(tmp_path):
    with pytest.raises(ValueError):
        write_vector_file([1.0], 0, "xy", tmp_path)