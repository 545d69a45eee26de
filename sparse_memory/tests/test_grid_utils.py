import pytest

from sparse_memory.src.core.errors import InvalidArgumentError
from sparse_memory.src.utils import is_rectangular, matrix_shape, validate_matrix


def test_matrix_shape():
    assert matrix_shape([[1, 2, 3], [4, 5, 6]]) == (2, 3)
    assert matrix_shape([]) == (0, 0)
    assert matrix_shape([[]]) == (1, 0)


def test_is_rectangular():
    assert is_rectangular([[1, 2], [3, 4]])
    assert is_rectangular([])
    assert not is_rectangular([[1, 2], [3]])


def test_validate_matrix_accepts_floats():
    assert validate_matrix([[0.5, 1], [2, 3.25]]) == (2, 2)


@pytest.mark.parametrize(
    "matrix",
    [
        [[1, 2], [3]],
        [[1, "a"]],
        "abc",
        [1, 2, 3],
        None,
    ],
)
def test_validate_matrix_rejects(matrix):
    with pytest.raises(InvalidArgumentError):
        validate_matrix(matrix)
