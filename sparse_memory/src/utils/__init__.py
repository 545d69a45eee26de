from .grid_utils import is_numeric, is_rectangular, matrix_shape, validate_matrix
from .logger import get_logger

__all__ = [
    "is_numeric",
    "is_rectangular",
    "matrix_shape",
    "validate_matrix",
    "get_logger",
]
